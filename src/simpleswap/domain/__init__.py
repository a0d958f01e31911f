# src/simpleswap/domain/__init__.py
"""
Domain Layer - Request, Response and Error Types

This package contains the typed shapes exchanged with the SimpleSwap API
and the exception hierarchy. No dependencies on the HTTP transport.
"""

from simpleswap.domain.models import (
    Currency,
    ErrorResponse,
    Exchange,
    ExchangeCurrencies,
    ExchangeRequest,
    ExchangesRequest,
    Range,
    RangesRequest,
)
from simpleswap.domain.errors import (
    APIError,
    DecodeError,
    SimpleSwapError,
    TransportError,
)

__all__ = [
    "Currency",
    "Exchange",
    "ExchangeCurrencies",
    "ExchangeRequest",
    "ExchangesRequest",
    "Range",
    "RangesRequest",
    "ErrorResponse",
    "SimpleSwapError",
    "APIError",
    "TransportError",
    "DecodeError",
]
