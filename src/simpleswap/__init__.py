# src/simpleswap/__init__.py
"""
SimpleSwap - Python client for the SimpleSwap exchange API

A small synchronous client for the SimpleSwap REST API: currency metadata,
exchange creation and lookup, and min/max amount ranges for currency pairs.
"""

__version__ = "0.1.0"

from simpleswap.client import SimpleSwapClient
from simpleswap.domain.errors import (
    APIError,
    DecodeError,
    SimpleSwapError,
    TransportError,
)
from simpleswap.domain.models import (
    Currency,
    ErrorResponse,
    Exchange,
    ExchangeRequest,
    ExchangesRequest,
    Range,
    RangesRequest,
)

__all__ = [
    "SimpleSwapClient",
    "SimpleSwapError",
    "APIError",
    "TransportError",
    "DecodeError",
    "Currency",
    "Exchange",
    "ExchangeRequest",
    "ExchangesRequest",
    "Range",
    "RangesRequest",
    "ErrorResponse",
]
