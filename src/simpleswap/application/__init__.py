# src/simpleswap/application/__init__.py
"""
Application Layer - API Operations

This package contains the services that map typed requests onto gateway
calls, one service per API area.
"""

from simpleswap.application.currency_service import CurrencyService
from simpleswap.application.exchange_service import ExchangeService

__all__ = [
    "CurrencyService",
    "ExchangeService",
]
