# src/simpleswap/application/currency_service.py
"""
Currency Service - Currency Metadata Lookups

Files that USE this module:
- simpleswap.client (SimpleSwapClient delegates currency calls here)
- tests.test_services (unit tests)

Files that this module USES:
- simpleswap.adapters.gateway (SimpleSwapGateway and endpoint constants)
- simpleswap.domain.models (Currency schema)
"""
from __future__ import annotations

from typing import List

from simpleswap.adapters.gateway import GET, GET_ALL_CURRENCIES, GET_CURRENCY, SimpleSwapGateway
from simpleswap.domain.models import Currency


class CurrencyService:
    def __init__(self, gateway: SimpleSwapGateway):
        self.gateway = gateway

    def get_currency(self, symbol: str) -> Currency:
        """Fetch metadata for one currency by ticker (e.g. "btc")."""
        return self.gateway.request(GET, GET_CURRENCY, Currency, params={"symbol": symbol})

    def get_all_currencies(self) -> List[Currency]:
        """Fetch metadata for every currency the service supports."""
        return self.gateway.request(GET, GET_ALL_CURRENCIES, List[Currency])
