# src/simpleswap/client.py
"""
SimpleSwap Client - Public Entry Point

SimpleSwapClient wires one gateway to the currency and exchange services and
exposes every API operation as a method. Each method is a single blocking
request; failures raise SimpleSwapError subclasses.

    with SimpleSwapClient("my-api-key") as client:
        btc = client.get_currency("btc")
        limits = client.get_ranges(RangesRequest("btc", "eth"))

Files that USE this module:
- simpleswap (package export)
- simpleswap.app (command line)
- tests.test_client (unit tests)

Files that this module USES:
- simpleswap.adapters.gateway (SimpleSwapGateway)
- simpleswap.application.* (CurrencyService, ExchangeService)
- simpleswap.config (default API key)
- simpleswap.shared.validators (API key format check)
"""
from __future__ import annotations

from typing import List, Optional

import requests

from simpleswap.adapters.gateway import SimpleSwapGateway
from simpleswap.application.currency_service import CurrencyService
from simpleswap.application.exchange_service import ExchangeService
from simpleswap.config import settings
from simpleswap.domain.models import (
    Currency,
    Exchange,
    ExchangeRequest,
    ExchangesRequest,
    Range,
    RangesRequest,
)
from simpleswap.shared.validators import validate_api_key


class SimpleSwapClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the client.

        Args:
            api_key: SimpleSwap API key (defaults to settings.api_key / SIMPLESWAP_API_KEY)
            base_url: Optional API address (defaults to https://api.simpleswap.io)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            session: Optional requests.Session, e.g. to mount custom adapters

        Raises:
            ValueError: If no API key is given or configured, or the key is malformed
        """
        api_key = api_key or settings.api_key
        if not api_key:
            raise ValueError("SimpleSwap API key not configured (pass api_key or set SIMPLESWAP_API_KEY).")
        if not validate_api_key(api_key):
            raise ValueError("Invalid SimpleSwap API key format.")

        self.gateway = SimpleSwapGateway(api_key, base_url=base_url, timeout=timeout, session=session)
        self.currencies = CurrencyService(self.gateway)
        self.exchanges = ExchangeService(self.gateway)

    def __enter__(self) -> "SimpleSwapClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.gateway.close()

    # --- Currencies ---

    def get_currency(self, symbol: str) -> Currency:
        return self.currencies.get_currency(symbol)

    def get_all_currencies(self) -> List[Currency]:
        return self.currencies.get_all_currencies()

    # --- Exchanges ---

    def create_exchange(self, req: ExchangeRequest) -> Exchange:
        return self.exchanges.create_exchange(req)

    def get_exchange(self, exchange_id: str) -> Exchange:
        return self.exchanges.get_exchange(exchange_id)

    def get_exchanges(self, req: Optional[ExchangesRequest] = None) -> List[Exchange]:
        return self.exchanges.get_exchanges(req)

    def get_ranges(self, req: RangesRequest) -> Range:
        return self.exchanges.get_ranges(req)
