# src/simpleswap/application/exchange_service.py
"""
Exchange Service - Exchange Creation, Lookup and Ranges

This module maps exchange-related requests onto gateway calls: creating an
exchange (with optional end-user context headers), reading one or many
exchange records, and fetching the min/max amount range for a pair.

Files that USE this module:
- simpleswap.client (SimpleSwapClient delegates exchange calls here)
- tests.test_services (unit tests)

Files that this module USES:
- simpleswap.adapters.gateway (SimpleSwapGateway and endpoint constants)
- simpleswap.domain.models (request and response shapes)
- simpleswap.domain.errors (errors for unusable range responses)
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional

from simpleswap.adapters.gateway import (
    CREATE_EXCHANGE,
    GET,
    GET_EXCHANGE,
    GET_EXCHANGES,
    GET_RANGES,
    POST,
    SimpleSwapGateway,
)
from simpleswap.domain.errors import DecodeError, SimpleSwapError
from simpleswap.domain.models import (
    Exchange,
    ExchangeRequest,
    ExchangesRequest,
    Range,
    RangesRequest,
)

log = logging.getLogger(__name__)


def _parse_bound(value: Any) -> float:
    """Parse a range bound sent as a numeric string or a JSON number."""
    if isinstance(value, bool):
        raise ValueError(f"not a number: {value!r}")
    number = float(value)
    if math.isinf(number):
        text = str(value).strip().lstrip("+-").lower()
        if not isinstance(value, str) or text not in ("inf", "infinity"):
            raise ValueError(f"value out of range: {value!r}")
    return number


class ExchangeService:
    def __init__(self, gateway: SimpleSwapGateway):
        self.gateway = gateway

    def create_exchange(self, req: ExchangeRequest) -> Exchange:
        """
        Create an exchange.

        End-user context (IP, user agent, timezone, language) is forwarded
        as headers only for the fields that are set.

        Args:
            req: Exchange parameters

        Returns:
            The created exchange record
        """
        return self.gateway.request(
            POST,
            CREATE_EXCHANGE,
            Exchange,
            params=req.to_params(),
            headers=req.client_headers(),
        )

    def get_exchange(self, exchange_id: str) -> Exchange:
        """Fetch one exchange by id."""
        return self.gateway.request(GET, GET_EXCHANGE, Exchange, params={"id": exchange_id})

    def get_exchanges(self, req: Optional[ExchangesRequest] = None) -> List[Exchange]:
        """List exchanges; limit/offset and the time window are passed through as given."""
        req = req or ExchangesRequest()
        return self.gateway.request(GET, GET_EXCHANGES, List[Exchange], params=req.to_params())

    def get_ranges(self, req: RangesRequest) -> Range:
        """
        Fetch the min/max amount of currency_from accepted for a pair.

        The API sends both bounds as strings (numbers are accepted too).
        A bound missing from the response is left at 0.0.

        Args:
            req: Currency pair and rate mode

        Returns:
            Parsed Range

        Raises:
            SimpleSwapError: If the response is empty
            DecodeError: If a bound is not a number or overflows a float
        """
        data: Optional[Dict[str, Any]] = self.gateway.request(
            GET, GET_RANGES, Optional[Dict[str, Any]], params=req.to_params()
        )
        if not data:
            raise SimpleSwapError.local("unknown error", "error fetching ranges")

        bounds = {}
        for key in ("min", "max"):
            if key not in data:
                continue
            try:
                bounds[key] = _parse_bound(data[key])
            except (TypeError, ValueError) as e:
                log.warning("SimpleSwap returned a non-numeric range %s: %r", key, data[key])
                raise DecodeError.local(e, f"error marshalling result ({key})") from e

        return Range(minimum=bounds.get("min", 0.0), maximum=bounds.get("max", 0.0))
