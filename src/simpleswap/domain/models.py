# src/simpleswap/domain/models.py
"""
Domain Models - Request and Response Shapes

This module contains the typed shapes exchanged with the SimpleSwap API:
- Request dataclasses built by callers (exchange creation, listings, ranges)
- Response schemas decoded from JSON (currencies, exchanges, errors)
- The parsed min/max amount range

Response schemas are pydantic models: upstream field names are kept as-is
and missing or null fields decode to their zero value.

Files that USE this module:
- simpleswap.adapters.gateway (decodes responses into these schemas)
- simpleswap.application.* (services build params from requests)
- simpleswap.domain.errors (errors wrap ErrorResponse)
- tests.* (tests use models for fixtures)

Files that this module USES:
- None (pure domain layer)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _format_bool(value: bool) -> str:
    """Render a flag the way the upstream API expects it ("true"/"false")."""
    return "true" if value else "false"


def _format_time(value: datetime) -> str:
    """Render a timestamp as RFC 3339 in UTC; naive datetimes are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ExchangeRequest:
    """
    Parameters for creating an exchange.

    Attributes:
        currency_from: Ticker the user sends (e.g. "btc")
        currency_to: Ticker the user receives (e.g. "eth")
        amount: Amount of currency_from to exchange
        fixed: True for a fixed-rate exchange, False for floating rate
        address_to: Destination address for currency_to
        extra_id_to: Destination memo/tag when the currency needs one
        user_refund_address: Refund address for currency_from
        user_refund_extra_id: Refund memo/tag
        client_ip: End user's IP, forwarded as x-forwarded-for
        client_user_agent: End user's user agent, forwarded as x-user-agent
        client_timezone: End user's timezone, forwarded as x-user-timezone
        client_language: End user's language, forwarded as x-user-language

    The client_* fields are never sent as parameters.
    """
    currency_from: str
    currency_to: str
    amount: Union[int, float]
    fixed: bool = False
    address_to: str = ""
    extra_id_to: str = ""
    user_refund_address: str = ""
    user_refund_extra_id: str = ""
    client_ip: str = ""
    client_user_agent: str = ""
    client_timezone: str = ""
    client_language: str = ""

    def to_params(self) -> Dict[str, str]:
        return {
            "fixed": _format_bool(self.fixed),
            "currency_from": self.currency_from,
            "currency_to": self.currency_to,
            "amount": str(self.amount),
            "address_to": self.address_to,
            "extra_id_to": self.extra_id_to,
            "user_refund_address": self.user_refund_address,
            "user_refund_extra_id": self.user_refund_extra_id,
        }

    def client_headers(self) -> Dict[str, str]:
        """Client-context headers, only for the fields that are set."""
        candidates = (
            ("x-forwarded-for", self.client_ip),
            ("x-user-language", self.client_language),
            ("x-user-timezone", self.client_timezone),
            ("x-user-agent", self.client_user_agent),
        )
        return {name: value for name, value in candidates if value}


@dataclass(frozen=True)
class ExchangesRequest:
    """Filters for listing exchanges; unset filters are not sent."""
    limit: int = 0
    offset: int = 0
    min_time: Optional[datetime] = None
    max_time: Optional[datetime] = None

    def to_params(self) -> Dict[str, str]:
        params: Dict[str, str] = {}
        if self.limit != 0:
            params["limit"] = str(self.limit)
        if self.offset != 0:
            params["offset"] = str(self.offset)
        if self.min_time is not None:
            params["gte"] = _format_time(self.min_time)
        if self.max_time is not None:
            params["lte"] = _format_time(self.max_time)
        return params


@dataclass(frozen=True)
class RangesRequest:
    """Currency pair and rate mode for a min/max range lookup."""
    currency_from: str
    currency_to: str
    fixed: bool = False

    def to_params(self) -> Dict[str, str]:
        return {
            "fixed": _format_bool(self.fixed),
            "currency_from": self.currency_from,
            "currency_to": self.currency_to,
        }


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class Schema(BaseModel):
    """Base for upstream JSON schemas."""

    model_config = ConfigDict(
        extra="ignore",
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null means "not set" upstream; let the field default apply
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class Currency(Schema):
    """Currency metadata as returned by /get_currency and /get_all_currencies."""
    name: str = ""
    symbol: str = ""
    network: str = ""
    contract_address: str = ""
    has_extra_id: bool = False
    extra_id: str = ""
    image: str = ""
    warnings_from: List[str] = Field(default_factory=list)
    warnings_to: List[str] = Field(default_factory=list)
    validation_address: str = ""
    validation_extra: str = ""
    address_explorer: str = ""
    tx_explorer: str = ""
    confirmations_from: str = ""
    is_fiat: bool = Field(default=False, alias="isFiat")


class ExchangeCurrencies(Schema):
    """Full currency records for both legs of an exchange."""
    currency_from_ticker: Currency = Field(default_factory=Currency)
    currency_to_ticker: Currency = Field(default_factory=Currency)


class Exchange(Schema):
    """Exchange record as returned by /create_exchange, /get_exchange and /get_exchanges."""
    id: str = ""
    type: str = ""
    timestamp: str = ""
    updated_at: str = ""
    valid_until: str = ""
    currency_from: str = ""
    currency_to: str = ""
    amount_from: str = ""
    expected_amount: str = ""
    amount_to: str = ""
    address_from: str = ""
    address_to: str = ""
    extra_id_from: str = ""
    extra_id_to: str = ""
    user_refund_address: str = ""
    user_refund_extra_id: str = ""
    tx_from: str = ""
    tx_to: str = ""
    status: str = ""
    redirect_url: str = ""
    currencies: ExchangeCurrencies = Field(default_factory=ExchangeCurrencies)


class ErrorResponse(Schema):
    """Error body returned by the API, also used for locally built errors."""
    is_api_error: bool = False
    code: int = 0
    error: str = ""
    description: str = ""
    trace_id: str = ""


@dataclass(frozen=True)
class Range:
    """Minimum and maximum amount of currency_from accepted for a pair."""
    minimum: float = 0.0
    maximum: float = 0.0
