# tests/test_services.py
"""
Service Tests - Unit Tests for Currency and Exchange Operations

Checks that each operation calls the gateway with the right verb, endpoint,
parameters and headers, and that range responses are post-processed
correctly. The gateway is mocked.

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- simpleswap.application.* (CurrencyService, ExchangeService under test)
- simpleswap.domain (requests, schemas and errors)
- unittest.mock (Mock for gateway mocking)
- pytest (testing framework)
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest

from simpleswap.adapters.gateway import (
    CREATE_EXCHANGE,
    GET_ALL_CURRENCIES,
    GET_CURRENCY,
    GET_EXCHANGE,
    GET_EXCHANGES,
    GET_RANGES,
)
from simpleswap.application.currency_service import CurrencyService
from simpleswap.application.exchange_service import ExchangeService
from simpleswap.domain.errors import DecodeError, SimpleSwapError
from simpleswap.domain.models import (
    Currency,
    Exchange,
    ExchangeRequest,
    ExchangesRequest,
    Range,
    RangesRequest,
)


class TestCurrencyService:
    def test_get_currency(self):
        gateway = Mock()
        gateway.request.return_value = Currency(name="Bitcoin", symbol="btc")

        result = CurrencyService(gateway).get_currency("btc")

        assert result.symbol == "btc"
        gateway.request.assert_called_once_with("GET", GET_CURRENCY, Currency, params={"symbol": "btc"})

    def test_get_all_currencies(self):
        gateway = Mock()
        gateway.request.return_value = []

        assert CurrencyService(gateway).get_all_currencies() == []
        gateway.request.assert_called_once_with("GET", GET_ALL_CURRENCIES, List[Currency])


class TestCreateExchange:
    def test_minimal_request_sends_no_client_headers(self):
        gateway = Mock()
        gateway.request.return_value = Exchange(id="abc")

        req = ExchangeRequest(currency_from="btc", currency_to="eth", amount=1)
        result = ExchangeService(gateway).create_exchange(req)

        assert result.id == "abc"
        args, kwargs = gateway.request.call_args
        assert args == ("POST", CREATE_EXCHANGE, Exchange)
        assert kwargs["headers"] == {}
        assert kwargs["params"] == {
            "fixed": "false",
            "currency_from": "btc",
            "currency_to": "eth",
            "amount": "1",
            "address_to": "",
            "extra_id_to": "",
            "user_refund_address": "",
            "user_refund_extra_id": "",
        }

    def test_client_context_headers(self):
        gateway = Mock()
        req = ExchangeRequest(
            currency_from="xrp",
            currency_to="btc",
            amount=250.5,
            fixed=True,
            address_to="bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh",
            user_refund_address="rEb8TK3gBgk5auZkwc6sHnwrGVJH8DuaLh",
            user_refund_extra_id="123456",
            client_ip="203.0.113.7",
            client_user_agent="Mozilla/5.0",
            client_timezone="Europe/Berlin",
            client_language="de",
        )
        ExchangeService(gateway).create_exchange(req)

        _, kwargs = gateway.request.call_args
        assert kwargs["headers"] == {
            "x-forwarded-for": "203.0.113.7",
            "x-user-language": "de",
            "x-user-timezone": "Europe/Berlin",
            "x-user-agent": "Mozilla/5.0",
        }
        params = kwargs["params"]
        assert params["fixed"] == "true"
        assert params["amount"] == "250.5"
        assert params["user_refund_extra_id"] == "123456"
        assert "203.0.113.7" not in params.values()

    def test_partial_client_context(self):
        gateway = Mock()
        req = ExchangeRequest(currency_from="btc", currency_to="eth", amount=1, client_ip="198.51.100.1")
        ExchangeService(gateway).create_exchange(req)

        _, kwargs = gateway.request.call_args
        assert kwargs["headers"] == {"x-forwarded-for": "198.51.100.1"}


class TestGetExchanges:
    def test_get_exchange(self):
        gateway = Mock()
        ExchangeService(gateway).get_exchange("ex-42")
        gateway.request.assert_called_once_with("GET", GET_EXCHANGE, Exchange, params={"id": "ex-42"})

    def test_unset_filters_are_omitted(self):
        gateway = Mock()
        gateway.request.return_value = []

        ExchangeService(gateway).get_exchanges(ExchangesRequest())

        gateway.request.assert_called_once_with("GET", GET_EXCHANGES, List[Exchange], params={})

    def test_no_request_means_no_filters(self):
        gateway = Mock()
        ExchangeService(gateway).get_exchanges()
        _, kwargs = gateway.request.call_args
        assert kwargs["params"] == {}

    def test_filters(self):
        gateway = Mock()
        req = ExchangesRequest(
            limit=20,
            offset=40,
            min_time=datetime(2024, 3, 1, 0, 0, tzinfo=timezone.utc),
            max_time=datetime(2024, 3, 31, 23, 59, 59, tzinfo=timezone.utc),
        )
        ExchangeService(gateway).get_exchanges(req)

        _, kwargs = gateway.request.call_args
        assert kwargs["params"] == {
            "limit": "20",
            "offset": "40",
            "gte": "2024-03-01T00:00:00Z",
            "lte": "2024-03-31T23:59:59Z",
        }

    def test_times_converted_to_utc(self):
        tz = timezone(timedelta(hours=3))
        req = ExchangesRequest(max_time=datetime(2024, 3, 1, 3, 0, tzinfo=tz))
        assert req.to_params() == {"lte": "2024-03-01T00:00:00Z"}

    def test_naive_time_taken_as_utc(self):
        req = ExchangesRequest(min_time=datetime(2024, 3, 1, 12, 30))
        assert req.to_params() == {"gte": "2024-03-01T12:30:00Z"}


class TestGetRanges:
    def _service(self, data):
        gateway = Mock()
        gateway.request.return_value = data
        return ExchangeService(gateway), gateway

    def test_request(self):
        service, gateway = self._service({"min": "0.001", "max": "10.5"})
        service.get_ranges(RangesRequest("btc", "eth", fixed=True))

        gateway.request.assert_called_once_with(
            "GET",
            GET_RANGES,
            Optional[Dict[str, Any]],
            params={"fixed": "true", "currency_from": "btc", "currency_to": "eth"},
        )

    def test_parses_string_bounds(self):
        service, _ = self._service({"min": "0.001", "max": "10.5"})
        assert service.get_ranges(RangesRequest("btc", "eth")) == Range(minimum=0.001, maximum=10.5)

    def test_parses_numeric_bounds(self):
        service, _ = self._service({"min": 0.25, "max": 100})
        assert service.get_ranges(RangesRequest("btc", "eth")) == Range(minimum=0.25, maximum=100.0)

    def test_missing_max_left_at_zero(self):
        service, _ = self._service({"min": "0.5"})
        assert service.get_ranges(RangesRequest("btc", "eth")) == Range(minimum=0.5, maximum=0.0)

    def test_non_numeric_min(self):
        service, _ = self._service({"min": "abc", "max": "10.5"})
        with pytest.raises(DecodeError) as exc_info:
            service.get_ranges(RangesRequest("btc", "eth"))

        assert "error marshalling result (min)" in exc_info.value.description
        assert exc_info.value.is_api_error is False

    def test_non_numeric_max(self):
        service, _ = self._service({"min": "1", "max": None})
        with pytest.raises(DecodeError, match=r"error marshalling result \(max\)"):
            service.get_ranges(RangesRequest("btc", "eth"))

    @pytest.mark.parametrize("data, key", [
        ({"min": True, "max": "10"}, "min"),
        ({"min": "1", "max": False}, "max"),
    ])
    def test_boolean_bound_rejected(self, data, key):
        service, _ = self._service(data)
        with pytest.raises(DecodeError) as exc_info:
            service.get_ranges(RangesRequest("btc", "eth"))
        assert f"error marshalling result ({key})" in exc_info.value.description

    @pytest.mark.parametrize("data, key", [
        ({"min": "1e400", "max": "10"}, "min"),
        ({"min": "1", "max": "-1e400"}, "max"),
        ({"min": "1", "max": float("inf")}, "max"),
    ])
    def test_overflowing_bound_rejected(self, data, key):
        service, _ = self._service(data)
        with pytest.raises(DecodeError, match=rf"error marshalling result \({key}\): value out of range"):
            service.get_ranges(RangesRequest("btc", "eth"))

    def test_literal_infinity_accepted(self):
        service, _ = self._service({"min": "0.1", "max": "+Inf"})
        assert service.get_ranges(RangesRequest("btc", "eth")) == Range(minimum=0.1, maximum=float("inf"))

    @pytest.mark.parametrize("data", [None, {}])
    def test_empty_response(self, data):
        service, _ = self._service(data)
        with pytest.raises(SimpleSwapError) as exc_info:
            service.get_ranges(RangesRequest("btc", "eth"))

        assert exc_info.value.description == "error fetching ranges: unknown error"
        assert exc_info.value.is_api_error is False
