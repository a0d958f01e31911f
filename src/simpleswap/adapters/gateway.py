# src/simpleswap/adapters/gateway.py
"""
SimpleSwap API Gateway - HTTP Transport and Response Decoding

This module implements the single adapter every API operation goes through.
It builds the HTTP request (API key, parameters, headers), sends it with
requests, and decodes the JSON body into the caller's type or into an
ErrorResponse.

Parameter placement follows the upstream API: POST calls carry their
parameters as a JSON body, GET calls as query-string parameters. The API key
is always a query parameter.

Files that USE this module:
- simpleswap.application.currency_service (currency lookups)
- simpleswap.application.exchange_service (exchange and range calls)
- simpleswap.client (builds the gateway for SimpleSwapClient)
- tests.test_gateway (unit tests)

Files that this module USES:
- simpleswap.config (settings for base URL and HTTP timeout)
- simpleswap.domain.models (ErrorResponse schema)
- simpleswap.domain.errors (exceptions raised on failure)
"""
import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Type, TypeVar, get_origin

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from simpleswap.config import settings
from simpleswap.domain.errors import APIError, DecodeError, TransportError
from simpleswap.domain.models import ErrorResponse

log = logging.getLogger(__name__)

T = TypeVar("T")

GET = "GET"
POST = "POST"

# Endpoints
GET_CURRENCY = "/get_currency"
GET_ALL_CURRENCIES = "/get_all_currencies"
CREATE_EXCHANGE = "/create_exchange"
GET_EXCHANGE = "/get_exchange"
GET_EXCHANGES = "/get_exchanges"
GET_RANGES = "/get_ranges"
GET_ESTIMATED = "/get_estimated"
GET_PAIRS = "/get_pairs"
GET_PAIR = "/get_pair"

ENDPOINTS = frozenset({
    GET_CURRENCY,
    GET_ALL_CURRENCIES,
    CREATE_EXCHANGE,
    GET_EXCHANGE,
    GET_EXCHANGES,
    GET_RANGES,
    GET_ESTIMATED,
    GET_PAIRS,
    GET_PAIR,
})


@lru_cache(maxsize=None)
def _adapter(dest: Any) -> TypeAdapter:
    return TypeAdapter(dest)


def _zero_value(dest: Any) -> Any:
    """Value a JSON null stands for when dest does not accept None, or None if it has none."""
    if get_origin(dest) in (list, List):
        return []
    if isinstance(dest, type) and issubclass(dest, BaseModel):
        return dest()
    return None


def _encode_headers(headers: Optional[Mapping[str, str]]) -> dict:
    # http.client only encodes str header values as latin-1
    return {name: value.encode("utf-8") for name, value in (headers or {}).items()}


class SimpleSwapGateway:
    """
    HTTP adapter bound to one API key and one base URL.

    The key, URL and timeout are fixed at construction and never change.
    Calls go through one requests.Session, which is not documented as
    thread-safe: share a gateway within a thread, and give each thread its
    own gateway (or client) for concurrent use.
    """

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the gateway.

        Args:
            api_key: SimpleSwap API key, sent as the api_key query parameter
            base_url: Optional API address (defaults to settings.base_url)
            timeout: Optional HTTP timeout in seconds (defaults to settings.http_timeout_seconds)
            session: Optional requests.Session to send requests with

        Raises:
            ValueError: If the API key is empty
        """
        if not api_key:
            raise ValueError("SimpleSwap API key is missing.")
        self._api_key = api_key
        self._base_url = (base_url or settings.base_url).rstrip("/")
        self._timeout = timeout or settings.http_timeout_seconds
        self.session = session or requests.Session()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> int:
        return self._timeout

    def close(self) -> None:
        """Release pooled connections held by the session."""
        self.session.close()

    def request(
        self,
        method: str,
        endpoint: str,
        dest: Type[T],
        params: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> T:
        """
        Call an endpoint and decode the response.

        Args:
            method: GET or POST
            endpoint: One of the endpoint paths defined in this module
            dest: Type the success body is decoded into (e.g. Currency, List[Exchange])
            params: Request parameters; JSON body for POST, query string for GET
            headers: Extra HTTP headers; values are sent UTF-8 encoded

        Returns:
            The decoded success body

        Raises:
            TransportError: If the request could not be completed
            APIError: If the API answered with a non-success status
            DecodeError: If the body does not match the expected schema
        """
        if method not in (GET, POST):
            raise ValueError(f"Unsupported HTTP method: {method}")
        if endpoint not in ENDPOINTS:
            raise ValueError(f"Unknown SimpleSwap endpoint: {endpoint}")

        if method == POST:
            query = {}
            body = dict(params) if params is not None else None
        else:
            query = dict(params or {})
            body = None
        query["api_key"] = self._api_key

        try:
            log.debug("SimpleSwap request: %s %s", method, endpoint)
            resp = self.session.request(
                method,
                self._base_url + endpoint,
                params=query,
                json=body,
                headers=_encode_headers(headers),
                timeout=self._timeout,
            )
        except requests.exceptions.RequestException as e:
            log.warning("SimpleSwap %s %s failed: %s", method, endpoint, e)
            raise TransportError.local(e, "error making API request") from e

        if 200 <= resp.status_code < 300:
            return self._decode_result(resp, dest)
        raise self._decode_error(resp)

    def _decode_result(self, resp: requests.Response, dest: Type[T]) -> T:
        try:
            return _adapter(dest).validate_json(resp.content)
        except ValidationError as e:
            # null decodes to the zero value of dest, like a missing field
            if resp.content.strip() == b"null":
                zero = _zero_value(dest)
                if zero is not None:
                    return zero
            log.warning("SimpleSwap returned an undecodable result (HTTP %d): %s", resp.status_code, e)
            raise DecodeError.local(e, "error unmarshalling result") from e

    def _decode_error(self, resp: requests.Response) -> Exception:
        try:
            error = ErrorResponse.model_validate_json(resp.content)
        except ValidationError as e:
            log.warning("SimpleSwap returned an undecodable error (HTTP %d): %s", resp.status_code, e)
            return DecodeError.local(e, "error unmarshalling error response")
        log.warning(
            "SimpleSwap API error (HTTP %d): code=%s error=%s trace_id=%s",
            resp.status_code, error.code, error.error, error.trace_id,
        )
        return APIError(error, status_code=resp.status_code)
