# src/simpleswap/domain/errors.py
"""
Domain Errors - Client Exceptions

Every failure surfaced by the client is a SimpleSwapError wrapping an
ErrorResponse, whether it came from the upstream API or was built locally
(transport failure, undecodable body, unparsable range value).
"""

from __future__ import annotations

from typing import Optional

from simpleswap.domain.models import ErrorResponse


class SimpleSwapError(Exception):
    """Base exception for client errors."""

    def __init__(self, response: ErrorResponse):
        self.response = response
        super().__init__(response.description or response.error or "unknown error")

    @classmethod
    def local(cls, cause: object, context: str) -> "SimpleSwapError":
        """Build an error that did not originate from the upstream API."""
        return cls(ErrorResponse(is_api_error=False, description=f"{context}: {cause}"))

    @property
    def is_api_error(self) -> bool:
        return self.response.is_api_error

    @property
    def code(self) -> int:
        return self.response.code

    @property
    def error(self) -> str:
        return self.response.error

    @property
    def description(self) -> str:
        return self.response.description

    @property
    def trace_id(self) -> str:
        return self.response.trace_id


class APIError(SimpleSwapError):
    """Raised when the upstream API answers with a non-success status."""

    def __init__(self, response: ErrorResponse, status_code: Optional[int] = None):
        super().__init__(response)
        self.status_code = status_code

    def __str__(self) -> str:
        parts = [p for p in (self.response.error, self.response.description) if p]
        text = ": ".join(parts) or "unknown error"
        if self.response.code:
            text = f"[{self.response.code}] {text}"
        return text


class TransportError(SimpleSwapError):
    """Raised when the HTTP request could not be completed."""
    pass


class DecodeError(SimpleSwapError):
    """Raised when a response body does not match the expected schema."""
    pass
