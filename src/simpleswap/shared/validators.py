# src/simpleswap/shared/validators.py
"""
Input Validation Utilities - Configuration Validation

Validates the credentials and addresses the client is configured with, so
that a malformed environment fails at startup instead of on the first call.
Request payloads (currencies, amounts, addresses) are passed through to the
upstream API unchecked.

Files that USE this module:
- simpleswap.config.settings (uses validation functions in Settings field validators)
- simpleswap.client (checks an explicitly passed API key)

Files that this module USES:
- None (pure utility functions)
"""
import re
from urllib.parse import urlparse


def validate_api_key(api_key: str) -> bool:
    """
    Validate API key format.

    SimpleSwap keys are opaque: only empty keys and keys containing
    whitespace are rejected.

    Args:
        api_key: API key to validate

    Returns:
        True if valid, False otherwise
    """
    if not api_key:
        return False

    return not re.search(r"\s", api_key)


def validate_base_url(url: str) -> bool:
    """
    Validate API base URL.

    Args:
        url: Base URL to validate (e.g. https://api.simpleswap.io)

    Returns:
        True if the URL has an http/https scheme and a host, False otherwise
    """
    if not url:
        return False

    parsed = urlparse(url)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)
