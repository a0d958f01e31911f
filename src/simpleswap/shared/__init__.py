# src/simpleswap/shared/__init__.py
"""
Shared Utilities - Cross-cutting Concerns

This package contains shared utilities used across all layers:
- Validation
- Logging configuration
"""

from simpleswap.shared.logging_conf import setup_logging
from simpleswap.shared.validators import validate_api_key, validate_base_url

__all__ = [
    "setup_logging",
    "validate_api_key",
    "validate_base_url",
]
