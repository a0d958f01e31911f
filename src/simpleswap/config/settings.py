# src/simpleswap/config/settings.py
"""
Settings - Pydantic-based Configuration Management

Provides centralized configuration management using Pydantic Settings.
Supports environment variables and a .env file, with validation.

Files that USE this module:
- simpleswap.client (default API key and base URL for SimpleSwapClient)
- simpleswap.adapters.gateway (HTTP timeout for the transport)
- simpleswap.app (logging configuration for the command line)

Files that this module USES:
- simpleswap.shared.validators (validation functions for settings)
"""

from __future__ import annotations

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from simpleswap.shared.validators import validate_api_key, validate_base_url

DEFAULT_BASE_URL = "https://api.simpleswap.io"


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- SimpleSwap API ---
    api_key: str = Field(default="", alias="SIMPLESWAP_API_KEY")
    base_url: str = Field(default=DEFAULT_BASE_URL, alias="SIMPLESWAP_BASE_URL")

    # --- HTTP Settings ---
    http_timeout_seconds: int = Field(default=10, alias="HTTP_TIMEOUT_SECONDS", ge=1, le=60)

    # --- Logging ---
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")
    log_dir: Optional[str] = Field(default=None, alias="LOG_DIR")
    log_stdout: bool = Field(default=False, alias="SIMPLESWAP_LOG_STDOUT")  # stdout carries command output
    log_max_bytes: int = Field(default=10 * 1024 * 1024, alias="LOG_MAX_BYTES")  # 10MB
    log_backup_count: int = Field(default=5, alias="LOG_BACKUP_COUNT")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Validate API key format (an empty key means 'not configured')."""
        if v and not validate_api_key(v):
            raise ValueError("Invalid SIMPLESWAP_API_KEY format")
        return v

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate base URL and strip the trailing slash."""
        if not validate_base_url(v):
            raise ValueError("SIMPLESWAP_BASE_URL must be an http(s) URL")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def log_level_value(self) -> int:
        """Numeric logging level for logging.basicConfig."""
        return getattr(logging, self.log_level)


# Global settings instance
settings = Settings()
