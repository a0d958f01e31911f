# src/simpleswap/config/__init__.py
"""
Configuration Module

Provides centralized configuration management using Pydantic Settings.
Values come from environment variables or an optional .env file.
"""

from simpleswap.config.settings import DEFAULT_BASE_URL, Settings, settings

__all__ = ["DEFAULT_BASE_URL", "Settings", "settings"]
