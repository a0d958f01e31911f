# src/simpleswap/adapters/__init__.py
"""
Adapters Layer - External Interfaces

This package contains the adapter for the SimpleSwap HTTP API.
"""

from simpleswap.adapters.gateway import SimpleSwapGateway

__all__ = ["SimpleSwapGateway"]
