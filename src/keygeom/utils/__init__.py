"""Utility functions for keygeom.

This module provides:

- Logging setup and configuration
- Warning handlers for recoverable layout problems
"""

from keygeom.utils.logging import (
    LogWarnings,
    RaiseWarnings,
    WarningHandler,
    configure_logging,
)

__all__ = [
    "LogWarnings",
    "RaiseWarnings",
    "WarningHandler",
    "configure_logging",
]
