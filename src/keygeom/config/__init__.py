"""Configuration management for keygeom.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- CatalogConfig: Outline lookup and fallback settings
- LoggingConfig: Logging settings
- KeyGeomSettings: Main application settings
"""

from keygeom.config.settings import (
    CatalogConfig,
    KeyGeomSettings,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "CatalogConfig",
    "KeyGeomSettings",
    "LoggingConfig",
    "get_default_settings",
]
