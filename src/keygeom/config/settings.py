"""Configuration settings for keygeom."""

from pathlib import Path

from pydantic import BaseModel, Field


class CatalogConfig(BaseModel):
    """Configuration for outline lookup."""

    default_outline: str = Field(
        default="default",
        min_length=1,
        description="Outline used when a key names a missing outline",
    )
    fallback_size: float = Field(
        default=1.0,
        gt=0.0,
        description="Side of the square outline used when no default outline exists",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class KeyGeomSettings(BaseModel):
    """Main application settings."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> KeyGeomSettings:
    """Get default application settings."""
    return KeyGeomSettings()
