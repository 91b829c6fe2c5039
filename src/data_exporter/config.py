"""Configuration for the exporter.

``ExportConfig`` is the per-instance configuration handed to ``ExportService``.
``ExporterSettings`` holds process-wide settings read from ``EXPORTER_*``
environment variables.
"""

import os
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from data_exporter.export.base import ExportOptions


class ExportConfig(BaseModel):
    """Exporter configuration, immutable after construction.

    Example:
        >>> config = ExportConfig(cwd="/var/exports")
        >>> config.cwd
        '/var/exports'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    cwd: str = Field(default_factory=os.getcwd)  # Base directory for relative paths
    options: ExportOptions = Field(default_factory=ExportOptions)

    @field_validator("cwd", mode="before")
    @classmethod
    def coerce_path(cls, value: Any) -> Any:
        """Accept path-like objects."""
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value


class ExporterSettings(BaseSettings):
    """Process settings loaded from the environment."""

    model_config = SettingsConfigDict(env_prefix="EXPORTER_", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    log_format: Literal["console", "json"] = "console"


_settings: ExporterSettings | None = None


def get_settings() -> ExporterSettings:
    """Return the cached settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = ExporterSettings()
    return _settings


def reset_settings() -> None:
    """Drop cached settings so the next access reloads the environment."""
    global _settings
    _settings = None
