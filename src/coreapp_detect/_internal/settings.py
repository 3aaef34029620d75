"""Settings for .NET Core project detection.

Environment variables override defaults using the ``COREAPP_DETECT_`` prefix.

Example environment variables:
    COREAPP_DETECT_TARGET_FRAMEWORK=net5.0
    COREAPP_DETECT_POLICY=strict
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..types import PortExtraction, SelectionPolicy


class DetectorSettings(BaseSettings):
    """Detection settings."""

    model_config = SettingsConfigDict(env_prefix="COREAPP_DETECT_", extra="ignore")

    target_framework: str = "net5.0"
    """Target framework a project must declare to be detected."""

    project_ext: str = ".csproj"
    """Extension of project descriptor files."""

    settings_ext: str = ".json"
    """Extension searched for launch settings files."""

    launch_settings_name: str = "launchSettings.json"
    """Exact base name of launch settings files."""

    policy: SelectionPolicy = SelectionPolicy.LAST
    """Which project file wins when several are found."""

    port_extraction: PortExtraction = PortExtraction.AUTHORITY
    """How ports are read from application URLs."""

    log_level: str = "WARNING"
    """Log level for the package logger."""

    log_file: str | None = None
    """Optional log file, in addition to stderr."""


@lru_cache
def get_settings() -> DetectorSettings:
    """Get detection settings (cached)."""
    return DetectorSettings()


__all__ = ["DetectorSettings", "get_settings"]
