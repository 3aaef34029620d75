"""Internal utilities for coreapp_detect package."""

from __future__ import annotations

from .logging import configure_logging
from .settings import DetectorSettings, get_settings

__all__ = ["DetectorSettings", "configure_logging", "get_settings"]
