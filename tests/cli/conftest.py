"""Pytest configuration for CLI tests."""

import logging

import pytest

from coreapp_detect._internal import logging as logging_config
from coreapp_detect._internal.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop COREAPP_DETECT_* variables and the cached settings around each test."""
    for name in ("TARGET_FRAMEWORK", "POLICY", "PORT_EXTRACTION", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"COREAPP_DETECT_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_logging():
    """Let each CLI run attach its handler to the stderr of the current test."""
    yield
    logging.getLogger(logging_config.LOGGER_NAME).handlers.clear()
    logging_config._configured = False
