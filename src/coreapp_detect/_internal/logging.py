"""Logging configuration for the coreapp_detect package."""

from __future__ import annotations

import logging
import os
import sys

LOGGER_NAME = "coreapp_detect"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


def configure_logging(
    log_level: str | None = None,
    log_file: str | None = None,
    force: bool = False,
) -> None:
    """Configure the 'coreapp_detect' logger.

    Records always go to stderr since stdout carries the detection result.

    Args:
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to COREAPP_DETECT_LOG_LEVEL env var or WARNING.
        log_file: Optional path to a log file. Defaults to COREAPP_DETECT_LOG_FILE env var.
        force: If True, reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return

    if log_level is None:
        log_level = os.environ.get("COREAPP_DETECT_LOG_LEVEL", DEFAULT_LOG_LEVEL)

    if log_file is None:
        log_file = os.environ.get("COREAPP_DETECT_LOG_FILE")

    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: Could not create log file {log_file}: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    _configured = True

