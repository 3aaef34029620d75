"""Tests for environment-backed settings and logging setup."""

import logging

import pytest

from coreapp_detect._internal import logging as logging_config
from coreapp_detect._internal.settings import DetectorSettings
from coreapp_detect.types import PortExtraction, SelectionPolicy


def test_defaults(monkeypatch):
    for name in ("TARGET_FRAMEWORK", "POLICY", "PORT_EXTRACTION", "LOG_LEVEL"):
        monkeypatch.delenv(f"COREAPP_DETECT_{name}", raising=False)

    settings = DetectorSettings()

    assert settings.target_framework == "net5.0"
    assert settings.project_ext == ".csproj"
    assert settings.launch_settings_name == "launchSettings.json"
    assert settings.policy == SelectionPolicy.LAST
    assert settings.port_extraction == PortExtraction.AUTHORITY


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("COREAPP_DETECT_TARGET_FRAMEWORK", "net6.0")
    monkeypatch.setenv("COREAPP_DETECT_POLICY", "strict")
    monkeypatch.setenv("COREAPP_DETECT_PORT_EXTRACTION", "first-digits")

    settings = DetectorSettings()

    assert settings.target_framework == "net6.0"
    assert settings.policy == SelectionPolicy.STRICT
    assert settings.port_extraction == PortExtraction.FIRST_DIGITS


def test_invalid_policy_is_rejected(monkeypatch):
    monkeypatch.setenv("COREAPP_DETECT_POLICY", "newest")

    with pytest.raises(ValueError):
        DetectorSettings()


@pytest.fixture
def fresh_logger():
    logger = logging.getLogger(logging_config.LOGGER_NAME)
    yield logger
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    logging_config._configured = False


def test_configure_logging(fresh_logger, tmp_path):
    log_file = tmp_path / "detect.log"

    logging_config.configure_logging(log_level="debug", log_file=str(log_file), force=True)
    logging.getLogger("coreapp_detect.scanner").debug("walking %s", "src")

    assert fresh_logger.level == logging.DEBUG
    assert fresh_logger.propagate is False
    assert len(fresh_logger.handlers) == 2
    for handler in fresh_logger.handlers:
        handler.flush()
    assert "coreapp_detect.scanner - DEBUG - walking src" in log_file.read_text()


def test_configure_logging_is_idempotent(fresh_logger):
    logging_config.configure_logging(log_level="INFO", force=True)
    logging_config.configure_logging(log_level="DEBUG")

    assert fresh_logger.level == logging.INFO
    assert len(fresh_logger.handlers) == 1


def test_configure_logging_unwritable_file(fresh_logger, tmp_path, capsys):
    logging_config.configure_logging(log_file=str(tmp_path / "missing" / "detect.log"), force=True)

    assert len(fresh_logger.handlers) == 1
    assert "Could not create log file" in capsys.readouterr().err
