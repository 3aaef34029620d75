"""Pytest configuration for all tests."""

from pathlib import Path

import pytest
from helpers import RecordingReporter

from coreapp_detect import DetectorSettings


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def settings() -> DetectorSettings:
    """Default settings, unaffected by COREAPP_DETECT_* variables in the environment."""
    return DetectorSettings.model_construct()


@pytest.fixture
def make_tree(tmp_path: Path):
    """Factory fixture that writes files below a fresh source directory.

    Usage:
        def test_example(make_tree):
            root = make_tree({"MyApp.csproj": csproj("net5.0")})
    """

    def _make(files: dict[str, str], name: str = "app") -> Path:
        root = tmp_path / name
        root.mkdir()
        for rel_path, content in files.items():
            path = root / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return root

    return _make
