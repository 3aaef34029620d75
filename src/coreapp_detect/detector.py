"""Detection of .NET Core projects in a source directory."""

from __future__ import annotations

import logging
from pathlib import Path

from ._internal.settings import DetectorSettings, get_settings
from .errors import SourcePathNotFoundError, WalkError
from .launch_settings import apply_launch_settings_file
from .project import find_project_descriptors, select_descriptor
from .scanner import get_files_by_ext
from .types import ConfigInfo, DetectionResult, Reporter

logger = logging.getLogger(__name__)


class DotNetCoreDetector:
    """Scans a source directory for a project targeting a given .NET framework.

    Example:
        detector = DotNetCoreDetector()
        result = detector.detect("path/to/app")
        if result.detected:
            print(result.config.app_name, result.config.ports)
    """

    def __init__(self, settings: DetectorSettings | None = None, reporter: Reporter | None = None):
        self.settings = settings or get_settings()
        self.reporter = reporter or logger

    def detect(self, source_path: str | Path) -> DetectionResult:
        """Scan ``source_path`` and report whether it holds a matching project.

        A missing or unreadable ``source_path`` is logged and treated as a tree
        without project files.

        Raises:
            AmbiguousProjectError: If the strict policy is set and several project files exist.
        """
        config = ConfigInfo()

        try:
            descriptors = find_project_descriptors(source_path, self.settings.project_ext, self.reporter)
        except (SourcePathNotFoundError, WalkError) as e:
            self.reporter.debug("Treating %r as empty: %s", str(source_path), e)
            descriptors = []

        selected = select_descriptor(descriptors, self.settings.policy)
        if selected is not None:
            config.version = selected.target_framework
            config.path = selected.path
            config.app_name = selected.app_name

        self.reporter.debug("Target framework %r from %r", config.version, config.path)
        if config.version != self.settings.target_framework:
            return DetectionResult(detected=False, config=config, descriptors=descriptors)

        self._collect_ports(source_path, config)
        return DetectionResult(detected=True, config=config, descriptors=descriptors)

    def _collect_ports(self, source_path: str | Path, config: ConfigInfo) -> None:
        try:
            json_files = get_files_by_ext(source_path, [self.settings.settings_ext], self.reporter)
        except (SourcePathNotFoundError, WalkError) as e:
            self.reporter.debug("Treating %r as empty: %s", str(source_path), e)
            return

        for json_file in json_files:
            if json_file.name != self.settings.launch_settings_name:
                continue
            apply_launch_settings_file(config, json_file, self.settings.port_extraction, self.reporter)


def detect_dotnet_core(
    source_path: str | Path,
    settings: DetectorSettings | None = None,
    reporter: Reporter | None = None,
) -> tuple[bool, ConfigInfo]:
    """Detect a .NET Core project under ``source_path``.

    Returns:
        Tuple of (detected, config). ``config`` holds whatever was gathered even
        when nothing was detected.
    """
    result = DotNetCoreDetector(settings=settings, reporter=reporter).detect(source_path)
    return result.detected, result.config


__all__ = ["DotNetCoreDetector", "detect_dotnet_core"]
