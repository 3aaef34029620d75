"""Detection of .NET Core projects for Dockerfile generation.

Scans a source directory for a ``.csproj`` targeting ``net5.0`` and reads the
HTTP port of the matching profile in ``launchSettings.json``.

Example usage:
    # CLI
    coreapp-detect path/to/app

    # Python API
    from coreapp_detect import detect_dotnet_core
    detected, config = detect_dotnet_core("path/to/app")
"""

from __future__ import annotations

from ._internal import DetectorSettings, configure_logging, get_settings
from .detector import DotNetCoreDetector, detect_dotnet_core
from .errors import AmbiguousProjectError, DetectionError, SourcePathNotFoundError, WalkError
from .output import format_json, format_result
from .scanner import get_files_by_ext
from .types import ConfigInfo, DetectionResult, PortExtraction, ProjectDescriptor, SelectionPolicy

__version__ = "0.1.0"

__all__ = [
    "AmbiguousProjectError",
    "ConfigInfo",
    "DetectionError",
    "DetectionResult",
    "DetectorSettings",
    "DotNetCoreDetector",
    "PortExtraction",
    "ProjectDescriptor",
    "SelectionPolicy",
    "SourcePathNotFoundError",
    "WalkError",
    "configure_logging",
    "detect_dotnet_core",
    "format_json",
    "format_result",
    "get_files_by_ext",
    "get_settings",
]
