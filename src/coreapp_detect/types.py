"""Type definitions for .NET Core project detection."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, Protocol

from pydantic import BaseModel, ConfigDict, Field


class Reporter(Protocol):
    """Sink for diagnostic messages emitted while scanning.

    A ``logging.Logger`` satisfies this protocol.
    """

    def warning(self, msg: str, *args: Any) -> None: ...

    def debug(self, msg: str, *args: Any) -> None: ...


class SelectionPolicy(StrEnum):
    """Which project file wins when a tree holds more than one."""

    LAST = "last"  # last file in walk order
    FIRST = "first"  # first file in walk order
    STRICT = "strict"  # more than one file is an error


class PortExtraction(StrEnum):
    """How a port number is read from an application URL."""

    AUTHORITY = "authority"  # port component of the URL authority
    FIRST_DIGITS = "first-digits"  # first run of digits anywhere in the URL


class ProjectDescriptor(BaseModel):
    """A single parsed ``.csproj`` file.

    Attributes:
        path: Path of the project file relative to the scanned root.
        app_name: Project file name without its extension.
        target_framework: ``TargetFramework`` value, empty when missing or unparsable.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(description="Project file path relative to the scanned root")
    app_name: str = Field(description="Project file name without extension")
    target_framework: str = Field(default="", description="TargetFramework value from the project file")


class LaunchProfile(BaseModel):
    """A launch profile from ``launchSettings.json``. Only ``applicationUrl`` is read."""

    model_config = ConfigDict(extra="allow")

    application_url: str | None = Field(default=None, alias="applicationUrl")

    @property
    def urls(self) -> list[str]:
        """Individual URLs from the semicolon separated ``applicationUrl``."""
        if self.application_url is None:
            return []
        return self.application_url.split(";")


class LaunchSettings(BaseModel):
    """Top level of a ``launchSettings.json`` document."""

    model_config = ConfigDict(extra="ignore")

    profiles: dict[str, Any] = Field(default_factory=dict, description="Launch profiles keyed by profile name")


class ConfigInfo(BaseModel):
    """Accumulated detection result for one directory scan.

    Attributes:
        version: Target framework read from the selected project file.
        path: Project file path relative to the scanned root.
        app_name: Project file name without extension.
        ports: HTTP ports collected from matching launch profiles.
        http_port: Last parsed ``http://`` port.
        https_port: Last parsed ``https://`` port.
    """

    model_config = ConfigDict(populate_by_name=True)

    version: str = Field(default="", description="Target framework identifier")
    path: str = Field(default="", alias="csprojPath", description="Project file path relative to the root")
    app_name: str = Field(default="", alias="appName", description="Application name")
    ports: list[int] = Field(default_factory=list, description="Detected HTTP ports")
    http_port: int = Field(default=0, alias="httpPort", description="Parsed HTTP port")
    https_port: int = Field(default=0, alias="httpsPort", description="Parsed HTTPS port")


class DetectionResult(BaseModel):
    """Outcome of scanning a source directory.

    Attributes:
        detected: True when the selected project targets the wanted framework.
        config: Everything gathered during the scan, populated even when not detected.
        descriptors: Every project file found, in walk order.
    """

    detected: bool = Field(description="Whether the project targets the wanted framework")
    config: ConfigInfo = Field(default_factory=ConfigInfo, description="Accumulated detection data")
    descriptors: list[ProjectDescriptor] = Field(default_factory=list, description="All project files found")


__all__ = [
    "ConfigInfo",
    "DetectionResult",
    "LaunchProfile",
    "LaunchSettings",
    "PortExtraction",
    "ProjectDescriptor",
    "Reporter",
    "SelectionPolicy",
]
