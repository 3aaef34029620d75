"""Builders for synthetic .NET project trees used across tests."""

import json
from typing import Any

CSPROJ_TEMPLATE = """<Project Sdk="Microsoft.NET.Sdk.Web">

  <PropertyGroup>
    <TargetFramework>{framework}</TargetFramework>
  </PropertyGroup>

</Project>
"""


class RecordingReporter:
    """Reporter that keeps messages instead of logging them."""

    def __init__(self):
        self.warnings: list[str] = []
        self.debugs: list[str] = []

    def warning(self, msg: str, *args: Any) -> None:
        self.warnings.append(msg % args if args else msg)

    def debug(self, msg: str, *args: Any) -> None:
        self.debugs.append(msg % args if args else msg)


def csproj(framework: str) -> str:
    """Return a minimal SDK-style project file targeting ``framework``."""
    return CSPROJ_TEMPLATE.format(framework=framework)


def launch_settings(profiles: dict[str, Any]) -> str:
    """Return a launchSettings.json document with the given profiles."""
    return json.dumps({"iisSettings": {"windowsAuthentication": False}, "profiles": profiles}, indent=2)
