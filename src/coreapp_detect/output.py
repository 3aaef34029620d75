"""Rendering of detection results."""

from __future__ import annotations

from .types import ConfigInfo


def format_result(config: ConfigInfo) -> str:
    """Format a detection result as the single line consumed by the Dockerfile pipeline.

    The layout is fixed, including the double space after ``"csprojPath":``:

        {"csprojPath":  "MyApp.csproj", "ports": [5000], "httpPort": 5000, "appName": "MyApp"}
    """
    ports = ",".join(str(port) for port in config.ports)
    return (
        f'{{"csprojPath":  "{config.path}", "ports": [{ports}], '
        f'"httpPort": {config.http_port}, "appName": "{config.app_name}"}}'
    )


def format_json(config: ConfigInfo) -> str:
    """Format the full detection result, including the HTTPS port, as indented JSON."""
    return config.model_dump_json(by_alias=True, indent=2)


__all__ = ["format_json", "format_result"]
