"""Port discovery from ``launchSettings.json`` profiles."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from urllib.parse import urlsplit

from pydantic import ValidationError

from .types import ConfigInfo, LaunchProfile, LaunchSettings, PortExtraction, Reporter

logger = logging.getLogger(__name__)

HTTPS_PREFIX = "https://"
HTTP_PREFIX = "http://"

_DIGITS_RE = re.compile(r"[0-9]+")


def parse_launch_settings(data: bytes | str) -> LaunchSettings | None:
    """Parse a launch settings document.

    Returns:
        The parsed settings, or None if the document is not a JSON object with a
        well-formed ``profiles`` mapping.
    """
    try:
        raw = json.loads(data)
    except ValueError:
        return None
    if not isinstance(raw, dict):
        return None
    try:
        return LaunchSettings.model_validate(raw)
    except ValidationError:
        return None


def get_profile(settings: LaunchSettings, name: str) -> LaunchProfile | None:
    """Look up a profile by name.

    A missing profile, a profile that is not an object and an ``applicationUrl``
    that is not a string all yield None.
    """
    record = settings.profiles.get(name)
    if not isinstance(record, dict):
        return None
    try:
        return LaunchProfile.model_validate(record)
    except ValidationError:
        return None


def extract_port(url: str, mode: PortExtraction = PortExtraction.AUTHORITY) -> int | None:
    """Read the port number from an application URL.

    Args:
        url: A single URL such as ``http://localhost:5000``.
        mode: AUTHORITY reads the port of the URL authority; FIRST_DIGITS takes the
              first run of digits anywhere in the URL.

    Returns:
        The port, or None if the URL carries none.
    """
    if mode == PortExtraction.FIRST_DIGITS:
        match = _DIGITS_RE.search(url)
        return int(match.group()) if match else None

    try:
        return urlsplit(url).port
    except ValueError:
        return None


def apply_profile(config: ConfigInfo, profile: LaunchProfile, mode: PortExtraction = PortExtraction.AUTHORITY) -> None:
    """Record the ports of a profile's URLs on ``config``.

    ``https://`` URLs set ``https_port`` and ``http://`` URLs set ``http_port``;
    other URLs are ignored. The resulting ``http_port`` is then appended to
    ``ports``, even when no HTTP URL was present.
    """
    for url in profile.urls:
        if url.startswith(HTTPS_PREFIX):
            port = extract_port(url, mode)
            if port is not None:
                config.https_port = port
        elif url.startswith(HTTP_PREFIX):
            port = extract_port(url, mode)
            if port is not None:
                config.http_port = port
    config.ports.append(config.http_port)


def apply_launch_settings_file(
    config: ConfigInfo,
    path: str | Path,
    mode: PortExtraction = PortExtraction.AUTHORITY,
    reporter: Reporter | None = None,
) -> bool:
    """Read one launch settings file and apply the profile named ``config.app_name``.

    Returns:
        True if a profile with an ``applicationUrl`` was applied.
    """
    reporter = reporter or logger
    try:
        with open(path, "rb") as fh:
            data = fh.read()
    except OSError as e:
        reporter.warning("Could not read launch settings %r: %s", str(path), e)
        return False

    settings = parse_launch_settings(data)
    if settings is None:
        reporter.debug("Ignoring malformed launch settings %r", str(path))
        return False

    profile = get_profile(settings, config.app_name)
    if profile is None or profile.application_url is None:
        reporter.debug("No applicationUrl for profile %r in %r", config.app_name, str(path))
        return False

    apply_profile(config, profile, mode)
    reporter.debug("Ports after %r: http=%d https=%d", str(path), config.http_port, config.https_port)
    return True


__all__ = [
    "apply_launch_settings_file",
    "apply_profile",
    "extract_port",
    "get_profile",
    "parse_launch_settings",
]
