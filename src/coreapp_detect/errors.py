"""Exceptions raised while detecting a .NET Core project."""

from __future__ import annotations


class DetectionError(Exception):
    """Base class for detection failures."""


class SourcePathNotFoundError(DetectionError, FileNotFoundError):
    """The directory to scan does not exist."""


class WalkError(DetectionError, OSError):
    """The directory walk failed on the root path itself."""


class AmbiguousProjectError(DetectionError):
    """More than one project descriptor was found under the strict policy."""

    def __init__(self, paths: list[str]):
        self.paths = paths
        super().__init__(f"Found {len(paths)} project files, expected exactly one: {', '.join(paths)}")


__all__ = [
    "AmbiguousProjectError",
    "DetectionError",
    "SourcePathNotFoundError",
    "WalkError",
]
