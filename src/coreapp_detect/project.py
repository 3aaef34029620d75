"""Parsing of ``.csproj`` project descriptors."""

from __future__ import annotations

import logging
import os
import xml.etree.ElementTree as ET
from pathlib import Path

from .errors import AmbiguousProjectError
from .scanner import file_ext, get_files_by_ext
from .types import ProjectDescriptor, Reporter, SelectionPolicy

logger = logging.getLogger(__name__)

PROJECT_ELEMENT = "Project"
PROPERTY_GROUP_ELEMENT = "PropertyGroup"
TARGET_FRAMEWORK_ELEMENT = "TargetFramework"


def _local_name(tag: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix from a tag."""
    return tag.rsplit("}", 1)[-1]


def read_target_framework(data: bytes) -> str:
    """Return the ``TargetFramework`` of a project document.

    The value is read from ``Project/PropertyGroup/TargetFramework``; when several
    property groups declare it, the last one wins. Namespaces are ignored.

    Raises:
        ET.ParseError: If the document is not well-formed XML or its root is not ``Project``.
    """
    root = ET.fromstring(data)
    if _local_name(root.tag) != PROJECT_ELEMENT:
        raise ET.ParseError(f"expected element type <{PROJECT_ELEMENT}> but have <{_local_name(root.tag)}>")

    framework = ""
    for group in root:
        if _local_name(group.tag) != PROPERTY_GROUP_ELEMENT:
            continue
        for child in group:
            if _local_name(child.tag) == TARGET_FRAMEWORK_ELEMENT:
                framework = child.text or ""
    return framework


def parse_project_file(path: str | Path, root: str | Path, reporter: Reporter | None = None) -> ProjectDescriptor:
    """Parse a project file into a ProjectDescriptor.

    Read and parse failures are not raised: the descriptor is returned with an
    empty ``target_framework``.

    Args:
        path: Project file to parse.
        root: Scanned root directory, used to compute the relative path.
        reporter: Receives diagnostics. Defaults to the module logger.
    """
    reporter = reporter or logger
    path = Path(path)
    name = path.name
    app_name = name[: len(name) - len(file_ext(name))]
    relative = Path(os.path.relpath(path, root)).as_posix()

    target_framework = ""
    try:
        with open(path, "rb") as fh:
            data = fh.read()
        target_framework = read_target_framework(data)
    except OSError as e:
        reporter.warning("Could not read project file %r: %s", str(path), e)
    except ET.ParseError as e:
        reporter.debug("Could not parse project file %r: %s", str(path), e)

    return ProjectDescriptor(path=relative, app_name=app_name, target_framework=target_framework)


def find_project_descriptors(
    root: str | Path,
    project_ext: str = ".csproj",
    reporter: Reporter | None = None,
) -> list[ProjectDescriptor]:
    """Parse every project file under ``root``, in walk order.

    Raises:
        SourcePathNotFoundError: If ``root`` does not exist.
        WalkError: If ``root`` itself cannot be read.
    """
    reporter = reporter or logger
    return [parse_project_file(f, root, reporter) for f in get_files_by_ext(root, [project_ext], reporter)]


def select_descriptor(
    descriptors: list[ProjectDescriptor],
    policy: SelectionPolicy = SelectionPolicy.LAST,
) -> ProjectDescriptor | None:
    """Pick the descriptor that represents the project.

    Returns:
        The chosen descriptor, or None if there are none.

    Raises:
        AmbiguousProjectError: If ``policy`` is STRICT and more than one descriptor is given.
    """
    if not descriptors:
        return None
    if policy == SelectionPolicy.FIRST:
        return descriptors[0]
    if policy == SelectionPolicy.STRICT and len(descriptors) > 1:
        raise AmbiguousProjectError([d.path for d in descriptors])
    return descriptors[-1]


__all__ = [
    "find_project_descriptors",
    "parse_project_file",
    "read_target_framework",
    "select_descriptor",
]
