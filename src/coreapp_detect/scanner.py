"""Directory walking for project and settings files."""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable
from pathlib import Path

from .errors import SourcePathNotFoundError, WalkError
from .types import Reporter

logger = logging.getLogger(__name__)


def file_ext(name: str) -> str:
    """Return the extension of a file name including the dot, or "" if it has none.

    Unlike ``Path.suffix``, a leading dot counts (``".csproj"`` -> ``".csproj"``).
    """
    idx = name.rfind(".")
    return name[idx:] if idx >= 0 else ""


def get_files_by_ext(input_path: str | Path, exts: Iterable[str], reporter: Reporter | None = None) -> list[Path]:
    """Recursively collect files whose extension is exactly one of ``exts``.

    Entries are visited in lexical order. Symlinked directories are not followed,
    including a symlinked ``input_path``.

    Args:
        input_path: Directory to walk.
        exts: Extensions to match, including the dot (e.g. ".csproj").
        reporter: Receives warnings and debug messages. Defaults to the module logger.

    Returns:
        Matching file paths, each prefixed with ``input_path``.

    Raises:
        SourcePathNotFoundError: If ``input_path`` does not exist.
        WalkError: If ``input_path`` itself cannot be read.
    """
    reporter = reporter or logger
    root = Path(input_path)
    wanted = frozenset(exts)

    try:
        is_dir = stat.S_ISDIR(root.stat().st_mode)
        is_link = root.is_symlink()
    except FileNotFoundError as e:
        reporter.warning("Error in walking through files due to : %r", str(e))
        raise SourcePathNotFoundError(f"Source path not found: {root}") from e
    except OSError as e:
        reporter.warning("Error in walking through files due to : %r", str(e))
        raise WalkError(f"Cannot access source path {root}: {e}") from e

    files: list[Path] = []
    if not is_dir:
        reporter.warning("The path %r is not a directory.", str(root))
        if file_ext(root.name) in wanted:
            files.append(root)
    elif is_link:
        reporter.debug("Not following symlinked source path %r", str(root))
        if file_ext(root.name) in wanted:
            files.append(root)
    else:
        try:
            _walk(root, root, wanted, files, reporter)
        except WalkError as e:
            reporter.warning("Error in walking through files due to : %r", str(e))
            raise

    reporter.debug("No of files with %s ext identified : %d", sorted(wanted), len(files))
    return files


def _walk(path: Path, root: Path, wanted: frozenset[str], files: list[Path], reporter: Reporter) -> None:
    try:
        with os.scandir(path) as it:
            entries = sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        if path == root:
            raise WalkError(f"Cannot read source path {root}: {e}") from e
        reporter.warning("Skipping path %r due to error: %r", str(path), str(e))
        return

    for entry in entries:
        entry_path = path / entry.name
        try:
            is_dir = entry.is_dir(follow_symlinks=False)
        except OSError as e:
            reporter.warning("Skipping path %r due to error: %r", str(entry_path), str(e))
            continue

        if is_dir:
            _walk(entry_path, root, wanted, files, reporter)
        elif file_ext(entry.name) in wanted:
            files.append(entry_path)


__all__ = ["file_ext", "get_files_by_ext"]
