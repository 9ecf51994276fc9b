"""
Utility functions for project discovery and path conversion.
"""

from __future__ import annotations

from pathlib import Path

from .settings import CONFIG_FILENAME, PYPROJECT_FILENAME

PROJECT_MARKERS = (CONFIG_FILENAME, PYPROJECT_FILENAME)


def find_project_root(start_path: Path | None = None) -> Path | None:
    """
    Find the project root by searching parent directories for a config file.

    Starts from the given path (or current directory) and walks up the
    directory tree until it finds a directory containing .boundaries.toml
    or pyproject.toml.

    Args:
        start_path: Starting directory for the search (default: current directory)

    Returns:
        Path to the project root directory, or None if not found
    """
    if start_path is None:
        start_path = Path.cwd()

    current = Path(start_path).resolve()

    for directory in (current, *current.parents):
        if any((directory / marker).exists() for marker in PROJECT_MARKERS):
            return directory

    return None


def project_path(path: Path | str | None, project_root: Path) -> str | None:
    """
    Convert a path into the project-relative, forward-slash form used for matching.

    Relative paths are taken as already relative to the project root. Absolute
    paths outside the project root are returned in forward-slash form unchanged.

    Args:
        path: Absolute or project-relative path
        project_root: Resolved project root directory

    Returns:
        The converted path, or None when no path is given
    """
    if path is None or path == "":
        return None

    candidate = Path(str(path).replace("\\", "/"))
    if not candidate.is_absolute():
        return candidate.as_posix()

    candidate = candidate.resolve()
    if candidate.is_relative_to(project_root):
        return candidate.relative_to(project_root).as_posix()
    return candidate.as_posix()
