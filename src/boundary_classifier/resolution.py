"""
Import resolution.

This module provides FileSystemResolver, which turns an import string into a
file path in the project. It handles relative imports, absolute paths and
alias prefixes (e.g. ``components/x`` -> ``src/components/x``). Bare package
names are never resolved: they belong to installed dependencies, not to the
project.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

DEFAULT_EXTENSIONS = (".js", ".jsx", ".ts", ".tsx", ".mjs", ".cjs", ".json")

# Signature of any resolver usable by the classifier
Resolver = Callable[[str, Path | None], Path | None]


class ResolutionError(Exception):
    """Raised by resolvers that cannot resolve an import source."""


class FileSystemResolver:
    """
    Resolves import sources to files on disk.

    Attributes:
        project_root: Root directory alias targets are relative to
        aliases: Import prefix to project-relative directory mapping
        extensions: File extensions probed for extension-less imports
    """

    def __init__(
        self,
        project_root: Path,
        aliases: Mapping[str, str] | None = None,
        extensions: Sequence[str] = DEFAULT_EXTENSIONS,
    ) -> None:
        self.project_root = Path(project_root).resolve()
        # Longest prefix first, so "components/shared" wins over "components"
        self.aliases = dict(
            sorted((aliases or {}).items(), key=lambda item: len(item[0]), reverse=True)
        )
        self.extensions = tuple(extensions)

    def __call__(self, source: str, importer: Path | None = None) -> Path | None:
        return self.resolve(source, importer)

    def resolve(self, source: str, importer: Path | None = None) -> Path | None:
        """
        Resolve an import source to an existing file.

        Args:
            source: Import string as written
            importer: File containing the import (needed for relative imports)

        Returns:
            Absolute path of the resolved file, or None if it cannot be resolved
        """
        base = self._base_path(source, importer)
        if base is None:
            return None
        return self._probe(base)

    def _base_path(self, source: str, importer: Path | None) -> Path | None:
        if not source:
            return None

        if source in (".", "..") or source.startswith(("./", "../")):
            if importer is None:
                return None
            return Path(importer).resolve().parent / source

        if source.startswith("/"):
            return Path(source)

        for alias, target in self.aliases.items():
            if source == alias or source.startswith(f"{alias}/"):
                rest = source[len(alias) :].lstrip("/")
                base = self.project_root / target
                return base / rest if rest else base

        return None

    def _probe(self, base: Path) -> Path | None:
        """Try the path as given, with each extension, then as a directory index."""
        candidates = [base]
        candidates.extend(base.with_name(base.name + extension) for extension in self.extensions)
        candidates.extend(base / f"index{extension}" for extension in self.extensions)

        for candidate in candidates:
            if candidate.is_file():
                return candidate.resolve()

        return None
