"""
Element classification entry points.

This module provides the ElementClassifier class which is responsible for:
- Converting file paths into project-relative form
- Checking paths against the ignore patterns
- Resolving element types of source files
- Resolving and classifying import sources as local, built-in or external
"""

from __future__ import annotations

import sys
from functools import lru_cache
from pathlib import Path

from .imports import classify_import, is_ignored
from .registry import BuiltinRegistry, get_registry
from .resolution import FileSystemResolver, ResolutionError, Resolver
from .resolver import classify_path
from .settings import Settings
from .types import ElementClassification, FileClassification, ImportClassification
from .utils import project_path

# Upper bound of memoized path classifications per classifier
PATH_CACHE_SIZE = 4096


class ElementClassifier:
    """
    Classifies files and imports of a project into element types.

    Classification is a pure function of the path and the settings, so one
    instance can be shared freely. Path classifications are memoized per
    instance in a bounded LRU cache.

    Attributes:
        settings: Normalized project settings
        resolver: Callable turning (source, importing file) into a file path
        registry: Registry of platform built-in module names
    """

    def __init__(
        self,
        settings: Settings,
        resolver: Resolver | None = None,
        registry: BuiltinRegistry | None = None,
        cache_size: int | None = PATH_CACHE_SIZE,
    ) -> None:
        """
        Initialize the classifier.

        Args:
            settings: Normalized project settings
            resolver: Import resolver (default: FileSystemResolver using the
                settings' project root and aliases)
            registry: Built-in registry (default: the settings' platform)
            cache_size: Maximum number of memoized path classifications
                (None for no limit)
        """
        self.settings = settings
        self.resolver = resolver or FileSystemResolver(settings.project_root, settings.aliases)
        self.registry = registry or get_registry(settings.platform)
        self._classify_path = lru_cache(maxsize=cache_size)(self._classify_path)

    def project_path(self, path: Path | str | None) -> str | None:
        """Convert a path into its project-relative, forward-slash form."""
        return project_path(path, self.settings.project_root)

    def classify_path(self, path: str | None) -> ElementClassification:
        """
        Get the element classification of a project-relative path.

        Ignored paths get the empty classification.
        """
        if not path or is_ignored(path, self.settings.ignore):
            return ElementClassification()
        return self._classify_path(path)

    def _classify_path(self, path: str) -> ElementClassification:
        return classify_path(path, self.settings.types)

    def classify_file(self, path: Path | str) -> FileClassification:
        """
        Classify a source file.

        Args:
            path: Absolute or project-relative path of the file

        Returns:
            FileClassification with the file's element type and ancestors
        """
        relative = self.project_path(path)
        return FileClassification(
            path=relative,
            is_ignored=is_ignored(relative, self.settings.ignore),
            element=self.classify_path(relative),
        )

    def resolve_import(self, source: str, importer: Path | str | None = None) -> str | None:
        """
        Resolve an import source to a project-relative path.

        Resolution failures are not errors: they mean the import has no
        local file (an installed package, a built-in, or a broken import).

        Args:
            source: Import string as written
            importer: File containing the import

        Returns:
            Project-relative path of the resolved file, or None
        """
        importer_path = None
        if importer is not None:
            importer_path = Path(importer)
            if not importer_path.is_absolute():
                importer_path = self.settings.project_root / importer_path

        try:
            resolved = self.resolver(source, importer_path)
        except (ResolutionError, ImportError, OSError, ValueError) as e:
            print(f"Warning: Could not resolve '{source}': {e}", file=sys.stderr)
            return None

        return self.project_path(resolved)

    def classify_import(
        self, source: str, importer: Path | str | None = None
    ) -> ImportClassification:
        """
        Classify an import source as seen from an importing file.

        Args:
            source: Import string as written
            importer: File containing the import

        Returns:
            ImportClassification for the import
        """
        resolved = self.resolve_import(source, importer)
        return classify_import(
            source,
            resolved,
            self.settings.types,
            ignore=self.settings.ignore,
            registry=self.registry,
        )
