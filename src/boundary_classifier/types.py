"""
Type definitions for the package.

This module contains the core data structures used throughout the package
for representing element type declarations and the classification results
produced for files and import sources.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any


def frozen_mapping(values: Mapping[str, str] | None = None) -> Mapping[str, str]:
    """Read-only copy of a mapping, safe to share between results."""
    return MappingProxyType(dict(values or {}))


class MatchStrategy(Enum):
    """
    How a type declaration's pattern is matched against a path.

    Attributes:
        PARENT_FOLDERS: The pattern denotes a directory; every path nested
            under it belongs to the type
        EXACT: The pattern must match the candidate path literally
    """

    PARENT_FOLDERS = "parentFolders"
    EXACT = "exact"


@dataclass(frozen=True)
class TypeDeclaration:
    """
    One user-declared architectural element type.

    Attributes:
        name: Type name (e.g., "components"). Duplicates shadow by order.
        pattern: Glob pattern over "/"-delimited path segments
        match_strategy: How the pattern is applied (see MatchStrategy)
        capture_names: Names mapped positionally onto the pattern's wildcard
            captures. Empty entries skip their position.
    """

    name: str
    pattern: str
    match_strategy: MatchStrategy = MatchStrategy.PARENT_FOLDERS
    capture_names: tuple[str | None, ...] = ()


@dataclass(frozen=True)
class AncestorElement:
    """An enclosing element found above the innermost one."""

    type: str
    type_root_path: str
    captured_values: Mapping[str, str] = field(default_factory=frozen_mapping)
    captures: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "typeRootPath": self.type_root_path,
            "capturedValues": dict(self.captured_values),
            "captures": list(self.captures),
        }


@dataclass(frozen=True)
class ElementClassification:
    """
    Result of resolving a path against the declared element types.

    Attributes:
        type: Innermost matched type name, or None when nothing matched
        type_root_path: Root directory of the matched element (the matched
            path itself for exact types)
        captured_values: Named captures of the innermost type (read-only)
        captures: Positional captures of the innermost type's own pattern,
            named or not
        internal_path: Path relative to type_root_path; only set for
            parentFolders types
        ancestors: Enclosing elements, nearest first
    """

    type: str | None = None
    type_root_path: str | None = None
    captured_values: Mapping[str, str] = field(default_factory=frozen_mapping)
    captures: tuple[str, ...] = ()
    internal_path: str | None = None
    ancestors: tuple[AncestorElement, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "typeRootPath": self.type_root_path,
            "capturedValues": dict(self.captured_values),
            "captures": list(self.captures),
            "internalPath": self.internal_path,
            "ancestors": [ancestor.to_dict() for ancestor in self.ancestors],
        }


@dataclass(frozen=True)
class FileClassification:
    """Classification of a source file."""

    path: str | None
    is_ignored: bool
    element: ElementClassification = field(default_factory=ElementClassification)

    def to_dict(self) -> dict[str, Any]:
        return {"path": self.path, "isIgnored": self.is_ignored, **self.element.to_dict()}


@dataclass(frozen=True)
class ImportClassification:
    """
    Classification of an import source as seen from an importing file.

    Attributes:
        source: The raw import string as written
        resolved_path: Project-relative path when the import resolved to a file
        base_module: Package identity for unresolved imports
            ("scope/name" for scoped identifiers, else the first segment)
        is_ignored: The resolved path matches an ignore pattern
        is_local: Resolved to a file and neither built-in nor external
        is_built_in: Unresolved and a known platform built-in module
        is_external: Unresolved and syntactically a bare package import
        element: Element classification of the resolved path
    """

    source: str
    resolved_path: str | None = None
    base_module: str | None = None
    is_ignored: bool = False
    is_local: bool = False
    is_built_in: bool = False
    is_external: bool = False
    element: ElementClassification = field(default_factory=ElementClassification)

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "path": self.resolved_path,
            "baseModule": self.base_module,
            "isIgnored": self.is_ignored,
            "isLocal": self.is_local,
            "isBuiltIn": self.is_built_in,
            "isExternal": self.is_external,
            **self.element.to_dict(),
        }
