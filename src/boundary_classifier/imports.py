"""
Import source classification.

Helpers that decide, from the raw import string and the path it resolved to
(if any), whether an import is local, built-in, external or ignored, and
what package it belongs to.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from .matcher import is_match
from .registry import BuiltinRegistry, NodeCoreModules
from .resolver import classify_path
from .types import ElementClassification, ImportClassification, TypeDeclaration

SCOPED_PATTERN = re.compile(r"^@[^/]*/?[^/]+")
EXTERNAL_PATTERN = re.compile(r"^\w", re.ASCII)


def is_scoped(source: str | None) -> bool:
    """Check if an import source is a scoped package identifier (``@scope/pkg``)."""
    return bool(source) and SCOPED_PATTERN.match(source) is not None


def base_module(source: str | None, resolved_path: str | None = None) -> str | None:
    """
    Get the package identity of an import source.

    Args:
        source: Raw import string
        resolved_path: Path the import resolved to, if any

    Returns:
        None for resolved imports; ``scope/pkg`` for scoped identifiers
        (just ``pkg`` when the scope is empty, as in ``@/pkg``);
        otherwise the first "/"-delimited segment
    """
    if resolved_path or not source:
        return None
    if is_scoped(source):
        scope, _, rest = source[1:].partition("/")
        package = rest.split("/")[0]
        if not scope:
            return package or None
        return f"{scope}/{package}" if package else scope
    return source.split("/")[0]


def is_built_in(
    source: str | None, resolved_path: str | None, registry: BuiltinRegistry
) -> bool:
    if resolved_path or not source:
        return False
    if source.startswith("node:"):
        # The prefixed form names the module as a whole, e.g. "node:fs/promises"
        return registry.is_builtin(source)
    return registry.is_builtin(base_module(source) or "")


def is_external(source: str | None, resolved_path: str | None) -> bool:
    """
    Check if an unresolved import looks like a bare package import.

    ``lodash`` and ``@org/pkg`` are external; ``./x`` is not.
    """
    if resolved_path or not source:
        return False
    return EXTERNAL_PATTERN.match(source) is not None or is_scoped(source)


def is_ignored(path: str | None, ignore: Sequence[str]) -> bool:
    """Check a path against the ignore patterns; a missing path is never ignored."""
    return is_match(path, ignore)


def classify_import(
    source: str,
    resolved_path: str | None,
    declarations: Sequence[TypeDeclaration],
    ignore: Sequence[str] = (),
    registry: BuiltinRegistry | None = None,
) -> ImportClassification:
    """
    Classify an import source.

    Args:
        source: Raw import string as written
        resolved_path: Project-relative path the import resolved to, or None
        declarations: Normalized type declarations in priority order
        ignore: Ignore patterns
        registry: Built-in module registry (default: Node.js core modules)

    Returns:
        ImportClassification including the element classification of the
        resolved path (empty when unresolved or ignored)
    """
    if registry is None:
        registry = NodeCoreModules()

    built_in = is_built_in(source, resolved_path, registry)
    external = is_external(source, resolved_path)
    ignored = is_ignored(resolved_path, ignore)

    element = ElementClassification()
    if resolved_path and not ignored:
        element = classify_path(resolved_path, declarations)

    return ImportClassification(
        source=source,
        resolved_path=resolved_path,
        base_module=base_module(source, resolved_path),
        is_ignored=ignored,
        is_local=bool(resolved_path) and not built_in and not external,
        is_built_in=built_in,
        is_external=external,
        element=element,
    )
