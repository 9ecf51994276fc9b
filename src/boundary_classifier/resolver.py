"""
Path to element type resolution.

This module provides classify_path, which assigns a path to its innermost
element type and discovers the chain of enclosing element types above it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .matcher import capture
from .types import (
    AncestorElement,
    ElementClassification,
    MatchStrategy,
    TypeDeclaration,
    frozen_mapping,
)

# Appended to parentFolders patterns while the innermost type is unknown
NESTED_SUFFIX = "/**/*"


def captured_values(
    captures: Sequence[str], capture_names: Sequence[str | None]
) -> Mapping[str, str]:
    """
    Name positional captures.

    Captures without a name are dropped, and names without a capture are
    never populated. An empty name skips its position. The result is
    read-only.
    """
    return frozen_mapping(
        {name: value for name, value in zip(capture_names, captures) if name}
    )


def classify_path(
    path: str | None, declarations: Sequence[TypeDeclaration]
) -> ElementClassification:
    """
    Resolve the element type and ancestors of a project-relative path.

    Segments are visited from the file name toward the root while a window
    of not yet consumed segments grows in front of them. At every step the
    declarations are tested in order against the window and the first one
    that matches wins; the window is then consumed and the scan continues
    rootward. The first match is the innermost type, later matches are its
    ancestors, nearest first.

    While the innermost type is unknown, parentFolders patterns also match
    anything nested below them. After that they are matched literally, so
    that enclosing element folders are recognized by their own path.

    Args:
        path: "/"-delimited project-relative path (already checked against
            the ignore patterns)
        declarations: Normalized type declarations in priority order

    Returns:
        The classification; empty when the path or declarations are empty
    """
    if not path or not declarations:
        return ElementClassification()

    segments = path.split("/")
    innermost: ElementClassification | None = None
    ancestors: list[AncestorElement] = []
    window_end = len(segments)

    for window_start in range(len(segments) - 1, -1, -1):
        window = "/".join(segments[window_start:window_end])

        for declaration in declarations:
            widened = (
                innermost is None and declaration.match_strategy is MatchStrategy.PARENT_FOLDERS
            )
            pattern = declaration.pattern + NESTED_SUFFIX if widened else declaration.pattern
            captures = capture(pattern, window)
            if captures is None:
                continue

            type_root_path = "/".join(segments[:window_end])
            internal_path = None
            if widened:
                # The last two captures belong to the nested suffix
                *captures, nested_dirs, nested_name = captures
                internal_path = f"{nested_dirs}/{nested_name}" if nested_dirs else nested_name
                type_root_path = type_root_path[: -len(internal_path) - 1]

            values = captured_values(captures, declaration.capture_names)
            if innermost is None:
                innermost = ElementClassification(
                    type=declaration.name,
                    type_root_path=type_root_path,
                    captured_values=values,
                    captures=tuple(captures),
                    internal_path=internal_path,
                )
            else:
                ancestors.append(
                    AncestorElement(
                        type=declaration.name,
                        type_root_path=type_root_path,
                        captured_values=values,
                        captures=tuple(captures),
                    )
                )
            window_end = window_start
            break

    if innermost is None:
        return ElementClassification()

    return ElementClassification(
        type=innermost.type,
        type_root_path=innermost.type_root_path,
        captured_values=innermost.captured_values,
        captures=innermost.captures,
        internal_path=innermost.internal_path,
        ancestors=tuple(ancestors),
    )
