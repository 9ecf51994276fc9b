"""
Glob pattern matching with positional captures.

This module translates the small set of glob operators used by element type
patterns into regular expressions:

- ``*`` matches any run of characters inside one segment (a whole-segment
  ``*`` requires at least one character)
- ``**`` as a whole segment matches zero or more segments
- ``?`` matches a single character inside one segment
- ``[abc]`` / ``[!abc]`` character classes
- ``{a,b}`` literal alternation

Each wildcard produces one capture, in the order it appears in the pattern.
Compiled patterns are cached, so repeated matching is cheap.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache


def _translate_class(segment: str, start: int) -> tuple[str, int] | None:
    """Translate a ``[...]`` class starting at ``start``; None if unterminated."""
    end = segment.find("]", start + 2 if segment[start + 1 : start + 2] == "!" else start + 1)
    if end == -1:
        return None
    body = segment[start + 1 : end]
    if body.startswith("!"):
        body = "^" + body[1:]
    body = body.replace("\\", "\\\\")
    return f"([{body}])", end + 1


def _translate_braces(segment: str, start: int) -> tuple[str, int] | None:
    end = segment.find("}", start)
    if end == -1:
        return None
    options = segment[start + 1 : end].split(",")
    return "(" + "|".join(re.escape(option) for option in options) + ")", end + 1


def _translate_segment(segment: str) -> str:
    """Translate one path segment (never ``**``) into a regex fragment."""
    if segment == "*":
        return "([^/]+)"

    parts: list[str] = []
    index = 0
    while index < len(segment):
        char = segment[index]
        if char == "*":
            # Consecutive stars inside a segment behave like one
            while index < len(segment) and segment[index] == "*":
                index += 1
            parts.append("([^/]*)")
            continue
        if char == "?":
            parts.append("([^/])")
        elif char == "[" and (translated := _translate_class(segment, index)):
            fragment, index = translated
            parts.append(fragment)
            continue
        elif char == "{" and (translated := _translate_braces(segment, index)):
            fragment, index = translated
            parts.append(fragment)
            continue
        else:
            parts.append(re.escape(char))
        index += 1
    return "".join(parts)


@lru_cache(maxsize=1024)
def compile_pattern(pattern: str) -> re.Pattern[str]:
    """
    Compile a glob pattern into an anchored regular expression.

    Args:
        pattern: Glob pattern over "/"-delimited segments

    Returns:
        Compiled regex whose groups are the pattern's positional captures
    """
    segments = pattern.split("/")
    parts: list[str] = []
    needs_separator = False

    for index, segment in enumerate(segments):
        is_last = index == len(segments) - 1
        if segment == "**":
            if is_last:
                parts.append("(?:/(.*))?" if needs_separator else "(.*)")
            else:
                if needs_separator:
                    parts.append("/")
                parts.append("(?:(.*)/)?")
                needs_separator = False
            continue
        if needs_separator:
            parts.append("/")
        parts.append(_translate_segment(segment))
        needs_separator = True

    return re.compile("^" + "".join(parts) + "$")


def capture(pattern: str, candidate: str) -> tuple[str, ...] | None:
    """
    Match a candidate path against a pattern and return its captures.

    Args:
        pattern: Glob pattern
        candidate: "/"-delimited path to test

    Returns:
        Tuple with one string per wildcard in the pattern (empty string for a
        ``**`` that matched nothing), or None if the candidate does not match
    """
    match = compile_pattern(pattern).match(candidate)
    if match is None:
        return None
    return tuple(group or "" for group in match.groups())


def is_match(candidate: str | None, patterns: Iterable[str]) -> bool:
    """
    Check whether a path matches any of the given patterns.

    A missing candidate never matches.
    """
    if not candidate:
        return False
    return any(compile_pattern(pattern).match(candidate) for pattern in patterns)
