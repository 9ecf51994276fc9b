"""
Configuration loading and normalization.

This module turns user configuration into the canonical form consumed by the
resolver. Type declarations may be written in the legacy shorthand (a bare
type name) or as tables; both are normalized once, up front, into a tuple of
TypeDeclaration objects. Configuration is read from the
``[tool.boundary-classifier]`` table of pyproject.toml or from the top level
of a ``.boundaries.toml`` file.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Union

try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .registry import REGISTRIES
from .types import MatchStrategy, TypeDeclaration, frozen_mapping

DEFAULT_PLATFORM = "node"
TOOL_NAME = "boundary-classifier"
CONFIG_FILENAME = ".boundaries.toml"
PYPROJECT_FILENAME = "pyproject.toml"

LEGACY_CAPTURE_NAMES = ("elementName",)

# A raw entry of the "elements"/"types" list
TypeEntry = Union[str, Mapping[str, Any], TypeDeclaration]


class ConfigurationError(ValueError):
    """Raised when the configuration cannot be normalized."""


@dataclass(frozen=True)
class Settings:
    """
    Normalized configuration for classifying a project.

    Attributes:
        project_root: Directory all classified paths are made relative to
        types: Type declarations in priority order
        ignore: Glob patterns of paths excluded from classification
        aliases: Import prefix to project-relative directory mapping
        platform: Name of the built-in module registry ("node" or "python")
    """

    project_root: Path
    types: tuple[TypeDeclaration, ...] = ()
    ignore: tuple[str, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=frozen_mapping)
    platform: str = DEFAULT_PLATFORM

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any], project_root: Path) -> Settings:
        """
        Build settings from a raw configuration mapping.

        ``elements`` takes precedence over the older ``types`` key.

        Raises:
            ConfigurationError: If any part of the configuration is malformed
        """
        entries = data.get("elements") or data.get("types")
        ignore = data.get("ignore") or []
        aliases = data.get("alias") or {}
        platform = data.get("platform") or DEFAULT_PLATFORM

        if not isinstance(platform, str):
            raise ConfigurationError(f"'platform' must be a string, got {platform!r}")
        platform = platform.lower()

        if isinstance(ignore, str) or not isinstance(ignore, Iterable):
            raise ConfigurationError(f"'ignore' must be a list of patterns, got {ignore!r}")
        if not isinstance(aliases, Mapping):
            raise ConfigurationError(f"'alias' must be a table, got {aliases!r}")
        if platform not in REGISTRIES:
            raise ConfigurationError(
                f"Unknown platform {platform!r} (expected one of: {', '.join(REGISTRIES)})"
            )

        return cls(
            project_root=Path(project_root).resolve(),
            types=normalize_types(entries),
            ignore=tuple(str(pattern) for pattern in ignore),
            aliases=frozen_mapping({str(key): str(value) for key, value in aliases.items()}),
            platform=platform,
        )


def _parse_match_strategy(value: Any, name: str) -> MatchStrategy:
    if value is None:
        return MatchStrategy.PARENT_FOLDERS
    if isinstance(value, MatchStrategy):
        return value
    try:
        return MatchStrategy(value)
    except ValueError as err:
        choices = ", ".join(strategy.value for strategy in MatchStrategy)
        raise ConfigurationError(
            f"Unknown match strategy {value!r} for type '{name}' (expected one of: {choices})"
        ) from err


def _parse_capture_names(value: Any, name: str) -> tuple[str | None, ...]:
    if value is None:
        return ()
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ConfigurationError(f"'capture' of type '{name}' must be a list of names")
    return tuple(str(item) if item else None for item in value)


def normalize_type(entry: TypeEntry) -> TypeDeclaration:
    """
    Normalize a single type entry into a TypeDeclaration.

    A bare name ``X`` expands to a parentFolders declaration with pattern
    ``X/*`` capturing ``elementName``. Tables default to parentFolders when
    no match strategy is given. Already-normalized declarations are returned
    unchanged.

    Args:
        entry: Legacy name, table, or TypeDeclaration

    Returns:
        The canonical declaration

    Raises:
        ConfigurationError: If the entry is malformed
    """
    if isinstance(entry, TypeDeclaration):
        return entry

    if isinstance(entry, str):
        if not entry:
            raise ConfigurationError("Type names must not be empty")
        return TypeDeclaration(
            name=entry,
            pattern=f"{entry}/*",
            match_strategy=MatchStrategy.PARENT_FOLDERS,
            capture_names=LEGACY_CAPTURE_NAMES,
        )

    if not isinstance(entry, Mapping):
        raise ConfigurationError(f"Unsupported type entry: {entry!r}")

    # "type" is the key used by older configurations
    name = entry.get("name") or entry.get("type")
    if not name or not isinstance(name, str):
        raise ConfigurationError(f"Type entry is missing a name: {dict(entry)!r}")

    pattern = entry.get("pattern")
    if not pattern or not isinstance(pattern, str):
        raise ConfigurationError(f"Type '{name}' must declare a non-empty pattern")

    return TypeDeclaration(
        name=name,
        pattern=pattern,
        match_strategy=_parse_match_strategy(entry.get("match", entry.get("matchType")), name),
        capture_names=_parse_capture_names(entry.get("capture"), name),
    )


def normalize_types(entries: Iterable[TypeEntry] | None) -> tuple[TypeDeclaration, ...]:
    """
    Normalize a list of type entries, preserving declaration order.

    Declaration order is the priority order used by the resolver: earlier
    declarations are tested first. A declaration repeating an earlier pattern
    can never match and is reported with a warning.

    Args:
        entries: Raw entries, or None for no types

    Returns:
        Tuple of canonical declarations (empty for no input)
    """
    if not entries:
        return ()
    if isinstance(entries, (str, Mapping)):
        raise ConfigurationError("Types must be given as a list")

    declarations = tuple(normalize_type(entry) for entry in entries)

    seen: dict[tuple[str, MatchStrategy], str] = {}
    for declaration in declarations:
        key = (declaration.pattern, declaration.match_strategy)
        if key in seen:
            print(
                f"Warning: Type '{declaration.name}' repeats the pattern "
                f"'{declaration.pattern}' of type '{seen[key]}' and will never match",
                file=sys.stderr,
            )
        else:
            seen[key] = declaration.name

    return declarations


def read_config_file(config_path: Path) -> dict[str, Any]:
    """
    Read the raw configuration table from a TOML file.

    For pyproject.toml the ``[tool.boundary-classifier]`` table is returned;
    any other file is read as a whole.

    Raises:
        ConfigurationError: If the file cannot be read or parsed
    """
    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Could not read {config_path}: {e}") from e
    except tomllib.TOMLDecodeError as e:
        raise ConfigurationError(f"Invalid TOML in {config_path}: {e}") from e

    if config_path.name == PYPROJECT_FILENAME:
        return data.get("tool", {}).get(TOOL_NAME, {})
    return data


def find_config_file(project_root: Path) -> Path | None:
    """
    Find the configuration file in a project root.

    ``.boundaries.toml`` wins over pyproject.toml; pyproject.toml only counts
    when it has a ``[tool.boundary-classifier]`` table.
    """
    dedicated = project_root / CONFIG_FILENAME
    if dedicated.is_file():
        return dedicated

    pyproject = project_root / PYPROJECT_FILENAME
    if pyproject.is_file():
        try:
            data = tomllib.loads(pyproject.read_text(encoding="utf-8"))
        except (OSError, tomllib.TOMLDecodeError) as e:
            print(f"Warning: Could not parse {pyproject}: {e}", file=sys.stderr)
            return None
        if TOOL_NAME in data.get("tool", {}):
            return pyproject

    return None


def load_settings(project_root: Path, config_path: Path | None = None) -> Settings:
    """
    Load and normalize the settings for a project.

    Args:
        project_root: Root directory of the project
        config_path: Explicit configuration file (default: discovered in project_root)

    Returns:
        Normalized Settings; empty settings when no configuration exists

    Raises:
        ConfigurationError: If the configuration is malformed
    """
    project_root = Path(project_root).resolve()
    if config_path is None:
        config_path = find_config_file(project_root)
    if config_path is None:
        return Settings(project_root=project_root)
    return Settings.from_mapping(read_config_file(Path(config_path)), project_root)


def type_names(settings: Settings) -> list[str]:
    """Get the declared type names in priority order, without repeats."""
    return list(dict.fromkeys(declaration.name for declaration in settings.types))
