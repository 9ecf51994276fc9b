"""
Main entry point for the boundary-classifier package.

This module provides the command-line interface for the package.
It can be invoked via:
- The `boundary-classifier` command (after installation)
- `python -m boundary_classifier`
- Direct import and call to main()
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

from .classifier import ElementClassifier
from .settings import ConfigurationError, load_settings
from .types import ElementClassification
from .utils import find_project_root


def format_element(element: ElementClassification) -> list[str]:
    """Render an element classification as indented text lines."""
    if element.type is None:
        return ["  type: (none)"]

    lines = [f"  type: {element.type}", f"  root: {element.type_root_path}"]
    if element.internal_path is not None:
        lines.append(f"  internal path: {element.internal_path}")
    for name, value in element.captured_values.items():
        lines.append(f"  {name}: {value}")
    for ancestor in element.ancestors:
        lines.append(f"  ancestor: {ancestor.type} ({ancestor.type_root_path})")
    return lines


def _print_json(results: list[Any]) -> None:
    print(json.dumps([result.to_dict() for result in results], indent=2))


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the classifier.

    Parses command-line arguments, loads the project settings and prints the
    classification of the given files or import.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="Classify project files and imports into architectural element types"
    )
    parser.add_argument(
        "--project-root",
        type=Path,
        help="Root directory of the project (auto-detected from .boundaries.toml or pyproject.toml if not specified)",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Configuration file (default: .boundaries.toml or pyproject.toml in the project root)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    file_parser = subparsers.add_parser("file", help="Classify source files")
    file_parser.add_argument("paths", nargs="+", type=Path, help="Files to classify")

    import_parser = subparsers.add_parser("import", help="Classify an import source")
    import_parser.add_argument("source", help="Import string as written (e.g. '../helpers/a')")
    import_parser.add_argument(
        "--from",
        dest="importer",
        type=Path,
        help="File containing the import (required for relative imports)",
    )

    args = parser.parse_args(argv)

    if args.project_root:
        project_root = Path(args.project_root).resolve()
    else:
        project_root = find_project_root()
        if project_root is None:
            print(
                "Error: Could not find project root (.boundaries.toml or pyproject.toml not found).\n"
                "Please run from a project directory or specify --project-root",
                file=sys.stderr,
            )
            return 1

    try:
        settings = load_settings(project_root, args.config)
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not settings.types:
        print("Warning: No element types configured; nothing will be classified", file=sys.stderr)

    classifier = ElementClassifier(settings)

    if args.command == "file":
        results = [classifier.classify_file(path.resolve()) for path in args.paths]
        if args.json:
            _print_json(results)
            return 0
        for result in results:
            suffix = " (ignored)" if result.is_ignored else ""
            print(f"{result.path}{suffix}")
            if not result.is_ignored:
                for line in format_element(result.element):
                    print(line)
        return 0

    importer = args.importer.resolve() if args.importer else None
    result = classifier.classify_import(args.source, importer)
    if args.json:
        _print_json([result])
        return 0

    if result.is_built_in:
        kind = "built-in"
    elif result.is_external:
        kind = "external"
    elif result.is_local:
        kind = "local"
    else:
        kind = "unresolved"
    print(f"{result.source}: {kind}")
    if result.resolved_path:
        print(f"  path: {result.resolved_path}{' (ignored)' if result.is_ignored else ''}")
    if result.base_module:
        print(f"  base module: {result.base_module}")
    if result.resolved_path and not result.is_ignored:
        for line in format_element(result.element):
            print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
