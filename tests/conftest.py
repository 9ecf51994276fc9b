"""Pytest configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

from boundary_classifier import Settings, normalize_types

PROJECT_FILES = (
    "components/component-a/ComponentA.js",
    "components/component-a/index.js",
    "components/component-b/index.js",
    "helpers/helper-a/HelperA.js",
    "helpers/helper-a/index.js",
    "helpers/helper-b/index.js",
    "modules/module-a/ModuleA.js",
    "modules/module-a/index.js",
    "modules/module-a/components/component-c/index.js",
    "modules/module-b/index.js",
    "foo/index.js",
)

CONFIG = """\
ignore = ["**/*.test.js"]
types = [
    "helpers",
    { name = "components", pattern = "components/*", capture = ["elementName"] },
    { name = "modules", pattern = "modules/*", capture = ["elementName"] },
]

[alias]
helpers = "helpers"
components = "components"
"""


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a project with components, helpers and modules folders."""
    root = tmp_path / "project"
    root.mkdir()
    for relative in PROJECT_FILES:
        file_path = root / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("export default {};\n")
    (root / ".boundaries.toml").write_text(CONFIG)
    return root.resolve()


@pytest.fixture
def declarations():
    """Types of a project where components may be nested inside modules."""
    return normalize_types(
        [
            "helpers",
            {"name": "components", "pattern": "components/*", "capture": ["elementName"]},
            {"name": "modules", "pattern": "modules/*", "capture": ["elementName"]},
        ]
    )


@pytest.fixture
def settings(project_root: Path, declarations) -> Settings:
    """Settings equivalent to the project's .boundaries.toml."""
    return Settings(
        project_root=project_root,
        types=declarations,
        ignore=("**/*.test.js",),
        aliases={"helpers": "helpers", "components": "components"},
    )
