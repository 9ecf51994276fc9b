"""Tests for utility functions."""

from __future__ import annotations

from pathlib import Path

import pytest

from boundary_classifier import find_project_root
from boundary_classifier.utils import project_path


class TestFindProjectRoot:
    """Tests for find_project_root function."""

    def test_find_project_root_in_current_dir(self, tmp_path: Path) -> None:
        """Test finding project root in current directory."""
        project_root = tmp_path / "project"
        project_root.mkdir()
        (project_root / ".boundaries.toml").write_text('types = ["components"]\n')

        found = find_project_root(project_root)

        assert found == project_root.resolve()

    def test_find_project_root_in_parent(self, tmp_path: Path) -> None:
        """Test finding project root in parent directory."""
        project_root = tmp_path / "project"
        project_root.mkdir()
        (project_root / "pyproject.toml").write_text("[project]\nname = 'test'")

        subdir = project_root / "subdir" / "nested"
        subdir.mkdir(parents=True)

        found = find_project_root(subdir)

        assert found == project_root.resolve()

    def test_find_project_root_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that find_project_root defaults to current directory."""
        project_root = tmp_path / "project"
        project_root.mkdir()
        (project_root / ".boundaries.toml").write_text("")

        monkeypatch.chdir(project_root)

        found = find_project_root()

        assert found == project_root.resolve()


class TestProjectPath:
    """Tests for project_path function."""

    def test_absolute_path_inside_root(self, tmp_path: Path) -> None:
        """Test that paths inside the root become relative."""
        root = tmp_path.resolve()

        assert project_path(root / "src" / "a.js", root) == "src/a.js"

    def test_absolute_path_outside_root(self, tmp_path: Path) -> None:
        """Test that paths outside the root stay absolute."""
        root = (tmp_path / "project").resolve()
        outside = (tmp_path / "other" / "a.js").resolve()

        assert project_path(outside, root) == outside.as_posix()

    def test_relative_path(self, tmp_path: Path) -> None:
        """Test that relative paths are kept and use forward slashes."""
        assert project_path("src\\components\\a.js", tmp_path) == "src/components/a.js"
        assert project_path(Path("src") / "a.js", tmp_path) == "src/a.js"

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test that a missing path stays missing."""
        assert project_path(None, tmp_path) is None
        assert project_path("", tmp_path) is None
