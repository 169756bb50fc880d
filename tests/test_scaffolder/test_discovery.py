"""Tests for project-root discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from phjvgen.scaffolder.discovery import find_project_root, is_project_root
from phjvgen.scaffolder.errors import ProjectRootNotFoundError

pytestmark = pytest.mark.unit


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    root = tmp_path / "shop"
    (root / "domain" / "src" / "main").mkdir(parents=True)
    (root / "pom.xml").write_text("<project/>", encoding="utf-8")
    return root


class TestIsProjectRoot:
    def test_descriptor_and_layer(self, project_root):
        assert is_project_root(project_root)

    def test_descriptor_without_layer(self, tmp_path):
        (tmp_path / "pom.xml").write_text("<project/>", encoding="utf-8")
        assert not is_project_root(tmp_path)

    def test_layer_without_descriptor(self, tmp_path):
        (tmp_path / "common").mkdir()
        assert not is_project_root(tmp_path)

    def test_custom_markers(self, tmp_path):
        (tmp_path / "pom.xml").write_text("<project/>", encoding="utf-8")
        (tmp_path / "core").mkdir()
        assert is_project_root(tmp_path, marker_dirs=("core",))


class TestFindProjectRoot:
    def test_from_root_itself(self, project_root):
        assert find_project_root(project_root) == project_root.resolve()

    def test_three_levels_below(self, project_root):
        start = project_root / "domain" / "src" / "main"
        found = find_project_root(start)
        assert found == project_root.resolve()
        assert found.is_absolute()

    def test_defaults_to_cwd(self, project_root, monkeypatch):
        monkeypatch.chdir(project_root / "domain" / "src")
        assert find_project_root() == project_root.resolve()

    def test_module_pom_is_skipped(self, project_root):
        module = project_root / "domain"
        (module / "pom.xml").write_text("<project/>", encoding="utf-8")
        assert find_project_root(module / "src") == project_root.resolve()

    def test_not_found(self, tmp_path):
        start = tmp_path / "nowhere" / "deep"
        start.mkdir(parents=True)
        with pytest.raises(ProjectRootNotFoundError) as exc_info:
            find_project_root(start)
        assert exc_info.value.start == start.resolve()
        assert "No project root found" in str(exc_info.value)
