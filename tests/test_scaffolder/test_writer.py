"""Tests for file/directory materialization and TreeWriter rollback."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from phjvgen.scaffolder.errors import MaterializationError
from phjvgen.scaffolder.writer import TreeWriter, create_dirs, write_file

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# One-shot helpers
# ---------------------------------------------------------------------------


class TestWriteFile:
    def test_creates_parents_and_writes(self, tmp_path):
        out = write_file(tmp_path / "a" / "b" / "c.txt", "héllo\n")
        assert out.read_text(encoding="utf-8") == "héllo\n"

    def test_overwrites(self, tmp_path):
        target = tmp_path / "c.txt"
        target.write_text("old", encoding="utf-8")
        write_file(target, "new")
        assert target.read_text(encoding="utf-8") == "new"

    def test_error_carries_path(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("i am a file", encoding="utf-8")
        with pytest.raises(MaterializationError) as exc_info:
            write_file(blocker / "child.txt", "x")
        assert exc_info.value.path == blocker / "child.txt"
        assert isinstance(exc_info.value.cause, OSError)


class TestCreateDirs:
    def test_creates_all(self, tmp_path):
        dirs = create_dirs(tmp_path / "x" / "y", tmp_path / "z")
        assert all(d.is_dir() for d in dirs)

    def test_existing_is_fine(self, tmp_path):
        create_dirs(tmp_path)
        assert tmp_path.is_dir()

    def test_error_carries_path(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        with pytest.raises(MaterializationError) as exc_info:
            create_dirs(blocker / "sub")
        assert exc_info.value.path == blocker / "sub"


# ---------------------------------------------------------------------------
# TreeWriter
# ---------------------------------------------------------------------------


class TestTreeWriter:
    def test_clean_exit_keeps_everything(self, tmp_path):
        with TreeWriter() as writer:
            writer.make_dirs(tmp_path / "proj" / "empty")
            writer.write_text(tmp_path / "proj" / "a.txt", "a")
        assert (tmp_path / "proj" / "empty").is_dir()
        assert (tmp_path / "proj" / "a.txt").read_text(encoding="utf-8") == "a"
        assert writer.written == [tmp_path / "proj" / "a.txt"]

    def test_exception_rolls_back_created_tree(self, tmp_path):
        with pytest.raises(RuntimeError):
            with TreeWriter() as writer:
                writer.make_dirs(tmp_path / "proj" / "src" / "main")
                writer.write_text(tmp_path / "proj" / "pom.xml", "<project/>")
                raise RuntimeError("boom")
        assert not (tmp_path / "proj").exists()
        assert list(tmp_path.iterdir()) == []

    def test_rollback_restores_overwritten_file(self, tmp_path):
        existing = tmp_path / "pom.xml"
        existing.write_text("original", encoding="utf-8")
        with pytest.raises(RuntimeError):
            with TreeWriter() as writer:
                writer.write_text(existing, "patched")
                writer.write_text(existing, "patched twice")
                raise RuntimeError("boom")
        assert existing.read_text(encoding="utf-8") == "original"

    def test_rollback_keeps_foreign_files(self, tmp_path):
        with pytest.raises(RuntimeError):
            with TreeWriter() as writer:
                writer.make_dirs(tmp_path / "shared")
                (tmp_path / "shared" / "foreign.txt").write_text("keep", encoding="utf-8")
                raise RuntimeError("boom")
        assert (tmp_path / "shared" / "foreign.txt").read_text(encoding="utf-8") == "keep"

    def test_rollback_leaves_preexisting_dirs(self, tmp_path):
        (tmp_path / "root").mkdir()
        with pytest.raises(RuntimeError):
            with TreeWriter() as writer:
                writer.write_text(tmp_path / "root" / "new" / "f.txt", "x")
                raise RuntimeError("boom")
        assert (tmp_path / "root").is_dir()
        assert not (tmp_path / "root" / "new").exists()

    def test_write_error_is_materialization_error_and_rolls_back(self, tmp_path):
        target = tmp_path / "proj" / "b.txt"
        with pytest.raises(MaterializationError) as exc_info:
            with TreeWriter() as writer:
                writer.write_text(tmp_path / "proj" / "a.txt", "a")
                with patch.object(Path, "write_text", side_effect=PermissionError(13, "denied")):
                    writer.write_text(target, "b")
        assert exc_info.value.path == target
        assert not (tmp_path / "proj").exists()

    def test_manual_rollback_clears_state(self, tmp_path):
        writer = TreeWriter()
        writer.write_text(tmp_path / "f.txt", "x")
        writer.rollback()
        assert not (tmp_path / "f.txt").exists()
        assert writer.written == []
