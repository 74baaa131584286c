"""Unit tests for filesystem-mutating operations.

Tests delete, recursive copy, paste, rename with both collision
policies, folder creation, and error reporting.
"""

import logging
import os
import shutil
from pathlib import Path
from unittest.mock import patch

import pytest
from filepilot.browser.operations import (
    copy_path,
    create_directory,
    delete_path,
    paste,
    rename_path,
)


class TestDeletePath:
    """Tests for delete_path."""

    def test_delete_file(self, tmp_path: Path) -> None:
        """A file is removed."""
        target = tmp_path / "a.txt"
        target.write_text("content")

        result = delete_path(target)

        assert result.success is True
        assert result.path == target
        assert not target.exists()

    def test_delete_directory_recursively(self, sample_tree: Path) -> None:
        """A directory is removed with everything below it."""
        result = delete_path(sample_tree / "src")

        assert result.success is True
        assert not (sample_tree / "src").exists()
        assert (sample_tree / "foo.rs").exists()

    @pytest.mark.skipif(os.name != "posix", reason="symlinks need POSIX")
    def test_delete_directory_symlink_keeps_target(self, tmp_path: Path) -> None:
        """Deleting a link to a directory removes only the link."""
        real = tmp_path / "real"
        real.mkdir()
        (real / "keep.txt").write_text("x")
        link = tmp_path / "link"
        link.symlink_to(real, target_is_directory=True)

        result = delete_path(link)

        assert result.success is True
        assert not link.is_symlink()
        assert (real / "keep.txt").exists()

    def test_delete_missing_path_fails(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        """A missing path is reported and logged, not raised."""
        with caplog.at_level(logging.ERROR):
            result = delete_path(tmp_path / "missing")

        assert result.success is False
        assert result.error is not None
        assert "Error deleting" in caplog.text

    def test_delete_permission_error(self, tmp_path: Path) -> None:
        """An OSError from rmtree becomes a failed result."""
        target = tmp_path / "dir"
        target.mkdir()

        with patch("filepilot.browser.operations.shutil.rmtree", side_effect=OSError("in use")):
            result = delete_path(target)

        assert result.success is False
        assert result.error == "in use"
        assert target.exists()


class TestCopyPath:
    """Tests for copy_path."""

    def test_copy_file(self, tmp_path: Path) -> None:
        """A file is copied byte for byte."""
        source = tmp_path / "a.bin"
        source.write_bytes(b"\x00\x01payload")
        destination = tmp_path / "b.bin"

        report = copy_path(source, destination)

        assert report.success is True
        assert report.files_copied == 1
        assert destination.read_bytes() == b"\x00\x01payload"

    def test_copy_tree_reproduces_structure(self, tmp_path: Path) -> None:
        """A directory tree is reproduced with identical contents."""
        src = tmp_path / "src"
        (src / "sub").mkdir(parents=True)
        (src / "x.txt").write_bytes(b"x-content")
        (src / "sub" / "y.txt").write_bytes(b"y-content")
        dst = tmp_path / "dst"

        report = copy_path(src, dst)

        assert report.success is True
        assert report.files_copied == 2
        assert (dst / "x.txt").read_bytes() == b"x-content"
        assert (dst / "sub" / "y.txt").read_bytes() == b"y-content"
        assert sorted(p.relative_to(dst) for p in dst.rglob("*")) == sorted(
            p.relative_to(src) for p in src.rglob("*")
        )

    def test_copy_creates_intermediate_directories(self, tmp_path: Path) -> None:
        """Missing parents of a directory destination are created."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "f.txt").write_text("f")

        report = copy_path(src, tmp_path / "a" / "b" / "dst")

        assert report.success is True
        assert (tmp_path / "a" / "b" / "dst" / "f.txt").read_text() == "f"

    def test_copy_overwrites_existing_file(self, tmp_path: Path) -> None:
        """Repeating a copy overwrites the destination."""
        source = tmp_path / "a.txt"
        source.write_text("new")
        destination = tmp_path / "b.txt"
        destination.write_text("old")

        copy_path(source, destination)

        assert destination.read_text() == "new"

    def test_failed_child_does_not_stop_siblings(self, tmp_path: Path) -> None:
        """One failing file is reported and the rest are still copied."""
        src = tmp_path / "src"
        src.mkdir()
        for name in ("a.txt", "b.txt", "c.txt"):
            (src / name).write_text(name)
        dst = tmp_path / "dst"
        real_copy2 = shutil.copy2

        def flaky_copy2(s: Path, d: Path) -> object:
            if Path(s).name == "b.txt":
                raise PermissionError("denied")
            return real_copy2(s, d)

        with patch("filepilot.browser.operations.shutil.copy2", side_effect=flaky_copy2):
            report = copy_path(src, dst)

        assert report.success is False
        assert report.files_copied == 2
        assert [f.path.name for f in report.failures] == ["b.txt"]
        assert (dst / "a.txt").exists()
        assert (dst / "c.txt").exists()
        assert not (dst / "b.txt").exists()

    def test_refuses_copy_into_itself(self, tmp_path: Path) -> None:
        """Copying a folder into its own subtree is refused."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "f.txt").write_text("f")

        report = copy_path(src, src / "src")

        assert report.success is False
        assert "into itself" in (report.failures[0].error or "")
        assert not (src / "src").exists()

    def test_refuses_copy_onto_same_file(self, tmp_path: Path) -> None:
        """Copying a file onto itself is refused."""
        source = tmp_path / "a.txt"
        source.write_text("a")

        report = copy_path(source, tmp_path / "a.txt")

        assert report.success is False
        assert source.read_text() == "a"

    def test_missing_source_fails(self, tmp_path: Path) -> None:
        """A missing source is a failed report."""
        report = copy_path(tmp_path / "missing", tmp_path / "dst")

        assert report.success is False
        assert report.files_copied == 0

    @pytest.mark.skipif(os.name != "posix", reason="symlinks need POSIX")
    def test_directory_symlink_copied_as_link(self, tmp_path: Path) -> None:
        """Links to directories inside a tree are recreated, not followed."""
        src = tmp_path / "src"
        src.mkdir()
        (src / "loop").symlink_to(src, target_is_directory=True)
        dst = tmp_path / "dst"

        report = copy_path(src, dst)

        assert report.success is True
        assert (dst / "loop").is_symlink()


class TestPaste:
    """Tests for paste."""

    def test_empty_clipboard_is_noop(self, tmp_path: Path) -> None:
        """Nothing happens without a clipboard source."""
        assert paste(None, tmp_path) is None
        assert list(tmp_path.iterdir()) == []

    def test_paste_uses_source_name(self, tmp_path: Path) -> None:
        """The copy lands in the directory under the source's name."""
        source = tmp_path / "origin" / "report.txt"
        source.parent.mkdir()
        source.write_text("data")
        target_dir = tmp_path / "target"
        target_dir.mkdir()

        report = paste(source, target_dir)

        assert report is not None
        assert report.destination == target_dir / "report.txt"
        assert (target_dir / "report.txt").read_text() == "data"

    def test_paste_twice_overwrites(self, tmp_path: Path) -> None:
        """Pasting again copies again."""
        source = tmp_path / "origin" / "report.txt"
        source.parent.mkdir()
        source.write_text("v1")
        target_dir = tmp_path / "target"
        target_dir.mkdir()

        paste(source, target_dir)
        source.write_text("v2")
        report = paste(source, target_dir)

        assert report is not None and report.success
        assert (target_dir / "report.txt").read_text() == "v2"


class TestRenamePath:
    """Tests for rename_path."""

    def test_rename_file(self, tmp_path: Path) -> None:
        """The entry moves to the new name in the same directory."""
        old = tmp_path / "a.txt"
        old.write_text("a")

        result = rename_path(old, "b.txt")

        assert result.success is True
        assert result.path == tmp_path / "b.txt"
        assert not old.exists()
        assert (tmp_path / "b.txt").read_text() == "a"

    def test_collision_fails_by_default(self, tmp_path: Path) -> None:
        """An existing target is refused and both files are kept."""
        old = tmp_path / "a.txt"
        old.write_text("a")
        existing = tmp_path / "b.txt"
        existing.write_text("b")

        result = rename_path(old, "b.txt")

        assert result.success is False
        assert "already exists" in (result.error or "")
        assert result.path == old
        assert old.read_text() == "a"
        assert existing.read_text() == "b"

    def test_collision_overwrite_replaces_file(self, tmp_path: Path) -> None:
        """The overwrite policy replaces an existing file."""
        old = tmp_path / "a.txt"
        old.write_text("a")
        (tmp_path / "b.txt").write_text("b")

        result = rename_path(old, "b.txt", collision="overwrite")

        assert result.success is True
        assert (tmp_path / "b.txt").read_text() == "a"
        assert not old.exists()

    def test_overwrite_cannot_replace_non_empty_directory(self, tmp_path: Path) -> None:
        """Even with overwrite, a non-empty directory target is left alone."""
        old = tmp_path / "a"
        old.mkdir()
        target = tmp_path / "b"
        target.mkdir()
        (target / "keep.txt").write_text("k")

        result = rename_path(old, "b", collision="overwrite")

        assert result.success is False
        assert (target / "keep.txt").exists()

    def test_same_name_is_noop(self, tmp_path: Path) -> None:
        """Renaming to the current name succeeds without touching anything."""
        old = tmp_path / "a.txt"
        old.write_text("a")

        result = rename_path(old, "a.txt")

        assert result.success is True
        assert old.exists()

    @pytest.mark.parametrize("bad_name", ["", ".", "..", "sub/name"])
    def test_invalid_names_rejected(self, tmp_path: Path, bad_name: str) -> None:
        """Empty names, dot names and names with separators are refused."""
        old = tmp_path / "a.txt"
        old.write_text("a")

        result = rename_path(old, bad_name)

        assert result.success is False
        assert old.exists()

    def test_missing_source_fails(self, tmp_path: Path) -> None:
        """Renaming a missing entry is a failed result."""
        result = rename_path(tmp_path / "missing", "other")
        assert result.success is False


class TestCreateDirectory:
    """Tests for create_directory."""

    def test_create(self, tmp_path: Path) -> None:
        """A new directory is created."""
        result = create_directory(tmp_path, "New Folder")

        assert result.success is True
        assert result.path == tmp_path / "New Folder"
        assert (tmp_path / "New Folder").is_dir()

    def test_existing_name_fails(self, tmp_path: Path) -> None:
        """A like-named entry makes creation fail."""
        (tmp_path / "New Folder").write_text("file in the way")

        result = create_directory(tmp_path, "New Folder")

        assert result.success is False
        assert result.error is not None

    def test_invalid_name_fails(self, tmp_path: Path) -> None:
        """Names with separators are refused."""
        result = create_directory(tmp_path, "a/b")

        assert result.success is False
        assert not (tmp_path / "a").exists()
