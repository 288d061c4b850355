"""Unit tests for existence, emptiness and purge helpers."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from fsutil.filesystem.dirs import file_exists, is_empty, remove_contents


class TestFileExists:
    """Tests for file_exists function."""

    def test_existing_file(self, tmp_path: Path) -> None:
        """A regular file exists."""
        path = tmp_path / "file.txt"
        path.write_text("x")

        assert file_exists(path) is True

    def test_existing_directory(self, tmp_path: Path) -> None:
        """A directory exists."""
        assert file_exists(tmp_path) is True

    def test_missing_path(self, tmp_path: Path) -> None:
        """A nonexistent path does not exist."""
        assert file_exists(tmp_path / "missing") is False

    def test_empty_path(self) -> None:
        """The empty string does not exist."""
        assert file_exists("") is False

    def test_invalid_path(self) -> None:
        """A path with a NUL byte yields False rather than raising."""
        assert file_exists("bad\0name") is False

    def test_dangling_symlink(self, tmp_path: Path) -> None:
        """A link whose target is missing does not exist."""
        link = tmp_path / "dead"
        link.symlink_to(tmp_path / "nowhere")

        assert file_exists(link) is False

    def test_stat_error(self, tmp_path: Path) -> None:
        """Any stat failure, including permission errors, yields False."""
        with patch("fsutil.filesystem.dirs.os.stat", side_effect=PermissionError("denied")):
            assert file_exists(tmp_path) is False


class TestIsEmpty:
    """Tests for is_empty function."""

    def test_fresh_directory(self, tmp_path: Path) -> None:
        """A freshly created directory is empty."""
        path = tmp_path / "fresh"
        path.mkdir()

        assert is_empty(path) is True

    def test_directory_with_file(self, tmp_path: Path) -> None:
        """A directory holding a file is not empty."""
        (tmp_path / "file.txt").write_text("x")

        assert is_empty(tmp_path) is False

    def test_directory_with_hidden_entry(self, tmp_path: Path) -> None:
        """Hidden entries count."""
        (tmp_path / ".hidden").mkdir()

        assert is_empty(tmp_path) is False

    def test_missing_path(self, tmp_path: Path) -> None:
        """A nonexistent path raises."""
        with pytest.raises(FileNotFoundError):
            is_empty(tmp_path / "missing")

    def test_file_path(self, tmp_path: Path) -> None:
        """A regular file cannot be listed."""
        path = tmp_path / "file.txt"
        path.write_text("x")

        with pytest.raises(NotADirectoryError):
            is_empty(path)


class TestRemoveContents:
    """Tests for remove_contents function."""

    def test_removes_all_children(self, tmp_path: Path) -> None:
        """Files, directories and links are removed; the directory stays."""
        target = tmp_path / "target"
        (target / "nested" / "deeper").mkdir(parents=True)
        (target / "nested" / "deeper" / "file.txt").write_text("x")
        (target / "top.txt").write_text("top")
        (target / ".hidden").write_text("hidden")

        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        (target / "link_to_outside").symlink_to(outside)

        remove_contents(target)

        assert target.is_dir()
        assert list(target.iterdir()) == []
        assert is_empty(target) is True
        # Link targets are not touched
        assert (outside / "keep.txt").read_text() == "keep"

    def test_already_empty(self, tmp_path: Path) -> None:
        """Purging an empty directory is a no-op."""
        remove_contents(tmp_path)

        assert is_empty(tmp_path) is True

    def test_missing_path(self, tmp_path: Path) -> None:
        """A nonexistent path raises."""
        with pytest.raises(FileNotFoundError):
            remove_contents(tmp_path / "missing")

    def test_first_failure_aborts(self, tmp_path: Path) -> None:
        """A removal failure propagates and later children are not attempted."""
        (tmp_path / "a.txt").write_text("a")
        (tmp_path / "b.txt").write_text("b")

        with (
            patch("fsutil.filesystem.dirs.os.unlink", side_effect=PermissionError("denied")) as mock_unlink,
            pytest.raises(PermissionError),
        ):
            remove_contents(tmp_path)

        assert mock_unlink.call_count == 1
        assert sorted(os.listdir(tmp_path)) == ["a.txt", "b.txt"]
