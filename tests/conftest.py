"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
import stat
import zipfile
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

# (name, content or None for a directory marker, permission bits)
ZipSpec = list[tuple[str, bytes | None, int]]


@pytest.fixture(autouse=True)
def fixed_umask() -> Iterator[None]:
    """Run every test under umask 022 so created modes are predictable."""
    previous = os.umask(0o022)
    try:
        yield
    finally:
        os.umask(previous)


@pytest.fixture
def make_zip(tmp_path: Path) -> Callable[..., Path]:
    """Factory building zip files with explicit Unix permission bits."""

    def _make(entries: ZipSpec, name: str = "archive.zip") -> Path:
        archive_path = tmp_path / name
        with zipfile.ZipFile(archive_path, "w", zipfile.ZIP_DEFLATED) as zf:
            for entry_name, content, mode in entries:
                info = zipfile.ZipInfo(entry_name)
                info.create_system = 3
                if content is None:
                    info.external_attr = ((stat.S_IFDIR | mode) << 16) | 0x10
                    zf.writestr(info, b"")
                else:
                    info.external_attr = (stat.S_IFREG | mode) << 16
                    info.compress_type = zipfile.ZIP_DEFLATED
                    zf.writestr(info, content)
        return archive_path

    return _make


@pytest.fixture
def sample_entries() -> ZipSpec:
    """A small archive layout with nested directories and mixed modes."""
    return [
        ("docs/", None, 0o755),
        ("docs/readme.txt", b"read me\n", 0o644),
        ("docs/guides/", None, 0o750),
        ("docs/guides/setup.md", b"# Setup\n" * 50, 0o640),
        ("bin/", None, 0o755),
        ("bin/run.sh", b"#!/bin/sh\necho run\n", 0o755),
    ]


def snapshot_tree(root: Path) -> dict[str, tuple[str, object, int]]:
    """Describe every path under ``root`` as (kind, payload, mode).

    Regular files carry their bytes, symlinks their target, directories None.
    """
    result: dict[str, tuple[str, object, int]] = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            path = Path(dirpath) / name
            rel = path.relative_to(root).as_posix()
            st = path.lstat()
            if stat.S_ISLNK(st.st_mode):
                result[rel] = ("symlink", os.readlink(path), 0)
            elif stat.S_ISDIR(st.st_mode):
                result[rel] = ("directory", None, stat.S_IMODE(st.st_mode))
            else:
                result[rel] = ("file", path.read_bytes(), stat.S_IMODE(st.st_mode))
    return result


@pytest.fixture
def tree_snapshot() -> Callable[[Path], dict[str, tuple[str, object, int]]]:
    """Expose snapshot_tree to tests."""
    return snapshot_tree
