"""Shared test fixtures."""

from __future__ import annotations

import errno
import os
import stat
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO
from unittest.mock import MagicMock

import pytest

from fskit.filesystem import RealFileSystem


class NoLinkFileSystem(RealFileSystem):
    """Real filesystem on which every hard link fails as if cross-device."""

    def hard_link(self, src: Path, dst: Path) -> None:
        raise OSError(errno.EXDEV, "Invalid cross-device link", str(dst))


class StrictPermissionFileSystem(NoLinkFileSystem):
    """No-link filesystem that refuses to write into read-only files.

    Enforces the owner write bit even when the tests run as root.
    """

    def create_truncate(self, path: Path, mode: int) -> BinaryIO:
        if path.exists() and not path.stat().st_mode & stat.S_IWUSR:
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return super().create_truncate(path, mode)


# ============================================================================
# Filesystem Fixtures
# ============================================================================


@pytest.fixture
def no_link_fs() -> NoLinkFileSystem:
    """Create a filesystem without hard link support."""
    return NoLinkFileSystem()


@pytest.fixture
def strict_fs() -> StrictPermissionFileSystem:
    """Create a no-link filesystem that honours read-only files."""
    return StrictPermissionFileSystem()


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.lstat.side_effect = FileNotFoundError(errno.ENOENT, "No such file or directory")
    fs.stat.side_effect = FileNotFoundError(errno.ENOENT, "No such file or directory")
    fs.list_entries.return_value = []
    return fs


@pytest.fixture
def spy_fs() -> MagicMock:
    """Create a mock that records calls and forwards them to the real filesystem."""
    return MagicMock(wraps=RealFileSystem())


@pytest.fixture
def zero_umask() -> Iterator[None]:
    """Clear the process umask so created modes can be asserted exactly."""
    previous = os.umask(0)
    try:
        yield
    finally:
        os.umask(previous)


# ============================================================================
# Sample Tree Fixtures
# ============================================================================


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Create a source tree.

    Layout::

        src/
            a.txt         "hello"
            sub/
                b.txt     "world"
                empty/
    """
    src = tmp_path / "src"
    (src / "sub" / "empty").mkdir(parents=True)
    (src / "a.txt").write_text("hello")
    (src / "sub" / "b.txt").write_text("world")
    return src


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Create a regular source file."""
    path = tmp_path / "source.txt"
    path.write_text("This is the source file content.")
    return path
