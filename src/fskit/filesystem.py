"""Filesystem abstraction for testability.

This module provides the production implementation of the FileSystem
protocol. RealFileSystem wraps standard library ``os`` and ``pathlib``
operations, one OS call per method. ``mkdir_all`` is the exception: it
creates each missing ancestor in turn.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from fskit.types import DirEntry, PathKind


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library os and Path operations.
    Satisfies the FileSystem protocol structurally.
    """

    def lstat(self, path: Path) -> os.stat_result:
        """Probe metadata of a path without following symlinks."""
        return os.lstat(path)

    def stat(self, path: Path) -> os.stat_result:
        """Probe metadata of a path, following symlinks."""
        return os.stat(path)

    def mkdir_all(self, path: Path, mode: int) -> None:
        """Create a directory and all missing ancestors, each with mode."""
        for directory in [*reversed(path.parents), path]:
            if directory.is_dir():
                continue
            try:
                directory.mkdir(mode=mode)
            except FileExistsError:
                if not directory.is_dir():
                    raise

    def open_read(self, path: Path) -> BinaryIO:
        """Open a file for binary reading."""
        return open(path, "rb")

    def create_truncate(self, path: Path, mode: int) -> BinaryIO:
        """Create or truncate a file for binary writing."""
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
        return os.fdopen(fd, "wb")

    def sync(self, stream: BinaryIO) -> None:
        """Flush a written stream to stable storage."""
        stream.flush()
        os.fsync(stream.fileno())

    def hard_link(self, src: Path, dst: Path) -> None:
        """Create a hard link at dst referring to src."""
        os.link(src, dst)

    def list_entries(self, path: Path) -> list[DirEntry]:
        """List the immediate children of a directory, sorted by name."""
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                if entry.is_dir(follow_symlinks=False):
                    kind = PathKind.DIRECTORY
                elif entry.is_file(follow_symlinks=False):
                    kind = PathKind.REGULAR_FILE
                else:
                    kind = PathKind.OTHER
                entries.append(DirEntry(name=entry.name, kind=kind))
        return sorted(entries, key=lambda e: e.name)

    def rename(self, src: Path, dst: Path) -> None:
        """Rename src to dst."""
        os.rename(src, dst)

    def remove(self, path: Path) -> None:
        """Remove a file."""
        os.unlink(path)

    def append_bytes(self, path: Path, data: bytes, mode: int) -> None:
        """Append data to a file, creating it if needed."""
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_APPEND, mode)
        with os.fdopen(fd, "ab") as f:
            f.write(data)

    def set_times(self, path: Path, atime: float, mtime: float) -> None:
        """Set access and modification times."""
        os.utime(path, (atime, mtime))
