"""Protocol definitions for core abstractions.

This module defines the capability surface fskit consumes from the
operating system. Designing to an interface enables:
- Substitution of test doubles for failure injection
- A clear contract of which OS calls the copy logic relies on

Implementations satisfy the protocol structurally (duck typing).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

from fskit.types import DirEntry


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem primitives used by fskit.

    Each method maps onto a single OS operation. Errors are raised as the
    built-in ``OSError`` subclasses; translating them into fskit errors is
    the caller's job.
    """

    def lstat(self, path: Path) -> os.stat_result:
        """Probe metadata of a path without following symlinks.

        Args:
            path: Path to probe.

        Returns:
            The stat result.

        Raises:
            FileNotFoundError: If nothing exists at the path.
        """
        ...

    def stat(self, path: Path) -> os.stat_result:
        """Probe metadata of a path, following symlinks.

        Args:
            path: Path to probe.

        Returns:
            The stat result of the final target.

        Raises:
            FileNotFoundError: If nothing exists at the path or a symlink
                on it dangles.
        """
        ...

    def mkdir_all(self, path: Path, mode: int) -> None:
        """Create a directory and all missing ancestors.

        No-op if the directory already exists. Every directory created gets
        the same mode.

        Args:
            path: Directory to create.
            mode: Permission bits for each new directory.
        """
        ...

    def open_read(self, path: Path) -> BinaryIO:
        """Open a file for binary reading.

        Args:
            path: File to open.

        Returns:
            Readable binary stream.
        """
        ...

    def create_truncate(self, path: Path, mode: int) -> BinaryIO:
        """Create or truncate a file for binary writing.

        Args:
            path: File to open.
            mode: Permission bits used when the file is created.

        Returns:
            Writable binary stream.
        """
        ...

    def sync(self, stream: BinaryIO) -> None:
        """Flush a written stream to stable storage.

        Args:
            stream: Stream returned by ``create_truncate``.
        """
        ...

    def hard_link(self, src: Path, dst: Path) -> None:
        """Create a hard link at dst referring to src.

        Args:
            src: Existing file.
            dst: New link path; must not exist.
        """
        ...

    def list_entries(self, path: Path) -> list[DirEntry]:
        """List the immediate children of a directory.

        Args:
            path: Directory to list.

        Returns:
            Entries sorted by name.
        """
        ...

    def rename(self, src: Path, dst: Path) -> None:
        """Rename src to dst.

        Args:
            src: Existing path.
            dst: New path.
        """
        ...

    def remove(self, path: Path) -> None:
        """Remove a file.

        Args:
            path: File to remove.
        """
        ...

    def append_bytes(self, path: Path, data: bytes, mode: int) -> None:
        """Append data to a file, creating it if needed.

        Args:
            path: File to append to.
            data: Bytes to append.
            mode: Permission bits used when the file is created.
        """
        ...

    def set_times(self, path: Path, atime: float, mtime: float) -> None:
        """Set access and modification times.

        Args:
            path: Path to update.
            atime: Access time in seconds since the epoch.
            mtime: Modification time in seconds since the epoch.
        """
        ...
