"""Shared data types for fskit."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

__all__ = ["CopyOutcome", "DirEntry", "PathInfo", "PathKind", "SyncSummary"]


class PathKind(str, Enum):
    """Kind of a filesystem entry."""

    DIRECTORY = "directory"
    REGULAR_FILE = "file"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> PathKind:
        """Map an ``st_mode`` value to a kind.

        Args:
            mode: Mode as returned by ``lstat``.

        Returns:
            DIRECTORY, REGULAR_FILE, or OTHER for anything else
            (symlinks, sockets, FIFOs, devices).
        """
        if stat.S_ISDIR(mode):
            return cls.DIRECTORY
        if stat.S_ISREG(mode):
            return cls.REGULAR_FILE
        return cls.OTHER


@dataclass(frozen=True)
class PathInfo:
    """Metadata snapshot of a path taken by a single probe.

    Attributes:
        path: The probed path.
        exists: False if nothing is at the path.
        kind: Entry kind (None when missing).
        mode: Permission bits (``S_IMODE`` of ``st_mode``).
        device: Device number of the entry.
        inode: Inode number of the entry.
        size: Size in bytes.
    """

    path: Path
    exists: bool
    kind: PathKind | None = None
    mode: int = 0
    device: int = 0
    inode: int = 0
    size: int = 0

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.exists and self.kind is None:
            raise ValueError("existing path requires a kind")
        if not self.exists and self.kind is not None:
            raise ValueError("missing path cannot have a kind")

    @classmethod
    def missing(cls, path: Path) -> PathInfo:
        """Create the snapshot of a path that does not exist."""
        return cls(path=path, exists=False)

    @property
    def is_dir(self) -> bool:
        return self.kind is PathKind.DIRECTORY

    @property
    def is_regular(self) -> bool:
        return self.kind is PathKind.REGULAR_FILE

    @property
    def identity(self) -> tuple[int, int]:
        """The (device, inode) pair identifying the underlying storage."""
        return (self.device, self.inode)

    def same_file(self, other: PathInfo) -> bool:
        """Check whether two snapshots refer to the same underlying file.

        Args:
            other: Snapshot of another path.

        Returns:
            True if both exist and share device and inode.
        """
        return self.exists and other.exists and self.identity == other.identity


@dataclass(frozen=True)
class DirEntry:
    """A single entry of a directory listing."""

    name: str
    kind: PathKind


class CopyOutcome(str, Enum):
    """What a file copy actually did."""

    UNCHANGED = "unchanged"
    LINKED = "linked"
    STREAMED = "streamed"


@dataclass
class SyncSummary:
    """Counters collected during one tree synchronization.

    Attributes:
        dirs_created: Destination directories that did not exist before.
        files_linked: Files satisfied by a hard link.
        files_streamed: Files whose bytes were copied.
        files_unchanged: Files already sharing identity with the source.
    """

    dirs_created: int = 0
    files_linked: int = 0
    files_streamed: int = 0
    files_unchanged: int = 0

    @property
    def files_total(self) -> int:
        return self.files_linked + self.files_streamed + self.files_unchanged

    def record(self, outcome: CopyOutcome) -> None:
        """Count the outcome of one file copy."""
        if outcome is CopyOutcome.LINKED:
            self.files_linked += 1
        elif outcome is CopyOutcome.STREAMED:
            self.files_streamed += 1
        else:
            self.files_unchanged += 1
