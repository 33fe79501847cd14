"""Error types raised by fskit operations.

Every error carries the path (or paths) it concerns. Underlying OS errors
are chained with ``raise ... from`` so the original cause stays available
through ``__cause__`` as well as the ``cause`` attribute.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "AccessError",
    "CopyError",
    "EditorError",
    "FsError",
    "NotDirectoryError",
    "NotFoundError",
    "NotRegularFileError",
]


class FsError(Exception):
    """Base class for all fskit errors."""

    pass


class NotFoundError(FsError):
    """A required path does not exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} does not exist")


class NotDirectoryError(FsError):
    """A path exists but is not a directory."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"{path} is not a directory")


class NotRegularFileError(FsError):
    """A path exists but is not a regular file.

    Attributes:
        path: The offending path.
        kind: Human-readable kind of the entry, e.g. "directory" or "other".
    """

    def __init__(self, path: Path, kind: str) -> None:
        self.path = path
        self.kind = kind
        super().__init__(f"can't copy non-regular file {path} ({kind})")


class AccessError(FsError):
    """An unexpected OS failure while probing or listing a path."""

    def __init__(self, path: Path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"error accessing {path}: {cause}")


class CopyError(FsError):
    """Streaming file content from src to dst failed.

    Attributes:
        src: Source file.
        dst: Destination file, possibly partially written.
        cause: Error raised by the streamed copy.
        link_error: Error raised by the preceding hard-link attempt, if any.
    """

    def __init__(
        self,
        src: Path,
        dst: Path,
        cause: OSError,
        link_error: OSError | None = None,
    ) -> None:
        self.src = src
        self.dst = dst
        self.cause = cause
        self.link_error = link_error
        message = f"error copying {src} to {dst}: {cause}"
        if link_error is not None:
            message += f" (hard link also failed: {link_error})"
        super().__init__(message)


class EditorError(FsError):
    """The external editor could not be launched."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"error editing {path}: {cause}")
