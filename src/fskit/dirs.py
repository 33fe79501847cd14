"""Directory helpers."""

from __future__ import annotations

import logging
from pathlib import Path

from fskit.config import DEFAULT_DIR_PERMS
from fskit.errors import AccessError, NotDirectoryError, NotFoundError
from fskit.filesystem import RealFileSystem
from fskit.paths import classify
from fskit.protocols import FileSystem
from fskit.types import DirEntry, PathKind

__all__ = [
    "create_dir",
    "dir_exists",
    "ensure_dir",
    "is_empty_dir",
    "list_dir",
    "list_entries",
]

logger = logging.getLogger(__name__)


def create_dir(
    path: Path | str,
    perms: int = DEFAULT_DIR_PERMS,
    fs: FileSystem | None = None,
) -> None:
    """Create a directory and any missing ancestors.

    Args:
        path: Directory to create.
        perms: Permission bits for the new directory.
        fs: Filesystem implementation. Defaults to RealFileSystem.

    Raises:
        AccessError: If the directory can't be created.
    """
    path = Path(path)
    fs = fs or RealFileSystem()
    try:
        fs.mkdir_all(path, perms)
    except OSError as e:
        raise AccessError(path, e) from e


def ensure_dir(
    path: Path | str,
    perms: int = DEFAULT_DIR_PERMS,
    fs: FileSystem | None = None,
) -> bool:
    """Create a directory if it doesn't exist yet.

    A symlink to a directory counts as an existing directory.

    Args:
        path: Directory to ensure.
        perms: Permission bits used if the directory is created.
        fs: Filesystem implementation. Defaults to RealFileSystem.

    Returns:
        True if the directory was created, False if it already existed.

    Raises:
        NotDirectoryError: If something other than a directory is at path.
    """
    path = Path(path)
    fs = fs or RealFileSystem()
    info = classify(path, fs, follow_symlinks=True)
    if info.exists:
        if not info.is_dir:
            raise NotDirectoryError(path)
        return False
    create_dir(path, perms, fs)
    logger.debug("created directory %s", path)
    return True


def dir_exists(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check if the given path is a directory or a symlink to one."""
    return classify(path, fs, follow_symlinks=True).is_dir


def list_entries(path: Path | str, fs: FileSystem | None = None) -> list[DirEntry]:
    """List every entry of a directory, sorted by name.

    path may be a symlink to a directory. Entries themselves are reported
    without following symlinks.

    Args:
        path: Directory to list.
        fs: Filesystem implementation. Defaults to RealFileSystem.

    Returns:
        Entries with their kinds.

    Raises:
        NotFoundError: If path does not exist.
        NotDirectoryError: If path is not a directory.
        AccessError: If the directory can't be read.
    """
    path = Path(path)
    fs = fs or RealFileSystem()
    info = classify(path, fs, follow_symlinks=True)
    if not info.exists:
        raise NotFoundError(path)
    if not info.is_dir:
        raise NotDirectoryError(path)
    try:
        return fs.list_entries(path)
    except OSError as e:
        raise AccessError(path, e) from e


def list_dir(path: Path | str, fs: FileSystem | None = None) -> list[str]:
    """List the names of the sub-directories of a directory, sorted."""
    return [e.name for e in list_entries(path, fs) if e.kind is PathKind.DIRECTORY]


def is_empty_dir(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check if a directory has no entries."""
    return not list_entries(path, fs)
