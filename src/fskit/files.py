"""File helpers.

Thin wrappers over single OS calls. Missing sources raise NotFoundError;
other OS failures propagate as the built-in OSError subclasses unless
noted otherwise.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from fskit.config import DEFAULT_DIR_PERMS, DEFAULT_FILE_PERMS
from fskit.copier import copy_file
from fskit.dirs import create_dir
from fskit.errors import NotDirectoryError, NotFoundError, NotRegularFileError
from fskit.filesystem import RealFileSystem
from fskit.paths import classify
from fskit.protocols import FileSystem
from fskit.types import CopyOutcome

__all__ = [
    "append_to_file",
    "copy",
    "create_file",
    "file_exists",
    "file_size",
    "move_file",
    "read_file",
    "touch",
]

logger = logging.getLogger(__name__)


def file_exists(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check if the given path exists and is not a directory."""
    info = classify(path, fs)
    return info.exists and not info.is_dir


def create_file(
    path: Path | str,
    perms: int = DEFAULT_FILE_PERMS,
    fs: FileSystem | None = None,
) -> None:
    """Create an empty file, truncating it if it already exists.

    Args:
        path: File to create.
        perms: Permission bits used if the file is created.
        fs: Filesystem implementation. Defaults to RealFileSystem.
    """
    fs = fs or RealFileSystem()
    with fs.create_truncate(Path(path), perms):
        pass


def touch(
    path: Path | str,
    perms: int = DEFAULT_FILE_PERMS,
    dir_perms: int = DEFAULT_DIR_PERMS,
    fs: FileSystem | None = None,
) -> bool:
    """Update a file's access and modification times, creating it if needed.

    Missing parent directories are created with dir_perms.

    Args:
        path: File to touch.
        perms: Permission bits used if the file is created.
        dir_perms: Permission bits for created parent directories.
        fs: Filesystem implementation. Defaults to RealFileSystem.

    Returns:
        True if the file was created, False if only its times changed.
    """
    path = Path(path)
    fs = fs or RealFileSystem()
    info = classify(path, fs)
    if info.exists:
        now = time.time()
        fs.set_times(path, now, now)
        return False

    create_dir(path.parent, dir_perms, fs)
    create_file(path, perms, fs)
    logger.debug("created %s", path)
    return True


def append_to_file(
    path: Path | str,
    data: bytes | str,
    perms: int = DEFAULT_FILE_PERMS,
    fs: FileSystem | None = None,
) -> None:
    """Append data to a file, creating it if it doesn't exist.

    Args:
        path: File to append to.
        data: Bytes, or text encoded as UTF-8.
        perms: Permission bits used if the file is created.
        fs: Filesystem implementation. Defaults to RealFileSystem.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    fs = fs or RealFileSystem()
    fs.append_bytes(Path(path), data, perms)


def read_file(path: Path | str, fs: FileSystem | None = None) -> bytes:
    """Read the whole content of a regular file.

    Raises:
        NotFoundError: If path does not exist.
        NotRegularFileError: If path is not a regular file.
    """
    path = Path(path)
    fs = fs or RealFileSystem()
    info = classify(path, fs)
    if not info.exists:
        raise NotFoundError(path)
    if not info.is_regular:
        raise NotRegularFileError(path, info.kind.value)
    with fs.open_read(path) as f:
        return f.read()


def file_size(path: Path | str, fs: FileSystem | None = None) -> int:
    """Get the size of a file in bytes.

    Raises:
        NotFoundError: If path does not exist.
    """
    info = classify(path, fs)
    if not info.exists:
        raise NotFoundError(Path(path))
    return info.size


def move_file(src: Path | str, dst: Path | str, fs: FileSystem | None = None) -> None:
    """Move a file by renaming it.

    Raises:
        NotFoundError: If src does not exist.
    """
    src = Path(src)
    fs = fs or RealFileSystem()
    if not classify(src, fs).exists:
        raise NotFoundError(src)
    fs.rename(src, Path(dst))


def copy(
    src: Path | str,
    dst: Path | str,
    fs: FileSystem | None = None,
    link: bool = True,
) -> tuple[Path, CopyOutcome]:
    """Copy a file the way ``cp`` does.

    If dst is an existing directory, or a symlink to one, the file is
    copied into it under its own name. Otherwise dst names the target
    file and its parent directory must already exist.

    Args:
        src: Source file.
        dst: Destination file or directory.
        fs: Filesystem implementation. Defaults to RealFileSystem.
        link: Try a hard link before streaming.

    Returns:
        The destination file path and what was done to produce it.

    Raises:
        NotFoundError: If src or the destination's parent does not exist.
        NotDirectoryError: If the destination's parent is not a directory.
    """
    src, dst = Path(src), Path(dst)
    fs = fs or RealFileSystem()

    if not classify(src, fs).exists:
        raise NotFoundError(src)

    if classify(dst, fs, follow_symlinks=True).is_dir:
        dst = dst / src.name
    else:
        parent = classify(dst.parent, fs, follow_symlinks=True)
        if not parent.exists:
            raise NotFoundError(dst.parent)
        if not parent.is_dir:
            raise NotDirectoryError(dst.parent)

    return dst, copy_file(src, dst, fs, link=link)
