"""Path classification.

``classify`` is the single metadata probe every other operation builds on.
Snapshots are never cached: two probes of the same path may disagree if
something else changes the filesystem in between.
"""

from __future__ import annotations

import stat
from pathlib import Path

from fskit.errors import AccessError
from fskit.filesystem import RealFileSystem
from fskit.protocols import FileSystem
from fskit.types import PathInfo, PathKind

__all__ = ["classify", "is_directory", "is_regular_file", "path_exists"]


def classify(
    path: Path | str,
    fs: FileSystem | None = None,
    follow_symlinks: bool = False,
) -> PathInfo:
    """Probe a path and report whether and what it is.

    By default symlinks are not followed, so a link classifies as OTHER
    regardless of its target.

    Args:
        path: Path to probe.
        fs: Filesystem implementation. Defaults to RealFileSystem.
        follow_symlinks: Report the link target instead of the link. A
            dangling link is then reported as missing.

    Returns:
        PathInfo snapshot. Non-existence is not an error.

    Raises:
        AccessError: If the probe fails for any reason other than the
            path not existing.
    """
    path = Path(path)
    fs = fs or RealFileSystem()
    try:
        st = fs.stat(path) if follow_symlinks else fs.lstat(path)
    except (FileNotFoundError, NotADirectoryError):
        # ENOTDIR: a parent component is a file, so the path can't exist.
        return PathInfo.missing(path)
    except OSError as e:
        raise AccessError(path, e) from e

    return PathInfo(
        path=path,
        exists=True,
        kind=PathKind.from_mode(st.st_mode),
        mode=stat.S_IMODE(st.st_mode),
        device=st.st_dev,
        inode=st.st_ino,
        size=st.st_size,
    )


def path_exists(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check if anything exists at a path."""
    return classify(path, fs).exists


def is_directory(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check if a path exists and is a directory."""
    return classify(path, fs).is_dir


def is_regular_file(path: Path | str, fs: FileSystem | None = None) -> bool:
    """Check if a path exists and is a regular file."""
    return classify(path, fs).is_regular
