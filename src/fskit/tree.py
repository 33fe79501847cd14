"""Recursive directory synchronization.

``sync_tree`` overlays a source directory onto a destination: every entry
under the source ends up at the mirrored path under the destination, and
entries that only exist at the destination are left alone. The walk is
depth-first, single-threaded and fail-fast. Nothing already copied is
undone when a later entry fails.

Concurrent calls on disjoint trees are safe. Calls whose source or
destination trees overlap race on the same paths and are not arbitrated.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fskit.config import FsConfig
from fskit.copier import copy_file
from fskit.errors import AccessError, NotDirectoryError, NotFoundError
from fskit.filesystem import RealFileSystem
from fskit.paths import classify
from fskit.protocols import FileSystem
from fskit.types import PathInfo, PathKind, SyncSummary

__all__ = ["TreeCopier", "sync_tree"]

logger = logging.getLogger(__name__)


class TreeCopier:
    """Copies directory trees.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(self, filesystem: FileSystem, config: FsConfig) -> None:
        """Initialize the copier with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            config: Immutable settings (required).
        """
        self.fs = filesystem
        self.config = config

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        config: FsConfig | None = None,
    ) -> TreeCopier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            config: Optional settings (defaults if not provided).

        Returns:
            Configured TreeCopier instance.
        """
        return cls(
            filesystem=filesystem or RealFileSystem(),
            config=config or FsConfig.default(),
        )

    def sync_tree(self, src: Path | str, dst: Path | str) -> SyncSummary:
        """Recreate the tree rooted at src under dst.

        A missing dst is created, along with missing ancestors, using the
        permission bits of src. An existing dst directory keeps its own
        permissions, and dst may be a symlink to a directory. Symlinks
        anywhere below dst are not followed. Existing destination files
        are overwritten.

        Args:
            src: Source directory.
            dst: Destination directory.

        Returns:
            Counters describing what was done.

        Raises:
            NotFoundError: If src does not exist. dst is not created.
            NotDirectoryError: If src, dst, or a mirrored sub-directory
                exists but is not a directory.
            NotRegularFileError: If the tree contains an entry that is
                neither a directory nor a regular file.
            AccessError: If probing or listing a path fails.
            CopyError: If copying a file's content fails.
        """
        src, dst = Path(src), Path(dst)
        src_info = classify(src, self.fs)
        if not src_info.exists:
            raise NotFoundError(src)
        if not src_info.is_dir:
            raise NotDirectoryError(src)

        summary = SyncSummary()
        self._ensure_destination(src_info, dst, summary, follow_symlinks=True)
        self._copy_entries(src_info, dst, summary)
        logger.debug(
            "synced %s -> %s: %d dirs created, %d files",
            src,
            dst,
            summary.dirs_created,
            summary.files_total,
        )
        return summary

    def _sync_dir(self, src: PathInfo, dst: Path, summary: SyncSummary) -> None:
        """Mirror one directory level and recurse into sub-directories."""
        self._ensure_destination(src, dst, summary)
        self._copy_entries(src, dst, summary)

    def _copy_entries(self, src: PathInfo, dst: Path, summary: SyncSummary) -> None:
        try:
            entries = self.fs.list_entries(src.path)
        except OSError as e:
            raise AccessError(src.path, e) from e

        for entry in entries:
            child_src = src.path / entry.name
            child_dst = dst / entry.name
            if entry.kind is PathKind.DIRECTORY:
                child_info = classify(child_src, self.fs)
                if not child_info.is_dir:
                    # Replaced between listing and probing.
                    raise NotDirectoryError(child_src)
                self._sync_dir(child_info, child_dst, summary)
            else:
                outcome = copy_file(child_src, child_dst, self.fs, link=self.config.link_files)
                summary.record(outcome)

    def _ensure_destination(
        self,
        src: PathInfo,
        dst: Path,
        summary: SyncSummary,
        follow_symlinks: bool = False,
    ) -> None:
        # Only the caller's destination root may be a link to a directory.
        dst_info = classify(dst, self.fs, follow_symlinks=follow_symlinks)
        if dst_info.exists:
            if not dst_info.is_dir:
                raise NotDirectoryError(dst)
            return

        try:
            self.fs.mkdir_all(dst, src.mode)
        except OSError as e:
            raise AccessError(dst, e) from e
        summary.dirs_created += 1
        logger.debug("created %s (mode %o)", dst, src.mode)


def sync_tree(src: Path | str, dst: Path | str) -> SyncSummary:
    """Copy the directory tree at src onto dst with default settings.

    See ``TreeCopier.sync_tree`` for the full contract.
    """
    return TreeCopier.create().sync_tree(src, dst)
