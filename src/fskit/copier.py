"""File content copying.

``copy_file`` promises content equality, not independent storage. When
source and destination share a filesystem the destination is usually
created as a hard link, so writing through either path later changes both.
Callers that need an independent copy must disable linking.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import BinaryIO, Callable

from fskit.errors import CopyError, NotFoundError, NotRegularFileError
from fskit.filesystem import RealFileSystem
from fskit.paths import classify
from fskit.protocols import FileSystem
from fskit.types import CopyOutcome, PathInfo

__all__ = ["copy_file"]

logger = logging.getLogger(__name__)

# An attempt gets the filesystem, the source snapshot and the destination
# path, and either succeeds or raises OSError.
CopyAttempt = Callable[[FileSystem, PathInfo, Path], CopyOutcome]


def _link(fs: FileSystem, src: PathInfo, dst: Path) -> CopyOutcome:
    fs.hard_link(src.path, dst)
    return CopyOutcome.LINKED


def _create_destination(fs: FileSystem, dst: Path, mode: int) -> BinaryIO:
    try:
        return fs.create_truncate(dst, mode)
    except PermissionError as e:
        # A read-only dst, such as one streamed earlier from a read-only
        # source, is replaced rather than written through.
        try:
            fs.remove(dst)
        except FileNotFoundError:
            raise e from None
        logger.debug("replacing read-only %s", dst)
        return fs.create_truncate(dst, mode)


def _stream(fs: FileSystem, src: PathInfo, dst: Path) -> CopyOutcome:
    with fs.open_read(src.path) as reader, _create_destination(fs, dst, src.mode) as writer:
        shutil.copyfileobj(reader, writer)
        fs.sync(writer)
    return CopyOutcome.STREAMED


LINK_THEN_STREAM: tuple[CopyAttempt, ...] = (_link, _stream)
STREAM_ONLY: tuple[CopyAttempt, ...] = (_stream,)


def copy_file(
    src: Path | str,
    dst: Path | str,
    fs: FileSystem | None = None,
    link: bool = True,
) -> CopyOutcome:
    """Copy a regular file from src to dst.

    If dst already refers to the same file as src (same device and inode)
    nothing is done. Otherwise a hard link is attempted first and, if that
    fails for any reason, the bytes are streamed into a created or
    truncated dst and synced to disk. A failed link is not an error. An
    existing dst that can't be opened for writing is removed and created
    afresh.

    A partially written dst is left in place when streaming fails.

    Args:
        src: Source file.
        dst: Destination file.
        fs: Filesystem implementation. Defaults to RealFileSystem.
        link: Try a hard link before streaming.

    Returns:
        What was done to produce dst.

    Raises:
        NotFoundError: If src does not exist.
        NotRegularFileError: If src or an existing dst is not a regular file.
        AccessError: If probing src or dst fails.
        CopyError: If streaming the content fails.
    """
    src, dst = Path(src), Path(dst)
    fs = fs or RealFileSystem()

    src_info = classify(src, fs)
    if not src_info.exists:
        raise NotFoundError(src)
    if not src_info.is_regular:
        raise NotRegularFileError(src, src_info.kind.value)

    dst_info = classify(dst, fs)
    if dst_info.exists:
        if not dst_info.is_regular:
            raise NotRegularFileError(dst, dst_info.kind.value)
        if src_info.same_file(dst_info):
            logger.debug("%s and %s are the same file", src, dst)
            return CopyOutcome.UNCHANGED

    *fallible, final = LINK_THEN_STREAM if link else STREAM_ONLY
    link_error: OSError | None = None
    for attempt in fallible:
        try:
            outcome = attempt(fs, src_info, dst)
        except OSError as e:
            logger.debug("hard link %s -> %s unavailable (%s), streaming", src, dst, e)
            link_error = e
            continue
        logger.debug("%s %s -> %s", outcome.value, src, dst)
        return outcome

    try:
        outcome = final(fs, src_info, dst)
    except OSError as e:
        raise CopyError(src, dst, e, link_error) from e
    logger.debug("%s %s -> %s", outcome.value, src, dst)
    return outcome
