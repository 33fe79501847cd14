"""Filesystem helpers with structure-preserving directory tree copy."""

__version__ = "0.1.0"

from fskit.copier import copy_file
from fskit.errors import (
    AccessError,
    CopyError,
    EditorError,
    FsError,
    NotDirectoryError,
    NotFoundError,
    NotRegularFileError,
)
from fskit.paths import classify
from fskit.protocols import FileSystem
from fskit.tree import TreeCopier, sync_tree
from fskit.types import CopyOutcome, DirEntry, PathInfo, PathKind, SyncSummary

__all__ = [
    "__version__",
    "AccessError",
    "CopyError",
    "CopyOutcome",
    "DirEntry",
    "EditorError",
    "FileSystem",
    "FsError",
    "NotDirectoryError",
    "NotFoundError",
    "NotRegularFileError",
    "PathInfo",
    "PathKind",
    "SyncSummary",
    "TreeCopier",
    "classify",
    "copy_file",
    "sync_tree",
]
