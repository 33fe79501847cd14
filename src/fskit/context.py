"""Application context for dependency injection.

This module separates object creation from object use, enabling testability
and reducing coupling in CLI commands.

Dependencies are typed using the FileSystem protocol rather than a concrete
implementation, so tests can inject doubles without touching the disk.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from fskit.config import FsConfig
from fskit.protocols import FileSystem
from fskit.tree import TreeCopier


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from fskit.filesystem import RealFileSystem
    return RealFileSystem()


@dataclass
class AppContext:
    """Container for application dependencies.

    Provides a single injection point for all services used by CLI commands.
    """

    config: FsConfig
    tree_copier: TreeCopier
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(config_path: Path | None = None) -> AppContext:
    """Factory for application dependencies.

    Creates all services with proper wiring. Use this in production code.
    For tests, construct AppContext directly with test doubles.

    Args:
        config_path: Optional JSON config file. Defaults are used if None.

    Returns:
        Configured AppContext with all dependencies.
    """
    from fskit.filesystem import RealFileSystem

    config = FsConfig.from_file(config_path) if config_path else FsConfig.default()
    filesystem = RealFileSystem()
    tree_copier = TreeCopier.create(filesystem=filesystem, config=config)

    return AppContext(
        config=config,
        tree_copier=tree_copier,
        filesystem=filesystem,
    )
