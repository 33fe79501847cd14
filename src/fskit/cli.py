"""CLI commands using Typer."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Annotated

if TYPE_CHECKING:
    from fskit.context import AppContext

import typer
from rich.console import Console
from rich.logging import RichHandler

from fskit import __version__
from fskit.console import ConsoleUI
from fskit.context import create_context
from fskit.dirs import ensure_dir, list_entries
from fskit.editor import open_in_editor
from fskit.errors import FsError
from fskit.files import copy, touch
from fskit.tree import TreeCopier
from fskit.types import PathKind

app = typer.Typer(
    name="fskit",
    help="Filesystem helpers: tree sync, copy, touch, list and edit",
    no_args_is_help=True,
)

console = Console()
ui = ConsoleUI(console)


@dataclass
class _GlobalOptions:
    config_path: Path | None = None


options = _GlobalOptions()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"fskit v{__version__}")
        raise typer.Exit()


def _configure_logging(verbose: bool) -> None:
    """Send library debug logging to stderr through Rich."""
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit",
        ),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every filesystem decision")
    ] = False,
    config: Annotated[
        Path | None, typer.Option("--config", "-c", help="JSON configuration file")
    ] = None,
) -> None:
    """Filesystem helpers: tree sync, copy, touch, list and edit."""
    _configure_logging(verbose)
    options.config_path = config


def _load_context() -> AppContext:
    """Build the context, reporting a bad config file as a CLI error."""
    try:
        return create_context(options.config_path)
    except (FileNotFoundError, ValueError) as e:
        ui.show_error(str(e))
        raise typer.Exit(1) from e


def _fail(error: FsError) -> typer.Exit:
    ui.show_error(str(error))
    return typer.Exit(1)


# ============================================================================
# Copy Commands
# ============================================================================


@app.command("sync")
def sync(
    src: Annotated[Path, typer.Argument(help="Source directory")],
    dst: Annotated[Path, typer.Argument(help="Destination directory")],
    no_link: Annotated[
        bool, typer.Option("--no-link", help="Always copy bytes instead of hard-linking")
    ] = False,
    _context=None,
) -> None:
    """Copy a directory tree onto a destination directory."""
    ctx = _context or _load_context()

    copier = ctx.tree_copier
    if no_link:
        config = ctx.config.model_copy(update={"link_files": False})
        copier = TreeCopier(filesystem=ctx.filesystem, config=config)

    try:
        summary = copier.sync_tree(src, dst)
    except FsError as e:
        raise _fail(e) from e

    ui.show_summary(summary)
    ui.show_success(f"Synced {src} to {dst}")


@app.command("cp")
def cp(
    src: Annotated[Path, typer.Argument(help="Source file")],
    dst: Annotated[Path, typer.Argument(help="Destination file or directory")],
    no_link: Annotated[
        bool, typer.Option("--no-link", help="Always copy bytes instead of hard-linking")
    ] = False,
    _context=None,
) -> None:
    """Copy a file, into DST if DST is a directory."""
    ctx = _context or _load_context()
    link = ctx.config.link_files and not no_link

    try:
        target, outcome = copy(src, dst, ctx.filesystem, link=link)
    except FsError as e:
        raise _fail(e) from e

    ui.show_success(f"Copied {src} to {target} ({outcome.value})")


# ============================================================================
# File and Directory Commands
# ============================================================================


@app.command("touch")
def touch_command(
    path: Annotated[Path, typer.Argument(help="File to touch")],
    _context=None,
) -> None:
    """Update a file's timestamps, creating it if needed."""
    ctx = _context or _load_context()

    try:
        created = touch(path, ctx.config.file_perms, ctx.config.dir_perms, ctx.filesystem)
    except (FsError, OSError) as e:
        ui.show_error(str(e))
        raise typer.Exit(1) from e

    ui.show_success(f"Created {path}" if created else f"Touched {path}")


@app.command("mkdir")
def mkdir(
    path: Annotated[Path, typer.Argument(help="Directory to create")],
    _context=None,
) -> None:
    """Create a directory and any missing parents."""
    ctx = _context or _load_context()

    try:
        created = ensure_dir(path, ctx.config.dir_perms, ctx.filesystem)
    except FsError as e:
        raise _fail(e) from e

    if created:
        ui.show_success(f"Created {path}")
    else:
        ui.show_info(f"{path} already exists")


@app.command("ls")
def ls(
    path: Annotated[Path, typer.Argument(help="Directory to list")] = Path("."),
    dirs: Annotated[
        bool, typer.Option("--dirs", "-d", help="Only list sub-directories")
    ] = False,
    _context=None,
) -> None:
    """List the entries of a directory."""
    ctx = _context or _load_context()

    try:
        entries = list_entries(path, ctx.filesystem)
    except FsError as e:
        raise _fail(e) from e

    if dirs:
        entries = [e for e in entries if e.kind is PathKind.DIRECTORY]
    ui.show_entries(str(path), entries)


@app.command("edit")
def edit(
    path: Annotated[Path, typer.Argument(help="File to edit")],
    editor: Annotated[
        str | None, typer.Option("--editor", "-e", help="Editor command")
    ] = None,
    _context=None,
) -> None:
    """Open a file in an external editor."""
    ctx = _context or _load_context()

    try:
        open_in_editor(path, editor or ctx.config.editor)
    except FsError as e:
        raise _fail(e) from e


if __name__ == "__main__":
    app()
