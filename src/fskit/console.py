"""Rich console output for the command line."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from fskit.types import DirEntry, PathKind, SyncSummary

_KIND_STYLES = {
    PathKind.DIRECTORY: "bold blue",
    PathKind.REGULAR_FILE: "",
    PathKind.OTHER: "magenta",
}


class ConsoleUI:
    """Non-interactive terminal output for fskit commands."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize output.

        Args:
            console: Rich console to print to. A new one is created if None.
        """
        self.console = console or Console()

    def show_success(self, message: str) -> None:
        """Display success message.

        Args:
            message: Success message.
        """
        self.console.print(f"[green]✓[/green] {escape(message)}")

    def show_error(self, message: str) -> None:
        """Display error message.

        Args:
            message: Error message.
        """
        self.console.print(f"[red]✗[/red] {escape(message)}")

    def show_info(self, message: str) -> None:
        """Display a neutral status message."""
        self.console.print(f"[dim]{escape(message)}[/dim]")

    def show_entries(self, title: str, entries: list[DirEntry]) -> None:
        """Display a directory listing.

        Args:
            title: Table title, usually the listed path.
            entries: Entries to show.
        """
        if not entries:
            self.console.print(f"[yellow]{escape(title)} is empty[/yellow]")
            return

        table = Table(title=escape(title))
        table.add_column("Name", style="cyan")
        table.add_column("Kind")

        for entry in entries:
            style = _KIND_STYLES[entry.kind]
            kind = f"[{style}]{entry.kind.value}[/{style}]" if style else entry.kind.value
            table.add_row(escape(entry.name), kind)

        self.console.print(table)

    def show_summary(self, summary: SyncSummary) -> None:
        """Display the counters of a tree sync.

        Args:
            summary: Counters returned by sync_tree.
        """
        table = Table(title="Sync Summary", show_header=False)
        table.add_column("What")
        table.add_column("Count", justify="right")
        table.add_row("Directories created", str(summary.dirs_created))
        table.add_row("Files linked", str(summary.files_linked))
        table.add_row("Files copied", str(summary.files_streamed))
        table.add_row("Files unchanged", str(summary.files_unchanged))
        self.console.print(table)
