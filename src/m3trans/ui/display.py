"""
Display management for the m3trans CLI with Rich components.
"""

from typing import Iterable
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskProgressColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from ..models.summary import TranslationSummary
from ..services.traversal import PlaylistNode


class DisplayManager:
    """Formats diagnostic listings, progress and run summaries using Rich."""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def display_playlist_tree(self, nodes: Iterable[PlaylistNode]) -> int:
        """Print each playlist's full path and kind. Returns the number printed."""
        count = 0
        for node in nodes:
            path = "/" + "/".join(node.path)
            self.console.print(
                f"Path: {escape(path)} Kind: {escape(node.playlist.kind_label)}",
                highlight=False,
                soft_wrap=True,
            )
            count += 1
        return count

    def create_progress_bar(self) -> Progress:
        """Create a progress bar for copying tracks."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            TimeElapsedColumn(),
            console=self.console,
            transient=True,
            expand=True
        )

    def display_summary(self, summary: TranslationSummary):
        """Display the run summary as a table."""
        title = "Dry run summary" if summary.dry_run else "Export summary"
        table = Table(title=title, box=box.ROUNDED, border_style="blue", show_header=False)
        table.add_column("Item", style="bold white")
        table.add_column("Count", justify="right")

        copied_label = "Tracks to copy" if summary.dry_run else "Tracks copied"
        table.add_row(copied_label, str(summary.tracks_copied))
        table.add_row("Tracks skipped (not local)", str(summary.tracks_skipped))
        table.add_row("Tracks failed", self._count(summary.tracks_failed, "red"))
        table.add_row("Folders", str(summary.folders_created))
        table.add_row("Playlists", str(summary.playlists_written))
        table.add_row("Playlists ignored", str(summary.playlists_ignored))
        table.add_row("Playlists failed", self._count(summary.playlists_failed, "red"))
        table.add_row("Entries omitted", self._count(summary.entries_omitted, "yellow"))
        if summary.unreachable_playlists:
            table.add_row("Unreachable playlists", self._count(summary.unreachable_playlists, "yellow"))

        self.console.print()
        self.console.print(table)
        if summary.succeeded:
            self.console.print("[bold green]✓[/bold green] Export completed.")
        else:
            self.console.print(
                f"[yellow]⚠[/yellow] Export completed with {summary.failures} failure(s). See the log for details."
            )

    @staticmethod
    def _count(value: int, style: str) -> str:
        return f"[{style}]{value}[/{style}]" if value else "0"

    def print_error(self, message: str):
        self.console.print(f"[bold red]✗[/bold red] {escape(message)}")

    def print_warning(self, message: str):
        self.console.print(f"[yellow]⚠[/yellow] {escape(message)}")
