"""src/sqsjanitor/ui/cli/display/table.py
What: Print the queue table and fetch failures for non-interactive runs.
Why: Give scripts and pipes the same data the interactive list shows.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from sqsjanitor.features.queues import FetchReport


@final
class QueueTableDisplay:
    """Handles plain table output in CLI."""

    console: Console

    def __init__(self, console: Console | None = None) -> None:
        """Initialize table display."""
        self.console = console or Console()

    def show_report(self, report: FetchReport, quiet: bool = False) -> None:
        """Print the queue table followed by any per-queue failures.

        Args:
            report: Fan-in result from the worker pool.
            quiet: Print only the failures.
        """
        if not quiet:
            table = Table(box=None, pad_edge=False, show_edge=False)
            table.add_column("MESSAGE COUNT", justify="right", no_wrap=True)
            table.add_column("SQS QUEUE URL", no_wrap=True, overflow="fold")
            for details in report.model:
                table.add_row(str(details.message_count), details.queue_url)
            self.console.print(table)
            self.console.print(f"\n[bold]Queues:[/bold] {len(report.model)}")

        if not report.failures:
            return

        self.console.print(f"[red]Failed to fetch: {len(report.failures)}[/red]")
        for failure in report.failures:
            self.console.print(f"[red]  • {escape(failure.queue_url)}: {escape(str(failure.error))}[/red]")
