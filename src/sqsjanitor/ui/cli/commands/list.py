"""src/sqsjanitor/ui/cli/commands/list.py
What: Fetch queue details and show them as a table or an interactive list.
Why: Wire the worker pool, the purge worker and the terminal surface together.
"""

import queue
from typing import final

from sqsjanitor.features.queues import (
    FetchReport,
    PurgeResult,
    PurgeWorker,
    SQSClientPort,
    list_queue_urls,
    new_purge_channel,
)
from sqsjanitor.features.queues.domain.errors import SurfaceError
from sqsjanitor.platform.logging import logger, suspend_console_logging
from sqsjanitor.ui.cli.args.options import ListArgs
from sqsjanitor.ui.cli.commands.executor import CommandExecutor
from sqsjanitor.ui.cli.display.progress import FetchProgressDisplay
from sqsjanitor.ui.cli.display.table import QueueTableDisplay
from sqsjanitor.ui.tui import run_interactive_list


@final
class ListCommand(CommandExecutor):
    """List queues, then print them or hand them to the interactive surface."""

    args: ListArgs
    progress_display: FetchProgressDisplay
    table_display: QueueTableDisplay

    def __init__(self, args: ListArgs, client: SQSClientPort | None = None) -> None:
        super().__init__(args, client)
        self.progress_display = FetchProgressDisplay()
        self.table_display = QueueTableDisplay()

    def execute(self) -> int:
        queue_urls = list_queue_urls(self.client, prefix=self.settings.queue_name_prefix)
        report = self.progress_display.run(
            self.client,
            queue_urls,
            self.settings.max_workers,
            quiet=self.args.quiet,
        )

        if self.args.plain:
            self.table_display.show_report(report, quiet=self.args.quiet)
            return 1 if report.failures else 0

        return self._run_interactive(report)

    def _run_interactive(self, report: FetchReport) -> int:
        purge_requests = new_purge_channel(self.settings.purge_buffer_size)
        purge_results: "queue.Queue[PurgeResult]" = queue.Queue()
        exit_channel: "queue.Queue[SurfaceError | None]" = queue.Queue()

        worker = PurgeWorker(self.client, purge_requests, on_result=purge_results.put)
        worker.start()
        try:
            with suspend_console_logging():
                _ = run_interactive_list(report.model, purge_requests, exit_channel, purge_results)
        finally:
            worker.stop()

        error = exit_channel.get()

        purged = [result for result in worker.results if result.ok]
        failed = [result for result in worker.results if not result.ok]
        if purged or failed:
            logger.info("Purged %d queue(s), %d purge(s) failed", len(purged), len(failed))
        if report.failures:
            logger.warning("%d queue(s) could not be fetched and were not listed", len(report.failures))

        if error is not None:
            logger.error("%s", error)
            return 1
        return 0
