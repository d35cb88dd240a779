"""Progress display for the attribute fan-out."""

import threading
from collections.abc import Sequence
from typing import Any, final

from rich.console import Console
from rich.progress import Progress, TaskID

from sqsjanitor.features.queues import FetchReport, SQSClientPort, fetch_all_queue_details
from sqsjanitor.platform.logging import QueueEventRichHandler, logger


@final
class FetchProgressDisplay:
    """Handles progress display while queue attributes are fetched."""

    def run(
        self,
        client: SQSClientPort,
        queue_urls: Sequence[str],
        max_workers: int,
        quiet: bool = False,
    ) -> FetchReport:
        """Fetch every queue's details behind a transient progress bar.

        Args:
            client: Injected SQS client.
            queue_urls: Queues to inspect.
            max_workers: Worker threads for the fan-out.
            quiet: Skip the progress bar entirely.

        Returns:
            FetchReport from the worker pool.
        """
        cancel_event = threading.Event()
        if quiet or not queue_urls:
            return fetch_all_queue_details(client, queue_urls, max_workers, cancel_event=cancel_event)

        progress_console: Console | None = None
        for handler in logger.handlers:
            if isinstance(handler, QueueEventRichHandler):
                progress_console = handler.console
                break

        progress_kwargs: dict[str, Any] = {
            "transient": True,
            "redirect_stdout": False,
            "redirect_stderr": False,
        }
        if progress_console is not None:
            progress_kwargs["console"] = progress_console

        with Progress(**progress_kwargs) as progress:
            task_id: TaskID = progress.add_task("[cyan]Fetching queue attributes...", total=len(queue_urls))

            def _cb(completed: int, total: int, queue_url: str) -> None:
                _ = queue_url  # reported through logging
                progress.update(
                    task_id,
                    completed=completed,
                    description=f"[cyan]Fetching queue attributes... {completed}/{total}",
                )

            return fetch_all_queue_details(
                client,
                queue_urls,
                max_workers,
                cancel_event=cancel_event,
                progress_callback=_cb,
            )
