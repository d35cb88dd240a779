"""
Summary: Fan queue URLs out to a fixed set of worker threads and fan results back in.
Why: Fetch per-queue attributes concurrently while guaranteeing one outcome per queue.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable, Sequence

from sqsjanitor.platform.logging import QueueEvent, log_queue_event

from ..domain.errors import FetchCancelledError, InvalidWorkerCountError, SqsJanitorError
from ..domain.models import FetchOutcome, FetchReport, QueueDetails, QueueListModel
from .attributes import fetch_attributes
from .ports import SQSClientPort

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int, str], None]


def _attributes_worker(
    client: SQSClientPort,
    queue_urls: "queue.Queue[str]",
    outcomes: "queue.Queue[FetchOutcome]",
    cancel_event: threading.Event,
) -> None:
    """Drain ``queue_urls`` until empty, pushing exactly one outcome per URL."""

    while True:
        try:
            queue_url = queue_urls.get_nowait()
        except queue.Empty:
            return

        if cancel_event.is_set():
            outcomes.put(FetchOutcome(queue_url, error=FetchCancelledError(queue_url)))
            continue

        try:
            message_count = fetch_attributes(client, queue_url)
        except SqsJanitorError as exc:
            outcomes.put(FetchOutcome(queue_url, error=exc))
        except Exception as exc:  # keep one outcome per URL even on unexpected failures
            logger.debug("Unexpected error fetching %s", queue_url, exc_info=True)
            outcomes.put(FetchOutcome(queue_url, error=exc))
        else:
            outcomes.put(FetchOutcome(queue_url, details=QueueDetails(queue_url, message_count)))


def fetch_all_queue_details(
    client: SQSClientPort,
    queue_urls: Sequence[str],
    max_workers: int,
    *,
    cancel_event: threading.Event | None = None,
    progress_callback: ProgressCallback | None = None,
) -> FetchReport:
    """Fetch the approximate message count of every queue using ``max_workers`` threads.

    Args:
        client: SQS client shared by all workers (boto3 clients are thread-safe).
        queue_urls: Queues to inspect.
        max_workers: Number of worker threads to start.
        cancel_event: Once set, queues not yet attempted are reported as
            ``FetchCancelledError`` failures instead of being fetched.
        progress_callback: Called from the calling thread as
            ``(completed, total, queue_url)`` each time an outcome arrives.

    Returns:
        FetchReport: Successful details in arrival order plus the failures.
        ``len(model) + len(failures) == len(queue_urls)`` always holds.

    Raises:
        InvalidWorkerCountError: If ``max_workers < 1`` and there is work to do.
    """
    total = len(queue_urls)
    if total == 0:
        return FetchReport(model=QueueListModel())
    if max_workers < 1:
        raise InvalidWorkerCountError(max_workers)

    cancel = cancel_event or threading.Event()
    work: "queue.Queue[str]" = queue.Queue(maxsize=total)
    for queue_url in queue_urls:
        work.put_nowait(queue_url)
    outcomes: "queue.Queue[FetchOutcome]" = queue.Queue()

    log_queue_event(
        logger,
        logging.INFO,
        QueueEvent.FETCH_START,
        "Fetching attributes for %d queue(s) with %d worker(s)",
        total,
        max_workers,
        total=total,
        workers=max_workers,
    )
    started = time.monotonic()

    workers = [
        threading.Thread(
            target=_attributes_worker,
            args=(client, work, outcomes, cancel),
            name=f"sqsjanitor-fetch-{index}",
            daemon=True,
        )
        for index in range(max_workers)
    ]
    for worker in workers:
        worker.start()

    details: list[QueueDetails] = []
    failures: list[FetchOutcome] = []
    try:
        for sequence in range(1, total + 1):
            outcome = outcomes.get()
            if outcome.details is not None:
                details.append(outcome.details)
                log_queue_event(
                    logger,
                    logging.DEBUG,
                    QueueEvent.FETCH_SUCCESS,
                    "Fetched %s",
                    outcome.queue_url,
                    queue_url=outcome.queue_url,
                    message_count=outcome.details.message_count,
                    sequence=sequence,
                    total=total,
                )
            else:
                failures.append(outcome)
                log_queue_event(
                    logger,
                    logging.WARNING,
                    QueueEvent.FETCH_ERROR,
                    "Failed to fetch %s: %s",
                    outcome.queue_url,
                    outcome.error,
                    queue_url=outcome.queue_url,
                    error_message=str(outcome.error),
                    sequence=sequence,
                    total=total,
                )
            if progress_callback is not None:
                progress_callback(sequence, total, outcome.queue_url)

        for worker in workers:
            worker.join()
    except KeyboardInterrupt:
        cancel.set()
        raise

    log_queue_event(
        logger,
        logging.INFO,
        QueueEvent.FETCH_COMPLETE,
        "Fetched %d queue(s), %d failed",
        len(details),
        len(failures),
        succeeded=len(details),
        failed=len(failures),
        duration_seconds=time.monotonic() - started,
    )
    return FetchReport(model=QueueListModel(details), failures=tuple(failures))


__all__ = ["ProgressCallback", "fetch_all_queue_details"]
