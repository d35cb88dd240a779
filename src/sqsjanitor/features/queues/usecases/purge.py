"""
Summary: Purge a queue and consume purge requests emitted by the interactive list.
Why: Run the remote purge off the input loop so the surface stays responsive.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, final

from botocore.exceptions import BotoCoreError, ClientError

from sqsjanitor.platform.logging import QueueEvent, log_queue_event

from ..domain.errors import RemoteCallError, SqsJanitorError
from .ports import SQSClientPort

logger = logging.getLogger(__name__)


def purge_queue(client: SQSClientPort, queue_url: str) -> None:
    """Discard every message in ``queue_url`` with one ``PurgeQueue`` call.

    No confirmation and no retry. Cached message counts are not updated.

    Raises:
        RemoteCallError: If the purge call fails.
    """
    try:
        _ = client.purge_queue(QueueUrl=queue_url)
    except (ClientError, BotoCoreError) as exc:
        raise RemoteCallError(queue_url, exc) from exc


@dataclass(slots=True, frozen=True)
class PurgeResult:
    """Outcome of one purge request."""

    queue_url: str
    error: SqsJanitorError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def new_purge_channel(buffer_size: int) -> "queue.Queue[str | None]":
    """Create the purge-request channel; ``buffer_size == 0`` means unbounded."""

    return queue.Queue(maxsize=buffer_size)


@final
class PurgeWorker:
    """Background thread that purges each queue URL put on ``requests``.

    Put ``None`` on the channel (or call ``stop``) to end the thread after
    the requests already queued have been handled.
    """

    _STOP: Final[None] = None

    def __init__(
        self,
        client: SQSClientPort,
        requests: "queue.Queue[str | None]",
        on_result: Callable[[PurgeResult], None] | None = None,
    ) -> None:
        self._client = client
        self._requests = requests
        self._on_result = on_result
        self._results: list[PurgeResult] = []
        self._thread = threading.Thread(target=self._run, name="sqsjanitor-purge", daemon=True)

    @property
    def results(self) -> list[PurgeResult]:
        return list(self._results)

    def start(self) -> None:
        self._thread.start()

    def stop(self, timeout: float | None = None) -> None:
        """Signal the worker to finish pending requests and wait for it."""

        if not self._thread.is_alive():
            return
        try:
            self._requests.put(self._STOP, timeout=timeout)
        except queue.Full:
            logger.warning("Purge channel still full; not waiting for the purge worker")
            return
        self._thread.join(timeout)

    def _run(self) -> None:
        while True:
            queue_url = self._requests.get()
            try:
                if queue_url is self._STOP:
                    return
                self._handle(queue_url)
            finally:
                self._requests.task_done()

    def _handle(self, queue_url: str) -> None:
        log_queue_event(
            logger, logging.INFO, QueueEvent.PURGE_REQUEST, "Purge requested for %s", queue_url,
            queue_url=queue_url,
        )
        try:
            purge_queue(self._client, queue_url)
        except SqsJanitorError as exc:
            result = self._failed(queue_url, exc)
        except Exception as exc:  # the worker outlives any single purge
            logger.debug("Unexpected error purging %s", queue_url, exc_info=True)
            result = self._failed(queue_url, RemoteCallError(queue_url, exc))
        else:
            result = PurgeResult(queue_url)
            log_queue_event(
                logger, logging.INFO, QueueEvent.PURGE_SUCCESS, "Purged %s", queue_url,
                queue_url=queue_url,
            )

        self._results.append(result)
        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception:
                logger.exception("Purge result callback failed for %s", queue_url)

    @staticmethod
    def _failed(queue_url: str, error: SqsJanitorError) -> PurgeResult:
        log_queue_event(
            logger, logging.ERROR, QueueEvent.PURGE_ERROR, "Failed to purge %s: %s", queue_url, error,
            queue_url=queue_url, error_message=str(error),
        )
        return PurgeResult(queue_url, error=error)


__all__ = ["PurgeResult", "PurgeWorker", "new_purge_channel", "purge_queue"]
