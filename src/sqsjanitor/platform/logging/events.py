"""Where: platform/logging/events.py
What: Structured queue event identifiers and the helper that emits them.
Why: Keep event names shared between the emitting use cases and the Rich handler.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import Any


class QueueEvent(StrEnum):
    """Structured event identifiers for queue fetch and purge logs."""

    FETCH_START = "queue.fetch.start"
    FETCH_SUCCESS = "queue.fetch.success"
    FETCH_ERROR = "queue.fetch.error"
    FETCH_COMPLETE = "queue.fetch.complete"
    PURGE_REQUEST = "queue.purge.request"
    PURGE_SUCCESS = "queue.purge.success"
    PURGE_ERROR = "queue.purge.error"


def log_queue_event(
    target: logging.Logger,
    level: int,
    event: QueueEvent,
    message: str,
    *message_args: object,
    **context: Any,
) -> None:
    """Log ``message`` with the event name and context attached as record extras."""

    extra: dict[str, Any] = {"queue_event": event.value}
    extra.update(context)
    target.log(level, message, *message_args, extra=extra, stacklevel=2)


__all__ = ["QueueEvent", "log_queue_event"]
