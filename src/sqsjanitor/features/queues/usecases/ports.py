"""
Summary: Protocol describing the subset of the SQS client the use cases call.
Why: Keep use cases testable with stubbed or fake clients.
"""

from __future__ import annotations

from typing import Any, Protocol


class SQSClientPort(Protocol):
    """Synchronous, one-shot SQS calls shaped like boto3's client methods."""

    def list_queues(self, **kwargs: Any) -> dict[str, Any]:
        """Return a ``ListQueues`` response page."""

        ...

    def get_queue_attributes(self, *, QueueUrl: str, AttributeNames: list[str]) -> dict[str, Any]:
        """Return a ``GetQueueAttributes`` response."""

        ...

    def purge_queue(self, *, QueueUrl: str) -> dict[str, Any]:
        """Discard every message in the queue."""

        ...


__all__ = ["SQSClientPort"]
