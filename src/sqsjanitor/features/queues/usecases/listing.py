"""Queue discovery through a single ``ListQueues`` page."""

from __future__ import annotations

import logging

from botocore.exceptions import BotoCoreError, ClientError

from ..domain.errors import RemoteCallError
from .ports import SQSClientPort

logger = logging.getLogger(__name__)


def list_queue_urls(client: SQSClientPort, prefix: str | None = None) -> list[str]:
    """Return the queue URLs from one ``ListQueues`` response page.

    Pagination is not followed; SQS returns up to 1000 URLs per page.

    Raises:
        RemoteCallError: If the listing call fails.
    """
    kwargs: dict[str, str] = {}
    if prefix:
        kwargs["QueueNamePrefix"] = prefix

    try:
        response = client.list_queues(**kwargs)
    except (ClientError, BotoCoreError) as exc:
        raise RemoteCallError(None, exc) from exc

    queue_urls: list[str] = list(response.get("QueueUrls", []))
    if response.get("NextToken"):
        logger.warning("Only the first %d queues are shown; narrow the list with --prefix", len(queue_urls))
    logger.debug("Listed %d queue(s)", len(queue_urls))
    return queue_urls


__all__ = ["list_queue_urls"]
