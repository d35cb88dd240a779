"""
Summary: Fetch the approximate message count of one queue with a single call.
Why: Give each worker a small unit of remote work with typed failures.
"""

from __future__ import annotations

from typing import Final

from botocore.exceptions import BotoCoreError, ClientError

from ..domain.errors import MissingAttributeError, ParseError, RemoteCallError
from .ports import SQSClientPort

APPROXIMATE_MESSAGE_COUNT: Final[str] = "ApproximateNumberOfMessages"


def fetch_attributes(client: SQSClientPort, queue_url: str) -> int:
    """Return the approximate number of messages in ``queue_url``.

    Exactly one ``GetQueueAttributes`` request is made, asking only for
    ``ApproximateNumberOfMessages``.

    Raises:
        RemoteCallError: The call itself failed.
        MissingAttributeError: The response lacks the attribute.
        ParseError: The attribute is not a non-negative integer.
    """
    try:
        response = client.get_queue_attributes(
            QueueUrl=queue_url,
            AttributeNames=[APPROXIMATE_MESSAGE_COUNT],
        )
    except (ClientError, BotoCoreError) as exc:
        raise RemoteCallError(queue_url, exc) from exc

    attributes = response.get("Attributes") or {}
    if APPROXIMATE_MESSAGE_COUNT not in attributes:
        raise MissingAttributeError(queue_url, APPROXIMATE_MESSAGE_COUNT)

    raw_value = attributes[APPROXIMATE_MESSAGE_COUNT]
    try:
        message_count = int(raw_value)
    except (TypeError, ValueError) as exc:
        raise ParseError(queue_url, raw_value) from exc
    if message_count < 0:
        raise ParseError(queue_url, raw_value)
    return message_count


__all__ = ["APPROXIMATE_MESSAGE_COUNT", "fetch_attributes"]
