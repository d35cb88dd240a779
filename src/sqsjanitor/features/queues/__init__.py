"""Public surface for the queues feature."""

from .domain.errors import (
    FetchCancelledError,
    InvalidWorkerCountError,
    MissingAttributeError,
    ParseError,
    RemoteCallError,
    SqsJanitorError,
)
from .domain.models import FetchOutcome, FetchReport, QueueDetails, QueueListModel
from .usecases import (
    PurgeResult,
    PurgeWorker,
    SQSClientPort,
    fetch_all_queue_details,
    fetch_attributes,
    list_queue_urls,
    new_purge_channel,
    purge_queue,
)

__all__ = [
    "FetchCancelledError",
    "FetchOutcome",
    "FetchReport",
    "InvalidWorkerCountError",
    "MissingAttributeError",
    "ParseError",
    "PurgeResult",
    "PurgeWorker",
    "QueueDetails",
    "QueueListModel",
    "RemoteCallError",
    "SQSClientPort",
    "SqsJanitorError",
    "fetch_all_queue_details",
    "fetch_attributes",
    "list_queue_urls",
    "new_purge_channel",
    "purge_queue",
]
