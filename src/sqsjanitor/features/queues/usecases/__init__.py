"""Use cases for listing, fetching and purging queues."""

from .attributes import APPROXIMATE_MESSAGE_COUNT, fetch_attributes
from .listing import list_queue_urls
from .ports import SQSClientPort
from .purge import PurgeResult, PurgeWorker, new_purge_channel, purge_queue
from .worker_pool import ProgressCallback, fetch_all_queue_details

__all__ = [
    "APPROXIMATE_MESSAGE_COUNT",
    "ProgressCallback",
    "PurgeResult",
    "PurgeWorker",
    "SQSClientPort",
    "fetch_all_queue_details",
    "fetch_attributes",
    "list_queue_urls",
    "new_purge_channel",
    "purge_queue",
]
