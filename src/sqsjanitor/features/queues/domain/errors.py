"""
Summary: Error taxonomy for queue fetching, purging and the interactive list.
Why: Let callers tell per-queue remote failures apart from local state errors.
"""

from __future__ import annotations


class SqsJanitorError(Exception):
    """Base class for every error raised by SQS Janitor."""


class RemoteCallError(SqsJanitorError):
    """An SQS API call failed at the transport or service level."""

    queue_url: str | None
    cause: BaseException | None

    def __init__(self, queue_url: str | None, cause: BaseException | None = None) -> None:
        self.queue_url = queue_url
        self.cause = cause
        target = queue_url or "<queue listing>"
        super().__init__(f"SQS call failed for {target}: {cause}")


class MissingAttributeError(SqsJanitorError):
    """The attribute response did not include the requested attribute."""

    queue_url: str
    attribute: str

    def __init__(self, queue_url: str, attribute: str) -> None:
        self.queue_url = queue_url
        self.attribute = attribute
        super().__init__(f"{attribute} missing from attributes of {queue_url}")


class ParseError(SqsJanitorError):
    """The message count was not a non-negative integer."""

    queue_url: str
    raw_value: object

    def __init__(self, queue_url: str, raw_value: object) -> None:
        self.queue_url = queue_url
        self.raw_value = raw_value
        super().__init__(f"Cannot parse message count {raw_value!r} for {queue_url}")


class FetchCancelledError(SqsJanitorError):
    """The fetch was cancelled before this queue was attempted."""

    queue_url: str

    def __init__(self, queue_url: str) -> None:
        self.queue_url = queue_url
        super().__init__(f"Fetch cancelled before {queue_url} was attempted")


class InvalidWorkerCountError(SqsJanitorError, ValueError):
    """The worker pool cannot make progress with the requested worker count."""

    def __init__(self, max_workers: int) -> None:
        self.max_workers = max_workers
        super().__init__(f"max_workers must be at least 1, got {max_workers}")


class OutOfRangeError(SqsJanitorError):
    """A cursor movement would leave the list bounds."""

    def __init__(self, position: int, row_count: int) -> None:
        self.position = position
        self.row_count = row_count
        super().__init__(f"invalid position {position} (rows={row_count})")


class NoSelectionError(SqsJanitorError, LookupError):
    """The list is empty, so nothing is selected."""


class SurfaceError(SqsJanitorError):
    """The interactive terminal surface failed."""

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f"Interactive surface failed: {cause}")


class ConfigurationError(SqsJanitorError):
    """A configuration file could not be read or holds invalid values."""


__all__ = [
    "ConfigurationError",
    "FetchCancelledError",
    "InvalidWorkerCountError",
    "MissingAttributeError",
    "NoSelectionError",
    "OutOfRangeError",
    "ParseError",
    "RemoteCallError",
    "SqsJanitorError",
    "SurfaceError",
]
