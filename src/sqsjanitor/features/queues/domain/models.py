"""
Summary: Value objects describing queues and the outcome of fetching them.
Why: Share one immutable model between the fetch pipeline and the list view.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import overload


@dataclass(slots=True, frozen=True)
class QueueDetails:
    """One queue's URL and its approximate message count."""

    queue_url: str
    message_count: int

    def __post_init__(self) -> None:
        if self.message_count < 0:
            raise ValueError(f"message_count must be non-negative, got {self.message_count}")


class QueueListModel(Sequence[QueueDetails]):
    """Immutable, ordered collection of ``QueueDetails``.

    Order is the order results arrived from the worker pool.
    """

    __slots__ = ("_items",)

    _items: tuple[QueueDetails, ...]

    def __init__(self, items: Iterable[QueueDetails] = ()) -> None:
        self._items = tuple(items)

    @overload
    def __getitem__(self, index: int) -> QueueDetails: ...

    @overload
    def __getitem__(self, index: slice) -> "QueueListModel": ...

    def __getitem__(self, index: int | slice) -> "QueueDetails | QueueListModel":
        if isinstance(index, slice):
            return QueueListModel(self._items[index])
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[QueueDetails]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, QueueListModel):
            return self._items == other._items
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._items)

    def __repr__(self) -> str:
        return f"QueueListModel({list(self._items)!r})"

    @property
    def queue_urls(self) -> list[str]:
        return [item.queue_url for item in self._items]


@dataclass(slots=True, frozen=True)
class FetchOutcome:
    """Tagged result for one queue: either ``details`` or ``error`` is set."""

    queue_url: str
    details: QueueDetails | None = None
    error: Exception | None = None

    def __post_init__(self) -> None:
        if (self.details is None) == (self.error is None):
            raise ValueError("FetchOutcome needs exactly one of details or error")

    @property
    def ok(self) -> bool:
        return self.details is not None


@dataclass(slots=True, frozen=True)
class FetchReport:
    """Aggregated fan-in result: the successful model plus per-queue failures."""

    model: QueueListModel
    failures: tuple[FetchOutcome, ...] = field(default_factory=tuple)

    @property
    def total(self) -> int:
        return len(self.model) + len(self.failures)


__all__ = ["FetchOutcome", "FetchReport", "QueueDetails", "QueueListModel"]
