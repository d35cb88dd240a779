"""Tests for queue value objects."""

import pytest

from sqsjanitor.features.queues import FetchOutcome, FetchReport, QueueDetails, QueueListModel
from sqsjanitor.features.queues.domain.errors import MissingAttributeError


def test_queue_details_is_immutable() -> None:
    details = QueueDetails("https://sqs/1/a", 3)

    with pytest.raises(AttributeError):
        details.message_count = 4  # pyright: ignore[reportAttributeAccessIssue]


def test_queue_details_rejects_negative_count() -> None:
    with pytest.raises(ValueError):
        _ = QueueDetails("https://sqs/1/a", -1)


def test_queue_list_model_preserves_order_and_is_read_only() -> None:
    """The model keeps construction order and exposes no mutators."""

    items = [QueueDetails("c", 1), QueueDetails("a", 2), QueueDetails("b", 3)]
    model = QueueListModel(items)
    items.append(QueueDetails("d", 4))

    assert len(model) == 3
    assert model.queue_urls == ["c", "a", "b"]
    assert model[1] == QueueDetails("a", 2)
    assert isinstance(model[0:2], QueueListModel)
    assert not hasattr(model, "append")
    assert model == QueueListModel(items[:3])


def test_fetch_outcome_requires_exactly_one_variant() -> None:
    with pytest.raises(ValueError):
        _ = FetchOutcome("a")
    with pytest.raises(ValueError):
        _ = FetchOutcome("a", details=QueueDetails("a", 1), error=RuntimeError("x"))

    ok = FetchOutcome("a", details=QueueDetails("a", 1))
    err = FetchOutcome("b", error=MissingAttributeError("b", "ApproximateNumberOfMessages"))
    assert ok.ok and not err.ok


def test_fetch_report_total_counts_successes_and_failures() -> None:
    report = FetchReport(
        model=QueueListModel([QueueDetails("a", 1)]),
        failures=(FetchOutcome("b", error=RuntimeError("boom")),),
    )

    assert report.total == 2
