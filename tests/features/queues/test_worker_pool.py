"""
Summary: Tests for the attribute fan-out/fan-in worker pool.
Why: Guard the one-outcome-per-queue and termination guarantees under concurrency.
"""

from __future__ import annotations

import threading
from collections import Counter

import pytest

from sqs_fakes import MISSING, FakeSQSClient, queue_url
from sqsjanitor.features.queues import (
    FetchCancelledError,
    InvalidWorkerCountError,
    MissingAttributeError,
    ParseError,
    RemoteCallError,
    fetch_all_queue_details,
)


def _counts(total: int) -> dict[str, object]:
    return {queue_url(f"queue-{index:03d}"): index for index in range(total)}


@pytest.mark.parametrize(("total", "max_workers"), [(1, 1), (5, 1), (12, 3), (40, 8), (3, 10)])
def test_every_queue_yields_exactly_one_result(total: int, max_workers: int) -> None:
    """No duplicates and no omissions for any worker count."""

    counts = _counts(total)
    client = FakeSQSClient(counts, delay=0.001)

    report = fetch_all_queue_details(client, list(counts), max_workers)

    assert report.total == total
    assert not report.failures
    assert Counter(report.model.queue_urls) == Counter(counts.keys())
    assert {details.queue_url: details.message_count for details in report.model} == counts
    assert sorted(client.attribute_calls) == sorted(counts)


def test_failures_do_not_abort_siblings() -> None:
    """Per-queue errors are reported alongside the successes of the other queues."""

    counts = _counts(30)
    failing = frozenset(list(counts)[::3])
    client = FakeSQSClient(counts, failing=failing)

    report = fetch_all_queue_details(client, list(counts), max_workers=2)

    assert report.total == 30
    assert {failure.queue_url for failure in report.failures} == failing
    assert all(isinstance(failure.error, RemoteCallError) for failure in report.failures)
    assert set(report.model.queue_urls) == set(counts) - failing


def test_all_failures_with_single_worker_terminates() -> None:
    """Many simultaneous failures never block the fan-in."""

    counts = _counts(200)
    client = FakeSQSClient(counts, failing=frozenset(counts))

    report = fetch_all_queue_details(client, list(counts), max_workers=1)

    assert len(report.model) == 0
    assert len(report.failures) == 200


def test_missing_attribute_yields_error_for_that_queue_only() -> None:
    counts = _counts(5)
    broken = queue_url("queue-002")
    counts[broken] = MISSING
    client = FakeSQSClient(counts)

    report = fetch_all_queue_details(client, list(counts), max_workers=2)

    assert len(report.model) == 4
    assert broken not in report.model.queue_urls
    assert [failure.queue_url for failure in report.failures] == [broken]
    assert isinstance(report.failures[0].error, MissingAttributeError)


def test_non_numeric_count_is_reported_as_parse_error() -> None:
    counts: dict[str, object] = {queue_url("a"): "lots", queue_url("b"): 7}
    client = FakeSQSClient(counts)

    report = fetch_all_queue_details(client, list(counts), max_workers=2)

    assert report.model.queue_urls == [queue_url("b")]
    assert isinstance(report.failures[0].error, ParseError)


@pytest.mark.parametrize("max_workers", [0, -1])
def test_non_positive_worker_count_fails_fast(max_workers: int) -> None:
    counts = _counts(3)
    client = FakeSQSClient(counts)

    with pytest.raises(InvalidWorkerCountError):
        _ = fetch_all_queue_details(client, list(counts), max_workers)

    assert client.attribute_calls == []


def test_empty_queue_list_returns_empty_report() -> None:
    client = FakeSQSClient({})

    report = fetch_all_queue_details(client, [], max_workers=0)

    assert len(report.model) == 0
    assert report.failures == ()


def test_exactly_max_workers_run_concurrently() -> None:
    """A barrier sized to ``max_workers`` only opens if that many calls overlap."""

    max_workers = 4
    counts = _counts(20)
    client = FakeSQSClient(counts, barrier=threading.Barrier(max_workers))

    report = fetch_all_queue_details(client, list(counts), max_workers)

    assert report.total == 20
    assert not report.failures
    assert client.peak == max_workers


def test_cancelled_fetch_reports_every_queue_without_remote_calls() -> None:
    counts = _counts(6)
    client = FakeSQSClient(counts)
    cancel_event = threading.Event()
    cancel_event.set()

    report = fetch_all_queue_details(client, list(counts), max_workers=3, cancel_event=cancel_event)

    assert client.attribute_calls == []
    assert len(report.failures) == 6
    assert all(isinstance(failure.error, FetchCancelledError) for failure in report.failures)


def test_progress_callback_counts_every_outcome() -> None:
    counts = _counts(7)
    counts[queue_url("queue-003")] = MISSING
    client = FakeSQSClient(counts)
    calls: list[tuple[int, int, str]] = []

    _ = fetch_all_queue_details(
        client,
        list(counts),
        max_workers=3,
        progress_callback=lambda done, total, url: calls.append((done, total, url)),
    )

    assert [done for done, _total, _url in calls] == list(range(1, 8))
    assert {total for _done, total, _url in calls} == {7}
    assert sorted(url for _done, _total, url in calls) == sorted(counts)


def test_keyboard_interrupt_sets_cancel_event() -> None:
    counts = _counts(10)
    client = FakeSQSClient(counts, delay=0.01)
    cancel_event = threading.Event()

    def _interrupt(_done: int, _total: int, _url: str) -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        _ = fetch_all_queue_details(
            client,
            list(counts),
            max_workers=2,
            cancel_event=cancel_event,
            progress_callback=_interrupt,
        )

    assert cancel_event.is_set()
