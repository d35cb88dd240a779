"""Tests for plain queue table output."""

from io import StringIO

import pytest
from rich.console import Console

from sqsjanitor.features.queues import (
    FetchOutcome,
    FetchReport,
    MissingAttributeError,
    QueueDetails,
    QueueListModel,
)
from sqsjanitor.ui.cli.display import QueueTableDisplay

ORDERS = "https://sqs.us-east-1.amazonaws.com/123456789012/orders"
EVENTS = "https://sqs.us-east-1.amazonaws.com/123456789012/events[dlq]"


@pytest.fixture
def report() -> FetchReport:
    """A report with one listed queue and one failure."""

    failure = FetchOutcome(EVENTS, error=MissingAttributeError(EVENTS, "ApproximateNumberOfMessages"))
    return FetchReport(QueueListModel([QueueDetails(ORDERS, 1520)]), (failure,))


def _display() -> tuple[QueueTableDisplay, StringIO]:
    buffer = StringIO()
    return QueueTableDisplay(Console(file=buffer, width=200, color_system=None)), buffer


def test_show_report(report: FetchReport) -> None:
    display, buffer = _display()

    display.show_report(report)

    lines = buffer.getvalue().splitlines()
    assert lines[0].split() == ["MESSAGE", "COUNT", "SQS", "QUEUE", "URL"]
    assert lines[1].split() == ["1520", ORDERS]
    output = buffer.getvalue()
    assert "Queues: 1" in output
    assert "Failed to fetch: 1" in output
    # Brackets in the URL survive markup rendering.
    assert EVENTS in output


def test_show_report_quiet_prints_failures_only(report: FetchReport) -> None:
    display, buffer = _display()

    display.show_report(report, quiet=True)

    output = buffer.getvalue()
    assert "MESSAGE COUNT" not in output
    assert "Failed to fetch: 1" in output


def test_show_report_without_failures() -> None:
    display, buffer = _display()

    display.show_report(FetchReport(QueueListModel([])))

    output = buffer.getvalue()
    assert "Queues: 0" in output
    assert "Failed" not in output
