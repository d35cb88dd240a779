"""Where: platform/logging/handlers.py
What: Rich console handler that renders structured queue events.
Why: Keep console output readable while the fetch fans out across workers.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override
from urllib.parse import urlsplit

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class QueueEventRichHandler(RichHandler):
    """Custom Rich handler that renders queue events with icons and compact URLs."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "queue.fetch.start": ("🚀", "cyan"),
        "queue.fetch.success": ("📥", "blue"),
        "queue.fetch.error": ("⛔", "red"),
        "queue.fetch.complete": ("✅", "green"),
        "queue.purge.request": ("🧹", "yellow"),
        "queue.purge.success": ("🗑️", "green"),
        "queue.purge.error": ("❌", "red"),
    }
    _EVENT_PREFIXES: ClassVar[dict[str, str]] = {
        "queue.fetch.start": "Fetching attributes",
        "queue.fetch.success": "Fetched ",
        "queue.fetch.error": "Failed to fetch ",
        "queue.fetch.complete": "Fetch complete",
        "queue.purge.request": "Purge requested for ",
        "queue.purge.success": "Purged ",
        "queue.purge.error": "Failed to purge ",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        """Initialize the handler with custom settings.

        Args:
            *args: Positional arguments to pass to RichHandler.
            **kwargs: Keyword arguments to pass to RichHandler.
        """
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    @staticmethod
    def _format_queue_url(queue_url: str) -> Text:
        """Render a queue URL as ``account/name`` with the host dimmed.

        Anything that does not look like a URL is rendered verbatim.
        """
        parts = urlsplit(queue_url)
        segments = [segment for segment in parts.path.split("/") if segment]
        text = Text()
        if not parts.netloc or not segments:
            _ = text.append(queue_url, style=Style(color="white"))
            return text

        _ = text.append(f"{parts.netloc}/", style=Style(dim=True))
        for segment in segments[:-1]:
            _ = text.append(segment, style=Style(color="magenta"))
            _ = text.append("/", style=Style(color="magenta"))
        _ = text.append(segments[-1], style=Style(color="white", bold=True))
        return text

    def _render_queue_event(self, record: logging.LogRecord) -> Text | None:
        """Render structured queue events with dedicated styling."""

        event = getattr(record, "queue_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        sequence = getattr(record, "sequence", None)
        total = getattr(record, "total", None)
        if isinstance(sequence, int) and sequence > 0:
            if isinstance(total, int) and total > 0:
                _ = body.append(f"[{sequence}/{total}] ")
            else:
                _ = body.append(f"[{sequence}] ")

        _ = body.append(self._EVENT_PREFIXES.get(event, record.getMessage()))

        queue_url = getattr(record, "queue_url", None)
        if queue_url:
            _ = body.append_text(self._format_queue_url(str(queue_url)))

        metrics: list[str] = []
        if event == "queue.fetch.start":
            workers = getattr(record, "workers", None)
            if isinstance(total, int):
                metrics.append(f"queues={total}")
            if isinstance(workers, int):
                metrics.append(f"workers={workers}")
        elif event == "queue.fetch.complete":
            succeeded = getattr(record, "succeeded", None)
            failed = getattr(record, "failed", None)
            duration = getattr(record, "duration_seconds", None)
            if isinstance(succeeded, int):
                metrics.append(f"ok={succeeded}")
            if isinstance(failed, int):
                metrics.append(f"failed={failed}")
            if isinstance(duration, (int, float)):
                metrics.append(f"duration={duration:.2f}s")
        elif event == "queue.fetch.success":
            message_count = getattr(record, "message_count", None)
            if isinstance(message_count, int):
                metrics.append(f"~{message_count} messages")
        elif event in {"queue.fetch.error", "queue.purge.error"}:
            error_message = getattr(record, "error_message", None)
            if error_message:
                metrics.append(str(error_message))
        if metrics:
            _ = body.append(" (" + ", ".join(metrics) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render message with custom styling for queue events."""

        event_text = self._render_queue_event(record)
        if event_text is not None:
            return event_text

        return super().render_message(record, message)


__all__ = ["QueueEventRichHandler"]
