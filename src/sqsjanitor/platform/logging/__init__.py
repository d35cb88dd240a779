"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export configured logger, setup helpers, and the custom Rich handler.
Why: Provide a single canonical import path for every layer.
"""

from __future__ import annotations

from .config import logger, setup_logger, suspend_console_logging
from .events import QueueEvent, log_queue_event
from .handlers import QueueEventRichHandler

__all__ = [
    "QueueEvent",
    "QueueEventRichHandler",
    "log_queue_event",
    "logger",
    "setup_logger",
    "suspend_console_logging",
]
