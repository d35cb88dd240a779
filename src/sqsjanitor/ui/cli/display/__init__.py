"""Display management for CLI interface."""

from sqsjanitor.ui.cli.display.progress import FetchProgressDisplay
from sqsjanitor.ui.cli.display.table import QueueTableDisplay

__all__ = ["FetchProgressDisplay", "QueueTableDisplay"]
