"""Interactive terminal surface for the queue list."""

from .app import QueueJanitorApp, run_interactive_list
from .controller import InputKey, QueueListController
from .view import QueueListView

__all__ = [
    "InputKey",
    "QueueJanitorApp",
    "QueueListController",
    "QueueListView",
    "run_interactive_list",
]
