"""
Summary: Translate key presses into cursor moves and purge requests for the queue list.
Why: Bridge view state, the shared model and the purge channel in one place.
"""

from __future__ import annotations

import queue
from collections.abc import Callable
from enum import Enum
from typing import Final, final

from rich.table import Table
from rich.text import Text

from sqsjanitor.features.queues.domain.errors import NoSelectionError, OutOfRangeError
from sqsjanitor.features.queues.domain.models import QueueDetails, QueueListModel

from .view import QueueListView

SELECTED_ROW_STYLE: Final[str] = "reverse"


class InputKey(Enum):
    """Input events the queue list reacts to."""

    ACTIVATE = "activate"
    UP = "up"
    DOWN = "down"
    OTHER = "other"

    @staticmethod
    def from_key_name(name: str) -> "InputKey":
        """Map a surface key name (``enter``, ``up``, ``down``, ...) to an event."""

        return _KEY_NAMES.get(name, InputKey.OTHER)


_KEY_NAMES: Final[dict[str, InputKey]] = {
    "enter": InputKey.ACTIVATE,
    "up": InputKey.UP,
    "down": InputKey.DOWN,
}


@final
class QueueListController:
    """Own the list view, read the shared model and emit purge requests."""

    def __init__(self, queues: QueueListModel, purge_requests: "queue.Queue[str | None]") -> None:
        self._queues = queues
        self._purge_requests = purge_requests
        self.view = QueueListView()
        self.view.update_queues(queues)
        self._dispatch: dict[InputKey, Callable[[], str | None]] = {
            InputKey.ACTIVATE: self._activate,
            InputKey.UP: self._move_up,
            InputKey.DOWN: self._move_down,
        }

    @property
    def queues(self) -> QueueListModel:
        return self._queues

    def get_current_selection(self) -> QueueDetails:
        """Return the queue under the cursor.

        Raises:
            NoSelectionError: If the list is empty.
        """
        if self.view.row_count == 0:
            raise NoSelectionError("the queue list is empty")
        return self._queues[self.view.cursor_position - 1]

    def handle_input(self, key: InputKey) -> str | None:
        """Apply ``key``; return the queue URL sent for purging, if any.

        Sending blocks while the purge channel is full.
        """
        action = self._dispatch.get(key)
        if action is None:
            return None
        return action()

    def _activate(self) -> str | None:
        if self.view.row_count == 0:
            return None
        queue_url = self.get_current_selection().queue_url
        self._purge_requests.put(queue_url)
        return queue_url

    def _move_up(self) -> None:
        try:
            self.view.move_cursor_up()
        except OutOfRangeError:
            pass

    def _move_down(self) -> None:
        try:
            self.view.move_cursor_down()
        except OutOfRangeError:
            pass

    def render_table(self) -> Table:
        """Build the two-column table from the full model, highlighting the cursor row."""

        table = Table(box=None, pad_edge=False, show_edge=False, expand=False)
        table.add_column("MESSAGE COUNT", justify="right", no_wrap=True)
        table.add_column("SQS QUEUE URL", no_wrap=True, min_width=self.view.column_width)

        for row, queue_details in enumerate(self._queues, start=1):
            style = SELECTED_ROW_STYLE if row == self.view.cursor_position else None
            table.add_row(str(queue_details.message_count), Text(queue_details.queue_url), style=style)
        return table


__all__ = ["InputKey", "QueueListController", "SELECTED_ROW_STYLE"]
