"""
Summary: Cursor and layout state for the interactive queue list.
Why: Keep navigation rules free of any terminal library so they stay testable.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import final

from sqsjanitor.features.queues.domain.errors import OutOfRangeError
from sqsjanitor.features.queues.domain.models import QueueDetails


@final
class QueueListView:
    """Pure view state: a 1-based cursor plus the derived layout of the rows."""

    cursor_position: int
    row_count: int
    column_width: int
    rendered_text: str

    def __init__(self) -> None:
        self.cursor_position = 1
        self.row_count = 0
        self.column_width = 0
        self.rendered_text = ""

    def update_queues(self, queues: Sequence[QueueDetails]) -> None:
        """Recompute rows, column width and text from a new model snapshot.

        The cursor only moves when the new row count would leave it out of range.
        """
        self.row_count = len(queues)
        self.column_width = max((len(queue.queue_url) for queue in queues), default=0)
        self.rendered_text = "".join(
            f"- url={queue.queue_url}; messageCount={queue.message_count}\n" for queue in queues
        )

        if self.row_count == 0:
            self.cursor_position = 1
        elif self.cursor_position > self.row_count:
            self.cursor_position = self.row_count

    def move_cursor_up(self) -> None:
        """Move the cursor one row up.

        Raises:
            OutOfRangeError: If the cursor is already on the first row.
        """
        if self.cursor_position - 1 <= 0:
            raise OutOfRangeError(self.cursor_position - 1, self.row_count)
        self.cursor_position -= 1

    def move_cursor_down(self) -> None:
        """Move the cursor one row down.

        Raises:
            OutOfRangeError: If the cursor is already on the last row.
        """
        if self.cursor_position >= self.row_count:
            raise OutOfRangeError(self.cursor_position + 1, self.row_count)
        self.cursor_position += 1


__all__ = ["QueueListView"]
