"""Where: ui/tui/app.py
What: Textual application hosting the interactive queue list.
Why: Give the controller a full-screen input surface with a clean quit path.
"""

from __future__ import annotations

import queue
from typing import ClassVar, final

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding, BindingType
from textual.containers import VerticalScroll
from textual.widgets import Footer, Static

from sqsjanitor.features.queues.domain.errors import SurfaceError
from sqsjanitor.features.queues.domain.models import QueueListModel
from sqsjanitor.features.queues.usecases.purge import PurgeResult

from .controller import InputKey, QueueListController

PURGE_RESULT_POLL_SECONDS = 0.25


class _QueueScroll(VerticalScroll, can_focus=False):
    """Scroll container that never takes focus, so arrow keys reach the app."""


@final
class QueueJanitorApp(App[None]):
    """Full-screen queue list: arrows move, enter purges, ctrl+c or q quits."""

    TITLE = "sqsjanitor"
    CSS = """
    #queues {
        width: 85%;
        height: 90%;
    }
    """
    BINDINGS: ClassVar[list[BindingType]] = [
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        controller: QueueListController,
        purge_results: "queue.Queue[PurgeResult] | None" = None,
    ) -> None:
        super().__init__()
        self._controller = controller
        self._purge_results = purge_results

    @property
    def controller(self) -> QueueListController:
        return self._controller

    def compose(self) -> ComposeResult:
        with _QueueScroll(id="queues"):
            yield Static(self._controller.render_table(), id="queue-table")
        yield Footer()

    def on_mount(self) -> None:
        if self._controller.view.row_count == 0:
            self.notify("No queues found.", severity="warning")
        if self._purge_results is not None:
            _ = self.set_interval(PURGE_RESULT_POLL_SECONDS, self._drain_purge_results)

    def on_key(self, event: events.Key) -> None:
        key = InputKey.from_key_name(event.key)
        if key is InputKey.OTHER:
            return
        event.stop()

        queue_url = self._controller.handle_input(key)
        if queue_url is not None:
            self.notify(f"Purge requested for {queue_url}")
        self.redraw()

    def redraw(self) -> None:
        """Re-render the table and keep the cursor row on screen."""

        self.query_one("#queue-table", Static).update(self._controller.render_table())

        scroll = self.query_one("#queues", _QueueScroll)
        # row 0 is the header line
        cursor_y = self._controller.view.cursor_position
        height = max(scroll.size.height, 1)
        if cursor_y < scroll.scroll_y:
            scroll.scroll_to(y=cursor_y, animate=False)
        elif cursor_y >= scroll.scroll_y + height:
            scroll.scroll_to(y=cursor_y - height + 1, animate=False)

    def _drain_purge_results(self) -> None:
        assert self._purge_results is not None
        while True:
            try:
                result = self._purge_results.get_nowait()
            except queue.Empty:
                return
            if result.ok:
                self.notify(f"Purged {result.queue_url}")
            else:
                self.notify(f"Purge failed: {result.error}", severity="error", timeout=10)


def run_interactive_list(
    model: QueueListModel,
    purge_requests: "queue.Queue[str | None]",
    exit_channel: "queue.Queue[SurfaceError | None]",
    purge_results: "queue.Queue[PurgeResult] | None" = None,
) -> SurfaceError | None:
    """Block until the user quits, then report the exit reason on ``exit_channel``.

    ``None`` is reported for a clean quit, a ``SurfaceError`` otherwise.
    """
    controller = QueueListController(model, purge_requests)
    app = QueueJanitorApp(controller, purge_results=purge_results)

    error: SurfaceError | None = None
    try:
        app.run()
    except Exception as exc:
        error = SurfaceError(exc)
    else:
        if app.return_code not in (None, 0):
            error = SurfaceError(f"terminal surface exited with code {app.return_code}")

    exit_channel.put(error)
    return error


__all__ = ["QueueJanitorApp", "run_interactive_list"]
