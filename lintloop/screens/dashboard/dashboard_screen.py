"""Dashboard screen - file table, log pane and status bar fed by the event bus."""

from __future__ import annotations

import logging
from collections.abc import Callable
from contextlib import suppress
from typing import TYPE_CHECKING

from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches, WrongType
from textual.events import Resize
from textual.message import Message
from textual.screen import Screen

from lintloop.keyboard import DASHBOARD_SCREEN_BINDINGS
from lintloop.models.events import ProgressEvent
from lintloop.pipeline.event_bus import EventBus
from lintloop.screens.dashboard.config import (
    ITEM_TABLE_COLUMNS,
    ITEM_TABLE_ID,
    LOG_FOOTER_ID,
    LOG_PANE_ID,
    LOG_TITLE_ID,
    LOG_VIEW_ID,
    STATUS_BAR_ID,
)
from lintloop.screens.dashboard.presenter import DashboardPresenter
from lintloop.widgets import ItemTable, LogView, StatusBar

if TYPE_CHECKING:
    from textual.app import ComposeResult

logger = logging.getLogger(__name__)


# =============================================================================
# Worker Messages
# =============================================================================


class ProgressReceived(Message):
    """One event taken off the bus by the receive worker."""

    def __init__(self, event: ProgressEvent) -> None:
        super().__init__()
        self.event = event


class EventStreamClosed(Message):
    """The bus is closed and fully drained."""


class DashboardScreen(Screen[None]):
    """Split view of per-file progress and the selected file's log.

    Exactly one receive worker is outstanding at a time. Each delivered event
    is applied before the next receive is scheduled, so events for a file are
    rendered in the order its worker sent them.
    """

    BINDINGS = DASHBOARD_SCREEN_BINDINGS

    _RECEIVE_WORKER_GROUP = "event-receive"

    def __init__(self, presenter: DashboardPresenter, bus: EventBus) -> None:
        super().__init__()
        self._presenter = presenter
        self._bus = bus
        self._stream_closed = False

    @property
    def presenter(self) -> DashboardPresenter:
        return self._presenter

    @property
    def stream_closed(self) -> bool:
        return self._stream_closed

    def compose(self) -> ComposeResult:
        with Horizontal(id="dashboard-panes"):
            yield ItemTable(ITEM_TABLE_COLUMNS, id=ITEM_TABLE_ID)
            with Vertical(id=LOG_PANE_ID):
                yield StatusBar(id=LOG_TITLE_ID, classes="log-title")
                yield LogView(id=LOG_VIEW_ID)
                yield StatusBar(id=LOG_FOOTER_ID, classes="log-footer")
        yield StatusBar(id=STATUS_BAR_ID)

    def on_mount(self) -> None:
        self._apply_size(self.app.size.width, self.app.size.height)
        with suppress(NoMatches, WrongType):
            table = self.query_one(f"#{ITEM_TABLE_ID}", ItemTable)
            table.set_rows(self._presenter.all_rows())
            table.move_cursor(self._presenter.cursor)
        self._refresh_log()
        self._refresh_status()
        self._schedule_receive()

    def on_resize(self, event: Resize) -> None:
        self._apply_size(event.size.width, event.size.height)
        self._refresh_log()

    # =========================================================================
    # Event consumption
    # =========================================================================

    def _schedule_receive(self) -> None:
        if self._stream_closed:
            return
        self.run_worker(
            self._receive_next,
            name="event-receive",
            group=self._RECEIVE_WORKER_GROUP,
            exit_on_error=False,
        )

    async def _receive_next(self) -> None:
        event = await self._bus.receive()
        if event is None:
            self.post_message(EventStreamClosed())
        else:
            self.post_message(ProgressReceived(event))

    def on_progress_received(self, message: ProgressReceived) -> None:
        index = self._presenter.apply_event(message.event)
        if index is not None:
            self._refresh_row(index)
            if index == self._presenter.cursor:
                self._refresh_log()
        self._refresh_status()
        self._schedule_receive()

    def on_event_stream_closed(self, _: EventStreamClosed) -> None:
        logger.info("Event stream closed")
        self._stream_closed = True
        self._presenter.mark_stream_closed()
        self._refresh_status()

    # =========================================================================
    # Actions
    # =========================================================================

    def _move_cursor(self, step: Callable[[], bool]) -> None:
        previous = self._presenter.cursor
        if not step():
            return
        self._refresh_row(previous)
        self._refresh_row(self._presenter.cursor)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{ITEM_TABLE_ID}", ItemTable).move_cursor(self._presenter.cursor)
        self._refresh_log()

    def action_move_up(self) -> None:
        if self._presenter.state.log_focused:
            if self._presenter.move_up():
                self._refresh_log()
            return
        self._move_cursor(self._presenter.move_up)

    def action_move_down(self) -> None:
        if self._presenter.state.log_focused:
            if self._presenter.move_down():
                self._refresh_log()
            return
        self._move_cursor(self._presenter.move_down)

    def action_half_page_up(self) -> None:
        if self._presenter.half_page_up():
            self._refresh_log()

    def action_half_page_down(self) -> None:
        if self._presenter.half_page_down():
            self._refresh_log()

    def action_log_top(self) -> None:
        if self._presenter.log_top():
            self._refresh_log()

    def action_log_bottom(self) -> None:
        if self._presenter.log_bottom():
            self._refresh_log()

    def action_open_log(self) -> None:
        if self._presenter.enter_log():
            self._refresh_log()

    def action_back(self) -> None:
        if self._presenter.back():
            self._refresh_log()

    async def action_quit_or_back(self) -> None:
        if self._presenter.quit_or_back():
            await self.app.run_action("quit")
            return
        self._refresh_log()

    def on_log_view_scrolled(self, message: LogView.Scrolled) -> None:
        message.stop()
        if self._presenter.scroll_log(message.delta):
            self._refresh_log()

    # =========================================================================
    # Rendering
    # =========================================================================

    def _apply_size(self, width: int, height: int) -> None:
        layout = self._presenter.resize(width, height)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{ITEM_TABLE_ID}", ItemTable).set_width(layout.table_width)
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{LOG_PANE_ID}", Vertical).styles.width = layout.log_width

    def _refresh_row(self, index: int) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{ITEM_TABLE_ID}", ItemTable).update_row(
                index, self._presenter.row_cells(index)
            )

    def _refresh_log(self) -> None:
        presenter = self._presenter
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{LOG_TITLE_ID}", StatusBar).set_text(f" {presenter.log_title()} ")
            self.query_one(f"#{LOG_VIEW_ID}", LogView).show_lines(presenter.visible_log_lines())
            self.query_one(f"#{LOG_FOOTER_ID}", StatusBar).set_text(presenter.log_footer())
            self.query_one(f"#{LOG_PANE_ID}", Vertical).set_class(
                presenter.state.log_focused, "-focused"
            )

    def _refresh_status(self) -> None:
        with suppress(NoMatches, WrongType):
            self.query_one(f"#{STATUS_BAR_ID}", StatusBar).set_text(
                self._presenter.status_text()
            )


__all__ = [
    "DashboardScreen",
    "EventStreamClosed",
    "ProgressReceived",
]
