"""Dashboard presenter - event application, navigation and row formatting.

The presenter owns the dashboard state and knows nothing about Textual, so
every transition can be exercised without running an app. The screen calls
into it and redraws whatever the return values say changed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from rich.text import Text

from lintloop.constants.enums import InputMode
from lintloop.constants.values import (
    FILEPATH_PLACEHOLDER,
    STATUS_FAILED,
    STATUS_FIXED,
    STATUS_PENDING,
)
from lintloop.models.events import ProgressEvent
from lintloop.models.file_record import FileItem, FileRecord, TableItem
from lintloop.models.state.app_settings import FixerSettings
from lintloop.models.state.dashboard_state import DashboardState, Layout, LogViewport
from lintloop.pipeline.text_extract import short_path
from lintloop.screens.dashboard.config import (
    ATTEMPTS_TEMPLATE,
    DEFAULT_STYLE,
    LOG_KEY_HINTS,
    LOG_LINE_TEMPLATE,
    NO_FILE_SELECTED,
    NO_FILES_PROCESSED,
    STATUS_OK,
    TABLE_KEY_HINTS,
    DashboardStyle,
)

logger = logging.getLogger(__name__)

# Prefix width of "%4d │ " so continuation lines stay aligned.
_CONTINUATION_PREFIX = " " * 4 + " │ "


class DashboardPresenter:
    """State machine behind DashboardScreen."""

    def __init__(
        self,
        items: Sequence[TableItem],
        settings: FixerSettings,
        style: DashboardStyle = DEFAULT_STYLE,
        state: DashboardState | None = None,
    ) -> None:
        self._items = list(items)
        self._settings = settings
        self._style = style
        self._state = state or DashboardState()
        self._state.status_message = self._progress_summary()
        self._load_selected_log()

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def items(self) -> list[TableItem]:
        return self._items

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def style(self) -> DashboardStyle:
        return self._style

    @property
    def cursor(self) -> int:
        return self._state.cursor

    @property
    def mode(self) -> InputMode:
        return self._state.mode

    @property
    def layout(self) -> Layout:
        return self._state.layout

    @property
    def selected_item(self) -> TableItem | None:
        if not self._items:
            return None
        return self._items[self._state.cursor]

    @property
    def selected_record(self) -> FileRecord | None:
        item = self.selected_item
        return item.record if isinstance(item, FileItem) else None

    def file_records(self) -> list[FileRecord]:
        return [item.record for item in self._items if isinstance(item, FileItem)]

    # =========================================================================
    # Events
    # =========================================================================

    def apply_event(self, event: ProgressEvent) -> int | None:
        """Apply one worker event and return the affected row index.

        Returns ``None`` when no file row matches ``event.path``.
        """
        found = self._find_row(event.path)
        if found is None:
            logger.debug("Dropping event for unknown path %s", event.path)
            return None

        index, record = found
        with record.lock:
            if event.status:
                record.status = event.status
            if event.log:
                record.logs.append(event.log)
            if event.starts_attempt:
                record.retries += 1

        if index == self._state.cursor:
            viewport = self._state.viewport
            follow = viewport.at_bottom
            viewport.set_content(self.log_lines())
            if follow:
                viewport.goto_bottom()

        self._state.status_message = self._progress_summary()
        return index

    def mark_stream_closed(self) -> None:
        self._state.stream_closed = True
        self._state.status_message = self._progress_summary()

    def _find_row(self, path: str) -> tuple[int, FileRecord] | None:
        for index, item in enumerate(self._items):
            if isinstance(item, FileItem) and item.path == path:
                return index, item.record
        return None

    # =========================================================================
    # Navigation
    # =========================================================================

    def cursor_up(self) -> bool:
        return self._select(self._state.cursor - 1)

    def cursor_down(self) -> bool:
        return self._select(self._state.cursor + 1)

    def _select(self, index: int) -> bool:
        if not self._items:
            return False
        clamped = min(max(index, 0), len(self._items) - 1)
        if clamped == self._state.cursor:
            return False
        self._state.cursor = clamped
        self._load_selected_log()
        return True

    def _load_selected_log(self) -> None:
        viewport = self._state.viewport
        viewport.set_content(self.log_lines())
        viewport.goto_bottom()

    def enter_log(self) -> bool:
        if self._state.mode is InputMode.LOG or not self._items:
            return False
        self._state.mode = InputMode.LOG
        return True

    def leave_log(self) -> bool:
        if self._state.mode is InputMode.TABLE:
            return False
        self._state.mode = InputMode.TABLE
        return True

    def move_up(self) -> bool:
        """``up``/``k``: move the cursor, or scroll the log when it has focus."""
        if self._state.log_focused:
            return self._scroll(lambda viewport: viewport.line_up())
        return self.cursor_up()

    def move_down(self) -> bool:
        if self._state.log_focused:
            return self._scroll(lambda viewport: viewport.line_down())
        return self.cursor_down()

    def half_page_up(self) -> bool:
        if not self._state.log_focused:
            return False
        return self._scroll(lambda viewport: viewport.half_view_up())

    def half_page_down(self) -> bool:
        if not self._state.log_focused:
            return False
        return self._scroll(lambda viewport: viewport.half_view_down())

    def log_top(self) -> bool:
        if not self._state.log_focused:
            return False
        return self._scroll(lambda viewport: viewport.goto_top())

    def log_bottom(self) -> bool:
        if not self._state.log_focused:
            return False
        return self._scroll(lambda viewport: viewport.goto_bottom())

    def scroll_log(self, delta: int) -> bool:
        """Mouse wheel over the log. Ignored unless the log has focus."""
        if not self._state.log_focused or delta == 0:
            return False
        if delta < 0:
            return self._scroll(lambda viewport: viewport.line_up(-delta))
        return self._scroll(lambda viewport: viewport.line_down(delta))

    def _scroll(self, operation: Callable[[LogViewport], None]) -> bool:
        viewport = self._state.viewport
        before = viewport.offset
        operation(viewport)
        return viewport.offset != before

    def quit_or_back(self) -> bool:
        """``q``: returns True when the app should quit.

        In log mode ``q`` returns to the table instead.
        """
        if self._state.log_focused:
            self.leave_log()
            return False
        return True

    def back(self) -> bool:
        """``escape``: leave log mode. Never quits."""
        return self.leave_log()

    # =========================================================================
    # Layout
    # =========================================================================

    def resize(self, width: int, height: int) -> Layout:
        self._state.width = width
        self._state.height = height
        self._state.layout = Layout.compute(width, height)
        self._state.viewport.set_height(self._state.layout.log_height)
        return self._state.layout

    # =========================================================================
    # Rendering
    # =========================================================================

    def row_cells(self, index: int) -> tuple[Text, Text, Text]:
        """Path, Status and Attempts cells for row ``index``."""
        item = self._items[index]
        if isinstance(item, FileItem):
            snapshot = item.record.snapshot()
            cells = (
                Text(item.label, style=self._style.file),
                Text(snapshot.status, style=self._status_style(snapshot.status)),
                Text(
                    ATTEMPTS_TEMPLATE.format(
                        retries=snapshot.retries,
                        max_retries=self._settings.max_retries,
                    )
                ),
            )
        else:
            cells = (Text(item.label, style=self._style.directory), Text(""), Text(""))

        if index == self._state.cursor:
            for cell in cells:
                cell.stylize(self._style.selected)
        return cells

    def all_rows(self) -> list[tuple[Text, Text, Text]]:
        return [self.row_cells(index) for index in range(len(self._items))]

    def _status_style(self, status: str) -> str:
        if status == STATUS_FIXED:
            return self._style.fixed
        if status == STATUS_FAILED:
            return self._style.failed
        if status == STATUS_PENDING:
            return self._style.pending
        return self._style.in_progress

    def log_lines(self) -> list[str]:
        """Numbered log entries of the selected file, one list item per line."""
        record = self.selected_record
        if record is None:
            return []
        lines: list[str] = []
        for number, entry in enumerate(record.snapshot().logs, start=1):
            first, *rest = entry.split("\n")
            lines.append(LOG_LINE_TEMPLATE.format(number=number, line=first))
            lines.extend(_CONTINUATION_PREFIX + line for line in rest)
        return lines

    def visible_log_lines(self) -> list[str]:
        return self._state.viewport.visible_lines()

    def log_title(self) -> str:
        record = self.selected_record
        if record is None:
            return NO_FILE_SELECTED
        title = self._settings.lint_command.replace(
            FILEPATH_PLACEHOLDER, Path(record.path).name, 1
        )
        return short_path(title)

    def log_footer(self) -> str:
        footer = f" {self._state.viewport.scroll_percent:3.0f}% "
        if self._state.log_focused:
            footer += f" {LOG_KEY_HINTS} "
        return footer

    def status_text(self) -> str:
        return (
            f" {len(self._items)} items | {self._state.status_message} | "
            f"{TABLE_KEY_HINTS} "
        )

    def _progress_summary(self) -> str:
        records = self.file_records()
        if not records:
            return NO_FILES_PROCESSED
        statuses = [record.snapshot().status for record in records]
        fixed = statuses.count(STATUS_FIXED)
        failed = statuses.count(STATUS_FAILED)
        if self._state.stream_closed:
            return f"Done: {fixed} fixed, {failed} failed"
        if fixed + failed == 0:
            return STATUS_OK
        return f"{fixed + failed}/{len(records)} done ({fixed} fixed, {failed} failed)"


__all__ = ["DashboardPresenter"]
