"""ItemTable widget - wrapper around Textual's DataTable for dashboard rows."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from contextlib import suppress
from typing import TYPE_CHECKING, Any

from textual.containers import Container
from textual.widgets import DataTable as TextualDataTable
from textual.widgets.data_table import CellDoesNotExist

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from textual.app import ComposeResult


class ItemTable(Container):
    """Directory/file table whose cursor is driven by the screen.

    The inner DataTable never takes focus, so navigation keys reach the
    screen bindings and the presenter stays the single owner of the cursor.
    Rows are keyed by their index in the item list.

    CSS Classes: widget-item-table
    """

    DEFAULT_CSS = """
    ItemTable {
        height: 1fr;
        min-width: 0;
        min-height: 3;
        background: $surface;
    }
    ItemTable > DataTable {
        height: 1fr;
        width: 1fr;
        min-width: 0;
        border: none;
        background: transparent;
        overflow-x: auto;
        overflow-y: auto;
    }
    """

    def __init__(
        self,
        columns: list[tuple[str, str]],
        *,
        id: str | None = None,
        classes: str = "",
    ) -> None:
        """Initialize the table wrapper.

        Args:
            columns: List of (label, key) column definitions.
            id: Widget ID.
            classes: CSS classes (widget-item-table is automatically added).
        """
        super().__init__(id=id, classes=f"widget-item-table {classes}".strip())
        self._columns = list(columns)
        self._inner_widget: TextualDataTable | None = None

    def compose(self) -> ComposeResult:
        table = TextualDataTable(cursor_type="row", zebra_stripes=False)
        table.can_focus = False
        table.styles.scrollbar_size_vertical = 1
        self._inner_widget = table
        yield table

        for label, key in self._columns:
            table.add_column(label, key=key)

    @property
    def row_count(self) -> int:
        return self._inner_widget.row_count if self._inner_widget is not None else 0

    def set_rows(self, rows: Iterable[Sequence[Any]]) -> None:
        """Replace every row; row keys are the row indices."""
        if self._inner_widget is None:
            return
        table = self._inner_widget
        with table.app.batch_update():
            table.clear()
            for index, cells in enumerate(rows):
                table.add_row(*cells, key=str(index))

    def update_row(self, index: int, cells: Sequence[Any]) -> None:
        """Rewrite the cells of a single row in place."""
        if self._inner_widget is None:
            return
        table = self._inner_widget
        for (_, column_key), value in zip(self._columns, cells, strict=False):
            try:
                table.update_cell(str(index), column_key, value)
            except CellDoesNotExist:
                logger.debug("Row %d has no cell %s", index, column_key)
                return

    def move_cursor(self, index: int) -> None:
        if self._inner_widget is None:
            return
        with suppress(CellDoesNotExist):
            self._inner_widget.move_cursor(row=index)

    def set_width(self, width: int) -> None:
        self.styles.width = width


__all__ = ["ItemTable"]
