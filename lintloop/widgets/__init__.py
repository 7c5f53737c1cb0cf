"""Widgets module for lintloop.

- item_table: ItemTable (DataTable wrapper for directory/file rows)
- log_view: LogView (numbered log pane)
- status_bar: StatusBar (single-line title, footer and status bars)
"""

from lintloop.widgets.item_table import ItemTable
from lintloop.widgets.log_view import LogView
from lintloop.widgets.status_bar import StatusBar

__all__ = [
    "ItemTable",
    "LogView",
    "StatusBar",
]
