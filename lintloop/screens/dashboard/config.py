"""Dashboard screen configuration - columns, widget IDs, style and text."""

from __future__ import annotations

from dataclasses import dataclass

# =============================================================================
# Table Column Definitions: list[tuple[str, str]] = [(label, key), ...]
# =============================================================================

ITEM_TABLE_COLUMNS: list[tuple[str, str]] = [
    ("Path", "path"),
    ("Status", "status"),
    ("Attempts", "attempts"),
]

# =============================================================================
# Widget IDs
# =============================================================================

ITEM_TABLE_ID = "item-table"
LOG_PANE_ID = "log-pane"
LOG_TITLE_ID = "log-title"
LOG_VIEW_ID = "log-view"
LOG_FOOTER_ID = "log-footer"
STATUS_BAR_ID = "status-bar"

# =============================================================================
# Text
# =============================================================================

NO_FILE_SELECTED = "No file selected"
NO_FILES_PROCESSED = "No files processed"
STATUS_OK = "OK"
TABLE_KEY_HINTS = "↑/↓: Navigate • Enter: Logs • Q: Quit"
LOG_KEY_HINTS = "↑/↓: scroll • ESC: back"
LOG_LINE_TEMPLATE = "{number:4d} │ {line}"
ATTEMPTS_TEMPLATE = "{retries}/{max_retries}"

# =============================================================================
# Style
# =============================================================================


@dataclass(frozen=True, slots=True)
class DashboardStyle:
    """Rich style strings used when rendering dashboard rows."""

    directory: str = "bold #7D56F4"
    file: str = ""
    selected: str = "on #3C3C3C"
    fixed: str = "green"
    failed: str = "red"
    in_progress: str = "yellow"
    pending: str = "dim"


DEFAULT_STYLE = DashboardStyle()

__all__ = [
    "ATTEMPTS_TEMPLATE",
    "DEFAULT_STYLE",
    "ITEM_TABLE_COLUMNS",
    "ITEM_TABLE_ID",
    "LOG_FOOTER_ID",
    "LOG_KEY_HINTS",
    "LOG_LINE_TEMPLATE",
    "LOG_PANE_ID",
    "LOG_TITLE_ID",
    "LOG_VIEW_ID",
    "NO_FILES_PROCESSED",
    "NO_FILE_SELECTED",
    "STATUS_BAR_ID",
    "STATUS_OK",
    "TABLE_KEY_HINTS",
    "DashboardStyle",
]
