"""Limit and threshold constants.

All limit values, capacities, and validation ranges.
"""

from typing import Final

# ============================================================================
# Event bus limits
# ============================================================================

EVENT_QUEUE_CAPACITY: Final = 100

# ============================================================================
# Display limits
# ============================================================================

SHORT_PATH_MAX: Final = 50
# Characters of an HTTP error body kept in a log line.
ERROR_BODY_EXCERPT_MAX: Final = 500
MIN_PANE_WIDTH: Final = 10
MIN_LOG_HEIGHT: Final = 1

# ============================================================================
# Layout reservations (rows / columns)
# ============================================================================

PANE_HORIZONTAL_MARGIN: Final = 4
# Status bar row + the log pane's top and bottom border.
PANE_VERTICAL_MARGIN: Final = 3
# Log header bar + log footer bar.
LOG_CHROME_ROWS: Final = 2

# ============================================================================
# Validation limits
# ============================================================================

MAX_RETRIES_MIN: Final = 1
EVENT_QUEUE_CAPACITY_MIN: Final = 1

__all__ = [
    "ERROR_BODY_EXCERPT_MAX",
    "EVENT_QUEUE_CAPACITY",
    "EVENT_QUEUE_CAPACITY_MIN",
    "LOG_CHROME_ROWS",
    "MAX_RETRIES_MIN",
    "MIN_LOG_HEIGHT",
    "MIN_PANE_WIDTH",
    "PANE_HORIZONTAL_MARGIN",
    "PANE_VERTICAL_MARGIN",
    "SHORT_PATH_MAX",
]
