"""All enum definitions.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum

# =============================================================================
# Pipeline Enums
# =============================================================================

class EventKind(Enum):
    """Kind of progress event sent from a worker to the dashboard."""

    ATTEMPT_STARTED = "attempt_started"
    LOG_APPENDED = "log_appended"
    COMPLETED = "completed"


class Outcome(Enum):
    """Terminal outcome of one file's fix loop."""

    FIXED = "fixed"
    FAILED = "failed"


# =============================================================================
# Dashboard Enums
# =============================================================================

class ItemKind(Enum):
    """Table item variants."""

    DIRECTORY = "directory"
    FILE = "file"


class InputMode(Enum):
    """Which pane currently receives navigation keys."""

    TABLE = "table"
    LOG = "log"


__all__ = [
    "EventKind",
    "InputMode",
    "ItemKind",
    "Outcome",
]
