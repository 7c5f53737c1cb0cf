"""Dashboard screen package."""

from lintloop.screens.dashboard.dashboard_screen import (
    DashboardScreen,
    EventStreamClosed,
    ProgressReceived,
)
from lintloop.screens.dashboard.presenter import DashboardPresenter

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
    "EventStreamClosed",
    "ProgressReceived",
]
