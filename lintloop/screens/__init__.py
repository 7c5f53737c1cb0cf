"""Screens for lintloop."""

from lintloop.screens.dashboard import DashboardPresenter, DashboardScreen

__all__ = [
    "DashboardPresenter",
    "DashboardScreen",
]
