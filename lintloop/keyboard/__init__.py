"""Keyboard bindings module.

Bindings are organized into two categories:

- app: App-level bindings (APP_BINDINGS)
- dashboard: Dashboard screen bindings (DASHBOARD_SCREEN_BINDINGS)
"""

from lintloop.keyboard.app import APP_BINDINGS
from lintloop.keyboard.dashboard import DASHBOARD_SCREEN_BINDINGS

__all__ = [
    "APP_BINDINGS",
    "DASHBOARD_SCREEN_BINDINGS",
]
