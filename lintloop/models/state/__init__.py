"""State models: settings, config loading and dashboard state."""

from lintloop.models.state.app_settings import (
    ConfigError,
    ConfigLoadError,
    FixerSettings,
)
from lintloop.models.state.config_manager import ConfigManager
from lintloop.models.state.dashboard_state import (
    DashboardState,
    Layout,
    LogViewport,
)

__all__ = [
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
    "DashboardState",
    "FixerSettings",
    "Layout",
    "LogViewport",
]
