"""Dashboard keyboard bindings.

Each key maps to one action on DashboardScreen; the screen forwards the
action to the presenter, which decides what it means in the current mode.
"""

from textual.binding import Binding

# ============================================================================
# Dashboard screen bindings
# ============================================================================

DASHBOARD_SCREEN_BINDINGS: list[Binding] = [
    Binding("q", "quit_or_back", "Quit"),
    Binding("escape", "back", "Back"),
    Binding("enter", "open_log", "Logs"),
    Binding("up", "move_up", "Up", show=False),
    Binding("k", "move_up", "Up", show=False),
    Binding("down", "move_down", "Down", show=False),
    Binding("j", "move_down", "Down", show=False),
    Binding("pageup", "half_page_up", "Half page up", show=False),
    Binding("pagedown", "half_page_down", "Half page down", show=False),
    Binding("g", "log_top", "Top", show=False),
    Binding("G", "log_bottom", "Bottom", show=False),
]

__all__ = [
    "DASHBOARD_SCREEN_BINDINGS",
]
