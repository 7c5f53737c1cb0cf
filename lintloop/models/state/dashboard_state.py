"""Dashboard-only state: log viewport, split-pane layout and cursor/mode."""

from __future__ import annotations

from dataclasses import dataclass, field

from lintloop.constants.enums import InputMode
from lintloop.constants.limits import (
    LOG_CHROME_ROWS,
    MIN_LOG_HEIGHT,
    MIN_PANE_WIDTH,
    PANE_HORIZONTAL_MARGIN,
    PANE_VERTICAL_MARGIN,
)


@dataclass(slots=True)
class LogViewport:
    """Scrollable window over a list of lines.

    ``offset`` is the index of the first visible line and always stays within
    ``[0, max_offset]``.
    """

    lines: list[str] = field(default_factory=list)
    offset: int = 0
    height: int = MIN_LOG_HEIGHT

    @property
    def max_offset(self) -> int:
        return max(0, len(self.lines) - self.height)

    @property
    def at_bottom(self) -> bool:
        return self.offset >= self.max_offset

    @property
    def scroll_percent(self) -> float:
        """Percent scrolled, 100 when everything fits."""
        if self.max_offset == 0:
            return 100.0
        return self.offset / self.max_offset * 100.0

    def _clamp(self) -> None:
        self.offset = min(max(self.offset, 0), self.max_offset)

    def set_content(self, lines: list[str]) -> None:
        self.lines = list(lines)
        self._clamp()

    def set_height(self, height: int) -> None:
        self.height = max(MIN_LOG_HEIGHT, height)
        self._clamp()

    def line_up(self, count: int = 1) -> None:
        self.offset -= count
        self._clamp()

    def line_down(self, count: int = 1) -> None:
        self.offset += count
        self._clamp()

    def half_view_up(self) -> None:
        self.line_up(max(1, self.height // 2))

    def half_view_down(self) -> None:
        self.line_down(max(1, self.height // 2))

    def goto_top(self) -> None:
        self.offset = 0

    def goto_bottom(self) -> None:
        self.offset = self.max_offset

    def visible_lines(self) -> list[str]:
        return self.lines[self.offset:self.offset + self.height]


@dataclass(frozen=True, slots=True)
class Layout:
    """Split-pane geometry derived from the terminal size."""

    table_width: int
    log_width: int
    log_height: int

    @classmethod
    def compute(cls, width: int, height: int) -> Layout:
        pane_width = max(MIN_PANE_WIDTH, width // 2 - PANE_HORIZONTAL_MARGIN)
        log_height = max(
            MIN_LOG_HEIGHT,
            height - LOG_CHROME_ROWS - PANE_VERTICAL_MARGIN,
        )
        return cls(table_width=pane_width, log_width=pane_width, log_height=log_height)


@dataclass(slots=True)
class DashboardState:
    """Mutable state owned by the dashboard loop alone."""

    cursor: int = 0
    mode: InputMode = InputMode.TABLE
    viewport: LogViewport = field(default_factory=LogViewport)
    layout: Layout = field(default_factory=lambda: Layout.compute(0, 0))
    width: int = 0
    height: int = 0
    stream_closed: bool = False
    status_message: str = ""

    @property
    def log_focused(self) -> bool:
        return self.mode is InputMode.LOG


__all__ = [
    "DashboardState",
    "Layout",
    "LogViewport",
]
