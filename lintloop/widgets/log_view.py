"""LogView widget - the numbered log pane of the selected file."""

from __future__ import annotations

from collections.abc import Sequence

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Static


class LogView(Static):
    """Renders the lines handed to it; scrolling is owned by the presenter.

    Mouse wheel movement is reported as a ``LogView.Scrolled`` message so the
    screen can decide whether the log currently accepts scrolling.
    """

    DEFAULT_CSS = """
    LogView {
        height: 1fr;
        width: 1fr;
        padding: 0 1;
        background: $surface;
    }
    """

    class Scrolled(Message):
        """Mouse wheel over the log; ``delta`` is negative for up."""

        def __init__(self, delta: int) -> None:
            super().__init__()
            self.delta = delta

    def __init__(self, *, id: str | None = None, classes: str = "") -> None:
        super().__init__("", id=id, classes=f"widget-log-view {classes}".strip())
        self._lines: list[str] = []

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def show_lines(self, lines: Sequence[str]) -> None:
        self._lines = list(lines)
        self.update(Text("\n".join(self._lines), no_wrap=True, overflow="ellipsis"))

    def on_mouse_scroll_up(self, event: events.MouseScrollUp) -> None:
        event.stop()
        self.post_message(self.Scrolled(-1))

    def on_mouse_scroll_down(self, event: events.MouseScrollDown) -> None:
        event.stop()
        self.post_message(self.Scrolled(1))


__all__ = ["LogView"]
