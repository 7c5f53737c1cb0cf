"""Single-line bars used above and below the panes."""

from __future__ import annotations

from rich.text import Text
from textual.widgets import Static


class StatusBar(Static):
    """One line of plain text. Markup in the text is not interpreted."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        width: 1fr;
        background: $panel;
        color: $text;
    }
    StatusBar.log-title {
        background: #7D56F4;
        color: #FAFAFA;
        text-style: bold;
    }
    StatusBar.log-footer {
        background: $panel;
        color: $text-muted;
    }
    """

    def __init__(self, text: str = "", *, id: str | None = None, classes: str = "") -> None:
        super().__init__(Text(text), id=id, classes=classes)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> None:
        if text == self._text:
            return
        self._text = text
        self.update(Text(text, no_wrap=True, overflow="ellipsis"))


__all__ = ["StatusBar"]
