"""Preview pane widget."""

from __future__ import annotations

from pathlib import Path

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.widgets import Static

from ..preview import PreviewContent


def render_preview(content: PreviewContent | None) -> RenderableType:
    """Turn preview content into something the pane can display."""
    if content is None:
        return Text("")
    if content.kind == "binary":
        # Bordered warning box
        return Panel(Text(content.text), box=box.ROUNDED, expand=False, padding=(0, 1))
    return Text(content.text, no_wrap=True)


class Preview(Vertical):
    """Side pane showing the selected file."""

    DEFAULT_CSS = """
    Preview {
        width: 1fr;
        height: 1fr;
        padding: 0 0 0 2;
    }

    Preview > VerticalScroll {
        height: 1fr;
        scrollbar-size: 0 0;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._content: PreviewContent | None = None

    def compose(self) -> ComposeResult:
        with VerticalScroll(id="preview-scroll"):
            yield Static(id="preview-content")

    @property
    def content_widget(self) -> Static:
        return self.query_one("#preview-content", Static)

    def show_content(self, content: PreviewContent | None) -> None:
        """Display loaded content (no I/O, safe for main thread)."""
        if content == self._content:
            return
        self._content = content
        self.content_widget.update(render_preview(content))
        self.query_one("#preview-scroll", VerticalScroll).scroll_home(animate=False)

    def get_current_file(self) -> Path | None:
        """Get the currently displayed file path."""
        if self._content is None:
            return None
        return self._content.path
