"""Grid widget rendering the current listing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from rich import box
from rich.console import RenderableType
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from textual.events import Key
from textual.message import Message
from textual.widget import Widget

from ..layout import GridLayout
from ..navigator import Cursor

if TYPE_CHECKING:
    from ..session import Session

NO_FILES = "No files"


def build_grid(
    layout: GridLayout,
    cursor: Cursor,
    offset: int,
    height: int,
    cursor_style: Style | str = "reverse",
    matched: Sequence[int] = (),
    match_style: Style | str = "bold underline",
) -> RenderableType:
    """Render the visible rows of a grid with the cursor highlighted.

    Args:
        layout: Grid to render
        cursor: Selected cell
        offset: First visible row
        height: Number of visible rows
        cursor_style: Style of the selected cell
        matched: Character positions in the selected name to emphasize
        match_style: Style applied to matched characters
    """
    if layout.count == 0:
        return Panel(Text(NO_FILES), box=box.ROUNDED, expand=False, padding=(0, 1))

    separator = " " * layout.gap
    text = Text(no_wrap=True, overflow="crop")
    last = min(offset + max(height, 0), layout.rows)
    for row in range(offset, last):
        for column in range(layout.columns):
            if column:
                text.append(separator)
            cell = layout.cells[column][row]
            if column == cursor.column and row == cursor.row:
                selected = Text(cell, style=cursor_style)
                for position in matched:
                    if position < len(cell):
                        selected.stylize(match_style, position, position + 1)
                text.append_text(selected)
            else:
                text.append(cell)
        if row < last - 1:
            text.append("\n")
    return text


class DirectoryGrid(Widget, can_focus=True):
    """Multi-column listing of the current directory.

    All key presses are forwarded to the app as KeyInput messages, so the
    browser's own key handling takes precedence over any bindings.
    """

    DEFAULT_CSS = """
    DirectoryGrid {
        width: 1fr;
        height: 1fr;
    }
    """

    class KeyInput(Message):
        """Message emitted for every key pressed while the grid has focus."""

        def __init__(self, key: str, character: str | None) -> None:
            super().__init__()
            self.key = key
            self.character = character

    def __init__(self, session: Session, cursor_style: Style | str = "reverse", **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session
        self.cursor_style = cursor_style

    def render(self) -> RenderableType:
        session = self.session
        matched = session.search.matched_indexes if session.search.active else ()
        return build_grid(
            session.layout,
            session.cursor,
            session.offset,
            session.list_height,
            cursor_style=self.cursor_style,
            matched=matched,
        )

    def on_key(self, event: Key) -> None:
        event.stop()
        event.prevent_default()
        self.post_message(self.KeyInput(event.key, event.character))
