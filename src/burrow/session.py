"""Browser state and key handling, independent of the terminal UI.

The session owns the listing, the grid layout, the cursor, position memory,
search state and preview state. The app feeds it keys, resizes and completed
background work; in return it gets commands describing the side effects to
carry out (load a preview, schedule a search expiry, open an editor, quit).
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Union

from .layout import DEFAULT_GAP, GridLayout, compute_layout, find_name
from .listing import Entry, is_directory, list_directory
from .navigator import MOVES, Cursor, clamp, scroll_offset
from .positions import Position, PositionMemory
from .preview import PreviewContent
from .search import SearchState

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FORCED = 2

# Row taken by the location bar
BAR_HEIGHT = 1


@dataclass(frozen=True)
class LoadPreview:
    path: Path


@dataclass(frozen=True)
class ExpireSearch:
    session_id: int
    keystroke: int
    delay: float


@dataclass(frozen=True)
class OpenEditor:
    path: Path


@dataclass(frozen=True)
class Quit:
    code: int
    path: Path | None = None


Command = Union[LoadPreview, ExpireSearch, OpenEditor, Quit]

# Named keys that move the cursor in both modes
ARROW_KEYS = {
    "up": "up",
    "down": "down",
    "left": "left",
    "right": "right",
    "shift+up": "top",
    "shift+down": "bottom",
    "shift+left": "leftmost",
    "shift+right": "rightmost",
}

# Letters that move the cursor when not typing a search query
VI_KEYS = {
    "k": "up",
    "j": "down",
    "h": "left",
    "l": "right",
    "g": "top",
    "G": "bottom",
}

QUIT_KEYS = ("escape",)
FORCE_QUIT_KEYS = ("ctrl+c",)
OPEN_KEYS = ("enter",)
BACK_KEYS = ("backspace", "ctrl+h")
SEARCH_CHARACTER = "/"
PREVIEW_CHARACTER = " "


class Session:
    """State machine behind the directory browser."""

    def __init__(
        self,
        path: Path,
        width: int = 80,
        height: int = 60,
        *,
        gap: int = DEFAULT_GAP,
        search_timeout: float = 2.0,
        lister: Callable[[Path], list[Entry]] = list_directory,
    ) -> None:
        self.path = Path(os.path.abspath(path))
        self.width = width
        self.height = height
        self.gap = gap
        self.search_timeout = search_timeout
        self._lister = lister

        self.entries: list[Entry] = []
        self.cursor = Cursor()
        self.offset = 0
        self.layout = GridLayout(columns=1, rows=0, count=0, gap=gap)
        self.positions = PositionMemory()
        self.search = SearchState()
        self.preview_mode = False
        self.preview: PreviewContent | None = None

        # Name to select once the next layout is known
        self.prev_name = ""
        self.find_prev_name = False

        self.list()
        self.relayout()

    # Geometry

    @property
    def display_width(self) -> int:
        """Width available to the grid; the preview pane takes half."""
        if self.preview_mode:
            return self.width // 2
        return self.width

    @property
    def list_height(self) -> int:
        return max(self.height - BAR_HEIGHT, 0)

    def list(self) -> None:
        """Read the current directory. Raises DirectoryError on failure."""
        self.entries = self._lister(self.path)

    def relayout(self) -> None:
        """Recompute the grid and settle the cursor on it."""
        self.layout = compute_layout(
            self.entries, self.display_width, self.list_height, gap=self.gap
        )
        if self.find_prev_name:
            self.find_prev_name = False
            cell = find_name(self.entries, self.layout, self.prev_name)
            if cell is not None:
                self.cursor = Cursor(*cell)
        self.cursor = clamp(self.cursor, self.layout)
        self.update_offset()
        self.save_position()

    def update_offset(self) -> None:
        self.offset = scroll_offset(
            self.cursor.row, self.offset, self.layout.rows, self.list_height
        )

    def save_position(self) -> None:
        self.positions.save(
            self.path, Position(self.cursor.column, self.cursor.row, self.offset)
        )

    def resize(self, width: int, height: int) -> None:
        """Adopt a new terminal size, keeping the same entry selected."""
        self.width = width
        self.height = height
        self._reset_geometry()
        self.relayout()

    def _reset_geometry(self) -> None:
        # Stored cells are meaningless in a different grid
        self.positions.clear()
        entry = self.selected_entry()
        if entry is not None:
            self.prev_name = entry.name
            self.find_prev_name = True
        self.cursor = Cursor()
        self.offset = 0

    # Selection

    def selected_entry(self) -> Entry | None:
        index = self.cursor.index(self.layout)
        if 0 <= index < len(self.entries):
            return self.entries[index]
        return None

    def selected_path(self) -> Path | None:
        entry = self.selected_entry()
        if entry is None:
            return None
        return self.path / entry.name

    def names(self) -> list[str]:
        return [entry.name for entry in self.entries]

    # Input

    def handle_key(self, key: str, character: str | None = None) -> list[Command]:
        """Apply one key press and return the resulting commands.

        Args:
            key: Key name, e.g. ``"up"``, ``"shift+left"``, ``"enter"``
            character: Printable character produced by the key, if any
        """
        if key in FORCE_QUIT_KEYS:
            return [Quit(EXIT_FORCED)]

        if self.search.active:
            commands = self._handle_search_key(key, character)
            if commands is not None:
                return commands

        if key in QUIT_KEYS:
            logger.info("Quit in %s", self.path)
            return [Quit(EXIT_OK, self.path)]

        if key in OPEN_KEYS:
            self.search.stop()
            commands = self.open()
            if commands:
                return commands
        elif key in BACK_KEYS:
            self.search.stop()
            self.back()
        elif key in ARROW_KEYS:
            self.move(ARROW_KEYS[key])
        elif character == SEARCH_CHARACTER:
            self.search.start()
        elif character == PREVIEW_CHARACTER:
            return self.toggle_preview()
        elif character in VI_KEYS:
            self.move(VI_KEYS[character])
        else:
            return []

        self.relayout()
        return self.preview_commands()

    def _handle_search_key(self, key: str, character: str | None) -> list[Command] | None:
        """Keys with a search-specific meaning; None falls through to browse."""
        if character == SEARCH_CHARACTER:
            self.search.stop()
            return []
        if key in BACK_KEYS:
            if not self.search.query:
                return None
            self._select_match(self.search.backspace(self.names()))
            return self._after_search_edit()
        if character == PREVIEW_CHARACTER or key in ARROW_KEYS:
            return None
        if character is not None and character.isprintable():
            self._select_match(self.search.append(character, self.names()))
            return self._after_search_edit()
        return None

    def _select_match(self, index: int | None) -> None:
        if index is None:
            return
        self.cursor = Cursor(*self.layout.cell(index))

    def _after_search_edit(self) -> list[Command]:
        self.relayout()
        commands: list[Command] = [
            ExpireSearch(self.search.session_id, self.search.keystroke, self.search_timeout)
        ]
        commands.extend(self.preview_commands())
        return commands

    def expire_search(self, session_id: int, keystroke: int) -> bool:
        """Handle a deferred search expiry; superseded timers are ignored."""
        return self.search.expire(session_id, keystroke)

    # Actions

    def move(self, direction: str) -> None:
        self.cursor = MOVES[direction](self.cursor, self.layout)

    def open(self) -> list[Command]:
        """Enter the selected directory, or ask for the file to be edited."""
        path = self.selected_path()
        if path is None:
            return []
        if not is_directory(path):
            logger.info("Editing %s", path)
            return [OpenEditor(path)]
        self.change_directory(path)
        return []

    def change_directory(self, path: Path) -> None:
        """Switch to a directory, restoring its remembered position."""
        self.path = path
        position = self.positions.get(path)
        if position is not None:
            self.cursor = Cursor(position.column, position.row)
            self.offset = position.offset
        else:
            self.cursor = Cursor()
            self.offset = 0
        logger.debug("Entering %s", path)
        self.list()

    def back(self) -> None:
        """Go to the parent directory, selecting the one we came from."""
        self.prev_name = self.path.name
        self.path = self.path.parent
        position = self.positions.get(self.path)
        if position is not None:
            self.cursor = Cursor(position.column, position.row)
            self.offset = position.offset
        else:
            self.cursor = Cursor()
            self.offset = 0
            self.find_prev_name = True
        logger.debug("Leaving for %s", self.path)
        self.list()

    def toggle_preview(self) -> list[Command]:
        """Show or hide the preview pane."""
        self.preview_mode = not self.preview_mode
        self._reset_geometry()
        self.relayout()
        if not self.preview_mode:
            self.preview = None
            return []
        return self.preview_commands()

    def preview_commands(self) -> list[Command]:
        """Commands that bring the preview up to date with the selection."""
        if not self.preview_mode:
            return []
        path = self.selected_path()
        if path is None:
            self.preview = None
            return []
        return [LoadPreview(path)]

    def apply_preview(self, content: PreviewContent) -> bool:
        """Show loaded preview content if it is still for the selection."""
        if not self.preview_mode or content.path != self.selected_path():
            return False
        self.preview = content
        return True

    # Location bar

    def location(self, home: Path | None = None) -> str:
        """Current directory with the home directory shortened to ``~``."""
        location = str(self.path)
        if home is None:
            home = Path.home()
        home_text = str(home)
        if home_text != "/" and (location == home_text or location.startswith(home_text + "/")):
            location = "~" + location[len(home_text):]
        return location

    def filter_text(self) -> str:
        if not self.search.active:
            return ""
        return SEARCH_CHARACTER + self.search.query
