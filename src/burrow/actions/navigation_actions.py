"""Key dispatch and command handling for BurrowApp."""

from __future__ import annotations

import logging
from functools import partial

from textual import events
from textual.app import ScreenStackError
from textual.css.query import NoMatches
from textual.message import Message

from ..listing import DirectoryError
from ..session import Command, ExpireSearch, LoadPreview, OpenEditor, Quit
from ..widgets import DirectoryGrid, LocationBar, Preview

logger = logging.getLogger(__name__)


class SearchExpired(Message):
    """Posted when the inactivity timer of a search keystroke fires."""

    def __init__(self, session_id: int, keystroke: int) -> None:
        super().__init__()
        self.session_id = session_id
        self.keystroke = keystroke


class NavigationActionsMixin:
    """Mixin feeding input to the session and carrying out its commands."""

    def on_directory_grid_key_input(self, event: DirectoryGrid.KeyInput) -> None:
        """Handle a key press on the grid."""
        try:
            commands = self.session.handle_key(event.key, event.character)
        except DirectoryError as e:
            self._fatal(e)
            return
        self._run_commands(commands)

    def action_force_quit(self) -> None:
        """Quit without reporting a directory."""
        self._run_commands(self.session.handle_key("ctrl+c"))

    def on_resize(self, event: events.Resize) -> None:
        """Re-fit the grid to the new terminal size."""
        self.session.resize(event.size.width, event.size.height)
        self._run_commands(self.session.preview_commands())

    def on_search_expired(self, event: SearchExpired) -> None:
        """End type-to-select unless a newer search has started."""
        if self.session.expire_search(event.session_id, event.keystroke):
            self._refresh_view()

    def _run_commands(self, commands: list[Command]) -> None:
        """Carry out the side effects requested by the session."""
        for command in commands:
            if isinstance(command, Quit):
                self.exit(result=command.path, return_code=command.code)
                return
            if isinstance(command, ExpireSearch):
                self.set_timer(
                    command.delay,
                    partial(
                        self.post_message,
                        SearchExpired(command.session_id, command.keystroke),
                    ),
                )
            elif isinstance(command, LoadPreview):
                self._load_preview(command.path)
            elif isinstance(command, OpenEditor):
                self._open_editor(command.path)
        self._refresh_view()

    def _refresh_view(self) -> None:
        """Redraw the bar, the grid and the preview pane from the session."""
        session = self.session
        try:
            bar = self.query_one("#location-bar", LocationBar)
            grid = self.query_one("#grid", DirectoryGrid)
            preview = self.query_one("#preview", Preview)
        except (NoMatches, ScreenStackError):
            # Resized before the screen was composed
            return

        bar.show(session.location(), session.filter_text(), session.display_width)
        grid.refresh()
        preview.display = session.preview_mode
        preview.show_content(session.preview)

    def _fatal(self, error: DirectoryError) -> None:
        logger.error("Giving up: %s", error)
        self.exit(return_code=1, message=f"Error: {error}")
