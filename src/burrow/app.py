"""Main Textual application for burrow."""

from functools import partial
from pathlib import Path

from rich.style import Style

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical

from .actions import FileActionsMixin, NavigationActionsMixin
from .config import Config
from .listing import list_directory
from .session import Session
from .widgets import DirectoryGrid, LocationBar, Preview


class BurrowApp(NavigationActionsMixin, FileActionsMixin, App):
    """burrow - terminal directory browser."""

    TITLE = "burrow"

    CSS = """
    #main-container {
        width: 100%;
        height: 100%;
    }

    #browser {
        width: 1fr;
        height: 100%;
    }

    #preview {
        display: none;
    }
    """

    # Priority so it works regardless of focus
    BINDINGS = [
        Binding("ctrl+c", "force_quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, config: Config, path: Path) -> None:
        super().__init__()
        self.config = config
        self.session = Session(
            path,
            gap=config.column_gap,
            search_timeout=config.search_timeout,
            lister=partial(list_directory, show_hidden=config.show_hidden),
        )

    def compose(self) -> ComposeResult:
        colors = self.config.colors
        with Horizontal(id="main-container"):
            with Vertical(id="browser"):
                yield LocationBar(
                    bar_style=Style(color=colors.foreground, bgcolor=colors.bar),
                    search_style=Style(color=colors.foreground, bgcolor=colors.search),
                    id="location-bar",
                )
                yield DirectoryGrid(
                    self.session,
                    cursor_style=Style(color=colors.foreground, bgcolor=colors.cursor),
                    id="grid",
                )
            yield Preview(id="preview")

    def on_mount(self) -> None:
        """Fit the grid to the terminal and take focus."""
        self.session.resize(self.size.width, self.size.height)
        self.query_one("#grid", DirectoryGrid).focus()
        self._refresh_view()


def run_app(config: Config, path: Path) -> tuple[int, Path | None]:
    """Run the browser and return its exit code and the directory to report."""
    app = BurrowApp(config, path)
    result = app.run()
    return app.return_code or 0, result
