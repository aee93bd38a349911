"""End-to-end tests driving BurrowApp through the Textual pilot."""

import asyncio

from burrow.actions import SearchExpired
from burrow.app import BurrowApp
from burrow.config import Config
from burrow.widgets import DirectoryGrid, LocationBar, Preview


def run(app, scenario, size=(80, 24)):
    """Run ``scenario(pilot)`` against a headless app."""

    async def main():
        async with app.run_test(size=size) as pilot:
            await pilot.pause()
            await scenario(pilot)

    asyncio.run(main())


class TestBurrowApp:
    def test_mount_fits_the_terminal(self, tree):
        app = BurrowApp(Config(), tree)

        async def scenario(pilot):
            assert (app.session.width, app.session.height) == (80, 24)
            assert isinstance(app.focused, DirectoryGrid)
            assert app.query_one("#location-bar", LocationBar) is not None

        run(app, scenario)

    def test_escape_reports_directory(self, tree):
        app = BurrowApp(Config(), tree)

        async def scenario(pilot):
            await pilot.press("enter")
            assert app.session.path == tree / "alpha"
            await pilot.press("escape")

        run(app, scenario)
        assert app.return_code == 0
        assert app.return_value == tree / "alpha"

    def test_ctrl_c_exits_without_directory(self, tree):
        app = BurrowApp(Config(), tree)

        async def scenario(pilot):
            await pilot.press("ctrl+c")

        run(app, scenario)
        assert app.return_code == 2
        assert app.return_value is None

    def test_keys_move_cursor(self, tree):
        app = BurrowApp(Config(), tree)

        async def scenario(pilot):
            await pilot.press("down", "j")
            assert app.session.selected_entry().name == "gamma.txt"
            await pilot.press("G")
            assert app.session.selected_entry().name == "zeta.py"

        run(app, scenario)

    def test_preview_loads_in_background(self, tree):
        app = BurrowApp(Config(), tree)

        async def scenario(pilot):
            await pilot.press("down", "down", "space")
            await app.workers.wait_for_complete()
            await pilot.pause()
            preview = app.query_one("#preview", Preview)
            assert preview.display
            assert app.session.preview is not None
            assert app.session.preview.path == tree / "gamma.txt"
            assert app.session.preview.text == "gamma\n    indented\n"
            assert preview.get_current_file() == tree / "gamma.txt"

            await pilot.press("space")
            assert not preview.display

        run(app, scenario)

    def test_directory_preview_follows_hidden_setting(self, tree):
        (tree / "alpha" / ".secret").write_text("")
        app = BurrowApp(Config(show_hidden=False), tree)

        async def scenario(pilot):
            await pilot.press("space")
            await app.workers.wait_for_complete()
            await pilot.pause()
            assert app.session.preview.path == tree / "alpha"
            assert ".secret" not in app.session.preview.text

        run(app, scenario)

    def test_search_expires(self, tree):
        app = BurrowApp(Config(search_timeout=0.5), tree)

        async def scenario(pilot):
            await pilot.press("slash", "n")
            assert app.session.search.active
            assert app.session.selected_entry().name == "notes.md"
            await pilot.pause(1.5)
            assert not app.session.search.active
            assert app.session.selected_entry().name == "notes.md"

        run(app, scenario)

    def test_only_latest_keystroke_expires_search(self, tree):
        app = BurrowApp(Config(search_timeout=60), tree)

        async def scenario(pilot):
            await pilot.press("slash", "n", "o")
            search = app.session.search
            assert (search.session_id, search.keystroke) == (1, 2)

            app.post_message(SearchExpired(1, 1))
            await pilot.pause()
            assert search.active

            app.post_message(SearchExpired(1, 2))
            await pilot.pause()
            assert not search.active

        run(app, scenario)

    def test_vanished_directory_is_fatal(self, tree):
        app = BurrowApp(Config(), tree)

        async def scenario(pilot):
            (tree / "beta").rmdir()
            await pilot.press("down", "enter")

        run(app, scenario)
        assert app.return_code == 1
