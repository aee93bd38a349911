"""File action handlers for BurrowApp: editing and previews."""

from __future__ import annotations

import logging
import shlex
import subprocess
from functools import partial
from pathlib import Path

from textual.app import SuspendNotSupported
from textual.worker import Worker

from ..config import resolve_editor
from ..preview import PreviewContent, load_preview

logger = logging.getLogger(__name__)


class FileActionsMixin:
    """Mixin providing the editor launch and background preview loading."""

    def _open_editor(self, file_path: Path) -> None:
        """Open a file in the editor, blocking until it exits."""
        editor = resolve_editor(self.config.editor)
        logger.info("Launching %s on %s", editor, file_path)

        # Suspend the TUI and run the editor
        try:
            with self.suspend():
                try:
                    subprocess.run([*shlex.split(editor), str(file_path)], check=False)
                except FileNotFoundError:
                    self.notify(f"Editor '{editor}' not found", severity="error")
                except OSError as e:
                    self.notify(f"Error opening editor: {e}", severity="error")
        except SuspendNotSupported:
            self.notify("Cannot run an editor in this environment", severity="error")
            return

        # The file may have changed under the preview
        for command in self.session.preview_commands():
            self._load_preview(command.path)

    def _load_preview(self, file_path: Path) -> None:
        """Load preview content in a background thread."""
        self.run_worker(
            partial(
                load_preview,
                file_path,
                self.config.tab_width,
                show_hidden=self.config.show_hidden,
            ),
            name="_load_preview",
            thread=True,
            group="preview",
            exclusive=True,
        )

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Apply a finished preview load if it is still wanted."""
        if event.worker.name != "_load_preview":
            return

        if event.state.name == "ERROR":
            logger.warning("Preview worker failed: %s", event.worker.error)
            return

        if event.state.name != "SUCCESS":
            return

        content = event.worker.result
        if isinstance(content, PreviewContent) and self.session.apply_preview(content):
            self._refresh_view()
