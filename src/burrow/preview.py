"""Preview loading for the side pane."""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from .listing import DirectoryError, list_directory

logger = logging.getLogger(__name__)

NO_PREVIEW = "No preview available"

PreviewKind = Literal["text", "binary", "error"]


@dataclass(frozen=True)
class PreviewContent:
    """What the preview pane shows for one path."""

    path: Path
    kind: PreviewKind
    text: str


class FileCache:
    """LRU cache for file previews with mtime-based invalidation.

    Shared by preview workers, so every access holds the lock.
    """

    def __init__(self, max_size: int = 32) -> None:
        self._cache: OrderedDict[tuple[str, int], tuple[float, PreviewContent]] = OrderedDict()
        self._max_size = max_size
        self._lock = threading.Lock()

    def get(self, path: Path, tab_width: int) -> PreviewContent | None:
        """Get cached content if valid, or None if not cached/stale."""
        key = (str(path), tab_width)
        try:
            current_mtime = path.stat().st_mtime
        except OSError:
            # File no longer accessible
            current_mtime = None

        with self._lock:
            cached = self._cache.get(key)
            if cached is None:
                return None
            cached_mtime, content = cached
            if current_mtime != cached_mtime:
                self._cache.pop(key, None)
                return None
            self._cache.move_to_end(key)
            return content

    def put(self, path: Path, tab_width: int, mtime: float, content: PreviewContent) -> None:
        """Cache preview content."""
        key = (str(path), tab_width)

        with self._lock:
            if len(self._cache) >= self._max_size and key not in self._cache:
                self._cache.popitem(last=False)

            self._cache[key] = (mtime, content)
            self._cache.move_to_end(key)

    def clear(self) -> None:
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._cache)


# Shared cache instance
_file_cache = FileCache()


def _directory_text(path: Path, show_hidden: bool) -> str:
    entries = list_directory(path, show_hidden=show_hidden)
    return "\n".join(entry.display_name for entry in entries)


def load_preview(path: Path, tab_width: int = 4, show_hidden: bool = True) -> PreviewContent:
    """Load preview content for a path (can be called from a worker thread).

    UTF-8 text is returned with tabs expanded. Anything that does not decode
    is reported as having no preview; read errors become the displayed text.
    A directory previews as its listing, filtered like the grid, and is
    never cached.
    """
    cached = _file_cache.get(path, tab_width)
    if cached is not None:
        return cached

    try:
        mtime = path.stat().st_mtime
        if path.is_dir():
            return PreviewContent(path, "text", _directory_text(path, show_hidden))
        data = path.read_bytes()
    except (OSError, DirectoryError) as e:
        logger.debug("Preview failed for %s: %s", path, e)
        return PreviewContent(path, "error", str(e))

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError:
        content = PreviewContent(path, "binary", NO_PREVIEW)
    else:
        content = PreviewContent(path, "text", text.replace("\t", " " * tab_width))

    _file_cache.put(path, tab_width, mtime, content)
    return content
