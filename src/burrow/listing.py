"""Directory enumeration for burrow."""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


class DirectoryError(Exception):
    """A directory could not be listed or a path could not be inspected.

    Burrow cannot do anything useful without a listing, so the app treats
    this as fatal.
    """

    def __init__(self, path: Path, error: OSError) -> None:
        super().__init__(f"{path}: {error.strerror or error}")
        self.path = path
        self.error = error


@dataclass(frozen=True)
class Entry:
    """A single file or directory shown in the grid."""

    name: str
    is_dir: bool

    @property
    def display_name(self) -> str:
        """Name as rendered in the grid; directories carry a trailing slash."""
        if self.is_dir:
            return self.name + "/"
        return self.name


def list_directory(path: Path, show_hidden: bool = True) -> list[Entry]:
    """List a directory, sorted by name.

    Raises:
        DirectoryError: if the directory cannot be read.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(path) as it:
            for item in it:
                if not show_hidden and item.name.startswith("."):
                    continue
                try:
                    is_dir = item.is_dir()
                except OSError:
                    # Dangling symlinks and the like are shown as plain files
                    is_dir = False
                entries.append(Entry(item.name, is_dir))
    except OSError as e:
        raise DirectoryError(path, e) from e

    entries.sort(key=lambda entry: entry.name)
    logger.debug("Listed %d entries in %s", len(entries), path)
    return entries


def is_directory(path: Path) -> bool:
    """Check whether a path is a directory, following symlinks.

    Raises:
        DirectoryError: if the path cannot be stat'ed.
    """
    try:
        return stat.S_ISDIR(path.stat().st_mode)
    except OSError as e:
        raise DirectoryError(path, e) from e
