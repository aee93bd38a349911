"""Per-directory cursor memory."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Position:
    """Snapshot of the cursor and scroll state in one directory."""

    column: int
    row: int
    offset: int


class PositionMemory:
    """Remembers where the cursor was in each visited directory.

    Coordinates are only meaningful for the grid geometry they were recorded
    in, so the whole memory is cleared when the geometry changes.
    """

    def __init__(self) -> None:
        self._positions: dict[Path, Position] = {}

    def save(self, path: Path, position: Position) -> None:
        """Record the position for a directory, replacing any older one."""
        self._positions[path] = position

    def get(self, path: Path) -> Position | None:
        """Return the remembered position, or None if there is none."""
        return self._positions.get(path)

    def clear(self) -> None:
        """Forget all positions."""
        self._positions.clear()

    def is_empty(self) -> bool:
        return len(self._positions) == 0

    def __contains__(self, path: Path) -> bool:
        return path in self._positions

    def __len__(self) -> int:
        return len(self._positions)
