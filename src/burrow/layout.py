"""Column-major grid layout for directory entries.

Entries are packed top to bottom, then left to right. Every column is padded
to its widest name, so all rows of a grid have the same width. The layout is
cheap to compute and is rebuilt whenever the terminal size, the preview pane
or the listing changes; nothing about it is persisted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from rich.cells import cell_len

from .listing import Entry

# Spaces between two columns
DEFAULT_GAP = 4


@dataclass(frozen=True)
class GridLayout:
    """Result of fitting a listing into a display area."""

    columns: int
    rows: int
    count: int
    cells: list[list[str]] = field(default_factory=list)
    widths: list[int] = field(default_factory=list)
    gap: int = DEFAULT_GAP

    @property
    def line_width(self) -> int:
        """Width of every rendered row, separators included."""
        if not self.widths:
            return 0
        return sum(self.widths) + self.gap * (len(self.widths) - 1)

    def index(self, column: int, row: int) -> int:
        """Linear entry index of a grid cell."""
        return column * self.rows + row

    def cell(self, index: int) -> tuple[int, int]:
        """Grid cell (column, row) of a linear entry index."""
        if self.rows == 0:
            return (0, 0)
        return (index // self.rows, index % self.rows)

    def contains(self, column: int, row: int) -> bool:
        """Check whether a cell holds a real entry."""
        return (
            0 <= column < self.columns
            and 0 <= row < self.rows
            and self.index(column, row) < self.count
        )

    def last_row(self, column: int) -> int:
        """Last populated row of a column; only the last column can be short."""
        if column == self.columns - 1:
            return self.rows - 1 - (self.columns * self.rows - self.count)
        return self.rows - 1

    def lines(self) -> list[str]:
        """Render the grid as plain text rows."""
        separator = " " * self.gap
        return [
            separator.join(self.cells[column][row] for column in range(self.columns))
            for row in range(self.rows)
        ]


def _pack(names: Sequence[str], columns: int, rows: int) -> tuple[list[list[str]], list[int]]:
    cells: list[list[str]] = []
    widths: list[int] = []
    for column in range(columns):
        chunk = list(names[column * rows:(column + 1) * rows])
        chunk.extend("" for _ in range(rows - len(chunk)))
        width = max((cell_len(name) for name in chunk), default=0)
        cells.append([name + " " * (width - cell_len(name)) for name in chunk])
        widths.append(width)
    return cells, widths


def initial_columns(count: int, height: int) -> int:
    """Starting column count before fitting to the width.

    A listing that fits in a third of the screen height stays in one column.
    """
    return max(count // max(height // 3, 1), 1)


def compute_layout(
    entries: Sequence[Entry],
    width: int,
    height: int,
    gap: int = DEFAULT_GAP,
) -> GridLayout:
    """Fit entries into a grid no wider than ``width``.

    Args:
        entries: Listing in display order
        width: Display width in terminal cells
        height: Height of the list area in rows (drives the initial guess)
        gap: Spaces between columns

    Returns:
        The layout with the most columns (up to the initial guess) whose rows
        all fit. A single column is always accepted, even if too wide.
    """
    count = len(entries)
    if count == 0:
        return GridLayout(columns=1, rows=0, count=0, cells=[[]], widths=[0], gap=gap)

    names = [entry.display_name for entry in entries]
    columns = initial_columns(count, height)

    while True:
        rows = math.ceil(count / columns)
        # Never leave trailing columns empty
        columns = math.ceil(count / rows)
        cells, widths = _pack(names, columns, rows)
        layout = GridLayout(
            columns=columns,
            rows=rows,
            count=count,
            cells=cells,
            widths=widths,
            gap=gap,
        )
        if columns == 1 or layout.line_width <= width:
            return layout
        columns -= 1


def find_name(entries: Sequence[Entry], layout: GridLayout, name: str) -> tuple[int, int] | None:
    """Locate an entry by name, returning its grid cell."""
    for index, entry in enumerate(entries):
        if entry.name == name:
            return layout.cell(index)
    return None
