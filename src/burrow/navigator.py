"""Cursor movement over a column-major grid.

All moves wrap around. The last column may hold fewer entries than the
others, and no move may leave the cursor on one of its empty cells: the
linear index ``column * rows + row`` always stays below the entry count.
"""

from dataclasses import dataclass

from .layout import GridLayout


@dataclass
class Cursor:
    """Selected grid cell."""

    column: int = 0
    row: int = 0

    def index(self, layout: GridLayout) -> int:
        return layout.index(self.column, self.row)


def _beyond_last(column: int, row: int, layout: GridLayout) -> bool:
    return column == layout.columns - 1 and layout.index(column, row) >= layout.count


def move_up(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    column, row = cursor.column, cursor.row - 1
    if row < 0:
        row = layout.rows - 1
        column -= 1
    if column < 0:
        column = layout.columns - 1
        row = layout.last_row(column)
    return Cursor(column, row)


def move_down(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    column, row = cursor.column, cursor.row + 1
    if row >= layout.rows:
        row = 0
        column += 1
    if column >= layout.columns:
        column = 0
    if _beyond_last(column, row, layout):
        return Cursor(0, 0)
    return Cursor(column, row)


def move_left(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    column, row = cursor.column - 1, cursor.row
    if column < 0:
        column = layout.columns - 1
    if _beyond_last(column, row, layout):
        row = layout.last_row(column)
    return Cursor(column, row)


def move_right(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    column, row = cursor.column + 1, cursor.row
    if column >= layout.columns:
        column = 0
    if _beyond_last(column, row, layout):
        row = layout.last_row(column)
    return Cursor(column, row)


def move_top(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    return Cursor(cursor.column, 0)


def move_bottom(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    return Cursor(cursor.column, layout.last_row(cursor.column))


def move_leftmost(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    return Cursor(0, cursor.row)


def move_rightmost(cursor: Cursor, layout: GridLayout) -> Cursor:
    if layout.count == 0:
        return Cursor()
    column = layout.columns - 1
    row = cursor.row
    if _beyond_last(column, row, layout):
        row = layout.last_row(column)
    return Cursor(column, row)


def clamp(cursor: Cursor, layout: GridLayout) -> Cursor:
    """Pull a cursor back onto a real cell (e.g. a restored position in a
    directory that has since lost entries)."""
    if layout.count == 0:
        return Cursor()
    if layout.contains(cursor.column, cursor.row):
        return cursor
    return Cursor(*layout.cell(layout.count - 1))


def scroll_offset(row: int, offset: int, rows: int, height: int) -> int:
    """Adjust the first visible row so that ``row`` stays on screen."""
    if height <= 0:
        return 0
    if row >= offset + height:
        offset = row - height + 1
    if row < offset:
        offset = row
    if rows > height and offset > rows - height:
        offset = rows - height
    return max(offset, 0)


MOVES = {
    "up": move_up,
    "down": move_down,
    "left": move_left,
    "right": move_right,
    "top": move_top,
    "bottom": move_bottom,
    "leftmost": move_leftmost,
    "rightmost": move_rightmost,
}
