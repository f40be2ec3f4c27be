"""Cursor movement and viewport scrolling in grapheme/line coordinates."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .buffer import Buffer


@dataclass
class Position:
    """Zero-based (column, row) pair.

    Columns count grapheme clusters, rows count lines. The same type is
    used for the edit cursor and for the viewport's top-left offset.
    """
    x: int = 0
    y: int = 0


class Direction(Enum):
    """Cursor movements. Values match the special key names."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    HOME = "home"
    END = "end"


def _row_length(buffer: Buffer, y: int) -> int:
    line = buffer.row(y)
    return len(line) if line is not None else 0


def move_cursor(position: Position, direction: Direction, buffer: Buffer,
                viewport_height: int) -> Position:
    """Return the position reached by moving ``position`` in ``direction``.

    The row may go one past the last line (the empty row where typing
    appends a new line). After any move the column is clamped to the length
    of the row the cursor ends up on.

    Args:
        position: Current cursor position
        direction: Movement to apply
        buffer: Document being edited
        viewport_height: Number of text rows on screen, used for paging

    Returns:
        The new cursor position
    """
    x, y = position.x, position.y
    height = len(buffer)
    width = _row_length(buffer, y)

    if direction is Direction.UP:
        y = max(y - 1, 0)
    elif direction is Direction.DOWN:
        if y < height:
            y += 1
    elif direction is Direction.LEFT:
        if x > 0:
            x -= 1
        elif y > 0:
            y -= 1
            x = _row_length(buffer, y)
    elif direction is Direction.RIGHT:
        if x < width:
            x += 1
        elif y < height:
            y += 1
            x = 0
    elif direction is Direction.PAGE_UP:
        y = max(y - viewport_height, 0)
    elif direction is Direction.PAGE_DOWN:
        y = min(y + viewport_height, height)
    elif direction is Direction.HOME:
        x = 0
    elif direction is Direction.END:
        x = width

    x = min(x, _row_length(buffer, y))
    return Position(x, y)


def scroll(cursor: Position, offset: Position, width: int, height: int) -> Position:
    """Return the viewport offset that keeps ``cursor`` on screen.

    Each axis moves independently and only as far as needed: a cursor before
    the window pulls the offset back to it, a cursor past the window pushes
    the offset forward by exactly the overshoot.
    """
    x, y = offset.x, offset.y
    width, height = max(width, 1), max(height, 1)
    if cursor.y < y:
        y = cursor.y
    elif cursor.y >= y + height:
        y = cursor.y - height + 1
    if cursor.x < x:
        x = cursor.x
    elif cursor.x >= x + width:
        x = cursor.x - width + 1
    return Position(x, y)
