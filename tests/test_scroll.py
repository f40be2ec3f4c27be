"""Tests for viewport scrolling."""

import pytest
from joskilo.cursor import Position, scroll


@pytest.mark.parametrize("row,offset,expected", [
    (0, 0, 0),      # Inside window
    (4, 0, 0),      # Last visible row
    (5, 0, 1),      # One past the window: overshoot by one
    (12, 0, 8),     # Far below: R - H + 1
    (3, 6, 3),      # Above the window: jump to cursor
    (7, 6, 6),      # Inside a scrolled window
])
def test_vertical_offset(row, offset, expected):
    new = scroll(Position(0, row), Position(0, offset), width=80, height=5)
    assert new.y == expected


@pytest.mark.parametrize("column,offset,expected", [
    (79, 0, 0),
    (80, 0, 1),
    (100, 0, 21),
    (5, 10, 5),
])
def test_horizontal_offset(column, offset, expected):
    new = scroll(Position(column, 0), Position(offset, 0), width=80, height=5)
    assert new.x == expected


def test_axes_are_independent():
    new = scroll(Position(100, 2), Position(0, 0), width=80, height=5)
    assert new == Position(21, 0)


def test_zero_height_window_still_shows_cursor_row():
    new = scroll(Position(0, 3), Position(0, 0), width=80, height=0)
    assert new.y == 3
