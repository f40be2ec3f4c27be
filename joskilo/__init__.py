"""Joskilo - A small terminal line editor."""

from .line import Line
from .buffer import Buffer, NoFileNameError
from .cursor import Position, Direction, move_cursor, scroll

__all__ = [
    'Line',
    'Buffer',
    'NoFileNameError',
    'Position',
    'Direction',
    'move_cursor',
    'scroll',
]
