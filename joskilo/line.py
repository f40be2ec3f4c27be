"""A single line of text indexed by grapheme cluster."""

from __future__ import annotations

import grapheme


class Line:
    """One document row.

    Every index accepted or returned by this class counts user-perceived
    characters (extended grapheme clusters), never code points or bytes.
    A base letter followed by combining marks, or a multi-codepoint flag,
    is a single unit.
    """

    def __init__(self, text: str = ""):
        self._text = text
        self._length = 0
        self._update_length()

    def _update_length(self) -> None:
        self._length = grapheme.length(self._text)

    @property
    def text(self) -> str:
        """Raw content of the line."""
        return self._text

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Line({self._text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Line):
            return self._text == other._text
        return NotImplemented

    def is_empty(self) -> bool:
        return self._length == 0

    def render(self, start: int, end: int) -> str:
        """Return the visible clusters in ``[start, end)``.

        Bounds are clamped to the content; tabs are shown as a single space.
        """
        end = min(end, self._length)
        start = min(max(start, 0), end)
        visible = grapheme.slice(self._text, start, end)
        return visible.replace("\t", " ")

    def insert(self, at: int, character: str) -> None:
        """Insert ``character`` before the cluster at ``at``.

        Positions at or past the end append.
        """
        if at >= self._length:
            self._text += character
        else:
            head = grapheme.slice(self._text, 0, at)
            tail = grapheme.slice(self._text, at)
            self._text = head + character + tail
        self._update_length()

    def delete(self, at: int) -> None:
        """Remove the cluster at ``at``; nothing happens past the end."""
        if at >= self._length:
            return
        head = grapheme.slice(self._text, 0, at)
        tail = grapheme.slice(self._text, at + 1)
        self._text = head + tail
        self._update_length()

    def split(self, at: int) -> "Line":
        """Truncate this line at ``at`` and return the remainder as a new Line."""
        remainder = Line(grapheme.slice(self._text, at))
        self._text = grapheme.slice(self._text, 0, at)
        self._update_length()
        return remainder

    def append(self, other: "Line") -> None:
        """Concatenate ``other`` onto the end of this line."""
        self._text += other.text
        self._update_length()
