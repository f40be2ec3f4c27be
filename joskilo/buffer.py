"""Document buffer: ordered lines plus the file they came from."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional

from .line import Line

if TYPE_CHECKING:
    from .cursor import Position

logger = logging.getLogger(__name__)


class NoFileNameError(OSError):
    """Raised when saving a buffer that has no associated path."""


def split_lines(content: str) -> List[str]:
    """Split file content into lines.

    Lines end with ``\\n`` or ``\\r\\n``. A final line ending does not start
    an extra empty line, so empty content has no lines at all. A ``\\r``
    that is not followed by ``\\n`` is ordinary text.
    """
    segments = content.split("\n")
    last = segments.pop()
    lines = [s[:-1] if s.endswith("\r") else s for s in segments]
    if last:
        lines.append(last)
    return lines


class Buffer:
    """An ordered sequence of :class:`Line` objects and an optional path.

    Edit operations take a :class:`~joskilo.cursor.Position` and never raise.
    Positions outside the valid domain of an operation are ignored. The
    insertion domain includes the row one past the last line, which is how
    typing there materializes a new trailing line.
    """

    def __init__(self, lines: Optional[List[Line]] = None, filename: Optional[str] = None):
        self.lines: List[Line] = lines if lines is not None else []
        self.filename = filename
        self.modified = False

    @classmethod
    def open(cls, filename: str) -> "Buffer":
        """Load ``filename`` into a new buffer.

        Raises:
            OSError: The file is missing or unreadable.
            UnicodeDecodeError: The file is not valid UTF-8.
        """
        with open(filename, "r", encoding="utf-8", newline="") as f:
            content = f.read()
        lines = [Line(text) for text in split_lines(content)]
        logger.info("Loaded %s (%d lines)", filename, len(lines))
        return cls(lines, filename=filename)

    def save(self) -> None:
        """Overwrite the associated file with the buffer contents.

        Every line, including the last, is written with a trailing newline.

        Raises:
            NoFileNameError: No path is associated with the buffer.
            OSError: The file could not be written.
        """
        if not self.filename:
            raise NoFileNameError("No file name")
        with open(self.filename, "w", encoding="utf-8", newline="") as f:
            for line in self.lines:
                f.write(line.text)
                f.write("\n")
        self.modified = False
        logger.info("Saved %s (%d lines)", self.filename, len(self.lines))

    def save_as(self, filename: str) -> None:
        """Save to ``filename`` and keep it as the buffer's path.

        The previous path is kept if writing fails.
        """
        previous = self.filename
        self.filename = filename
        try:
            self.save()
        except OSError:
            self.filename = previous
            raise

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self.lines)

    def is_empty(self) -> bool:
        return not self.lines

    def row(self, index: int) -> Optional[Line]:
        """Return the line at ``index``, or None outside the document."""
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None

    def insert(self, at: "Position", character: str) -> None:
        if character == "\n":
            self.insert_newline(at)
            return
        if at.y == len(self.lines):
            line = Line()
            line.insert(0, character)
            self.lines.append(line)
        elif at.y < len(self.lines):
            self.lines[at.y].insert(at.x, character)
        else:
            return
        self.modified = True

    def insert_newline(self, at: "Position") -> None:
        """Break the line at ``at``; the suffix becomes the following line."""
        if at.y == len(self.lines):
            self.lines.append(Line())
        elif at.y < len(self.lines):
            remainder = self.lines[at.y].split(at.x)
            self.lines.insert(at.y + 1, remainder)
        else:
            return
        self.modified = True

    def delete(self, at: "Position") -> None:
        """Delete the character at ``at``.

        At the end of a line that has a successor, the successor is merged
        into it. At the end of the last line nothing happens.
        """
        if at.y >= len(self.lines):
            return
        line = self.lines[at.y]
        if at.x >= len(line):
            if at.y + 1 >= len(self.lines):
                return
            following = self.lines.pop(at.y + 1)
            line.append(following)
        else:
            line.delete(at.x)
        self.modified = True
