"""Terminal interface using Blessed for display and Curtsies for input."""

import sys
import termios
from collections import deque
from typing import Optional, Tuple

import blessed

from .constants import EditorConstants


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Use as a context manager: entering switches to the fullscreen buffer and
    raw key input, leaving restores the terminal exactly as it was, whether
    the block exits normally or with an exception.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None, stream=None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.stream = stream or sys.stdout
        self.is_fullscreen = False
        self._curtsies_input: Optional[object] = None
        self._saved_tty: Optional[list] = None
        self._pending_keys: deque = deque()

    def __enter__(self) -> "TerminalInterface":
        try:
            self.setup()
        except BaseException:
            self.cleanup()
            raise
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.cleanup()
        return False

    def setup(self):
        """Enter raw input mode and fullscreen."""
        from curtsies import Input

        fd = sys.stdin.fileno()
        self._saved_tty = termios.tcgetattr(fd)
        # Curtsies switches stdin to cbreak mode on enter
        self._curtsies_input = Input(keynames='curtsies')
        self._curtsies_input.__enter__()

        new_settings = termios.tcgetattr(fd)
        # Disable IXON/IXOFF so Ctrl-S and Ctrl-Q reach the editor, and
        # IEXTEN so Ctrl-V/Ctrl-O are not eaten by the tty driver
        new_settings[0] &= ~(termios.IXON | termios.IXOFF)
        new_settings[3] &= ~termios.IEXTEN
        termios.tcsetattr(fd, termios.TCSANOW, new_settings)

        self.write(self.term.enter_fullscreen + self.term.clear)
        self.is_fullscreen = True
        self.flush()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self.is_fullscreen:
            self.write(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor)
            self.flush()
            self.is_fullscreen = False
        self._pending_keys.clear()
        try:
            if self._curtsies_input is not None:
                self._curtsies_input.__exit__(None, None, None)
        finally:
            self._curtsies_input = None
            if self._saved_tty is not None:
                saved, self._saved_tty = self._saved_tty, None
                termios.tcsetattr(sys.stdin.fileno(), termios.TCSANOW, saved)

    def read_key(self) -> str:
        """Block until a key arrives and return its curtsies token.

        Pasted text arrives from curtsies as a single event; its keys are
        handed out one per call.

        Raises:
            OSError: Input is not active or reading from the terminal failed.
        """
        if self._pending_keys:
            return self._pending_keys.popleft()
        if self._curtsies_input is None:
            raise OSError("terminal input is not active")
        while True:
            event = next(self._curtsies_input)
            events = getattr(event, 'events', None)
            if events is not None:
                self._pending_keys.extend(events)
                if not self._pending_keys:
                    continue
                return self._pending_keys.popleft()
            if isinstance(event, str):
                return event

    def size(self) -> Tuple[int, int]:
        """Width and height of the text area (status rows excluded)."""
        return self.term.width, max(self.term.height - EditorConstants.RESERVED_ROWS, 0)

    def write(self, text: str):
        print(text, end='', file=self.stream)

    def set_cursor_position(self, position):
        self.write(self.term.move_xy(position.x, position.y))

    def clear_screen(self):
        """Clear the entire screen."""
        self.write(self.term.home + self.term.clear)

    def clear_current_line(self):
        self.write(self.term.clear_eol)

    def set_foreground(self, color: Tuple[int, int, int]):
        self.write(self.term.color_rgb(*color))

    def set_background(self, color: Tuple[int, int, int]):
        self.write(self.term.on_color_rgb(*color))

    def reset_foreground(self):
        self.write(self.term.normal)

    def reset_background(self):
        self.write(self.term.normal)

    def hide_cursor(self):
        self.write(self.term.hide_cursor)

    def show_cursor(self):
        self.write(self.term.normal_cursor)

    def flush(self):
        self.stream.flush()
