"""Main editor controller for the line editor."""

import logging
import time
from dataclasses import dataclass
from typing import Optional

from . import cursor
from .buffer import Buffer
from .commands import CommandRegistry, QuitCommand
from .config import EditorConfig
from .constants import EditorConstants
from .cursor import Direction, Position
from .keyboard import KeyboardHandler, KeyEvent, KeyType
from .line import Line
from .terminal import TerminalInterface
from .version import get_version

logger = logging.getLogger(__name__)


@dataclass
class StatusMessage:
    """Transient message shown in the message bar."""
    text: str
    time: float

    def is_visible(self, timeout: float, now: Optional[float] = None) -> bool:
        if now is None:
            now = time.monotonic()
        return now - self.time < timeout


class Editor:
    """Line editor application controller.

    The editor object is the single owner of the session state: buffer,
    cursor position, viewport offset and status message. Commands receive
    it explicitly.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 config: Optional[EditorConfig] = None):
        """Initialize the editor components."""
        self.config = config or EditorConfig()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.buffer = Buffer()
        self.cursor_position = Position()
        self.offset = Position()
        self.running = False
        self.quit_times = EditorConstants.QUIT_TIMES
        self.prompting = False  # Message bar is reading a file name
        self.prompt_input = ""
        self.set_status(EditorConstants.HELP_MESSAGE)

    def set_status(self, text: str):
        """Show ``text`` in the message bar for the configured timeout."""
        self.status_message = StatusMessage(text, time.monotonic())

    def load_file(self, filename: str):
        """Load a file into the editor.

        A failure leaves an empty buffer and reports it in the message bar.
        A path that does not exist yet stays associated so saving creates it.

        Args:
            filename: Path to file to load
        """
        try:
            self.buffer = Buffer.open(filename)
        except FileNotFoundError as e:
            logger.warning("Could not open %s: %s", filename, e)
            self.buffer = Buffer(filename=filename)
            self.set_status(EditorConstants.OPEN_FAILED_MESSAGE.format(filename))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not open %s: %s", filename, e)
            self.buffer = Buffer()
            self.set_status(EditorConstants.OPEN_FAILED_MESSAGE.format(filename))
        self.cursor_position = Position()
        self.offset = Position()

    def run(self):
        """Run the main editor loop until quit.

        Terminal errors propagate after the terminal has been restored.
        """
        with self.terminal:
            self.running = True
            while True:
                self.refresh_screen()
                if not self.running:
                    break
                self.process_keypress()

    def process_keypress(self):
        """Read one key event, dispatch it and keep the cursor on screen."""
        key_event = self.keyboard.get_key_event()
        if key_event:
            self._handle_key_event(key_event)
        self.scroll()

    def _handle_key_event(self, key_event: KeyEvent):
        logger.debug("Key event %s", key_event)
        if self.prompting:
            self._handle_save_prompt(key_event)
            return

        command = self.command_registry.get_command(key_event.key_type, key_event.value)
        if not isinstance(command, QuitCommand):
            self.quit_times = EditorConstants.QUIT_TIMES
        self.command_registry.execute(self, key_event)

    # --- Operations invoked by commands ---

    def move_cursor(self, direction: Direction):
        _, height = self.terminal.size()
        self.cursor_position = cursor.move_cursor(
            self.cursor_position, direction, self.buffer, height
        )

    def insert_char(self, char: str):
        """Insert at the cursor and step over the inserted character."""
        self.buffer.insert(self.cursor_position, char)
        self.move_cursor(Direction.RIGHT)

    def delete_forward(self):
        self.buffer.delete(self.cursor_position)

    def backspace(self):
        """Delete the character before the cursor, joining lines at column 0."""
        if self.cursor_position.x > 0 or self.cursor_position.y > 0:
            self.move_cursor(Direction.LEFT)
            self.buffer.delete(self.cursor_position)

    def handle_save(self):
        """Save to the buffer's file, or ask for a name if it has none."""
        if self.buffer.filename:
            self.save()
        else:
            self.prompting = True
            self.prompt_input = ""

    def save(self, filename: Optional[str] = None) -> bool:
        """Write the buffer to disk and report the outcome.

        Args:
            filename: New path to associate with the buffer, if any

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            if filename:
                self.buffer.save_as(filename)
            else:
                self.buffer.save()
        except OSError as e:
            logger.warning("Could not save %s: %s", filename or self.buffer.filename, e)
            self.set_status(EditorConstants.SAVE_FAILED_MESSAGE.format(e.strerror or e))
            return False
        self.set_status(EditorConstants.SAVE_OK_MESSAGE)
        return True

    def request_quit(self):
        """Quit, unless unsaved changes still need confirming."""
        if self.buffer.modified and self.quit_times > 0:
            self.set_status(EditorConstants.QUIT_WARNING_MESSAGE.format(self.quit_times))
            self.quit_times -= 1
            return
        self.running = False

    def _handle_save_prompt(self, key_event: KeyEvent):
        """Handle keypress during the file name prompt."""
        if (key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape') or \
           (key_event.key_type == KeyType.CTRL and key_event.value == 'g'):
            self.prompting = False
            self.prompt_input = ""
            self.set_status(EditorConstants.SAVE_ABORTED_MESSAGE)
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            filename = self.prompt_input
            self.prompting = False
            self.prompt_input = ""
            if filename:
                self.save(filename)
            else:
                self.set_status(EditorConstants.SAVE_ABORTED_MESSAGE)
        elif key_event.key_type == KeyType.SPECIAL and key_event.value == 'backspace':
            self.prompt_input = self.prompt_input[:-1]
        elif key_event.key_type == KeyType.REGULAR:
            char = key_event.value
            if ord(char[0]) >= 32:
                self.prompt_input += char

    def scroll(self):
        width, height = self.terminal.size()
        self.offset = cursor.scroll(self.cursor_position, self.offset, width, height)

    # --- Rendering ---

    def refresh_screen(self):
        """Draw the current editor state to terminal."""
        term = self.terminal
        term.hide_cursor()
        term.set_cursor_position(Position())
        if not self.running:
            term.clear_screen()
        else:
            self.draw_rows()
            self.draw_status_bar()
            self.draw_message_bar()
            if self.prompting:
                _, height = term.size()
                prompt = EditorConstants.SAVE_PROMPT.format(self.prompt_input)
                term.set_cursor_position(Position(len(prompt), height + 1))
            else:
                term.set_cursor_position(Position(
                    self.cursor_position.x - self.offset.x,
                    self.cursor_position.y - self.offset.y,
                ))
        term.show_cursor()
        term.flush()

    def draw_rows(self):
        width, height = self.terminal.size()
        for terminal_row in range(height):
            self.terminal.set_cursor_position(Position(0, terminal_row))
            self.terminal.clear_current_line()
            line = self.buffer.row(terminal_row + self.offset.y)
            if line is not None:
                self.draw_line(line, width)
            elif self.buffer.is_empty() and terminal_row == height // 3:
                self.draw_welcome_message(width)
            else:
                self.terminal.write(EditorConstants.EMPTY_ROW_MARKER)

    def draw_line(self, line: Line, width: int):
        start = self.offset.x
        self.terminal.write(line.render(start, start + width))

    def draw_welcome_message(self, width: int):
        message = EditorConstants.WELCOME_MESSAGE.format(get_version())
        padding = max(width - len(message), 0) // 2
        spaces = " " * max(padding - 1, 0)
        self.terminal.write(f"{EditorConstants.EMPTY_ROW_MARKER}{spaces}{message}"[:width])

    def status_text(self, width: int) -> str:
        """Compose the status bar: file name and size left, line indicator right."""
        if self.buffer.filename:
            filename = self.buffer.filename[:self.config.filename_width]
        else:
            filename = EditorConstants.NO_NAME
        modified = " (modified)" if self.buffer.modified else ""
        status = f"{filename} - {len(self.buffer)} lines{modified}"
        line_indicator = f"{self.cursor_position.y + 1}/{len(self.buffer)}"
        padding = " " * max(width - len(status) - len(line_indicator), 0)
        return f"{status}{padding}{line_indicator}"[:width]

    def draw_status_bar(self):
        term = self.terminal
        width, height = term.size()
        term.set_cursor_position(Position(0, height))
        term.set_background(EditorConstants.STATUS_BG_COLOR)
        term.set_foreground(EditorConstants.STATUS_FG_COLOR)
        term.write(self.status_text(width))
        term.reset_foreground()
        term.reset_background()

    def draw_message_bar(self):
        term = self.terminal
        width, height = term.size()
        term.set_cursor_position(Position(0, height + 1))
        term.clear_current_line()
        if self.prompting:
            term.write(EditorConstants.SAVE_PROMPT.format(self.prompt_input)[:width])
        elif self.status_message.is_visible(self.config.message_timeout):
            term.set_foreground(EditorConstants.MESSAGE_FG_COLOR)
            term.write(self.status_message.text[:width])
            term.reset_foreground()
