"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .cursor import Direction
from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        """Execute the command.

        Args:
            editor: Editor instance holding all session state
            key_event: The key event that triggered this command
        """
        pass


class MoveCommand(EditorCommand):
    """Cursor movement in a fixed direction."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor, key_event):
        editor.move_cursor(self.direction)


class InsertTextCommand(EditorCommand):
    def execute(self, editor, key_event):
        char = key_event.value
        # Filter out control characters
        if char and (ord(char[0]) >= 32 or char == '\t'):
            editor.insert_char(char)


class InsertNewlineCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.insert_char('\n')


class DeleteCharCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.delete_forward()


class BackspaceCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.backspace()


class QuitCommand(EditorCommand):
    def execute(self, editor, key_event):
        editor.request_quit()


class SaveCommand(EditorCommand):
    """Save, prompting for a file name when the buffer has none."""

    def execute(self, editor, key_event):
        editor.handle_save()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._insert_text = InsertTextCommand()
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        for direction in Direction:
            self.register((KeyType.SPECIAL, direction.value), MoveCommand(direction))

        # Editing commands
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())
        self.register((KeyType.SPECIAL, 'delete'), DeleteCharCommand())
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> None:
        """Execute the command for the given key event.

        Regular characters without a binding are inserted; every other
        unbound key is ignored.
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command is None and key_event.key_type == KeyType.REGULAR:
            command = self._insert_text
        if command is not None:
            command.execute(editor, key_event)
