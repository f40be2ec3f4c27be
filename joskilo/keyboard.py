"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"  # Text carried in ``value``
    CTRL = "ctrl"  # Ctrl plus a letter, the letter in ``value``
    SPECIAL = "special"  # Named keys: arrows, paging, enter, backspace...


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The character for REGULAR events, the key name otherwise
    raw: str  # The token as read from the terminal


# Curtsies spellings that differ from the names commands are bound to
NAME_ALIASES = {
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'esc': 'escape',
}

# Named keys that produce text
TEXT_NAMES = {
    'space': ' ',
    'tab': '\t',
}

# Ctrl letters the terminal sends for keys of their own
CONTROL_KEYS = {
    'h': 'backspace',
    'j': 'enter',
    'm': 'enter',
}


def control_event(letter: str, raw: str) -> KeyEvent:
    """Event for Ctrl plus ``letter``."""
    if letter == 'i':
        return KeyEvent(KeyType.REGULAR, '\t', raw)
    if letter in CONTROL_KEYS:
        return KeyEvent(KeyType.SPECIAL, CONTROL_KEYS[letter], raw)
    return KeyEvent(KeyType.CTRL, letter, raw)


class KeyboardHandler:
    """Turns terminal key tokens into :class:`KeyEvent` objects."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and parse it.

        Returns None for empty tokens. Errors from the terminal propagate.
        """
        key = self.terminal.read_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: Token such as ``'<UP>'``, ``'<Ctrl-q>'``, ``'\\x11'`` or ``'a'``
        """
        key = str(key)
        if len(key) > 2 and key.startswith('<') and key.endswith('>'):
            return self.parse_name(key)

        if len(key) == 1:
            code = ord(key)
            if 1 <= code <= 26:
                return control_event(chr(ord('a') + code - 1), key)
            if code == 27:
                return KeyEvent(KeyType.SPECIAL, 'escape', key)
            if code == 127:
                return KeyEvent(KeyType.SPECIAL, 'backspace', key)

        return KeyEvent(KeyType.REGULAR, key, key)

    def parse_name(self, token: str) -> KeyEvent:
        """Parse a bracketed name like ``'<PAGEUP>'`` or ``'<Esc+b>'``."""
        *mods, base = token[1:-1].lower().replace('+', '-').split('-')
        base = NAME_ALIASES.get(base, base)

        if not mods:
            if base in TEXT_NAMES:
                return KeyEvent(KeyType.REGULAR, TEXT_NAMES[base], token)
            return KeyEvent(KeyType.SPECIAL, base, token)
        if mods == ['ctrl'] and len(base) == 1:
            return control_event(base, token)
        # Alt, Meta and Shift chords keep their full name and have no binding
        return KeyEvent(KeyType.SPECIAL, '-'.join(mods + [base]), token)
