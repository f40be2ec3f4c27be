"""Joskilo CLI entry point.

Allows running via `python -m joskilo` and provides the console script
defined in `pyproject.toml`.

Usage:
    joskilo [filename]
    joskilo --version
    joskilo --keytest
"""

from __future__ import annotations

import logging
import sys
import termios
from typing import Optional

from .config import EditorConfig, log_dir
from .constants import EditorConstants
from .version import get_version_string

logger = logging.getLogger(__name__)


def _escape_bytes(s: str) -> str:
    """Return a printable representation of raw key string."""
    return s.encode('unicode_escape').decode('ascii')


def configure_logging(config: EditorConfig) -> None:
    """Send log records to a file; the screen belongs to the editor."""
    directory = log_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError:
        logging.basicConfig(handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        filename=str(directory / EditorConstants.LOG_FILE_NAME),
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def run_keyboard_test(terminal=None) -> None:
    """Print parsed key events until Ctrl-Q is pressed."""
    from .keyboard import KeyboardHandler, KeyType
    from .terminal import TerminalInterface

    term = terminal or TerminalInterface()
    with term:
        term.write("Keyboard test mode - press keys to see parsed events.\r\n")
        term.write("Quit with Ctrl-Q.\r\n")
        term.flush()
        kb = KeyboardHandler(term)
        while True:
            ev = kb.get_key_event()
            if not ev:
                continue
            if ev.key_type == KeyType.CTRL and ev.value == 'q':
                break
            parts = [f"type={ev.key_type.value}", f"value={_escape_bytes(ev.value)}",
                     f"raw='{_escape_bytes(ev.raw)}'"]
            term.write(' '.join(parts) + "\r\n")
            term.flush()


def main(argv: Optional[list[str]] = None) -> int:
    # Very small arg parsing: version, key test mode and optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0

    config = EditorConfig.load()
    configure_logging(config)

    if not sys.stdin.isatty():
        print("joskilo: standard input is not a terminal", file=sys.stderr)
        return 1

    try:
        if args and args[0] in ('--keytest', '--keyboard-test'):
            run_keyboard_test()
            return 0

        from .editor import Editor
        editor = Editor(config=config)
        if args:
            editor.load_file(args[0])
        editor.run()
    except KeyboardInterrupt:
        return 130
    except (OSError, termios.error) as e:
        # The terminal has already been restored by the context manager
        logger.exception("Fatal terminal error")
        print(f"joskilo: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
