"""Constants and configuration defaults for the joskilo editor."""


class EditorConstants:
    """Central configuration constants for the editor."""

    # Colors as (r, g, b)
    STATUS_BG_COLOR = (239, 239, 239)
    STATUS_FG_COLOR = (0, 0, 255)
    MESSAGE_FG_COLOR = (255, 0, 0)

    # Screen layout
    RESERVED_ROWS = 2  # Status bar + message bar
    FILENAME_WIDTH = 20  # Characters of the file name shown in the status bar
    NO_NAME = "[No Name]"
    EMPTY_ROW_MARKER = "~"

    # Status messages
    MESSAGE_TIMEOUT = 5.0  # Seconds a status message stays visible
    HELP_MESSAGE = "Help: Ctrl+S = save | Ctrl+Q = quit"
    OPEN_FAILED_MESSAGE = "ERROR: Could not open file: {}"
    SAVE_OK_MESSAGE = "File saved successfully."
    SAVE_FAILED_MESSAGE = "Error writing file: {}"
    SAVE_ABORTED_MESSAGE = "Save aborted."
    SAVE_PROMPT = "Save as: {}"
    QUIT_WARNING_MESSAGE = (
        "WARNING! File has unsaved changes. "
        "Press Ctrl-Q {} more time to quit."
    )
    WELCOME_MESSAGE = "Joskilo editor -- version {}"

    # Unsaved-changes guard
    QUIT_TIMES = 1  # Extra Ctrl-Q presses needed when the buffer is modified

    # Logging
    DEFAULT_LOG_LEVEL = "WARNING"
    LOG_FILE_NAME = "joskilo.log"
    CONFIG_FILE_NAME = "config.json"
