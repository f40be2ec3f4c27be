"""User configuration for the editor.

Optional overrides are read from a JSON file in the OS-appropriate user
config directory. A missing file means defaults; a broken file or a bad
value is logged and ignored so the editor always starts.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)

APP_NAME = "joskilo"


def config_dir() -> Path:
    """Directory holding ``config.json``."""
    return Path(platformdirs.user_config_dir(APP_NAME))


def log_dir() -> Path:
    """Directory holding the editor log file."""
    return Path(platformdirs.user_log_dir(APP_NAME))


@dataclass
class EditorConfig:
    """Settings the user may override."""
    message_timeout: float = EditorConstants.MESSAGE_TIMEOUT
    filename_width: int = EditorConstants.FILENAME_WIDTH
    log_level: str = EditorConstants.DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "EditorConfig":
        """Load configuration from ``path`` (default: the user config file).

        Returns:
            A config with every valid override applied on top of the defaults.
        """
        if path is None:
            path = config_dir() / EditorConstants.CONFIG_FILE_NAME
        config = cls()
        if not path.exists():
            return config

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not load config from {path}: {e}")
            return config

        if not isinstance(data, dict):
            logger.warning("Config file has invalid format (not a dict), ignoring")
            return config

        config.apply(data)
        return config

    def apply(self, data: Dict[str, Any]) -> None:
        """Apply valid overrides from ``data``; invalid ones are logged."""
        for key, value in data.items():
            if not self.validate_setting(key, value):
                logger.warning(f"Ignoring invalid config value {key}={value!r}")
                continue
            if key == 'log_level':
                value = value.upper()
            setattr(self, key, value)

    @staticmethod
    def validate_setting(key: str, value: Any) -> bool:
        """Return True if ``value`` is acceptable for ``key``."""
        if key == 'message_timeout':
            return (isinstance(value, (int, float)) and not isinstance(value, bool)
                    and value > 0)
        if key == 'filename_width':
            return isinstance(value, int) and not isinstance(value, bool) and value > 0
        if key == 'log_level':
            return (isinstance(value, str)
                    and isinstance(logging.getLevelName(value.upper()), int))
        # Unknown keys are rejected so typos show up in the log
        return False
