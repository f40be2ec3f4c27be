"""Tests for user configuration loading."""

import json
import logging

from joskilo.config import EditorConfig
from joskilo.constants import EditorConstants


def write_config(tmp_path, data):
    path = tmp_path / "config.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_missing_file_gives_defaults(tmp_path):
    config = EditorConfig.load(tmp_path / "config.json")
    assert config.message_timeout == EditorConstants.MESSAGE_TIMEOUT
    assert config.filename_width == EditorConstants.FILENAME_WIDTH
    assert config.log_level == "WARNING"


def test_valid_overrides_are_applied(tmp_path):
    path = write_config(tmp_path, {"message_timeout": 2.5, "filename_width": 30, "log_level": "debug"})
    config = EditorConfig.load(path)
    assert config.message_timeout == 2.5
    assert config.filename_width == 30
    assert config.log_level == "DEBUG"


def test_invalid_values_are_ignored(tmp_path, caplog):
    path = write_config(tmp_path, {
        "message_timeout": -1,
        "filename_width": True,
        "log_level": "chatty",
        "colour": "red",
    })
    with caplog.at_level(logging.WARNING, logger="joskilo.config"):
        config = EditorConfig.load(path)
    assert config == EditorConfig()
    assert len(caplog.records) == 4


def test_malformed_json_is_ignored(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="joskilo.config"):
        config = EditorConfig.load(path)
    assert config == EditorConfig()
    assert "Could not load config" in caplog.text


def test_non_dict_config_is_ignored(tmp_path, caplog):
    path = write_config(tmp_path, ["message_timeout", 3])
    with caplog.at_level(logging.WARNING, logger="joskilo.config"):
        config = EditorConfig.load(path)
    assert config == EditorConfig()
    assert "invalid format" in caplog.text
