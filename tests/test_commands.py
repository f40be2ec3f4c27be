"""Tests for key-to-command bindings."""

from unittest.mock import Mock

import pytest
from joskilo.commands import (
    BackspaceCommand,
    CommandRegistry,
    DeleteCharCommand,
    InsertNewlineCommand,
    MoveCommand,
    QuitCommand,
    SaveCommand,
)
from joskilo.cursor import Direction
from joskilo.keyboard import KeyEvent, KeyType


@pytest.mark.parametrize("name,direction", [
    ('up', Direction.UP),
    ('down', Direction.DOWN),
    ('left', Direction.LEFT),
    ('right', Direction.RIGHT),
    ('page_up', Direction.PAGE_UP),
    ('page_down', Direction.PAGE_DOWN),
    ('home', Direction.HOME),
    ('end', Direction.END),
])
def test_navigation_bindings(name, direction):
    command = CommandRegistry().get_command(KeyType.SPECIAL, name)
    assert isinstance(command, MoveCommand)
    assert command.direction is direction


def test_edit_and_system_bindings():
    r = CommandRegistry()
    assert isinstance(r.get_command(KeyType.SPECIAL, 'enter'), InsertNewlineCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'delete'), DeleteCharCommand)
    assert isinstance(r.get_command(KeyType.SPECIAL, 'backspace'), BackspaceCommand)
    assert isinstance(r.get_command(KeyType.CTRL, 'q'), QuitCommand)
    assert isinstance(r.get_command(KeyType.CTRL, 's'), SaveCommand)


def test_regular_key_falls_back_to_insert():
    editor = Mock()
    CommandRegistry().execute(editor, KeyEvent(key_type=KeyType.REGULAR, value='a', raw='a'))
    editor.insert_char.assert_called_once_with('a')


def test_control_characters_are_not_inserted():
    editor = Mock()
    CommandRegistry().execute(editor, KeyEvent(key_type=KeyType.REGULAR, value='\x00', raw='\x00'))
    editor.insert_char.assert_not_called()


def test_enter_inserts_newline():
    editor = Mock()
    CommandRegistry().execute(editor, KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw='\n'))
    editor.insert_char.assert_called_once_with('\n')


def test_movement_moves_cursor():
    editor = Mock()
    CommandRegistry().execute(editor, KeyEvent(key_type=KeyType.SPECIAL, value='left', raw='<LEFT>'))
    editor.move_cursor.assert_called_once_with(Direction.LEFT)


def test_ctrl_s_goes_through_handle_save():
    editor = Mock()
    CommandRegistry().execute(editor, KeyEvent(key_type=KeyType.CTRL, value='s', raw='\x13'))
    editor.handle_save.assert_called_once_with()
    editor.save.assert_not_called()


def test_ctrl_q_requests_quit():
    editor = Mock()
    CommandRegistry().execute(editor, KeyEvent(key_type=KeyType.CTRL, value='q', raw='\x11'))
    editor.request_quit.assert_called_once_with()


def test_unbound_keys_do_nothing():
    editor = Mock()
    r = CommandRegistry()
    r.execute(editor, KeyEvent(key_type=KeyType.CTRL, value='z', raw='\x1a'))
    r.execute(editor, KeyEvent(key_type=KeyType.SPECIAL, value='insert', raw='<INSERT>'))
    r.execute(editor, KeyEvent(key_type=KeyType.SPECIAL, value='esc-b', raw='<Esc+b>'))
    assert editor.method_calls == []


def test_register_overrides_binding():
    r = CommandRegistry()
    custom = Mock()
    r.register((KeyType.CTRL, 'q'), custom)
    assert r.get_command(KeyType.CTRL, 'q') is custom
