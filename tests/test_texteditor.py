from __future__ import annotations

from unosim.texteditor import CURSOR, TextEditor


def _type(editor: TextEditor, text: str) -> None:
    for char in text:
        editor.insert_char(char)


def test_empty_editor_shows_only_cursor() -> None:
    editor = TextEditor()

    assert editor.get_text_with_cursor() == CURSOR == "|"
    assert len(editor) == 0


def test_insert_places_characters_before_cursor() -> None:
    editor = TextEditor()
    _type(editor, "abc")

    assert editor.get_text_with_cursor() == "abc|"
    assert editor.cursor == 3


def test_move_and_insert_in_the_middle() -> None:
    editor = TextEditor()
    _type(editor, "acd")
    editor.move_left()
    editor.move_left()
    editor.insert_char("b")

    assert editor.get_text_with_cursor() == "ab|cd"
    editor.move_right()
    assert editor.get_text_with_cursor() == "abc|d"
    assert editor.text == "abcd"


def test_delete_removes_character_before_cursor() -> None:
    editor = TextEditor()
    _type(editor, "abc")
    editor.move_left()
    editor.delete_char()

    assert editor.get_text_with_cursor() == "a|c"


def test_edge_operations_are_noops() -> None:
    editor = TextEditor()
    editor.delete_char()
    editor.move_left()
    editor.move_right()
    assert editor.get_text_with_cursor() == "|"

    _type(editor, "xy")
    editor.move_right()
    assert editor.get_text_with_cursor() == "xy|"

    editor.move_left()
    editor.move_left()
    editor.move_left()
    editor.delete_char()
    assert editor.get_text_with_cursor() == "|xy"


def test_insert_multiple_characters_at_once() -> None:
    editor = TextEditor("hello")
    editor.insert_char(" world")

    assert editor.get_text_with_cursor() == "hello world|"
    assert len(editor) == 11
