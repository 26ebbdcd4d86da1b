"""Tests for the markup character cursor."""

from emojiscript.markup.scanner import Cursor, is_identifier_char


class TestCursorPositions:
    """Line and column tracking."""

    def test_starts_at_line_one_column_one(self):
        cursor = Cursor("abc")
        assert (cursor.pos, cursor.line, cursor.column) == (0, 1, 1)

    def test_newline_resets_column(self):
        cursor = Cursor("a\nb")
        cursor.advance()
        cursor.advance()
        assert cursor.line == 2
        assert cursor.column == 1
        assert cursor.peek() == "b"

    def test_advance_at_end_returns_none(self):
        cursor = Cursor("x")
        assert cursor.advance() == "x"
        assert cursor.advance() is None
        assert cursor.at_end()

    def test_peek_offset_past_end(self):
        cursor = Cursor("ab")
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) is None

    def test_save_and_restore(self):
        cursor = Cursor("one\ntwo")
        mark = cursor.save()
        cursor.read_until("w")
        assert cursor.line == 2
        cursor.restore(mark)
        assert (cursor.pos, cursor.line, cursor.column) == (0, 1, 1)


class TestCursorReads:
    """Identifier and attribute value reads."""

    def test_identifier_stops_at_space(self):
        cursor = Cursor("data-id rest")
        assert cursor.read_identifier() == "data-id"
        assert cursor.peek() == " "

    def test_identifier_empty_when_absent(self):
        assert Cursor("=x").read_identifier() == ""

    def test_double_quoted_value(self):
        assert Cursor('"a b"').read_attribute_value() == "a b"

    def test_single_quoted_value(self):
        assert Cursor("'x > 1'").read_attribute_value() == "x > 1"

    def test_backslash_escape_keeps_escaped_char(self):
        assert Cursor('"say \\"hi\\""').read_attribute_value() == 'say "hi"'

    def test_unquoted_value_stops_at_gt(self):
        cursor = Cursor("5>rest")
        assert cursor.read_attribute_value() == "5"
        assert cursor.peek() == ">"

    def test_unquoted_value_stops_at_whitespace(self):
        assert Cursor("  10 other").read_attribute_value() == "10"

    def test_read_until_end_of_input(self):
        cursor = Cursor("no tags here")
        assert cursor.read_until("<") == "no tags here"
        assert cursor.at_end()


def test_identifier_chars():
    assert is_identifier_char("a")
    assert is_identifier_char("Z")
    assert is_identifier_char("7")
    assert is_identifier_char("-")
    assert is_identifier_char("_")
    assert not is_identifier_char(" ")
    assert not is_identifier_char("/")
    assert not is_identifier_char(None)
