"""Character cursor used by the markup parser.

The cursor owns the three pieces of scan state (offset, line, column) and
knows how to read the small lexical pieces of a tag: identifiers and
attribute values.  Speculative lookahead is done with :meth:`Cursor.save`
and :meth:`Cursor.restore`.
"""

from __future__ import annotations

from typing import NamedTuple, Optional

WHITESPACE = " \t\n\r"


def is_identifier_char(char: Optional[str]) -> bool:
    """Tag and attribute names use ASCII letters, digits, '-' and '_'."""
    if not char:
        return False
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or ("0" <= char <= "9") or char in "-_"


class Mark(NamedTuple):
    """A saved cursor position."""

    pos: int
    line: int
    column: int


class Cursor:
    """Left-to-right cursor over a source string with 1-based line/column."""

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1

    def at_end(self) -> bool:
        return self.pos >= len(self.source)

    def peek(self, offset: int = 0) -> Optional[str]:
        """Peek at a character without consuming it."""
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        """Consume and return the current character."""
        if self.pos >= len(self.source):
            return None

        char = self.source[self.pos]
        self.pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        return char

    def save(self) -> Mark:
        return Mark(self.pos, self.line, self.column)

    def restore(self, mark: Mark) -> None:
        self.pos, self.line, self.column = mark

    def skip_whitespace(self) -> None:
        while not self.at_end() and self.peek() in WHITESPACE:
            self.advance()

    def read_identifier(self) -> str:
        """Read a tag or attribute name; empty string if none is present."""
        chars = []
        while is_identifier_char(self.peek()):
            chars.append(self.advance())
        return "".join(chars)

    def read_attribute_value(self) -> str:
        """Read a quoted or unquoted attribute value.

        Quoted values honour backslash escapes (the escaped character is
        kept literally) and may span lines.  Unquoted values run until
        whitespace or '>'.
        """
        self.skip_whitespace()

        quote = self.peek()
        if quote in ('"', "'"):
            self.advance()
            chars = []
            while not self.at_end() and self.peek() != quote:
                if self.peek() == "\\":
                    self.advance()
                    if not self.at_end():
                        chars.append(self.advance())
                else:
                    chars.append(self.advance())
            if self.peek() == quote:
                self.advance()
            return "".join(chars)

        chars = []
        while not self.at_end() and self.peek() != ">" and self.peek() not in WHITESPACE:
            chars.append(self.advance())
        return "".join(chars)

    def read_until(self, stop: str) -> str:
        """Consume characters up to (not including) ``stop`` or end of input."""
        start = self.pos
        while not self.at_end() and self.peek() != stop:
            self.advance()
        return self.source[start:self.pos]


__all__ = ["Cursor", "Mark", "is_identifier_char", "WHITESPACE"]
