"""Unified error model for emojiscript.

Structural and semantic problems found while transpiling a document are
recorded as plain strings so the caller can show every one of them at once.
The exception classes below are what the scanner, the generator and the
service raise internally before those strings are collected.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class EmojiScriptError(Exception):
    """Base class for all errors surfaced to users."""

    message: str
    line: Optional[int] = None
    column: Optional[int] = None
    code: str = "EMOJISCRIPT_ERROR"

    def __str__(self) -> str:
        return self.message

    def describe(self) -> str:
        """Format the message with its code and location, if known."""
        parts = [f"[{self.code}] {self.message}"]
        if self.line is not None:
            if self.column is not None:
                parts.append(f"(line {self.line}:{self.column})")
            else:
                parts.append(f"(line {self.line})")
        return " ".join(parts)


@dataclass
class MarkupSyntaxError(EmojiScriptError):
    """A tag could not be scanned: unclosed tag, missing name or '>'."""

    tag: Optional[str] = None
    code: str = "SYNTAX_ERROR"


@dataclass
class IdentifierError(EmojiScriptError):
    """A declared name is empty, malformed or reserved."""

    name: str = ""
    code: str = "INVALID_IDENTIFIER"


@dataclass
class MarkupTranspileError(EmojiScriptError):
    """Raised by :meth:`MarkupParser.parse` when any error was recorded.

    The partial output and every collected message travel with the
    exception so callers can still render a preview.
    """

    output: str = ""
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    code: str = "TRANSPILE_ERROR"


@dataclass
class EmptyInputError(MarkupTranspileError):
    """The document is empty once surrounding whitespace is removed."""

    code: str = "EMPTY_INPUT"


@dataclass
class InputValidationError(EmojiScriptError):
    """A transpile request was rejected before reaching the transpiler."""

    code: str = "INVALID_INPUT"


@dataclass
class EmptyOutputError(EmojiScriptError):
    """A transpiler produced nothing for non-empty input."""

    code: str = "EMPTY_OUTPUT"


__all__ = [
    "EmojiScriptError",
    "MarkupSyntaxError",
    "IdentifierError",
    "MarkupTranspileError",
    "EmptyInputError",
    "InputValidationError",
    "EmptyOutputError",
]
