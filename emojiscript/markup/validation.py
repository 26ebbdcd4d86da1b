"""Identifier validation and unsafe-pattern flagging."""

from __future__ import annotations

import re
from typing import List, Tuple

from emojiscript.errors import IdentifierError

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

# Exact, case-sensitive matches only: "If" is accepted.
RESERVED_WORDS = frozenset(
    {"if", "else", "for", "while", "function", "return", "const", "let", "var"}
)

UNSAFE_PATTERNS: Tuple[str, ...] = ("eval(", "Function(", "__proto__", "constructor")


def validate_identifier(name: str) -> None:
    """Raise :class:`IdentifierError` unless ``name`` may be declared."""
    if not name:
        raise IdentifierError("empty identifier", name=name)

    if not IDENTIFIER_PATTERN.fullmatch(name):
        raise IdentifierError(f"invalid identifier: {name}", name=name)

    if name in RESERVED_WORDS:
        raise IdentifierError(f"'{name}' is a reserved keyword", name=name)


def is_valid_identifier(name: str) -> bool:
    try:
        validate_identifier(name)
    except IdentifierError:
        return False
    return True


def flag_unsafe_patterns(expression: str) -> Tuple[str, List[str]]:
    """Wrap known-dangerous substrings in an inline ``UNSAFE`` comment.

    Returns the annotated expression and one warning per pattern found.
    This is substring matching only and is trivially bypassed; it marks
    suspicious input for the reader, it does not make it safe.
    """
    warnings: List[str] = []
    result = expression
    for pattern in UNSAFE_PATTERNS:
        if pattern in result:
            warnings.append(f"potentially unsafe pattern detected: {pattern}")
            result = result.replace(pattern, f"/* UNSAFE: {pattern} */")
    return result, warnings


__all__ = [
    "IDENTIFIER_PATTERN",
    "RESERVED_WORDS",
    "UNSAFE_PATTERNS",
    "validate_identifier",
    "is_valid_identifier",
    "flag_unsafe_patterns",
]
