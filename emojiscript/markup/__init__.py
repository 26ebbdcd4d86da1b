"""Markup tag transpiler: scanner/parser and JavaScript code generator."""

from .flavor import Flavor
from .parser import MarkupParser, TranspileResult, transpile_markup
from .tags import TAG_KINDS, TAG_SYNONYMS, MarkupTag, TagKind, resolve_kind
from .validation import RESERVED_WORDS, flag_unsafe_patterns, is_valid_identifier, validate_identifier

__all__ = [
    "Flavor",
    "MarkupParser",
    "TranspileResult",
    "transpile_markup",
    "MarkupTag",
    "TagKind",
    "TAG_KINDS",
    "TAG_SYNONYMS",
    "resolve_kind",
    "RESERVED_WORDS",
    "flag_unsafe_patterns",
    "is_valid_identifier",
    "validate_identifier",
]
