"""Tag records and the canonical tag kinds they map to."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class TagKind(Enum):
    """Canonical generation behaviour shared by one or more tag names."""

    PRINT = "print"
    VARIABLE = "variable"
    FUNCTION = "function"
    LOOP = "loop"
    WHILE = "while"
    IF = "if"
    ELSE_IF = "elseif"
    ELSE = "else"
    CLASS = "class"
    METHOD = "method"
    IMPORT = "import"
    EXPORT = "export"
    RETURN = "return"
    THROW = "throw"
    ARRAY = "array"
    OBJECT = "object"
    TRY = "try"
    CATCH = "catch"
    FINALLY = "finally"
    COMMENT = "comment"
    ASYNC = "async"
    AWAIT = "await"
    SWITCH = "switch"
    CASE = "case"
    DEFAULT = "default"
    BREAK = "break"
    CONTINUE = "continue"


TAG_SYNONYMS: Dict[TagKind, Tuple[str, ...]] = {
    TagKind.PRINT: ("print", "log", "console"),
    TagKind.VARIABLE: ("var", "let", "const", "variable"),
    TagKind.FUNCTION: ("function", "func", "fn"),
    TagKind.LOOP: ("loop", "for", "foreach", "repeat"),
    TagKind.WHILE: ("while",),
    TagKind.IF: ("if", "condition"),
    TagKind.ELSE_IF: ("elseif", "elif"),
    TagKind.ELSE: ("else",),
    TagKind.CLASS: ("extend", "class"),
    TagKind.METHOD: ("method",),
    TagKind.IMPORT: ("import", "require", "use"),
    TagKind.EXPORT: ("export",),
    TagKind.RETURN: ("return",),
    TagKind.THROW: ("throw",),
    TagKind.ARRAY: ("array", "list"),
    TagKind.OBJECT: ("object", "dict", "map"),
    TagKind.TRY: ("try",),
    TagKind.CATCH: ("catch",),
    TagKind.FINALLY: ("finally",),
    TagKind.COMMENT: ("comment",),
    TagKind.ASYNC: ("async",),
    TagKind.AWAIT: ("await",),
    TagKind.SWITCH: ("switch", "match"),
    TagKind.CASE: ("case",),
    TagKind.DEFAULT: ("default",),
    TagKind.BREAK: ("break",),
    TagKind.CONTINUE: ("continue",),
}

# name -> kind, built once from the synonym groups above
TAG_KINDS: Dict[str, TagKind] = {
    name: kind for kind, names in TAG_SYNONYMS.items() for name in names
}


def resolve_kind(name: str) -> Optional[TagKind]:
    """Return the canonical kind for a tag name, or ``None`` if unknown."""
    return TAG_KINDS.get(name.lower())


@dataclass
class MarkupTag:
    """A parsed tag with its attributes and already-rendered content."""

    name: str
    attributes: Dict[str, str] = field(default_factory=dict)
    content: str = ""
    children: List["MarkupTag"] = field(default_factory=list)
    line: int = 1
    column: int = 1
    self_closing: bool = False
    closing: bool = False

    @property
    def kind(self) -> Optional[TagKind]:
        return resolve_kind(self.name)

    def attr(self, key: str, default: str = "") -> str:
        return self.attributes.get(key, default)

    def flag(self, key: str) -> bool:
        """True when the attribute is present with the value ``"true"``."""
        return self.attributes.get(key) == "true"

    def __repr__(self) -> str:
        return f"MarkupTag(<{self.name}>, {len(self.children)} children, {self.line}:{self.column})"


__all__ = ["TagKind", "TAG_SYNONYMS", "TAG_KINDS", "resolve_kind", "MarkupTag"]
