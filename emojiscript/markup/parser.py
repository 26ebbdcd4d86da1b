"""Single-pass scanner/parser for the markup tag language.

Generation is interleaved with parsing: a tag is rendered as soon as its
closing tag is consumed, and a nested tag's output is spliced into the
parent's content as plain text before the parent itself is rendered.

    >>> MarkupParser('<print>"Hello"</print>').parse()
    'console.log("Hello");\\n'
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Union

from emojiscript.emoji import MARKUP_EMOJI_KEYWORDS, replace_emojis
from emojiscript.errors import EmptyInputError, MarkupSyntaxError, MarkupTranspileError
from emojiscript.markup.codegen import CodeGenerationMixin
from emojiscript.markup.flavor import Flavor
from emojiscript.markup.scanner import WHITESPACE, Cursor, Mark, is_identifier_char
from emojiscript.markup.tags import MarkupTag
from emojiscript.observability.logging import get_logger

logger = get_logger(__name__)

# Each nesting level costs a few interpreter frames.
MAX_NESTING_DEPTH = 128


@dataclass
class TranspileResult:
    """Outcome of transpiling one markup document."""

    output: str
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    tags: List[MarkupTag] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class MarkupParser(CodeGenerationMixin):
    """Recursive descent parser for ``<tag attr="v">content</tag>`` documents.

    One instance handles exactly one document: construct it, call
    :meth:`parse`, then read ``errors``, ``warnings``, ``tags`` and
    ``scope``.
    """

    def __init__(self, source: str, flavor: Union[Flavor, str, None] = Flavor.JAVASCRIPT):
        self.source = source
        self.flavor = Flavor.coerce(flavor)
        self.cursor = Cursor(source)

        self.errors: List[str] = []
        self.warnings: List[str] = []
        self.tags: List[MarkupTag] = []
        self.indent_level = 0
        self.depth = 0

        # Advisory only: filled on each declaration, never used to reject one.
        self.scope: Dict[str, bool] = {}

        self._parsed = False

    # ====================================================================
    # Document
    # ====================================================================

    def parse(self) -> str:
        """Transpile the whole document.

        Returns the generated text.  Raises :class:`EmptyInputError` for a
        blank document and :class:`MarkupTranspileError` (carrying the
        partial output) if any error was recorded along the way.
        """
        if self._parsed:
            raise RuntimeError("MarkupParser.parse() may only be called once per instance")
        self._parsed = True

        if not self.source.strip():
            raise EmptyInputError("empty input", errors=["empty input"])

        self.cursor = Cursor(replace_emojis(self.source, MARKUP_EMOJI_KEYWORDS))
        cursor = self.cursor
        units: List[str] = []

        while not cursor.at_end():
            char = cursor.peek()
            if char == "<":
                try:
                    tag = self.parse_tag()
                except MarkupSyntaxError as exc:
                    self.errors.append(str(exc))
                    cursor.advance()
                    continue

                if tag.closing:
                    self.errors.append(
                        f"unexpected closing tag </{tag.name}> at line {tag.line}, column {tag.column}"
                    )
                    continue

                self.tags.append(tag)
                units.append(self.transpile_tag(tag))
            elif char in WHITESPACE:
                cursor.advance()
            else:
                units.append(cursor.read_until("<").strip())

        output = "".join(unit + "\n" for unit in units)
        logger.debug(
            "Transpiled markup: %d units, %d errors, %d warnings",
            len(units),
            len(self.errors),
            len(self.warnings),
        )

        if self.errors:
            raise MarkupTranspileError(
                f"parsing errors: {'; '.join(self.errors)}",
                output=output,
                errors=list(self.errors),
                warnings=list(self.warnings),
            )
        return output

    # ====================================================================
    # Tags
    # ====================================================================

    def parse_tag(self) -> MarkupTag:
        """Parse one tag starting at '<', including any nested tags."""
        cursor = self.cursor
        start = cursor.save()

        if cursor.peek() != "<":
            raise self.error("expected '<'")
        cursor.advance()

        if cursor.peek() == "/":
            return self._parse_closing_tag(start)

        if self.depth >= MAX_NESTING_DEPTH:
            cursor.restore(start)
            raise self.error("tag nesting too deep")

        name = cursor.read_identifier()
        if not name:
            raise self.error("expected tag name")

        tag = MarkupTag(name=name.lower(), line=start.line, column=start.column)
        self._parse_attributes(tag)

        if cursor.peek() == "/":
            cursor.advance()
            if cursor.peek() != ">":
                raise self.error("expected '>' after '/'")
            cursor.advance()
            tag.self_closing = True
            return tag

        if cursor.peek() != ">":
            raise self.error("expected '>'")
        cursor.advance()

        self._parse_content(tag, start)
        return tag

    def _parse_attributes(self, tag: MarkupTag) -> None:
        cursor = self.cursor
        cursor.skip_whitespace()
        while not cursor.at_end() and cursor.peek() not in (">", "/"):
            attr_name = cursor.read_identifier()
            if not attr_name:
                break

            cursor.skip_whitespace()
            if cursor.peek() == "=":
                cursor.advance()
                tag.attributes[attr_name] = cursor.read_attribute_value()
            else:
                tag.attributes[attr_name] = "true"
            cursor.skip_whitespace()

    def _parse_content(self, tag: MarkupTag, start: Mark) -> None:
        """Accumulate content until the matching close tag.

        A close tag with a different name is kept as literal text.  Nested
        tags are parsed recursively and their rendered output is appended.
        """
        cursor = self.cursor
        content: List[str] = []

        while not cursor.at_end():
            char = cursor.peek()
            if char != "<":
                content.append(cursor.advance())
                continue

            following = cursor.peek(1)
            if following == "/":
                lookahead = cursor.save()
                cursor.advance()
                cursor.advance()
                closing_name = cursor.read_identifier()

                if closing_name.lower() == tag.name:
                    cursor.skip_whitespace()
                    if cursor.peek() != ">":
                        raise self.error("expected '>' in closing tag")
                    cursor.advance()
                    tag.content = "".join(content).strip()
                    return

                cursor.restore(lookahead)
                content.append(cursor.advance())
            elif is_identifier_char(following):
                self.depth += 1
                try:
                    nested = self.parse_tag()
                finally:
                    self.depth -= 1
                tag.children.append(nested)
                content.append(self.transpile_tag(nested))
            else:
                # a comparison such as "a < b"
                content.append(cursor.advance())

        cursor.restore(start)
        raise MarkupSyntaxError(
            f"unclosed tag <{tag.name}> at line {tag.line}, column {tag.column}",
            line=tag.line,
            column=tag.column,
            tag=tag.name,
        )

    def _parse_closing_tag(self, start: Mark) -> MarkupTag:
        """Parse ``</name>`` once '<' is consumed; returns a closing marker."""
        cursor = self.cursor
        cursor.advance()  # '/'

        name = cursor.read_identifier()
        if not name:
            raise self.error("expected tag name in closing tag")

        cursor.skip_whitespace()
        if cursor.peek() != ">":
            raise self.error("expected '>' in closing tag")
        cursor.advance()

        return MarkupTag(name=name.lower(), line=start.line, column=start.column, closing=True)

    def error(self, message: str) -> MarkupSyntaxError:
        """Create a syntax error at the current position."""
        cursor = self.cursor
        return MarkupSyntaxError(
            f"{message} at line {cursor.line}, column {cursor.column}",
            line=cursor.line,
            column=cursor.column,
        )


def transpile_markup(source: str, flavor: Union[Flavor, str, None] = Flavor.JAVASCRIPT) -> TranspileResult:
    """Transpile a markup document without raising on document errors."""
    parser = MarkupParser(source, flavor)
    try:
        output = parser.parse()
    except MarkupTranspileError as exc:
        return TranspileResult(
            output=exc.output,
            errors=list(exc.errors),
            warnings=list(exc.warnings),
            tags=list(parser.tags),
        )
    return TranspileResult(output=output, warnings=list(parser.warnings), tags=list(parser.tags))


__all__ = ["MarkupParser", "TranspileResult", "transpile_markup", "MAX_NESTING_DEPTH"]
