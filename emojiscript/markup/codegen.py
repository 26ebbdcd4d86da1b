"""JavaScript generation for markup tags.

:class:`CodeGenerationMixin` is mixed into the parser so a tag can be
rendered the moment its closing tag is consumed.  It expects the host to
provide ``flavor``, ``indent_level``, ``errors``, ``warnings`` and ``scope``.

Each canonical :class:`TagKind` has one renderer; synonyms resolve to their
kind through :data:`TAG_KINDS` before dispatch.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from emojiscript.errors import IdentifierError
from emojiscript.markup.flavor import Flavor
from emojiscript.markup.tags import MarkupTag, TagKind
from emojiscript.markup.validation import flag_unsafe_patterns, validate_identifier

INDENT_UNIT = "  "


class CodeGenerationMixin:
    """Per-kind rendering rules shared by the markup parser."""

    flavor: Flavor
    indent_level: int
    errors: List[str]
    warnings: List[str]
    scope: Dict[str, bool]

    # ====================================================================
    # Dispatch
    # ====================================================================

    def transpile_tag(self, tag: Optional[MarkupTag]) -> str:
        """Render one tag.  Never raises; problems become errors/warnings."""
        if tag is None:
            return ""

        kind = tag.kind
        if kind is None:
            return self._render_unknown(tag)
        return getattr(self, _RENDERERS[kind])(tag)

    # ====================================================================
    # Formatting helpers
    # ====================================================================

    def indent(self) -> str:
        return INDENT_UNIT * self.indent_level

    def indent_block(self, block: str) -> str:
        """Indent every non-blank line one level deeper than the current tag."""
        prefix = INDENT_UNIT * (self.indent_level + 1)
        return "\n".join(prefix + line if line.strip() else "" for line in block.split("\n"))

    def _block(self, header: str, body: str) -> str:
        return f"{self.indent()}{header} {{\n{self.indent_block(body)}\n{self.indent()}}}"

    def _expression(self, text: str) -> str:
        flagged, warnings = flag_unsafe_patterns(text)
        self.warnings.extend(warnings)
        return flagged

    def _declared_name(self, name: str, label: str, error_prefix: str) -> Optional[str]:
        """Validate ``name``; on failure record the error and return a placeholder."""
        try:
            validate_identifier(name)
        except IdentifierError as exc:
            self.errors.append(f"{error_prefix}: {exc}")
            return f"{self.indent()}/* Invalid {label}: {exc} */"
        return None

    def _condition(self, tag: MarkupTag) -> Tuple[str, str]:
        """Return ``(condition, body)``.

        Without a ``condition`` attribute the first content line is the
        condition and the remaining lines are the body.
        """
        condition = tag.attr("condition")
        body = tag.content.strip()
        if not condition and body:
            first, _, rest = body.partition("\n")
            condition, body = first.strip(), rest.strip()
        return self._expression(condition or "true"), body

    # ====================================================================
    # Statements
    # ====================================================================

    def _render_print(self, tag: MarkupTag) -> str:
        content = self._expression(tag.content.strip())
        return f"{self.indent()}console.log({content});"

    def _render_variable(self, tag: MarkupTag) -> str:
        name = tag.attr("name")
        value = tag.attr("value")
        var_type = tag.attr("type")

        if not name and tag.content:
            target, sep, expression = tag.content.partition("=")
            if sep:
                name, value = target.strip(), expression.strip()

        placeholder = self._declared_name(name, "variable", "invalid variable")
        if placeholder is not None:
            return placeholder

        self.scope[name] = True

        keyword = "const" if tag.name == "const" else "let"
        declaration = name
        if self.flavor.typed and var_type:
            declaration = f"{name}: {var_type}"
        if not value:
            return f"{self.indent()}{keyword} {declaration};"
        return f"{self.indent()}{keyword} {declaration} = {self._expression(value)};"

    def _render_function(self, tag: MarkupTag) -> str:
        name = tag.attr("name")
        placeholder = self._declared_name(name, "function", "invalid function name")
        if placeholder is not None:
            return placeholder

        prefix = "async " if tag.flag("async") else ""
        header = f"{prefix}function {name}({tag.attr('params')})"
        returns = tag.attr("returns")
        if self.flavor.typed and returns:
            header += f": {returns}"
        return self._block(header, tag.content.strip())

    def _render_loop(self, tag: MarkupTag) -> str:
        variable = tag.attr("var")
        start = tag.attr("from")
        stop = tag.attr("to")
        step = tag.attr("step") or "1"
        items = tag.attr("in")
        times = tag.attr("times")
        body = tag.content.strip()

        if items:
            variable = variable or "item"
            return self._block(f"for (const {variable} of {items})", body)
        if times:
            variable = variable or "i"
            return self._block(f"for (let {variable} = 0; {variable} < {times}; {variable}++)", body)
        if start and stop:
            variable = variable or "i"
            return self._block(
                f"for (let {variable} = {start}; {variable} < {stop}; {variable} += {step})", body
            )
        return f"{self.indent()}/* Invalid loop configuration */"

    def _render_while(self, tag: MarkupTag) -> str:
        condition = self._expression(tag.attr("condition") or "true")
        return self._block(f"while ({condition})", tag.content.strip())

    def _render_if(self, tag: MarkupTag) -> str:
        condition, body = self._condition(tag)
        return self._block(f"if ({condition})", body)

    def _render_else_if(self, tag: MarkupTag) -> str:
        condition, body = self._condition(tag)
        return self._block(f"else if ({condition})", body)

    def _render_else(self, tag: MarkupTag) -> str:
        return self._block("else", tag.content.strip())

    def _render_class(self, tag: MarkupTag) -> str:
        name = tag.attr("name")
        placeholder = self._declared_name(name, "class", "invalid class name")
        if placeholder is not None:
            return placeholder

        parent = tag.attr("extends")
        header = f"class {name} extends {parent}" if parent else f"class {name}"
        return self._block(header, tag.content.strip())

    def _render_method(self, tag: MarkupTag) -> str:
        modifiers = ""
        if tag.flag("static"):
            modifiers += "static "
        if tag.flag("async"):
            modifiers += "async "

        header = f"{modifiers}{tag.attr('name')}({tag.attr('params')})"
        returns = tag.attr("returns")
        if self.flavor.typed and returns:
            header += f": {returns}"
        return self._block(header, tag.content.strip())

    # ====================================================================
    # Modules
    # ====================================================================

    def _render_import(self, tag: MarkupTag) -> str:
        module = tag.attr("from")
        items = tag.attr("items")
        name = tag.attr("name")
        if items:
            return f"{self.indent()}import {{ {items} }} from '{module}';"
        if name:
            return f"{self.indent()}import {name} from '{module}';"
        return f"{self.indent()}import '{module}';"

    def _render_export(self, tag: MarkupTag) -> str:
        body = tag.content.strip()
        name = tag.attr("name")
        if tag.flag("default"):
            return f"{self.indent()}export default {body}"
        if name:
            return f"{self.indent()}export const {name} = {body};"
        return f"{self.indent()}export {body}"

    # ====================================================================
    # Expressions and literals
    # ====================================================================

    def _render_return(self, tag: MarkupTag) -> str:
        value = tag.content.strip() or tag.attr("value")
        return f"{self.indent()}return {self._expression(value)};"

    def _render_throw(self, tag: MarkupTag) -> str:
        value = tag.content.strip() or tag.attr("value")
        return f"{self.indent()}throw {self._expression(value)};"

    def _render_array(self, tag: MarkupTag) -> str:
        items = tag.attr("items") or tag.content.strip()
        return f"[{items}]"

    def _render_object(self, tag: MarkupTag) -> str:
        content = tag.content.strip() or tag.attr("items")
        return f"{{ {content} }}"

    def _render_await(self, tag: MarkupTag) -> str:
        return f"{self.indent()}await {self._expression(tag.content.strip())}"

    def _render_async(self, tag: MarkupTag) -> str:
        return self._block("async () =>", tag.content.strip())

    def _render_comment(self, tag: MarkupTag) -> str:
        lines = tag.content.strip().split("\n")
        return "\n".join(f"{self.indent()}// {line.strip()}".rstrip() for line in lines)

    # ====================================================================
    # Error handling and branching
    # ====================================================================

    def _render_try(self, tag: MarkupTag) -> str:
        return self._block("try", tag.content.strip())

    def _render_catch(self, tag: MarkupTag) -> str:
        error_var = tag.attr("error") or "e"
        return self._block(f"catch ({error_var})", tag.content.strip())

    def _render_finally(self, tag: MarkupTag) -> str:
        return self._block("finally", tag.content.strip())

    def _render_switch(self, tag: MarkupTag) -> str:
        return self._block(f"switch ({tag.attr('on')})", tag.content.strip())

    def _label(self, label: str, body: str) -> str:
        if not body:
            return f"{self.indent()}{label}"
        return f"{self.indent()}{label}\n{self.indent_block(body)}"

    def _render_case(self, tag: MarkupTag) -> str:
        return self._label(f"case {tag.attr('value')}:", tag.content.strip())

    def _render_default(self, tag: MarkupTag) -> str:
        return self._label("default:", tag.content.strip())

    def _render_break(self, tag: MarkupTag) -> str:
        return f"{self.indent()}break;"

    def _render_continue(self, tag: MarkupTag) -> str:
        return f"{self.indent()}continue;"

    def _render_unknown(self, tag: MarkupTag) -> str:
        self.warnings.append(f"unknown tag: <{tag.name}>")
        placeholder = f"{self.indent()}/* Unknown tag: <{tag.name}> */"
        if tag.content:
            return f"{placeholder}\n{tag.content}"
        return placeholder


_RENDERERS: Dict[TagKind, str] = {
    TagKind.PRINT: "_render_print",
    TagKind.VARIABLE: "_render_variable",
    TagKind.FUNCTION: "_render_function",
    TagKind.LOOP: "_render_loop",
    TagKind.WHILE: "_render_while",
    TagKind.IF: "_render_if",
    TagKind.ELSE_IF: "_render_else_if",
    TagKind.ELSE: "_render_else",
    TagKind.CLASS: "_render_class",
    TagKind.METHOD: "_render_method",
    TagKind.IMPORT: "_render_import",
    TagKind.EXPORT: "_render_export",
    TagKind.RETURN: "_render_return",
    TagKind.THROW: "_render_throw",
    TagKind.ARRAY: "_render_array",
    TagKind.OBJECT: "_render_object",
    TagKind.TRY: "_render_try",
    TagKind.CATCH: "_render_catch",
    TagKind.FINALLY: "_render_finally",
    TagKind.COMMENT: "_render_comment",
    TagKind.ASYNC: "_render_async",
    TagKind.AWAIT: "_render_await",
    TagKind.SWITCH: "_render_switch",
    TagKind.CASE: "_render_case",
    TagKind.DEFAULT: "_render_default",
    TagKind.BREAK: "_render_break",
    TagKind.CONTINUE: "_render_continue",
}


__all__ = ["CodeGenerationMixin", "INDENT_UNIT"]
