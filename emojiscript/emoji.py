"""Emoji to keyword substitution tables.

Two tables live here. ``MARKUP_EMOJI_KEYWORDS`` is applied to markup
documents before tag scanning so emoji tokens can be mixed into tags
(``<💾 name="x" value="1"/>`` reads as ``<var ...>``).  ``EMOJI_KEYWORDS`` is
the emoji language proper: a flat find/replace table, not a parser.
"""

from __future__ import annotations

from typing import Dict, Mapping

MARKUP_EMOJI_KEYWORDS: Dict[str, str] = {
    "💾": "var",
    "🔒": "const",
    "📝": "log",
    "🔢": "number",
    "📊": "array",
    "📦": "object",
    "⚡": "function",
    "🔁": "loop",
    "❓": "if",
    "✅": "true",
    "❌": "false",
    "➕": "+",
    "➖": "-",
    "✖️": "*",
    "➗": "/",
}

EMOJI_KEYWORDS: Dict[str, str] = {
    "📦": "const",
    "🔢": "let",
    "🎯": "function",
    "➡️": "=>",
    "🔁": "for",
    "❓": "if",
    "❌": "else",
    "✅": "true",
    "⛔": "false",
    "🔙": "return",
    "📝": "console.log",
    "➕": "+",
    "➖": "-",
    "✖️": "*",
    "➗": "/",
    "🟰": "===",
    "❗": "!==",
    "⬆️": ">",
    "⬇️": "<",
    "📈": ">=",
    "📉": "<=",
    "🔗": "&&",
    "🔀": "||",
    "🚫": "!",
    "📥": "import",
    "📤": "export",
    "🔄": "while",
    "⚡": "async",
    "⏳": "await",
    "🎁": "new",
    "🗑️": "delete",
    "📊": "typeof",
    "🔍": "in",
    "🎪": "switch",
    "🔘": "case",
    "🏁": "break",
    "⏭️": "continue",
    "💥": "throw",
    "🛡️": "try",
    "🚨": "catch",
    "🏆": "finally",
    "🔐": "class",
    "🎨": "extends",
    "🌟": "static",
    "🔧": "constructor",
    "🎭": "this",
    "📍": "null",
    "❔": "undefined",
}


def replace_emojis(text: str, table: Mapping[str, str]) -> str:
    """Replace every emoji in ``table`` with its keyword.

    Longer sequences are replaced first so an emoji carrying a variation
    selector (``✖️``) is never split by a shorter key.
    """
    result = text
    for emoji in sorted(table, key=len, reverse=True):
        if emoji in result:
            result = result.replace(emoji, table[emoji])
    return result


def transpile_emoji(code: str) -> str:
    """Render emoji-language source as JavaScript."""
    return replace_emojis(code, EMOJI_KEYWORDS)


__all__ = [
    "MARKUP_EMOJI_KEYWORDS",
    "EMOJI_KEYWORDS",
    "replace_emojis",
    "transpile_emoji",
]
