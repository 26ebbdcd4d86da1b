"""
EmojiScript: a playground language with two surface syntaxes.

Programs are written either with emoji tokens (``📦 name 🟰 "x"``) or with
HTML-like tags (``<const name="name" value="'x'"/>``) and rendered as
JavaScript.  The package is laid out as follows:

* ``markup``: the tag scanner/parser and the JavaScript code generator.
  Nesting and the per-tag generation rules live here.
* ``emoji``: the emoji to keyword tables.  The emoji language itself is a
  flat find/replace over these tables.
* ``service``: request validation, markup detection and the response
  cache that sit between a client and the transpilers.
* ``server``: a FastAPI application exposing the service over HTTP.
* ``cli``: the ``emojiscript`` command line interface.
"""

__version__ = "1.0.0"

from .errors import (
    EmojiScriptError,
    EmptyInputError,
    IdentifierError,
    InputValidationError,
    MarkupSyntaxError,
    MarkupTranspileError,
)
from .emoji import transpile_emoji
from .markup import Flavor, MarkupParser, MarkupTag, TranspileResult, transpile_markup

__all__ = [
    "__version__",
    "EmojiScriptError",
    "EmptyInputError",
    "IdentifierError",
    "InputValidationError",
    "MarkupSyntaxError",
    "MarkupTranspileError",
    "Flavor",
    "MarkupParser",
    "MarkupTag",
    "TranspileResult",
    "transpile_emoji",
    "transpile_markup",
]
