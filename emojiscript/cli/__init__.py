"""
Command line interface for emojiscript.

Usage::

    emojiscript transpile program.html --target typescript
    emojiscript check program.html
    emojiscript examples --syntax markup
    emojiscript serve --port 8081
"""

import argparse
import sys
from typing import Optional

from emojiscript import __version__
from emojiscript.config import get_settings
from emojiscript.markup import Flavor
from emojiscript.observability.logging import configure_logging

from .commands import cmd_check, cmd_examples, cmd_serve, cmd_transpile
from .errors import handle_cli_exception


def _configure_runtime_logging(args) -> None:
    """Configure the package logger from --log-level, or EMOJISCRIPT_LOG_LEVEL."""
    configure_logging(getattr(args, 'log_level', None) or get_settings().log_level)


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument('file', help="Source file, or '-' to read from stdin")
    parser.add_argument(
        '--target',
        choices=[flavor.value for flavor in Flavor],
        default=Flavor.JAVASCRIPT.value,
        help='Output language (default: javascript)'
    )
    parser.add_argument(
        '--emoji',
        action='store_true',
        help='Treat the source as emoji syntax instead of markup'
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="EmojiScript transpiler: emoji and markup programs to JavaScript",
        prog="emojiscript"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Print full tracebacks and detailed CLI errors (or set EMOJISCRIPT_VERBOSE=1)'
    )
    parser.add_argument(
        '--log-level',
        choices=['debug', 'info', 'warn', 'error'],
        default=None,
        help='Set logging level (or set EMOJISCRIPT_LOG_LEVEL)'
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    transpile_parser = subparsers.add_parser(
        'transpile',
        help='Transpile a program and print the JavaScript'
    )
    _add_source_arguments(transpile_parser)
    transpile_parser.add_argument(
        '--json',
        action='store_true',
        help='Print output, errors and warnings as JSON'
    )
    transpile_parser.set_defaults(func=cmd_transpile)

    check_parser = subparsers.add_parser(
        'check',
        help='Report errors and warnings without printing output'
    )
    _add_source_arguments(check_parser)
    check_parser.set_defaults(func=cmd_check)

    examples_parser = subparsers.add_parser(
        'examples',
        help='List example programs'
    )
    examples_parser.add_argument(
        '--syntax',
        choices=['emoji', 'markup'],
        default='emoji',
        help='Which syntax to list (default: emoji)'
    )
    examples_parser.add_argument(
        '--code',
        action='store_true',
        help='Print each example program below its title'
    )
    examples_parser.set_defaults(func=cmd_examples)

    serve_parser = subparsers.add_parser(
        'serve',
        help='Run the HTTP API'
    )
    serve_parser.add_argument('--host', default=None, help='Host to bind (default: EMOJISCRIPT_HOST)')
    serve_parser.add_argument('--port', type=int, default=None, help='Port to bind (default: EMOJISCRIPT_PORT)')
    serve_parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    serve_parser.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[list] = None) -> None:
    """
    Main CLI entrypoint.

    Args:
        argv: Command-line arguments (None uses sys.argv[1:])

    Examples:
        >>> main(['transpile', 'hello.html'])  # doctest: +SKIP
        console.log("Hello");
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    args = parser.parse_args(argv)

    if not hasattr(args, 'func'):
        parser.print_help()
        sys.exit(1)

    _configure_runtime_logging(args)

    try:
        args.func(args)
    except (SystemExit, KeyboardInterrupt):
        raise
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)


__all__ = ["main", "build_parser"]
