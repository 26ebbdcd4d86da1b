"""
Transpile and check commands.

Both read a source file (or ``-`` for stdin) and run it through the markup
transpiler, or through emoji substitution with ``--emoji``.
"""

import argparse
import sys
from pathlib import Path

from emojiscript.emoji import transpile_emoji
from emojiscript.markup import TranspileResult, transpile_markup
from emojiscript.service import validate_code

from ..errors import CLIFileNotFoundError, CLIValidationError, handle_cli_exception
from ..output import print_error, print_json, print_success, print_warning


def read_source(path: str) -> str:
    """Read program text from ``path``; ``-`` reads stdin."""
    if path == "-":
        return sys.stdin.read()

    source_path = Path(path)
    if not source_path.is_file():
        raise CLIFileNotFoundError(
            f"File not found: {path}",
            hint="Pass a path to an existing file, or '-' to read from stdin",
            context={"path": str(source_path.resolve())},
        )
    try:
        return source_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise CLIValidationError(
            f"Cannot decode {path} as UTF-8",
            context={"path": path, "detail": str(exc)},
        ) from exc


def _report(result: TranspileResult) -> None:
    for warning in result.warnings:
        print_warning(warning, file=sys.stderr)
    for error in result.errors:
        print_error(error, file=sys.stderr)


def cmd_transpile(args: argparse.Namespace) -> None:
    """
    Handle the 'transpile' subcommand.

    Prints the generated JavaScript to stdout. Diagnostics go to stderr;
    when any error was recorded the partial output is still printed and
    the command exits with status 1.
    """
    try:
        source = read_source(args.file)
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    if args.emoji:
        output = transpile_emoji(source)
        if args.json:
            print_json({"success": True, "output": output, "errors": [], "warnings": []})
        else:
            print(output)
        return

    result = transpile_markup(source, args.target)
    if args.json:
        print_json(
            {
                "success": result.ok,
                "output": result.output,
                "errors": result.errors,
                "warnings": result.warnings,
            }
        )
    else:
        sys.stdout.write(result.output)
        _report(result)

    if not result.ok:
        sys.exit(1)


def cmd_check(args: argparse.Namespace) -> None:
    """
    Handle the 'check' subcommand: report problems without printing code.

    Emoji sources only get the brace/parenthesis balance check.
    """
    try:
        source = read_source(args.file)
    except Exception as exc:
        handle_cli_exception(exc, verbose=args.verbose)
        return

    if args.emoji:
        report = validate_code(source)
        for error in report.errors:
            print_error(error)
        if not report.valid:
            sys.exit(1)
        print_success(f"{args.file}: no problems found")
        return

    result = transpile_markup(source, args.target)
    for warning in result.warnings:
        print_warning(warning)
    for error in result.errors:
        print_error(error)

    if not result.ok:
        sys.exit(1)
    print_success(f"{args.file}: {len(result.tags)} top-level tags, no errors")
