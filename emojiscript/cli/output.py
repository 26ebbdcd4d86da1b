"""
Output formatting for CLI operations.

Status lines carry a one-character prefix so they stand out from
transpiled code, which is printed as-is.
"""

import json
from typing import Any, Dict, Iterable, Optional, TextIO

from emojiscript.service.models import ExampleProgram


def print_success(message: str, *, file: Optional[TextIO] = None) -> None:
    """
    Print success message with checkmark prefix.

    Examples:
        >>> print_success("No problems found")
        ✓ No problems found
    """
    print(f"✓ {message}", file=file)


def print_error(message: str, *, file: Optional[TextIO] = None) -> None:
    """
    Print error message with cross prefix.

    Examples:
        >>> print_error("unknown tag: blink")
        ✗ unknown tag: blink
    """
    print(f"✗ {message}", file=file)


def print_warning(message: str, *, file: Optional[TextIO] = None) -> None:
    """
    Print warning message with warning prefix.

    Examples:
        >>> print_warning("potentially unsafe pattern detected: eval(")
        ⚠ potentially unsafe pattern detected: eval(
    """
    print(f"⚠ {message}", file=file)


def print_info(message: str, *, file: Optional[TextIO] = None) -> None:
    """Print informational message with info prefix."""
    print(f"ℹ {message}", file=file)


def print_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def print_examples(examples: Iterable[ExampleProgram], *, show_code: bool = False) -> None:
    """
    List example programs, one per line, optionally followed by their code.

    Examples:
        >>> print_examples([ExampleProgram(title="Hello", description="Print",
        ...                 code="📝(1)", syntax="emoji", category="basics")])
        [basics] Hello - Print
    """
    for example in examples:
        print(f"[{example.category}] {example.title} - {example.description}")
        if show_code:
            for line in example.code.splitlines():
                print(f"    {line}")
            print()


__all__ = [
    "print_success",
    "print_error",
    "print_warning",
    "print_info",
    "print_json",
    "print_examples",
]
