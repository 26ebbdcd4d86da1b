"""Subcommand implementations for the emojiscript CLI."""

from .examples import cmd_examples
from .serve import cmd_serve
from .transpile import cmd_check, cmd_transpile

__all__ = ["cmd_check", "cmd_examples", "cmd_serve", "cmd_transpile"]
