import argparse

from emojiscript.server.examples import examples_for

from ..output import print_examples


def cmd_examples(args: argparse.Namespace) -> None:
    """Handle the 'examples' subcommand."""
    print_examples(examples_for(args.syntax), show_code=args.code)
