"""
Serve command implementation.

Runs the playground API under uvicorn.
"""

import argparse

import uvicorn

from emojiscript.config import get_settings
from emojiscript.server import create_app

from ..output import print_info

APP_FACTORY = "emojiscript.server.app:create_app"


def cmd_serve(args: argparse.Namespace) -> None:
    """
    Handle the 'serve' subcommand.

    Host and port default to ``EMOJISCRIPT_HOST`` / ``EMOJISCRIPT_PORT``.
    With ``--reload`` uvicorn imports the app factory itself.
    """
    settings = get_settings()
    host = args.host or settings.host
    port = args.port or settings.port

    print_info(f"EmojiScript API running at http://{host}:{port}{settings.api_prefix}")
    log_level = (args.log_level or settings.log_level).lower()
    if log_level == "warn":
        log_level = "warning"

    if args.reload:
        uvicorn.run(APP_FACTORY, factory=True, host=host, port=port, reload=True, log_level=log_level)
    else:
        uvicorn.run(create_app(settings), host=host, port=port, log_level=log_level)
