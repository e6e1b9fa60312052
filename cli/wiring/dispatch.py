"""CLI command dispatch wiring extracted from rasp_cli."""

from __future__ import annotations

import argparse
from typing import Any, Callable

from cli import handlers


def dispatch_command(parser: argparse.ArgumentParser, args: Any) -> int:
    """Dispatch parsed CLI args to the matching command handler."""
    from rasp.logging import configure_logging

    quiet = getattr(args, "quiet", False)
    verbose = getattr(args, "verbose", False)
    configure_logging(quiet=quiet, verbose=verbose)

    if args.command is None:
        return handlers.handle_help(parser)

    dispatch: dict[str, Callable[[], int]] = {
        "help": lambda: handlers.handle_help(parser),
        "info": lambda: handlers.handle_info(args),
        "versions": lambda: handlers.handle_versions(args),
        "snapshot": lambda: handlers.handle_snapshot(args),
        "archive": lambda: handlers.handle_archive(args),
        "config": lambda: handlers.handle_config(args),
    }
    handler = dispatch.get(args.command)
    if handler is None:
        return handlers.handle_help(parser)
    return handler()
