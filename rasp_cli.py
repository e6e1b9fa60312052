"""
rasp CLI

Entry point: environment loading, argument parsing and dispatch only.
All command logic lives in cli.handlers.
"""

from __future__ import annotations

import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from cli.wiring import build_parser, dispatch_command
from rasp import __version__


def _load_environment(env_file: Path | None = None) -> None:
    """Load .env (cwd by default). Values from the file win over the shell."""
    if env_file is not None:
        load_dotenv(env_file, override=True)
    else:
        load_dotenv(find_dotenv(usecwd=True), override=True)


def main(argv: list[str] | None = None) -> int:
    _load_environment()
    parser = build_parser(version=__version__)
    args = parser.parse_args(argv)
    return dispatch_command(parser, args)


if __name__ == "__main__":
    sys.exit(main())
