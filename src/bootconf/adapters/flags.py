"""Command-line flag adapter producing a structured BootContext."""

from __future__ import annotations

import argparse
import os
import sys

from dotenv import load_dotenv

from ..core.context import BootContext


def _env_debug() -> bool:
    load_dotenv()
    return os.getenv("DEBUG", "false").lower() == "true"


def build_parser(prog: str | None = None, add_help: bool = False) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=prog, add_help=add_help, allow_abbrev=False)
    parser.add_argument(
        "-config",
        "--config",
        dest="config_path",
        default="",
        help="location of the configuration JSON",
    )
    parser.add_argument(
        "-debug",
        "--debug",
        dest="debug",
        action="store_true",
        default=_env_debug(),
        help="enable debug logging",
    )
    return parser


_CONFIG = ("-config", "--config")
_DEBUG = ("-debug", "--debug")


def _split_argv(argv: list[str]) -> tuple[list[str], list[str]]:
    """Separate our flags, matched by exact name only, from the host's arguments.

    argparse still matches single-dash prefixes (``-c`` for ``-config``)
    with allow_abbrev off, so only exact spellings are handed to it.
    """
    ours: list[str] = []
    extra: list[str] = []
    tokens = iter(argv)
    for token in tokens:
        name, sep, value = token.partition("=")
        if name in _CONFIG:
            if not sep:
                value = next(tokens, None)
                if value is None:
                    # let argparse report the missing value
                    ours.append(token)
                    continue
            ours.append(f"--config={value}")
        elif token in _DEBUG:
            ours.append(token)
        else:
            extra.append(token)
    return ours, extra


def parse_flags(argv: list[str] | None = None) -> BootContext:
    """Parse -config/-debug, leaving anything else to the host program."""
    if argv is None:
        argv = sys.argv[1:]
    ours, extra = _split_argv(argv)
    args = build_parser().parse_args(ours)
    return BootContext(
        config_path=args.config_path,
        debug=args.debug,
        extra_args=tuple(extra),
    )
