#!/usr/bin/env python3
"""bootconf: check that a -config file loads, optionally printing it"""

from __future__ import annotations

import json
import sys

from . import __version__
from . import config
from .adapters.flags import build_parser
from .core.errors import ConfigError


def _parse_extra(extra: tuple[str, ...]):
    parser = build_parser(prog="bootconf", add_help=True)
    parser.description = "Load a JSON config file and report where it breaks."
    parser.add_argument("--print", dest="print_config", action="store_true", help="Print the loaded document.")
    parser.add_argument("-v", "--version", action="store_true", help="Show version and exit.")
    # -config/-debug were consumed by init(); this only validates the rest.
    return parser.parse_args(list(extra))


def main(argv: list[str] | None = None) -> int:
    ctx = config.init(argv)
    args = _parse_extra(ctx.extra_args)

    if args.version:
        print(f"bootconf {__version__}")
        return 0

    document: dict = {}
    try:
        config.load(document)
    except ConfigError:
        # already logged by the loader
        return 1

    if args.print_config:
        print(json.dumps(document, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
