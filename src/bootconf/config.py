"""Process-wide configuration bootstrap.

Call :func:`init` once at startup, before anything reads configuration:

    from bootconf import config

    config.init()
    config.load(app_config)

Components that can take the context explicitly should be handed
``config.context()`` (or their own ``ConfigLoader``) instead of calling the
module-level helpers.
"""

from __future__ import annotations

from typing import Any

from .adapters.flags import parse_flags
from .adapters.log import LoggingStatusLog, setup_logging
from .core.context import BootContext
from .core.loader import ConfigLoader

_context: BootContext | None = None
_loader: ConfigLoader | None = None


def init(argv: list[str] | None = None) -> BootContext:
    """Parse -config/-debug and configure logging. Only once per process."""
    global _context, _loader
    if _context is not None:
        raise RuntimeError("bootconf flags were already parsed")

    ctx = parse_flags(argv)
    setup_logging(ctx.debug)
    _context = ctx
    _loader = ConfigLoader(ctx, LoggingStatusLog())
    return ctx


def context() -> BootContext:
    if _context is None:
        raise RuntimeError("bootconf.config.init() has not been called")
    return _context


def loader() -> ConfigLoader:
    if _loader is None:
        raise RuntimeError("bootconf.config.init() has not been called")
    return _loader


def debug() -> bool:
    return context().debug


def load(dest: Any) -> None:
    loader().load(dest)


def load_direct(path: str, dest: Any) -> None:
    loader().load_direct(path, dest)


def reset() -> None:
    """Forget the parsed flags (useful for testing)."""
    global _context, _loader
    _context = None
    _loader = None
