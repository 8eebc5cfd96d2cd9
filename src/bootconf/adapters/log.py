"""Logging adapter implementing the StatusLog port over stdlib logging."""

from __future__ import annotations

import logging

LOGGER_NAME = "bootconf"
_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class LoggingStatusLog:
    def __init__(self, logger: logging.Logger | None = None):
        self._logger = logger or logging.getLogger(LOGGER_NAME)

    def error(self, tag: str, message: str, cause: BaseException | None = None) -> None:
        if cause is None:
            self._logger.error("[%s] %s", tag, message)
        else:
            self._logger.error("[%s] %s: %s", tag, message, cause)

    def status(self, tag: str, message: str) -> None:
        self._logger.info("[%s] %s", tag, message)

    def debug(self, tag: str, message: str) -> None:
        self._logger.debug("[%s] %s", tag, message)


def setup_logging(debug: bool) -> None:
    """Configure the root logger; -debug turns on DEBUG records."""
    level = logging.DEBUG if debug else logging.INFO
    root = logging.getLogger()
    root.setLevel(level)

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
