"""Error kinds raised while bootstrapping configuration."""

from __future__ import annotations

from enum import Enum, auto


class ErrorKind(Enum):
    MISSING_PATH = auto()
    UNRESOLVABLE_PATH = auto()
    STAT_FAILED = auto()
    OPEN_FAILED = auto()
    READ_FAILED = auto()
    JSON_SYNTAX = auto()
    UNMARSHAL = auto()


class ConfigError(Exception):
    """Fatal configuration failure.

    The message is the exception payload, so ``str(err)`` is what gets logged.
    Syntax errors also carry the resolved ``line``/``column`` and the text of
    the offending line.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        path: str | None = None,
        line: int | None = None,
        column: int | None = None,
        source_line: str | None = None,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.path = path
        self.line = line
        self.column = column
        self.source_line = source_line


class BindError(ValueError):
    """Decoded JSON does not fit the destination's shape."""

    def __init__(self, field_path: str, expected: str, got: str):
        where = field_path or "<root>"
        super().__init__(f"cannot bind JSON {got} to {where} (expected {expected})")
        self.field_path = field_path
        self.expected = expected
        self.got = got
