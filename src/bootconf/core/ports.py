"""Core ports (interfaces) for bootconf.

The loader reports progress and failures through these protocols and never
talks to a logging backend directly.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class StatusLog(Protocol):
    """Status/error reporting collaborator."""

    def error(self, tag: str, message: str, cause: BaseException | None = None) -> None:
        """Report a failure, optionally with its underlying cause."""

    def status(self, tag: str, message: str) -> None:
        """Report a notable successful step."""

    def debug(self, tag: str, message: str) -> None:
        """Report detail that only matters with -debug."""
