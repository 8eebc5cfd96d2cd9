"""Core startup context (structured view of the parsed flags)."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class BootContext:
    config_path: str = ""
    debug: bool = False
    extra_args: tuple[str, ...] = field(default_factory=tuple)
