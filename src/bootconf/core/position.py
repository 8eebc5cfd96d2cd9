"""Map a decoder offset back to a line/column for error reports."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    line: int
    column: int
    source_line: str


def locate(text: str, offset: int) -> Position:
    """Resolve ``offset`` in ``text`` to a 1-based line and 0-based column.

    Offsets index characters of the decoded text, so a multi-byte UTF-8
    character counts as one column. An offset past the end lands on the
    last line.
    """
    lines = text.split("\n")
    seen = 0
    for index, line in enumerate(lines):
        # +1 for the newline that split() removed
        if offset < seen + len(line) + 1:
            return Position(line=index + 1, column=offset - seen, source_line=line)
        seen += len(line) + 1

    last = lines[-1]
    seen -= len(last) + 1
    return Position(line=len(lines), column=offset - seen, source_line=last)
