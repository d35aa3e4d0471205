"""Conversion between character offsets and line numbers."""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field

_LINE_BREAK = re.compile("\r\n|[\n\x0b\x0c\r\x85\u2028\u2029]")


@dataclass(frozen=True)
class LineIndex:
    """Line table of a text, with offsets counted in characters."""

    text: str
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = (0, *(m.end() for m in _LINE_BREAK.finditer(self.text)))
        object.__setattr__(self, "_line_starts", starts)

    def pos_to_line(self, pos: int) -> int:
        """Return the line holding a character offset."""
        if not 0 <= pos <= len(self.text):
            raise IndexError(f"position {pos} out of bounds")
        return bisect_right(self._line_starts, pos) - 1

    def line_to_pos(self, line: int) -> int:
        """Return the offset of the first character of a line."""
        if not 0 <= line <= len(self._line_starts):
            raise IndexError(f"line {line} out of bounds")
        if line == len(self._line_starts):
            return len(self.text)
        return self._line_starts[line]