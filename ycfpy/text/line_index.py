"""Offset to line/column translation."""

from bisect import bisect_right
from dataclasses import dataclass

from ycfpy.text.text import TextSize


@dataclass(frozen=True, slots=True, order=True)
class LineCol:
    """Zero-based line and column (column counted in code points)."""

    line: int
    col: int


class LineIndex:
    """Line start table for one source string.

    `\\n`, `\\r\\n` and a lone `\\r` all end a line.
    """

    def __init__(self, source: str) -> None:
        self._len = len(source)
        starts = [0]
        position = 0
        while position < self._len:
            ch = source[position]
            if ch == "\n":
                starts.append(position + 1)
            elif ch == "\r":
                if position + 1 < self._len and source[position + 1] == "\n":
                    position += 1
                starts.append(position + 1)
            position += 1
        self._line_starts = tuple(starts)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def line_col(self, offset: TextSize) -> LineCol:
        value = offset.value
        if value > self._len:
            raise ValueError(f"Offset {value} is past the end of the text ({self._len})")
        line = bisect_right(self._line_starts, value) - 1
        return LineCol(line=line, col=value - self._line_starts[line])

    def offset(self, position: LineCol) -> TextSize:
        if not 0 <= position.line < len(self._line_starts):
            raise ValueError(f"Line {position.line} is out of range")
        value = self._line_starts[position.line] + position.col
        if value > self._len:
            raise ValueError(f"Position {position} is past the end of the text")
        return TextSize.from_int(value)
