from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Offset into (or length of) a source string, counted in code points."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def of(text: str) -> "TextSize":
        """Length of `text` as a TextSize."""
        return TextSize(len(text))

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def to_int(self) -> int:
        return self.value

    def __add__(self, other: "TextSize") -> "TextSize":
        return TextSize(self.value + other.value)

    def __sub__(self, other: "TextSize") -> "TextSize":
        result = self.value - other.value
        if result < 0:
            raise ValueError("Resulting TextSize cannot be negative")
        return TextSize(result)

    def __repr__(self) -> str:
        return f"TextSize({self.value})"


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """
    Half-open range [start, end) over the source text.

    Invariant:
    - 0 <= start <= end

    Offsets are plain Python string indices, so a range slices the source directly.
    """

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._end < 0:
            raise ValueError("TextRange positions cannot be negative")
        if self._start > self._end:
            raise ValueError("TextRange invariant violated: start > end")

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        """Range of `length` starting at `offset`."""
        return TextRange(offset.value, offset.value + length.value)

    @staticmethod
    def empty(offset: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value)

    @staticmethod
    def _from_offsets(start: int, end: int) -> "TextRange":
        """Build from raw ints (scanner internals work on ints for speed)."""
        return TextRange(start, end)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def len(self) -> TextSize:
        return TextSize(self._end - self._start)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        """The range as a `(start, end)` pair of ints."""
        return (self._start, self._end)

    def contains(self, offset: TextSize) -> bool:
        return self._start <= offset.value < self._end

    def contains_range(self, other: "TextRange") -> bool:
        """True when `other` lies fully inside this range."""
        return self._start <= other._start and other._end <= self._end

    def cover(self, other: "TextRange") -> "TextRange":
        """Smallest range covering both ranges."""
        return TextRange._from_offsets(min(self._start, other._start), max(self._end, other._end))

    def ordering(self, other: "TextRange") -> Literal[-1, 0, 1]:
        """Compare this range to another range for ordering.

        Returns:
        - -1 if this range ends before the other starts
        - 0 if the ranges overlap
        - 1 if this range starts after the other ends
        """
        if self._end <= other._start:
            return -1
        elif other._end <= self._start:
            return 1
        else:
            return 0

    def __repr__(self) -> str:
        return f"TextRange({self._start}, {self._end})"


def slice_text_range(source: str, range: TextRange) -> str:
    """Substring of `source` covered by `range`."""
    return source[range.start.value : range.end.value]
