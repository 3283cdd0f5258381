"""Text offsets and ranges."""

from ycfpy.text.line_index import LineCol, LineIndex
from ycfpy.text.text import TextRange, TextSize, slice_text_range

__all__ = [
    "LineCol",
    "LineIndex",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
