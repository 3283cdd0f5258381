"""Span category vocabulary."""

from enum import StrEnum


class SpanCategory(StrEnum):
    """Semantic tag attached to every span.

    Values are the dotted names consumers map to colors or outline roles.
    """

    KEYWORD = "keyword"

    NUMBER_HEX = "number.hex"
    NUMBER_BIN = "number.bin"
    NUMBER_OCT = "number.oct"
    NUMBER_DEC = "number.dec"

    STRING = "string"
    STRING_BEGIN = "string.begin"
    STRING_END = "string.end"
    ESCAPE = "escape"
    ESCAPE_MARKER = "escape.marker"
    INVALID_ESCAPE = "invalid-escape"

    MAP = "map"
    MAP_BEGIN = "map.begin"
    MAP_END = "map.end"

    ARRAY = "array"
    ARRAY_BEGIN = "array.begin"
    ARRAY_END = "array.end"

    MAP_KEY = "map-key"
    SEPARATOR_KV = "separator.kv"
    SEPARATOR_PATH = "separator.path"

    COMMENT = "comment"
    COMMENT_MARKER = "comment.marker"

    # Only emitted with `ScannerOptions.emit_unclassified`.
    UNCLASSIFIED = "unclassified"

    @property
    def is_number(self) -> bool:
        return self in (
            SpanCategory.NUMBER_HEX,
            SpanCategory.NUMBER_BIN,
            SpanCategory.NUMBER_OCT,
            SpanCategory.NUMBER_DEC,
        )

    @property
    def is_region(self) -> bool:
        return self in (SpanCategory.STRING, SpanCategory.MAP, SpanCategory.ARRAY)

    @property
    def is_delimiter(self) -> bool:
        return self in (
            SpanCategory.STRING_BEGIN,
            SpanCategory.STRING_END,
            SpanCategory.MAP_BEGIN,
            SpanCategory.MAP_END,
            SpanCategory.ARRAY_BEGIN,
            SpanCategory.ARRAY_END,
        )
