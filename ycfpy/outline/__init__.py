"""Structural navigation over scanned spans."""

from ycfpy.outline.outline import OutlineEntry, build_outline, find_entries

__all__ = [
    "OutlineEntry",
    "build_outline",
    "find_entries",
]
