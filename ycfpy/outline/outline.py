"""Key-path outline built from a span forest.

A dotted key such as `a.b = 1` names a value nested one map deeper than it is
written, so entries carry both the key's own segments and the full path from
the document root.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from ycfpy.scanner.categories import SpanCategory
from ycfpy.scanner.span import Span

_VALUE_CATEGORIES = frozenset(
    category for category in SpanCategory if category.is_number or category.is_region
) | {SpanCategory.KEYWORD}

_IGNORED = frozenset({SpanCategory.COMMENT, SpanCategory.UNCLASSIFIED})


@dataclass(frozen=True, slots=True)
class OutlineEntry:
    """One `key = value` entry."""

    segments: tuple[str, ...]
    full_path: tuple[str, ...]
    key: Span
    value: Span | None
    children: tuple[OutlineEntry, ...] = ()

    @property
    def dotted(self) -> str:
        return ".".join(self.full_path)

    def walk(self) -> Iterator[OutlineEntry]:
        yield self
        for child in self.children:
            yield from child.walk()


def build_outline(spans: Sequence[Span], source: str) -> tuple[OutlineEntry, ...]:
    """Outline of the document body (top-level map contents)."""
    return _map_entries(spans, source, ())


def find_entries(entries: Sequence[OutlineEntry], path: str | tuple[str, ...]) -> list[OutlineEntry]:
    """Every entry whose full path equals `path` (dotted string or segment tuple)."""
    target = tuple(path.split(".")) if isinstance(path, str) else path
    found: list[OutlineEntry] = []
    for entry in entries:
        for candidate in entry.walk():
            if candidate.full_path == target:
                found.append(candidate)
    return found


def _map_entries(children: Sequence[Span], source: str, parent_path: tuple[str, ...]) -> tuple[OutlineEntry, ...]:
    significant = [span for span in children if span.category not in _IGNORED and not span.category.is_delimiter]
    entries: list[OutlineEntry] = []
    index = 0
    while index < len(significant):
        span = significant[index]
        index += 1
        if span.category != SpanCategory.MAP_KEY:
            continue

        value: Span | None = None
        if index < len(significant) and significant[index].category == SpanCategory.SEPARATOR_KV:
            index += 1
            if index < len(significant) and significant[index].category in _VALUE_CATEGORIES:
                value = significant[index]
                index += 1

        segments = tuple(span.text(source).split("."))
        full_path = (*parent_path, *segments)
        entries.append(
            OutlineEntry(
                segments=segments,
                full_path=full_path,
                key=span,
                value=value,
                children=_value_entries(value, source, full_path),
            )
        )
    return tuple(entries)


def _value_entries(value: Span | None, source: str, path: tuple[str, ...]) -> tuple[OutlineEntry, ...]:
    if value is None:
        return ()
    match value.category:
        case SpanCategory.MAP:
            return _map_entries(value.inner_children(), source, path)
        case SpanCategory.ARRAY:
            # Keys of maps held in an array hang off the array's owner.
            entries: list[OutlineEntry] = []
            for element in value.inner_children():
                entries.extend(_value_entries(element, source, path))
            return tuple(entries)
        case _:
            return ()
