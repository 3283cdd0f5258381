"""Classified span tree."""

from collections.abc import Iterator
from dataclasses import dataclass

from ycfpy.scanner.categories import SpanCategory
from ycfpy.text import TextRange, slice_text_range


@dataclass(frozen=True, slots=True)
class Span:
    """A classified range of the source, with ordered, non-overlapping children."""

    category: SpanCategory
    range: TextRange
    children: tuple["Span", ...] = ()

    def text(self, source: str) -> str:
        return slice_text_range(source, self.range)

    def walk(self) -> Iterator["Span"]:
        """Pre-order traversal, this span first."""
        stack: list[Span] = [self]
        while stack:
            span = stack.pop()
            yield span
            stack.extend(reversed(span.children))

    def child(self, category: SpanCategory) -> "Span | None":
        """First direct child with the given category."""
        for child in self.children:
            if child.category == category:
                return child
        return None

    def inner_children(self) -> tuple["Span", ...]:
        """Children minus region delimiters."""
        return tuple(child for child in self.children if not child.category.is_delimiter)

    @property
    def is_terminated(self) -> bool:
        """False for a region that ran to end of input without its end delimiter."""
        if not self.category.is_region:
            return True
        # The begin delimiter is always first; the end delimiter, when present, is last.
        return len(self.children) > 1 and self.children[-1].category.is_delimiter


def iter_spans(spans: tuple[Span, ...] | list[Span]) -> Iterator[Span]:
    """Pre-order traversal over a span forest."""
    for span in spans:
        yield from span.walk()
