"""Scan carrier for scan-once/consume-many workflows."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ycfpy.diagnostics import has_errors
from ycfpy.scanner.options import ScannerOptions
from ycfpy.scanner.scan import ScannedSpans
from ycfpy.scanner.span import iter_spans

if TYPE_CHECKING:
    from ycfpy.diagnostics import Diagnostic
    from ycfpy.outline import OutlineEntry
    from ycfpy.scanner.categories import SpanCategory
    from ycfpy.scanner.span import Span
    from ycfpy.text import LineIndex


@dataclass(slots=True)
class YcfScanResult:
    """YCF scan result with cached line index and outline accessors."""

    source_text: str
    scanned: ScannedSpans
    options: ScannerOptions
    _line_index: LineIndex | None = field(default=None, init=False, repr=False)
    _outline: tuple[OutlineEntry, ...] | None = field(default=None, init=False, repr=False)

    @property
    def spans(self) -> tuple[Span, ...]:
        return self.scanned.spans

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.scanned.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.scanned.diagnostics)

    def iter_spans(self) -> Iterator[Span]:
        return iter_spans(self.scanned.spans)

    def spans_of(self, category: SpanCategory) -> list[Span]:
        return [span for span in self.iter_spans() if span.category == category]

    def line_index(self) -> LineIndex:
        if self._line_index is None:
            from ycfpy.text import LineIndex

            self._line_index = LineIndex(self.source_text)
        return self._line_index

    def outline(self) -> tuple[OutlineEntry, ...]:
        if self._outline is None:
            from ycfpy.outline import build_outline

            self._outline = build_outline(self.scanned.spans, self.source_text)
        return self._outline
