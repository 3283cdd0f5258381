"""Span scanner (grammar table + region-stack machine)."""

from ycfpy.scanner.categories import SpanCategory
from ycfpy.scanner.options import ScanMode, ScannerOptions
from ycfpy.scanner.rules import (
    YCF_GRAMMAR,
    Capture,
    Grammar,
    IncludeRule,
    LeafRule,
    MatchRule,
    RegionRule,
    Rule,
)
from ycfpy.scanner.scan import ScannedSpans, scan, scan_result
from ycfpy.scanner.scanner import Scanner, dump_spans
from ycfpy.scanner.span import Span, iter_spans
from ycfpy.scanner.state import OpenRegion, ScanState

__all__ = [
    "YCF_GRAMMAR",
    "Capture",
    "Grammar",
    "IncludeRule",
    "LeafRule",
    "MatchRule",
    "OpenRegion",
    "RegionRule",
    "Rule",
    "ScanMode",
    "ScanState",
    "ScannedSpans",
    "Scanner",
    "ScannerOptions",
    "Span",
    "SpanCategory",
    "dump_spans",
    "iter_spans",
    "scan",
    "scan_result",
]
