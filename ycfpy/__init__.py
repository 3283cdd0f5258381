"""Span scanner for the YCF configuration language."""

from ycfpy.diagnostics import Diagnostic
from ycfpy.pipeline import YcfScanResult
from ycfpy.scanner import (
    ScanMode,
    ScannedSpans,
    ScannerOptions,
    Span,
    SpanCategory,
    scan,
    scan_result,
)

__all__ = [
    "Diagnostic",
    "ScanMode",
    "ScannedSpans",
    "ScannerOptions",
    "Span",
    "SpanCategory",
    "YcfScanResult",
    "scan",
    "scan_result",
]
