"""High-level scan entrypoints for YCF source text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ycfpy.diagnostics import Diagnostic
from ycfpy.scanner.options import ScanMode, ScannerOptions
from ycfpy.scanner.scanner import Scanner
from ycfpy.scanner.span import Span

if TYPE_CHECKING:
    from ycfpy.pipeline import YcfScanResult


@dataclass(frozen=True, slots=True)
class ScannedSpans:
    spans: tuple[Span, ...]
    diagnostics: list[Diagnostic]


def _resolve_options(
    options: ScannerOptions | None,
    mode: ScanMode | None,
) -> ScannerOptions:
    if mode is not None and options is not None:
        raise ValueError("Pass either options or mode, not both")

    if options is not None:
        return options

    if mode is not None:
        return ScannerOptions.for_mode(mode)

    return ScannerOptions()


def scan(
    text: str,
    options: ScannerOptions | None = None,
    *,
    mode: ScanMode | None = None,
) -> ScannedSpans:
    resolved_options = _resolve_options(options=options, mode=mode)

    scanner = Scanner(text, options=resolved_options)
    spans = scanner.scan()
    return ScannedSpans(spans=spans, diagnostics=scanner.diagnostics)


def scan_result(
    text: str,
    options: ScannerOptions | None = None,
    *,
    mode: ScanMode | None = None,
) -> YcfScanResult:
    from ycfpy.pipeline import YcfScanResult

    resolved_options = _resolve_options(options=options, mode=mode)
    scanned = scan(text, options=resolved_options)
    return YcfScanResult(
        source_text=text,
        scanned=scanned,
        options=resolved_options,
    )
