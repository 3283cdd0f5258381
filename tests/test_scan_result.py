import pytest

from ycfpy import ScanMode, ScannerOptions, SpanCategory, scan, scan_result
from ycfpy.scanner import Span
from ycfpy.text import LineCol


def _assert_tiles(spans: tuple[Span, ...], start: int, end: int) -> None:
    position = start
    for span in spans:
        assert span.range.start.value == position
        position = span.range.end.value
    assert position == end


def test_scan_result_exposes_spans_diagnostics_and_error_state() -> None:
    result = scan_result("a = 1\n")

    assert result.spans == scan("a = 1\n").spans
    assert result.diagnostics == []
    assert result.has_errors is False
    assert result.options == ScannerOptions()


def test_scan_result_is_never_in_error_for_malformed_input() -> None:
    result = scan_result('a = { b = "open\\q')

    assert {d.code for d in result.diagnostics} == {
        "SCANNER_INVALID_ESCAPE",
        "SCANNER_UNTERMINATED_STRING",
        "SCANNER_UNTERMINATED_MAP",
    }
    assert result.has_errors is False


def test_scan_result_caches_line_index_and_outline() -> None:
    result = scan_result("a = 1\nb = 2\n")

    assert result.line_index() is result.line_index()
    assert result.outline() is result.outline()

    b_key = result.outline()[1].key
    assert result.line_index().line_col(b_key.range.start) == LineCol(1, 0)


def test_spans_of_searches_nested_spans() -> None:
    result = scan_result("a = [1 { b = 2 } 0x3]")

    assert [span.text(result.source_text) for span in result.spans_of(SpanCategory.NUMBER_DEC)] == ["1", "2"]
    assert len(result.spans_of(SpanCategory.MAP_KEY)) == 2
    assert len(list(result.iter_spans())) == 13


def test_options_and_mode_are_exclusive() -> None:
    with pytest.raises(ValueError, match="either options or mode"):
        scan("a = 1", ScannerOptions(), mode=ScanMode.VERBOSE)


def test_verbose_mode_tiles_the_input() -> None:
    source = "a = [1, 2] // c\n"
    result = scan_result(source, mode=ScanMode.VERBOSE)

    assert result.options.emit_unclassified is True
    _assert_tiles(result.spans, 0, len(source))
    array = result.spans[4]
    assert array.category == SpanCategory.ARRAY
    _assert_tiles(array.children, array.range.start.value, array.range.end.value)
    assert [child.text(source) for child in array.children if child.category == SpanCategory.UNCLASSIFIED] == [", "]


def test_unclassified_spans_are_not_emitted_inside_strings() -> None:
    source = '"a b"'
    string = scan(source, mode=ScanMode.VERBOSE).spans[0]

    assert SpanCategory.UNCLASSIFIED not in {child.category for child in string.children}


def test_unrecognized_reporting_can_be_disabled() -> None:
    scanned = scan("a = [1, 2]", ScannerOptions(report_unrecognized=False))

    assert scanned.diagnostics == []


def test_standard_mode_emits_no_unclassified_spans() -> None:
    scanned = scan("a = [1, 2]", mode=ScanMode.STANDARD)

    assert all(
        span.category != SpanCategory.UNCLASSIFIED for top in scanned.spans for span in top.walk()
    )
