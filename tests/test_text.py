import pytest

from ycfpy.text import LineCol, LineIndex, TextRange, TextSize, slice_text_range


def test_text_size_arithmetic() -> None:
    assert TextSize.of("abc") + TextSize.from_int(2) == TextSize(5)
    assert (TextSize(5) - TextSize(2)).to_int() == 3

    with pytest.raises(ValueError):
        TextSize(-1)
    with pytest.raises(ValueError):
        TextSize(1) - TextSize(2)


def test_text_range_invariants() -> None:
    with pytest.raises(ValueError):
        TextRange(3, 1)
    with pytest.raises(ValueError):
        TextRange(-1, 1)

    r = TextRange.at(TextSize(2), TextSize(3))
    assert r.as_tuple() == (2, 5)
    assert r.len() == TextSize(3)
    assert r.contains(TextSize(4))
    assert not r.contains(TextSize(5))
    assert TextRange.empty(TextSize(4)).is_empty()
    assert r.contains_range(TextRange(3, 5))
    assert r.cover(TextRange(7, 9)).as_tuple() == (2, 9)


def test_text_range_ordering() -> None:
    assert TextRange(0, 2).ordering(TextRange(2, 4)) == -1
    assert TextRange(2, 4).ordering(TextRange(0, 2)) == 1
    assert TextRange(0, 3).ordering(TextRange(2, 4)) == 0


def test_slice_text_range() -> None:
    assert slice_text_range("héllo", TextRange(1, 3)) == "él"


def test_line_index_handles_all_line_endings() -> None:
    index = LineIndex("a\nbc\r\nd\re")

    assert index.line_count == 4
    assert index.line_col(TextSize(0)) == LineCol(0, 0)
    assert index.line_col(TextSize(3)) == LineCol(1, 1)
    assert index.line_col(TextSize(6)) == LineCol(2, 0)
    assert index.line_col(TextSize(9)) == LineCol(3, 1)
    assert index.offset(LineCol(2, 0)) == TextSize(6)


def test_line_index_rejects_out_of_range_positions() -> None:
    index = LineIndex("ab\ncd")

    with pytest.raises(ValueError):
        index.line_col(TextSize(6))
    with pytest.raises(ValueError):
        index.offset(LineCol(2, 0))
    with pytest.raises(ValueError):
        index.offset(LineCol(1, 3))


def test_line_index_of_empty_text() -> None:
    index = LineIndex("")

    assert index.line_count == 1
    assert index.line_col(TextSize(0)) == LineCol(0, 0)
