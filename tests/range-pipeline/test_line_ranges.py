"""Unit tests for line range helpers."""

from dataclasses import dataclass

from fake_editor import FakeEditor

from sorty.editor.host import Position, Selection
from sorty.editor.line_ranges import (
    LineRange,
    RangeContent,
    SortOrder,
    get_line_range_content,
    line_range_from_selection,
    line_selection,
    replace_line_range,
    sort_ranges,
)


class TestLineRangeFromSelection:

    def test_anchor_before_head(self):
        assert line_range_from_selection(5, 10) == LineRange(from_line=5, to_line=10)

    def test_head_before_anchor(self):
        assert line_range_from_selection(10, 5) == LineRange(from_line=5, to_line=10)

    def test_single_line(self):
        assert line_range_from_selection(7, 7) == LineRange(from_line=7, to_line=7)

    def test_line_zero(self):
        assert line_range_from_selection(0, 5) == LineRange(from_line=0, to_line=5)


@dataclass
class _Ranged:
    range: LineRange
    name: str


class TestSortRanges:

    RANGES = [_Ranged(LineRange(4, 5), 'middle'), _Ranged(LineRange(9, 9), 'bottom'), _Ranged(LineRange(0, 2), 'top')]

    def test_ascending_by_default(self):
        assert [r.name for r in sort_ranges(self.RANGES)] == ['top', 'middle', 'bottom']

    def test_descending(self):
        assert [r.name for r in sort_ranges(self.RANGES, SortOrder.DESCENDING)] == ['bottom', 'middle', 'top']

    def test_does_not_modify_input(self):
        ranges = list(self.RANGES)
        sort_ranges(ranges, SortOrder.DESCENDING)
        assert ranges == self.RANGES


class TestGetLineRangeContent:

    def test_reads_every_line_of_range(self):
        editor = FakeEditor(['a', 'b', 'c', 'd'])
        assert get_line_range_content(editor, LineRange(1, 2)) == RangeContent(LineRange(1, 2), ['b', 'c'])

    def test_missing_line_gives_none(self):
        editor = FakeEditor(['a', 'b'])
        assert get_line_range_content(editor, LineRange(1, 3)) is None


class TestReplaceLineRange:

    def test_replaces_whole_lines(self):
        editor = FakeEditor(['keep', 'bb', 'a', 'keep'])
        assert replace_line_range(editor, LineRange(1, 2), ['a', 'bb']) is True
        assert editor.lines == ['keep', 'a', 'bb', 'keep']
        assert editor.calls_named("replace_range") == [
            ("replace_range", 'a\nbb', Position(1, 0), Position(2, 1)),
        ]

    def test_missing_last_line_leaves_buffer_alone(self):
        editor = FakeEditor(['a', 'b'])
        assert replace_line_range(editor, LineRange(0, 2), ['x', 'y', 'z']) is False
        assert editor.lines == ['a', 'b']
        assert editor.calls_named("replace_range") == []


class TestLineSelection:

    def test_spans_whole_lines(self):
        editor = FakeEditor(['first', 'second', 'third'])
        assert line_selection(editor, 0, 2) == Selection(anchor=Position(0, 0), head=Position(2, 5))
