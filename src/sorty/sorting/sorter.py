"""Sort lines, or blocks of grouped lines, with a comparator.

Sorting relies on ``sorted`` being stable: lines (or blocks) that compare
equal keep their input order. ``tasks_by_completion`` and every grouped
sort depend on this.
"""

from dataclasses import dataclass
from functools import cmp_to_key
from typing import Callable, Optional

from sorty.editor.line_ranges import SortOrder, sort_ranges
from sorty.sorting.comparators import Comparator


GroupFn = Callable[[list[str]], list[list[str]]]
Sorter = Callable[[list[str]], list[str]]


@dataclass
class SortedResult:
    sorted_lines: list[str]
    line_count: int


def sort_lines(lines: list[str], compare: Comparator, group_fn: Optional[GroupFn] = None) -> SortedResult:
    """Sort ``lines`` without modifying it.

    With ``group_fn``, lines are first split into blocks and each block is
    ordered by its first line; the remaining lines of a block travel with it
    in their original order.
    """
    if group_fn is not None:
        groups = sorted(group_fn(lines), key=cmp_to_key(lambda a, b: compare(a[0], b[0])))
        sorted_lines = [line for group in groups for line in group]
    else:
        sorted_lines = sorted(lines, key=cmp_to_key(compare))

    return SortedResult(sorted_lines=sorted_lines, line_count=len(sorted_lines))


def create_sorter(compare: Comparator, group_fn: Optional[GroupFn] = None) -> Sorter:
    def sorter(lines: list[str]) -> list[str]:
        return sort_lines(lines, compare, group_fn).sorted_lines

    return sorter


def sort_multiple_ranges(ranges, compare: Comparator, group_fn: Optional[GroupFn] = None):
    """Sort the content of several ranges, returned bottom range first.

    ``ranges`` holds ``RangeContent`` records; the result is a list of
    ``(LineRange, SortedResult)`` pairs in descending ``from_line`` order.
    """
    return [
        (content.range, sort_lines(content.lines, compare, group_fn))
        for content in sort_ranges(ranges, SortOrder.DESCENDING)
    ]
