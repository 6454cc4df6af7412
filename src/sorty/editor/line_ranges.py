"""Line ranges covered by selections, and reading/writing them through an Editor."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sorty.editor.host import Editor, Position, Selection


class SortOrder(Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


@dataclass(frozen=True)
class LineRange:
    from_line: int
    to_line: int


@dataclass
class RangeContent:
    range: LineRange
    lines: list[str]


def line_range_from_selection(anchor: int, head: int) -> LineRange:
    """Lines spanned by a selection, whichever end the user dragged from."""
    return LineRange(from_line=min(anchor, head), to_line=max(anchor, head))


def sort_ranges(ranges: list, order: SortOrder = SortOrder.ASCENDING) -> list:
    """Order records carrying a ``range`` attribute by their first line."""
    return sorted(
        ranges,
        key=lambda r: r.range.from_line,
        reverse=order is SortOrder.DESCENDING,
    )


def get_line_range_content(editor: Editor, line_range: LineRange) -> Optional[RangeContent]:
    """Read every line of ``line_range``; None if any of them is missing."""
    lines = []
    for i in range(line_range.from_line, line_range.to_line + 1):
        line = editor.get_line(i)
        if line is None:
            return None
        lines.append(line)
    return RangeContent(range=line_range, lines=lines)


def replace_line_range(editor: Editor, line_range: LineRange, lines: list[str]) -> bool:
    """Replace whole lines ``from_line..to_line`` with ``lines``.

    Returns False, leaving the buffer untouched, when ``to_line`` no longer
    exists.
    """
    last_line = editor.get_line(line_range.to_line)
    if last_line is None:
        return False

    editor.replace_range(
        '\n'.join(lines),
        Position(line_range.from_line, 0),
        Position(line_range.to_line, len(last_line)),
    )
    return True


def line_selection(editor: Editor, from_line: int, to_line: int) -> Selection:
    last_line = editor.get_line(to_line)
    return Selection(
        anchor=Position(from_line, 0),
        head=Position(to_line, len(last_line) if last_line is not None else 0),
    )
