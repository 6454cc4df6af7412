"""Apply a line transformer to every selection of an editor."""

from dataclasses import dataclass, field
import logging
from typing import Callable

from sorty.editor.host import Editor, Selection
from sorty.editor.line_ranges import (
    LineRange,
    SortOrder,
    get_line_range_content,
    line_range_from_selection,
    line_selection,
    replace_line_range,
    sort_ranges,
)


logger = logging.getLogger(__name__)

Transformer = Callable[[list[str]], list[str]]


@dataclass
class TransformResult:
    applied: list[LineRange] = field(default_factory=list)
    skipped: list[LineRange] = field(default_factory=list)
    selections: list[Selection] = field(default_factory=list)


@dataclass
class _PendingEdit:
    order: int
    range: LineRange
    lines: list[str]


def transform_line_selections(editor: Editor, transformer: Transformer) -> TransformResult:
    """Replace the lines under each selection with ``transformer(lines)``.

    Edits are applied from the bottom of the buffer upwards so that earlier
    edits never move the lines of ranges still waiting to be edited. The new
    selections each cover their whole range and are handed back to the
    editor top to bottom, matching the order the editor listed them in.

    A range with a line the editor can no longer read is left alone and gets
    no selection; the other ranges are still applied.
    """
    result = TransformResult()
    selections = editor.list_selections()
    if not selections:
        return result

    pending = []
    for order, selection in enumerate(selections):
        line_range = line_range_from_selection(selection.anchor.line, selection.head.line)
        content = get_line_range_content(editor, line_range)
        if content is None:
            _skip(result, line_range)
            continue
        pending.append(_PendingEdit(order, line_range, transformer(content.lines)))

    applied = []
    for edit in sort_ranges(pending, SortOrder.DESCENDING):
        if not replace_line_range(editor, edit.range, edit.lines):
            _skip(result, edit.range)
            continue
        logger.debug("Replaced lines %d-%d", edit.range.from_line, edit.range.to_line)
        to_line = edit.range.from_line + len(edit.lines) - 1
        applied.append((edit.order, edit.range, line_selection(editor, edit.range.from_line, to_line)))

    applied.sort(key=lambda a: (a[1].from_line, a[0]))
    result.applied = [line_range for _, line_range, _ in applied]
    result.selections = [selection for _, _, selection in applied]

    if result.selections:
        editor.set_selections(result.selections)
    return result


def _skip(result: TransformResult, line_range: LineRange) -> None:
    logger.info("Skipping lines %d-%d: no longer in the buffer", line_range.from_line, line_range.to_line)
    result.skipped.append(line_range)
