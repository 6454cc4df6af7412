"""Task line grammar and grouping of nested task blocks."""

from dataclasses import dataclass
import re
from typing import Optional


_COMPLETED_MARKERS = 'xX'
_TASK_LINE_RE = re.compile(r'^(\s*)- \[([xX ])\] (.*)$')
_LEADING_WHITESPACE_RE = re.compile(r'^\s*')


@dataclass(frozen=True)
class TaskLine:
    indent: str
    marker: str
    label: str

    @property
    def is_completed(self) -> bool:
        return self.marker in _COMPLETED_MARKERS


def parse_task_line(line: str) -> Optional[TaskLine]:
    """Split a task line into indentation, marker and label.

    Returns None for plain lines, i.e. anything not shaped like ``- [ ] label``,
    ``- [x] label`` or ``- [X] label`` after optional leading whitespace.
    """
    m = _TASK_LINE_RE.match(line)
    if m is None:
        return None
    return TaskLine(indent=m.group(1), marker=m.group(2), label=m.group(3))


def is_task(line: str) -> bool:
    return parse_task_line(line) is not None


def is_top_level_task(line: str) -> bool:
    task = parse_task_line(line)
    return task is not None and task.indent == ''


def is_completed_task(line: str) -> bool:
    task = parse_task_line(line)
    return task is not None and task.is_completed


def task_label(line: str) -> str:
    """Label of a task line, or the whole line when it is not a task."""
    task = parse_task_line(line)
    return task.label if task is not None else line


def indentation_level(line: str) -> int:
    """Number of leading whitespace characters; tabs count as one."""
    return len(_LEADING_WHITESPACE_RE.match(line).group(0))


def group_task_lines(lines: list[str]) -> list[list[str]]:
    """Partition lines into blocks of one task plus its nested lines.

    A block opens at every task line indented no deeper than the task that
    opened the previous block. Deeper task lines and all plain lines join the
    open block. Plain lines ahead of the first task form a block of their own.
    A task shallower than the current baseline opens a new block and becomes
    the new baseline; there is no attempt to climb back to an ancestor level.

    Concatenating the returned blocks gives back ``lines`` unchanged.
    """
    groups: list[list[str]] = []
    current: list[str] = []
    base_indent: Optional[int] = None

    for line in lines:
        if not is_task(line):
            current.append(line)
            continue

        indent = indentation_level(line)
        if base_indent is not None and indent > base_indent:
            current.append(line)
            continue

        if current:
            groups.append(current)
        current = [line]
        base_indent = indent

    if current:
        groups.append(current)

    return groups
