"""The fixed set of sort commands: each binds a comparator, and optionally
the task grouper, to the selection pipeline."""

from dataclasses import dataclass
from typing import Optional

from sorty.sorting import comparators
from sorty.sorting.comparators import Comparator
from sorty.sorting.sorter import GroupFn, Sorter, create_sorter
from sorty.sorting.tasks import group_task_lines


@dataclass(frozen=True)
class SortCommand:
    id: str
    name: str
    comparator: Comparator
    enabled_by_default: bool = True
    group_fn: Optional[GroupFn] = None

    def sorter(self) -> Sorter:
        return create_sorter(self.comparator, self.group_fn)


SORT_COMMANDS: tuple[SortCommand, ...] = (
    SortCommand('sorty-sort-lines', 'Sort Lines', comparators.alpha),
    SortCommand('sorty-sort-lines-reverse', 'Sort Lines (Reverse)', comparators.reverse_alpha),
    SortCommand('sorty-sort-lines-numeric', 'Sort Lines (Numeric)', comparators.numeric),
    SortCommand('sorty-sort-lines-numeric-reverse', 'Sort Lines (Numeric Reverse)', comparators.reverse_numeric),
    SortCommand('sorty-sort-tasks', 'Sort Tasks', comparators.tasks, group_fn=group_task_lines),
    SortCommand(
        'sorty-sort-tasks-by-completion',
        'Sort Tasks (By Completion)',
        comparators.tasks_by_completion,
        group_fn=group_task_lines,
    ),
)


def command_ids() -> list[str]:
    return [command.id for command in SORT_COMMANDS]


def get_command(command_id: str) -> SortCommand:
    for command in SORT_COMMANDS:
        if command.id == command_id:
            return command
    raise ValueError(f"unknown command '{command_id}' (expected one of: {', '.join(command_ids())})")
