"""Click handler for sorting the selected lines of a file."""

import click

from sorty.commands.options import load_settings, settings_option
from sorty.commands.registry import get_command
from sorty.editor.host import Position, Selection
from sorty.editor.line_ranges import line_range_from_selection
from sorty.editor.transform import transform_line_selections
from sorty.file_io import with_error_handling, with_text_buffer_update


def parse_selection(value: str) -> Selection:
    """Parse ``ANCHOR:HEAD`` (or a single ``LINE``), 1-based, into a Selection."""
    parts = value.split(":")
    if len(parts) > 2:
        raise ValueError(f"--select: expected ANCHOR:HEAD, got '{value}'")
    try:
        numbers = [int(part) for part in parts]
    except ValueError:
        raise ValueError(f"--select: line numbers must be integers, got '{value}'") from None
    if any(n < 1 for n in numbers):
        raise ValueError(f"--select: line numbers start at 1, got '{value}'")

    anchor, head = numbers[0], numbers[-1]
    return Selection(anchor=Position(anchor - 1, 0), head=Position(head - 1, 0))


def check_disjoint(selections: list[Selection]) -> None:
    """Reject selections that share lines; each range must be edited on its own."""
    ranges = sorted(
        (line_range_from_selection(s.anchor.line, s.head.line) for s in selections),
        key=lambda r: (r.from_line, r.to_line),
    )
    for upper, lower in zip(ranges, ranges[1:]):
        if lower.from_line <= upper.to_line:
            raise ValueError(
                f"--select: ranges {upper.from_line + 1}-{upper.to_line + 1} "
                f"and {lower.from_line + 1}-{lower.to_line + 1} overlap"
            )


def whole_text_selection(buffer) -> Selection:
    """Select every line, leaving out the empty line after a final newline."""
    last = buffer.line_count - 1
    if last > 0 and buffer.get_line(last) == '':
        last -= 1
    return Selection(anchor=Position(0, 0), head=Position(last, 0))


@click.command("sort")
@click.argument("text_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--command", "command_id", default="sorty-sort-lines", show_default=True,
              help="Sort command to run (see 'sorty commands')")
@click.option("--select", "selections", multiple=True,
              help="Lines to sort as ANCHOR:HEAD (1-based, repeatable); defaults to the whole file")
@settings_option
def sort_cmd(text_file, command_id, selections, settings_file):
    """Sort the selected lines of a file in place."""
    with with_error_handling():
        command = get_command(command_id)
        if not load_settings(settings_file).is_enabled(command.id):
            raise ValueError(f"command '{command.id}' is disabled (run 'sorty enable {command.id}')")
        parsed = [parse_selection(value) for value in selections]
        check_disjoint(parsed)

        with with_text_buffer_update(text_file) as buffer:
            buffer.set_selections(parsed or [whole_text_selection(buffer)])
            result = transform_line_selections(buffer, command.sorter())

    for line_range in result.skipped:
        click.echo(
            f"Skipped lines {line_range.from_line + 1}-{line_range.to_line + 1}: past the end of {text_file}",
            err=True,
        )
    for selection in result.selections:
        click.echo(f"{command.name}: lines {selection.anchor.line + 1}-{selection.head.line + 1} of {text_file}")


def register(group):
    """Register the sort command with the given Click group."""
    group.add_command(sort_cmd)
