"""TextBuffer — an in-memory Editor over the lines of a text."""

from typing import Optional

from sorty.editor.host import Position, Selection


class TextBuffer:
    """Holds text as a list of lines plus the current selections.

    Lines are split on ``\\n``; a text ending in a newline therefore has an
    empty last line, as in most editors.
    """

    def __init__(self, lines: list[str], selections: Optional[list[Selection]] = None):
        self._lines = list(lines)
        self._selections = list(selections or [])

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(text.split('\n'))

    def to_text(self) -> str:
        return '\n'.join(self._lines)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, line: int) -> Optional[str]:
        if 0 <= line < len(self._lines):
            return self._lines[line]
        return None

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        self._check_position(start)
        self._check_position(end)
        if (end.line, end.ch) < (start.line, start.ch):
            raise ValueError(f"range end {end} is before start {start}")

        before = self._lines[start.line][:start.ch]
        after = self._lines[end.line][end.ch:]
        replacement = (before + text + after).split('\n')
        self._lines[start.line:end.line + 1] = replacement

    def list_selections(self) -> list[Selection]:
        return list(self._selections)

    def set_selections(self, selections: list[Selection]) -> None:
        self._selections = list(selections)

    def _check_position(self, position: Position) -> None:
        line = self.get_line(position.line)
        if line is None:
            raise ValueError(f"line {position.line} does not exist")
        if position.ch < 0 or position.ch > len(line):
            raise ValueError(f"column {position.ch} is outside line {position.line}")
