"""Boundary between the sorting pipeline and the editor that owns the text."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass(frozen=True)
class Position:
    line: int
    ch: int


@dataclass(frozen=True)
class Selection:
    anchor: Position
    head: Position


class Editor(Protocol):
    """The four buffer operations the pipeline needs from its host."""

    def get_line(self, line: int) -> Optional[str]:
        """Text of one line, or None when ``line`` is out of range."""
        ...

    def replace_range(self, text: str, start: Position, end: Position) -> None:
        ...

    def list_selections(self) -> list[Selection]:
        ...

    def set_selections(self, selections: list[Selection]) -> None:
        ...
