from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete source position.

    Offsets are 0-based bytes; line/column are 1-based for user-facing messages.
    """

    offset: int
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range a diagnostic refers to, from ``start`` to ``end``."""

    start: Position
    end: Position

    @classmethod
    def splat(cls, pos: Position) -> "Span":
        return cls(start=pos, end=pos)

    def is_degenerate(self) -> bool:
        # File-level errors carry no precise location.
        return self.start.offset == self.end.offset == 0

    def format(self) -> str:
        return f"{self.start.line}:{self.start.column}"
