"""Rendering of a single diagnostic block.

A block looks like::

    •••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••••
    bulloak error: unexpected token: world

    world
    ^^^^^

    --- (line 2, column 1) ---

Errors without a precise location (a degenerate span) stop after the message
line and carry no trailing newline.
"""

from __future__ import annotations

from dataclasses import dataclass

from .spans import Span
from .stages import StageError
from .utils import repeat_str


DIVIDER_CHAR = "•"
DIVIDER_WIDTH = 79
CARET = "^"
PREFIX = "bulloak error"


def _lines(text: str) -> list[str]:
    # "\n" delimited; a trailing newline does not open another line.
    out = text.split("\n")
    if out and out[-1] == "":
        out.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in out]


@dataclass(frozen=True, slots=True)
class Formatter:
    """Binds the inputs of one render call.

    Build one per diagnostic and drop it after ``render()``.
    """

    text: str
    kind: object
    span: Span

    @classmethod
    def of(cls, err: StageError) -> "Formatter":
        return cls(text=err.text, kind=err.kind, span=err.span)

    def render(self) -> str:
        parts = [repeat_str(DIVIDER_CHAR, DIVIDER_WIDTH), "\n"]
        if self.span.is_degenerate():
            parts.append(f"{PREFIX}: {self.kind}")
            return "".join(parts)

        parts.append(f"{PREFIX}: {self.kind}\n\n")
        parts.append(notate(self))
        parts.append("\n")
        parts.append(f"--- (line {self.span.start.line}, column {self.span.start.column}) ---\n")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()


def notate(f: Formatter) -> str:
    """Return the start line of ``f.span`` with carets under the flagged columns.

    Only the start line is shown. The caret count comes from the columns
    alone, so a span ending on a later line may underline past the end of
    the shown line. Returns ``""`` when the start line is not in the text.
    """
    start, end = f.span.start, f.span.end
    lines = _lines(f.text)
    if start.line < 1 or start.line > len(lines):
        return ""

    width = max(1, max(0, end.column - start.column) + 1)
    return "".join(
        [
            lines[start.line - 1],
            "\n",
            repeat_str(" ", start.column - 1),
            repeat_str(CARET, width),
            "\n",
        ]
    )
