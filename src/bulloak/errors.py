"""The error returned by one run of the tree pipeline.

Tokenizer and parser failures stop the pipeline, so :class:`Tokenize` and
:class:`Parse` hold exactly one stage error. Semantic analysis keeps going and
reports everything it finds, so :class:`Semantic` holds all of them in
detection order.

Match on these with a catch-all branch: more variants may be added.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TextIO

from .diagnostics import Formatter
from .stages import ParserError, SemanticsError, StageError, TokenizerError


logger = logging.getLogger(__name__)


class Error(Exception):
    """Base of every error the pipeline returns."""

    def render(self) -> str:
        return render(self)

    def emit(self, file: TextIO | None = None) -> None:
        """Write the rendered diagnostics verbatim to ``file`` (stderr by default)."""
        stream = sys.stderr if file is None else file
        stream.write(self.render())

    def __str__(self) -> str:
        return self.render()


def _expect(err: object, cls: type[StageError]) -> None:
    if not isinstance(err, cls):
        raise TypeError(f"expected {cls.__name__}, got {type(err).__name__}")


@dataclass(slots=True)
class Tokenize(Error):
    error: TokenizerError

    def __post_init__(self) -> None:
        _expect(self.error, TokenizerError)

    @property
    def errors(self) -> tuple[StageError, ...]:
        return (self.error,)


@dataclass(slots=True)
class Parse(Error):
    error: ParserError

    def __post_init__(self) -> None:
        _expect(self.error, ParserError)

    @property
    def errors(self) -> tuple[StageError, ...]:
        return (self.error,)


@dataclass(slots=True)
class Semantic(Error):
    errors: tuple[SemanticsError, ...]

    def __post_init__(self) -> None:
        self.errors = tuple(self.errors)
        if not self.errors:
            raise ValueError("Semantic requires at least one error")
        for err in self.errors:
            _expect(err, SemanticsError)


class _Nonexhaustive(Error):
    """Reserved for future variants. Never constructed, never rendered."""


def from_tokenizer(err: TokenizerError) -> Tokenize:
    return Tokenize(err)


def from_parser(err: ParserError) -> Parse:
    return Parse(err)


def from_semantics(errs: Iterable[SemanticsError]) -> Semantic:
    return Semantic(tuple(errs))


def render(err: Error) -> str:
    """Render every stage error held by ``err`` as concatenated diagnostic blocks."""
    if isinstance(err, (Tokenize, Parse)):
        logger.debug("rendering %s error at %s: %s", err.error.stage, err.error.span.format(), err.error.message())
        return Formatter.of(err.error).render()
    if isinstance(err, Semantic):
        logger.debug("rendering %d semantic error(s)", len(err.errors))
        return "".join(Formatter.of(e).render() for e in err.errors)
    raise AssertionError(f"unreachable: no renderer for {type(err).__name__}")
