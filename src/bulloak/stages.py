"""Failures reported by the individual pipeline stages.

The tokenizer, parser and semantic analyzer each describe a problem with one
immutable value carrying the source text, an error kind and a span. Those
values are wrapped into :class:`bulloak.errors.Error` before they leave the
pipeline.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .spans import Span


class TokenizerCode(str, Enum):
    IDENTIFIER_CHAR_INVALID = "invalid identifier: {0}"
    FILENAME_CHAR_INVALID = "invalid character in file name: {0}"
    CHARACTER_UNEXPECTED = "unexpected character: {0}"


class ParserCode(str, Enum):
    TOKEN_UNEXPECTED = "unexpected token: {0}"
    EOF_UNEXPECTED = "unexpected end of file"
    WHEN_UNEXPECTED = "unexpected `when` keyword"
    GIVEN_UNEXPECTED = "unexpected `given` keyword"
    IT_UNEXPECTED = "unexpected `it` keyword"
    CORNER_NOT_LAST_CHILD = "a `└` can only appear in the last node"
    TEE_LAST_CHILD = "a `├` can't appear in the last node"
    DESCRIPTION_MISSING = "found a node without a description: {0}"


class SemanticCode(str, Enum):
    CONDITION_EMPTY = "found a condition with no children"
    NODE_UNEXPECTED = "unexpected child node"
    IDENTIFIER_DUPLICATED = "found an identifier more than once: {0}"
    TREE_NAME_MISMATCH = "tree name does not match the contract name: {0}"
    FILE_NAME_MISSING = "file name missing at tree root"


@dataclass(frozen=True, slots=True)
class ErrorKind:
    """What went wrong, independent of where.

    ``code`` is a stage-specific enum member whose value is a message template
    filled positionally with ``args``.
    """

    code: Enum
    args: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        want = sum(1 for _, field, _, _ in string.Formatter().parse(self.code.value) if field is not None)
        if len(self.args) != want:
            raise TypeError(f"{self.code.name} takes {want} argument(s), got {len(self.args)}")

    def __str__(self) -> str:
        return self.code.value.format(*self.args)


@dataclass(frozen=True, slots=True)
class StageError:
    kind: ErrorKind
    text: str
    span: Span

    stage: ClassVar[str] = "<none>"
    codes: ClassVar[type[Enum] | None] = None

    def __post_init__(self) -> None:
        codes = type(self).codes
        if codes is None:
            raise TypeError(f"{type(self).__name__} is abstract; use a stage-specific error")
        if not isinstance(self.kind, ErrorKind):
            raise TypeError(f"expected ErrorKind, got {type(self.kind).__name__}")
        if not isinstance(self.kind.code, codes):
            raise TypeError(
                f"{self.stage} error cannot carry {type(self.kind.code).__name__}.{self.kind.code.name}"
            )

    def message(self) -> str:
        return str(self.kind)


@dataclass(frozen=True, slots=True)
class TokenizerError(StageError):
    stage: ClassVar[str] = "tokenizer"
    codes: ClassVar[type[Enum] | None] = TokenizerCode


@dataclass(frozen=True, slots=True)
class ParserError(StageError):
    stage: ClassVar[str] = "parser"
    codes: ClassVar[type[Enum] | None] = ParserCode


@dataclass(frozen=True, slots=True)
class SemanticsError(StageError):
    stage: ClassVar[str] = "semantic"
    codes: ClassVar[type[Enum] | None] = SemanticCode
