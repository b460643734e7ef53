from __future__ import annotations

from .diagnostics import Formatter, notate
from .errors import Error, Parse, Semantic, Tokenize, from_parser, from_semantics, from_tokenizer, render
from .spans import Position, Span
from .stages import (
    ErrorKind,
    ParserCode,
    ParserError,
    SemanticCode,
    SemanticsError,
    StageError,
    TokenizerCode,
    TokenizerError,
)

__all__ = [
    "Error",
    "ErrorKind",
    "Formatter",
    "Parse",
    "ParserCode",
    "ParserError",
    "Position",
    "Semantic",
    "SemanticCode",
    "SemanticsError",
    "Span",
    "StageError",
    "Tokenize",
    "TokenizerCode",
    "TokenizerError",
    "from_parser",
    "from_semantics",
    "from_tokenizer",
    "notate",
    "render",
]
