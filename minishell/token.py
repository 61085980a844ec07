"""Lexical tokens produced by the lexer and consumed by the parser."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class TokenType(IntEnum):
    """Kinds of token the lexer can emit."""

    WORD = 0
    AND_IF = 1
    OR_IF = 2
    L_PARENTHESIS = 3
    R_PARENTHESIS = 4
    PIPE = 5
    LESS = 6
    DLESS = 7
    GREAT = 8
    DGREAT = 9
    EOF = 10
    UNTERMINATED_QUOTE = 11
    UNKNOWN = 12


@dataclass(frozen=True)
class Token:
    """A single token: its kind and the text it was built from, if any."""

    type: TokenType
    value: str | None = None