"""Split a command line into tokens."""

from __future__ import annotations

from collections.abc import Iterator

from minishell.token import Token, TokenType

_BLANKS = frozenset(" \t")
_QUOTES = frozenset("'\"")
_OPERATOR_CHARS = frozenset("|&<>()")

# Longer operators come before their one-character prefixes.
_OPERATORS = (
    ("&&", TokenType.AND_IF),
    ("||", TokenType.OR_IF),
    ("(", TokenType.L_PARENTHESIS),
    (")", TokenType.R_PARENTHESIS),
    ("|", TokenType.PIPE),
    ("<<", TokenType.DLESS),
    ("<", TokenType.LESS),
    (">>", TokenType.DGREAT),
    (">", TokenType.GREAT),
)

_TERMINAL_TYPES = frozenset(
    {TokenType.EOF, TokenType.UNTERMINATED_QUOTE, TokenType.UNKNOWN}
)


def _is_single_ampersand(text: str, pos: int) -> bool:
    return text[pos] == "&" and text[pos + 1:pos + 2] != "&"


def _scan(text: str) -> Iterator[Token]:
    """Yield tokens from text, ending with EOF or an unterminated quote."""
    left = right = 0
    end = len(text)
    while True:
        if right >= end:
            if right == left:
                yield Token(TokenType.EOF)
                return
            yield Token(TokenType.WORD, text[left:right])
            left = right
            continue

        char = text[right]

        if char in _BLANKS:
            word = text[left:right] if right != left else None
            while right < end and text[right] in _BLANKS:
                right += 1
            left = right
            if word is not None:
                yield Token(TokenType.WORD, word)
            continue

        if char in _OPERATOR_CHARS and not _is_single_ampersand(text, right):
            if right == left:
                for operator, kind in _OPERATORS:
                    if text.startswith(operator, right):
                        yield Token(kind, operator)
                        right += len(operator)
                        left = right
                        break
            else:
                yield Token(TokenType.WORD, text[left:right])
                left = right
            continue

        if char == "#" and right == left:
            yield Token(TokenType.EOF)
            return

        if char in _QUOTES:
            closing = text.find(char, right + 1)
            if closing == -1:
                yield Token(TokenType.UNTERMINATED_QUOTE, text[right:])
                return
            right = closing + 1
            continue

        right += 1


def tokenize(text: str) -> list[Token]:
    """Split text into tokens.

    The result always ends with exactly one terminal token: EOF, or
    UNTERMINATED_QUOTE holding the text from the opening quote onwards.
    Quotes are kept inside words; a '#' at the start of a word begins a
    comment that runs to the end of the line.
    """
    tokens: list[Token] = []
    for token in _scan(text):
        tokens.append(token)
        if token.type in _TERMINAL_TYPES:
            break
    return tokens