"""
Tokenizer for the mathexpr expression grammar.

Converts an expression string into a sequence of typed tokens.
Signs are emitted as PLUS/MINUS tokens; the grammar decides whether a sign
belongs to a number literal.
"""

from __future__ import annotations

import re
from enum import StrEnum, auto

from mathexpr.core.errors import make_syntax_error


class TokenKind(StrEnum):
    """Token types for the expression grammar."""

    # Literals
    NUMBER = auto()

    # Function names
    IDENT = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()

    # End of input
    EOF = auto()


class Token:
    """A single token from the expression tokenizer."""

    __slots__ = ("kind", "value", "pos")

    def __init__(self, kind: TokenKind, value: str, pos: int) -> None:
        self.kind = kind
        self.value = value
        self.pos = pos

    @property
    def end(self) -> int:
        """Offset just past the token."""
        return self.pos + len(self.value)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {self.value!r}, pos={self.pos})"


WHITESPACE = frozenset(" \t\n\r")

# Unsigned decimal: digits with an optional fraction, ASCII only
_NUMBER_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
# Identifier: letter or underscore followed by alphanumerics/underscores
_IDENT_RE = re.compile(r"[a-zA-Z_][a-zA-Z0-9_]*")

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    ",": TokenKind.COMMA,
}


def tokenize(source: str) -> list[Token]:
    """Tokenize an expression string into a list of tokens ending in EOF.

    Raises:
        ExpressionSyntaxError: On a character no token can start with.
    """
    tokens: list[Token] = []
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in WHITESPACE:
            i += 1
            continue

        if "0" <= c <= "9":
            m = _NUMBER_RE.match(source, i)
            assert m is not None
            tokens.append(Token(TokenKind.NUMBER, m.group(0), i))
            i = m.end()
            continue

        if c.isascii() and (c.isalpha() or c == "_"):
            m = _IDENT_RE.match(source, i)
            assert m is not None
            tokens.append(Token(TokenKind.IDENT, m.group(0), i))
            i = m.end()
            continue

        if c in _SINGLE_CHAR:
            tokens.append(Token(_SINGLE_CHAR[c], c, i))
            i += 1
            continue

        raise make_syntax_error(f"Unexpected character: {c!r}", source, i)

    tokens.append(Token(TokenKind.EOF, "", n))
    return tokens
