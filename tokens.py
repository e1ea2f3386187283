"""Token definitions for the lexer.

This module defines the `TokenType` enum for the token kinds recognized by
the arithmetic lexer and a small frozen `Token` dataclass holding a token
type and, for integer literals, the literal's value. Tokens are the atomic
units produced by the lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional


class TokenType(Enum):
    # Literals
    INTEGER = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()

    # Parentheses
    LPAREN = auto()
    RPAREN = auto()

    # Special
    EOF = auto()

    def __str__(self) -> str:
        return self.name


# Operator tokens that may appear in a BinaryOpNode.
ARITHMETIC_OPERATORS = frozenset(
    {TokenType.PLUS, TokenType.MINUS, TokenType.STAR, TokenType.SLASH}
)

SYMBOLS = {
    TokenType.PLUS: "+",
    TokenType.MINUS: "-",
    TokenType.STAR: "*",
    TokenType.SLASH: "/",
    TokenType.LPAREN: "(",
    TokenType.RPAREN: ")",
}

# Literals are stored as signed 64-bit integers.
INT_MAX = 2**63 - 1


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: Optional[int] = None

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.value)})"

    @property
    def lexeme(self) -> str:
        if self.value is not None:
            return str(self.value)
        return SYMBOLS.get(self.type, str(self.type))
