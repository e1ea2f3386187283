"""
Lexer for integer arithmetic expressions.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input string into a list of `Token` objects defined in
    `tokens.py`.
- It recognizes non-negative integer literals, the four arithmetic
    operators `+ - * /` and parentheses, and skips whitespace.

Examples:
    Input:  "3 + 5 * (10 - 2)"
    Tokens: [INTEGER(3), PLUS, INTEGER(5), STAR, LPAREN, INTEGER(10), MINUS,
             INTEGER(2), RPAREN, EOF]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`, with `peek_char()` for one character of lookahead.
- A `-` is always emitted as a MINUS token; signs are never folded into
    integer literals.
- Literals larger than a signed 64-bit integer are rejected with a
    `SyntaxError` rather than silently growing.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import Token, TokenType, INT_MAX

SINGLE_CHAR_TOKENS = {
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

ASCII_DIGITS = "0123456789"
INT_MAX_DIGITS = str(INT_MAX)


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.current_char = self.text[self.pos] if self.text else None

    def error(self, message: str = "") -> SyntaxError:
        return SyntaxError(f"Lexical error: {message}")

    def advance(self) -> None:
        """Advance to next character."""
        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        """Skip whitespace characters."""
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def integer(self) -> int:
        """Parse a multi-digit integer."""
        # `str.isdigit` accepts non-ASCII digits such as '٣', so check the
        # ASCII set explicitly.
        result = [self.current_char]
        while self.peek_char() is not None and self.peek_char() in ASCII_DIGITS:
            self.advance()
            result.append(self.current_char)
        self.advance()

        digits = "".join(result)
        # Range-check the text before converting it; `int()` refuses very long
        # digit strings.
        significant = digits.lstrip("0") or "0"
        if len(significant) > len(INT_MAX_DIGITS) or (
            len(significant) == len(INT_MAX_DIGITS) and significant > INT_MAX_DIGITS
        ):
            shown = digits if len(digits) <= 24 else f"{digits[:20]}..."
            raise self.error(f"integer literal {shown} out of range")
        return int(significant)

    def get_next_token(self) -> Token:
        """Lexical analyzer that returns tokens one at a time."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            token_type = SINGLE_CHAR_TOKENS.get(self.current_char)
            if token_type is not None:
                self.advance()
                return Token(token_type)

            if self.current_char in ASCII_DIGITS:
                return Token(TokenType.INTEGER, self.integer())

            raise self.error(f"Unrecognized character '{self.current_char}'")

        return Token(TokenType.EOF)

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string, ending with a single EOF."""
        tokens = []
        while True:
            token = self.get_next_token()
            tokens.append(token)
            if token.type == TokenType.EOF:
                break
        return tokens
