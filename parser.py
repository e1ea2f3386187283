"""
Parser for integer arithmetic expressions.

Overview and approach:
- This parser is a small hand-written recursive-descent parser. Each
    precedence level of the grammar is one method:

        expression := term ( ( '+' | '-' ) term )*
        term       := factor ( ( '*' | '/' ) factor )*
        factor     := INTEGER | '(' expression ')'

- `parse_expression()` handles the lowest precedence (`+ -`) and calls
    `parse_term()`, which handles `* /` and calls `parse_factor()`.
    `parse_factor()` recurses back into `parse_expression()` for the contents
    of parentheses.
- Both binary levels fold repeated operators into the left operand, so
    `8 - 3 - 2` parses as `(8 - 3) - 2`.

Key points:
- The cursor `self.pos` only moves forward; the grammar needs no
    backtracking. Reading past the end of the token list yields `None`.
- The first error raises `SyntaxError`; there is no recovery.
- By default trailing tokens after a complete expression are ignored
    (`"2 + 3)"` parses as `2 + 3`). Pass `strict=True` to reject them.
- `trace=True` prints every peek/advance and parse step.
- Parentheses may nest at most `MAX_NESTING` levels deep; deeper input is
    rejected with `SyntaxError` before the Python call stack runs out.
"""

from __future__ import annotations
from typing import List, Optional
from tokens import Token, TokenType
from ast_nodes import *

# Each parenthesis level costs three stack frames (expression, term, factor).
MAX_NESTING = 200


class Parser:
    def __init__(self, tokens: List[Token], strict: bool = False, trace: bool = False):
        self.tokens = tokens
        self.pos = 0
        self.strict = strict
        self.trace = trace
        self.depth = 0

    def _trace(self, message: str) -> None:
        if self.trace:
            print(message)

    def peek(self) -> Optional[Token]:
        """Return the token at the cursor without consuming it."""
        token = self.tokens[self.pos] if self.pos < len(self.tokens) else None
        self._trace(f"Peeking: {self.pos} -> {token}")
        return token

    def advance(self) -> Optional[Token]:
        """Consume and return the token at the cursor."""
        if self.pos >= len(self.tokens):
            self._trace(f"Advancing: {self.pos} -> None")
            return None
        token = self.tokens[self.pos]
        self._trace(f"Advancing: {self.pos} -> {token}")
        self.pos += 1
        return token

    @staticmethod
    def describe(token: Optional[Token]) -> str:
        if token is None or token.type == TokenType.EOF:
            return "end of input"
        return f"'{token.lexeme}'"

    def parse_factor(self) -> ASTNode:
        """Parse an integer literal or a parenthesized expression."""
        index = self.pos
        token = self.advance()

        if token is None or token.type == TokenType.EOF:
            raise SyntaxError("Unexpected end of input")

        match token.type:
            case TokenType.INTEGER:
                self._trace(f"Parsed integer: {token.value}")
                return IntLiteralNode(value=token.value)

            case TokenType.LPAREN:
                self._trace("Parsing subexpression inside parentheses")
                if self.depth >= MAX_NESTING:
                    raise SyntaxError(
                        f"Expression nested too deeply (more than {MAX_NESTING} "
                        f"parentheses) at position {index}"
                    )
                self.depth += 1
                expr = self.parse_expression()
                self.depth -= 1
                closing = self.peek()
                if closing is not None and closing.type == TokenType.RPAREN:
                    self.advance()
                    self._trace("Matched closing parenthesis")
                    return expr
                raise SyntaxError(f"Expected ')' but found {self.describe(closing)}")

            case _:
                raise SyntaxError(
                    f"Unexpected token {self.describe(token)} at position {index}"
                )

    def parse_term(self) -> ASTNode:
        """Parse a run of factors joined by `*` or `/`."""
        node = self.parse_factor()

        while True:
            token = self.peek()
            if token is None or token.type not in (TokenType.STAR, TokenType.SLASH):
                break
            self.advance()
            right = self.parse_factor()
            node = BinaryOpNode(left=node, operator=token.type, right=right)

        return node

    def parse_expression(self) -> ASTNode:
        """Parse a run of terms joined by `+` or `-`."""
        node = self.parse_term()

        while True:
            token = self.peek()
            if token is None or token.type not in (TokenType.PLUS, TokenType.MINUS):
                break
            self.advance()
            right = self.parse_term()
            node = BinaryOpNode(left=node, operator=token.type, right=right)

        return node

    def parse(self) -> ASTNode:
        """Parse the token list into a single expression tree."""
        ast = self.parse_expression()

        if self.strict:
            token = self.peek()
            if token is not None and token.type != TokenType.EOF:
                raise SyntaxError(
                    f"Unexpected trailing token {self.describe(token)} "
                    f"at position {self.pos}"
                )

        return ast
