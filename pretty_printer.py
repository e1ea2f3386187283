"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders it back as a fully parenthesized one-line expression. The
printer is intended for debugging, tests and the command-line driver.

Both walks use an explicit stack: long operator chains such as
`1 + 1 + ... + 1` build left-deep trees far deeper than Python's recursion
limit.

Examples:
    PrettyPrinter.print_ast(ast)
    PrettyPrinter.print_surface(ast)  # "(3 + (5 * (10 - 2)))"
"""

from __future__ import annotations
from ast_nodes import *


class PrettyPrinter:
    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        stack = [(node, indent, prefix)]

        while stack:
            current, depth, label = stack.pop()
            indent_str = " " * depth

            match current:
                case IntLiteralNode(value=v):
                    lines.append(f"{indent_str}{label}IntLiteral({v})")

                case BinaryOpNode(left=left, right=right):
                    lines.append(f"{indent_str}{label}BinaryOp({current.symbol})")
                    # right is pushed first so left is printed first
                    stack.append((right, depth + 2, "right: "))
                    stack.append((left, depth + 2, "left: "))

                case ASTNode():
                    lines.append(
                        f"{indent_str}{label}Unknown node type: {type(current)}"
                    )

                case _:
                    lines.append(f"{indent_str}{label}{current}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, fully parenthesized one-line form of an AST node.

        Every binary operation gets its own parentheses so the grouping the
        parser chose is visible, e.g. `8 - 3 - 2` prints as `((8 - 3) - 2)`.
        """
        if node is None:
            return ""

        # Items are either nodes still to render or finished text fragments.
        parts = []
        stack = [node]
        while stack:
            item = stack.pop()
            match item:
                case str():
                    parts.append(item)
                case IntLiteralNode(value=v):
                    parts.append(str(v))
                case BinaryOpNode(left=l, right=r):
                    stack.extend([")", r, f" {item.symbol} ", l, "("])
                case _:
                    s = PrettyPrinter.print_ast(item)
                    parts.append(" ".join(line.strip() for line in s.splitlines()))

        return "".join(parts)
