"""AST node definitions for arithmetic expressions.

This module defines the AST node dataclasses produced by the parser. The
`NodeType` enum identifies node kinds and is used by the pretty-printer,
the JSON exporter and the Graphviz renderer.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`).
- Nodes are frozen: a tree is built bottom-up by the parser and never
    mutated afterwards. Each `BinaryOpNode` owns its two subtrees.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from tokens import TokenType, SYMBOLS


class NodeType(Enum):
    INT_LITERAL = auto()
    BINARY_OP = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType


@dataclass(frozen=True)
class IntLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    value: int = 0


@dataclass(frozen=True)
class BinaryOpNode(ASTNode):
    type: NodeType = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=lambda: IntLiteralNode())
    operator: TokenType = TokenType.PLUS
    right: ASTNode = field(default_factory=lambda: IntLiteralNode())

    @property
    def symbol(self) -> str:
        return SYMBOLS[self.operator]
