"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/primitives describing the AST node. Operators are encoded by their
source character. The tree is walked with an explicit stack so left-deep
operator chains do not exhaust the recursion limit.
"""

from typing import Any, Dict, List, Optional, Tuple
from ast_nodes import *


def _leaf_or_shell(node: ASTNode) -> Dict[str, Any]:
    t = node.type
    if t == NodeType.INT_LITERAL and isinstance(node, IntLiteralNode):
        return {"node_type": "IntLiteral", "value": node.value}
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {"node_type": "BinaryOp", "operator": node.symbol}

    raise TypeError(f"Cannot serialize node of type {type(node).__name__}")


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    root = _leaf_or_shell(node)
    # (node, dict to fill with its children)
    pending: List[Tuple[ASTNode, Dict[str, Any]]] = [(node, root)]
    while pending:
        current, data = pending.pop()
        if isinstance(current, BinaryOpNode):
            data["left"] = _leaf_or_shell(current.left)
            data["right"] = _leaf_or_shell(current.right)
            pending.append((current.left, data["left"]))
            pending.append((current.right, data["right"]))

    return root
