import dataclasses

import pytest

from tests.utils import parse_text
from ast_nodes import *
from tokens import ARITHMETIC_OPERATORS


def _walk(node):
    yield node
    if isinstance(node, BinaryOpNode):
        yield from _walk(node.left)
        yield from _walk(node.right)


def test_binary_operators_are_arithmetic_tokens():
    ast = parse_text("1 + 2 * (3 - 4) / 5 - 6")
    ops = [n.operator for n in _walk(ast) if isinstance(n, BinaryOpNode)]
    assert len(ops) == 5
    assert all(o in ARITHMETIC_OPERATORS for o in ops)


def test_subtrees_are_not_shared():
    ast = parse_text("(1 + 1) * (1 + 1)")
    ids = [id(n) for n in _walk(ast)]
    assert len(ids) == len(set(ids))


def test_nodes_are_immutable():
    ast = parse_text("1 + 2")
    with pytest.raises(dataclasses.FrozenInstanceError):
        ast.left = IntLiteralNode(value=3)


def test_node_types_match_classes():
    ast = parse_text("7 * 8")
    assert ast.type == NodeType.BINARY_OP
    assert ast.left.type == NodeType.INT_LITERAL
    assert ast.symbol == "*"
