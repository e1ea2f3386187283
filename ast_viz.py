"""Graphviz visualization helpers for expression trees.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes the file to disk and requires the
Graphviz binaries to be installed.

Layout: each AST node becomes one graph node, labelled with its literal
value or operator symbol. Edges from an operator to its operands are
labelled `left` and `right` and drawn top-down. The tree is walked with an
explicit stack so long operator chains do not hit the recursion limit.
"""

from typing import Optional
from graphviz import Digraph
from ast_nodes import ASTNode, IntLiteralNode, BinaryOpNode


def render_ast_dot(node: ASTNode, fmt: str = "svg") -> Digraph:
    """Return a graphviz.Digraph for the given expression tree.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format=fmt)
    dot.attr("graph", rankdir="TB")
    dot.attr("node", fontname="Helvetica")

    # (node, parent graph node, edge label); pre-order, left before right
    stack = [(node, None, None)]
    counter = 0
    while stack:
        n, parent, edge_label = stack.pop()
        name = f"node_{counter}"
        counter += 1

        match n:
            case IntLiteralNode(value=v):
                dot.node(name, label=str(v), shape="box")
            case BinaryOpNode(left=left, right=right):
                dot.node(name, label=n.symbol, shape="circle")
                stack.append((right, name, "right"))
                stack.append((left, name, "left"))
            case _:
                raise TypeError(f"Cannot render node of type {type(n).__name__}")

        if parent is not None:
            dot.edge(parent, name, label=edge_label)

    return dot


def write_and_render(node: ASTNode, out_path: str, fmt: str = "svg") -> Optional[str]:
    """Write and render the tree to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create
    out/ast.png (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(node, fmt=fmt)
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
