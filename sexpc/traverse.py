"""
Generic pre-order walk over the source AST.

The walk only knows the shape of the tree. What happens at each node is left
to a Visitor, whose handler runs before the node's children are visited and
returns the context the children receive.

Pending nodes live on an explicit stack, so nesting depth is bounded by
memory and not by the interpreter's recursion limit.
"""

from __future__ import annotations

from typing import List, Tuple

from sexpc.errors import TraversalError
from sexpc.node import *
from sexpc.visitor import Visitor


def traverse(ast: Program, visitor: Visitor, ctx=None) -> None:
    # (node, parent, context handed down by the parent)
    stack: List[Tuple[Node, Node, object]] = [(ast, None, ctx)]
    while stack:
        node, parent, ctx = stack.pop()
        match node:
            case Program():
                ctx = visitor.visitProgram(node, parent, ctx)
                children = node.body
            case CallExpression():
                ctx = visitor.visitCallExpression(node, parent, ctx)
                children = node.params
            case NumberLiteral():
                visitor.visitNumberLiteral(node, parent, ctx)
                children = []
            case _:
                raise TraversalError(f"unknown node kind: {type(node).__name__}")
        # reversed, so the first child is popped first
        stack.extend((child, node, ctx) for child in reversed(children))
