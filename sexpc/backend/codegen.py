"""
Prints a target AST as C-like call statements.

Nodes are expanded on an explicit work stack: a node is printed once the
text of all its children is ready, and each ``visit*`` handler receives that
text as its context.
"""

from typing import List, Tuple

from sexpc.backend.node import *
from sexpc.errors import CodeGenError


class CGenerator:
    def visitNode(self, node: Node, parts: List[str]) -> str:
        raise CodeGenError(f"unknown node kind: {node.kind}")

    def visitProgram(self, node: Program, parts: List[str]) -> str:
        return "\n".join(parts)

    def visitExpressionStatement(self, node: ExpressionStatement, parts: List[str]) -> str:
        return parts[0] + ";"

    def visitCallExpression(self, node: CallExpression, parts: List[str]) -> str:
        callee, args = parts[0], parts[1:]
        return f"{callee}({', '.join(args)})"

    def visitIdentifier(self, node: Identifier, parts: List[str]) -> str:
        return node.name

    def visitNumberLiteral(self, node: NumberLiteral, parts: List[str]) -> str:
        return node.value


def children(node: Node) -> List[Node]:
    match node:
        case Program():
            return node.body
        case ExpressionStatement():
            return [node.expression]
        case CallExpression():
            return [node.callee, *node.arguments]
        case _:
            return []


def generate(node: Node) -> str:
    generator = CGenerator()
    results: List[str] = []
    # (node, whether its children are already on the stack)
    stack: List[Tuple[Node, bool]] = [(node, False)]
    while stack:
        current, expanded = stack.pop()
        if not isinstance(current, Node):
            raise CodeGenError(f"unknown node kind: {type(current).__name__}")
        kids = children(current)
        if not expanded:
            stack.append((current, True))
            stack.extend((kid, False) for kid in reversed(kids))
            continue
        split = len(results) - len(kids)
        parts = results[split:]
        del results[split:]
        results.append(current.accept(generator, parts))
    return results[0]
