from __future__ import annotations

from typing import List

from sexpc import node as source
from sexpc.backend import node as target
from sexpc.logger import SEXPC_LOG as LOG
from sexpc.traverse import traverse
from sexpc.visitor import Visitor


class CTransformer(Visitor):
    """
    Rebuilds the source AST as a target AST.

    The context threaded through the walk is the list that converted nodes
    are appended to: the target program body at top level, and a call's
    ``arguments`` list below it.
    """

    def emit(self, expr: target.Expr, parent: source.Node, ctx: List[target.Node]):
        # only top-level expressions become statements
        if not isinstance(parent, source.CallExpression):
            expr = target.ExpressionStatement(expr)
        ctx.append(expr)

    def visitNumberLiteral(self, node: source.NumberLiteral, parent: source.Node, ctx):
        self.emit(target.NumberLiteral(node.value), parent, ctx)
        return ctx

    def visitCallExpression(self, node: source.CallExpression, parent: source.Node, ctx):
        expression = target.CallExpression(target.Identifier(node.name), [])
        self.emit(expression, parent, ctx)
        return expression.arguments


def transform(ast: source.Program) -> target.Program:
    new_ast = target.Program([])
    traverse(ast, CTransformer(), new_ast.body)
    LOG.debug(f"transformed {len(new_ast.body)} statements")
    return new_ast
