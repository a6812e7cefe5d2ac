"""
Module that defines the base type of visitor over the source AST.

Handlers take ``(node, parent, ctx)`` and return the context handed to the
node's children. The defaults are no-ops that pass the context through.
"""

from __future__ import annotations

from abc import ABC

from sexpc.node import *


class Visitor(ABC):
    def visitProgram(self, node: Program, parent: Node, ctx):
        return ctx

    def visitCallExpression(self, node: CallExpression, parent: Node, ctx):
        return ctx

    def visitNumberLiteral(self, node: NumberLiteral, parent: Node, ctx):
        return ctx
