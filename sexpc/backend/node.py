"""
Target AST, shaped after the C-like output grammar.
"""

from __future__ import annotations

from typing import List, Union

from sexpc.tree import Node as BaseNode


class Node(BaseNode):
    pass


class Program(Node):
    def __init__(self, body: List[ExpressionStatement]):
        self.body = body


class ExpressionStatement(Node):
    def __init__(self, expression: Expr):
        self.expression = expression


class Identifier(Node):
    def __init__(self, name: str):
        self.name = name


class CallExpression(Node):
    def __init__(self, callee: Identifier, arguments: List[Expr]):
        self.callee = callee
        self.arguments = arguments


class NumberLiteral(Node):
    def __init__(self, value: str):
        self.value = value


Expr = Union[CallExpression, NumberLiteral]
