"""
Source AST produced by the parser.
"""

from __future__ import annotations

from typing import List, Union

from sexpc.tree import Node as BaseNode


class Node(BaseNode):
    pass


class Program(Node):
    def __init__(self, body: List[Expr]):
        self.body = body


class CallExpression(Node):
    def __init__(self, name: str, params: List[Expr]):
        assert name, "call expression needs a name"
        self.name = name
        self.params = params


class NumberLiteral(Node):
    def __init__(self, value: str):
        # kept as text, never converted to a number
        self.value = value


Expr = Union[CallExpression, NumberLiteral]
