from typing import List, Optional

from sexpc.errors import ParseError
from sexpc.frontend.lexer import NAME, NUMBER, PAREN, Token
from sexpc.logger import SEXPC_LOG as LOG
from sexpc.node import *


class SexpParser:
    """
    Top-down parser over a token list.

    A single cursor is shared by every expression and never looks further
    ahead than the current token.
    """

    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.current = 0

    def peek(self) -> Optional[Token]:
        if self.current < len(self.tokens):
            return self.tokens[self.current]
        return None

    def advance(self) -> Token:
        token = self.tokens[self.current]
        self.current += 1
        return token

    def parse(self) -> Program:
        ast = Program([])
        while self.current < len(self.tokens):
            ast.body.append(self.walk())
        LOG.debug(f"parsed {len(ast.body)} top-level expressions")
        return ast

    def walk(self) -> Expr:
        """
        Reads one expression. Calls that are still open are kept on an
        explicit stack, innermost last, so nesting depth is not limited by
        the interpreter's recursion limit.
        """
        stack: List[CallExpression] = []
        while True:
            token = self.peek()
            if token is None:
                if stack:
                    raise ParseError(f"unterminated call to '{stack[-1].name}'")
                raise ParseError("unexpected end of input")

            if token.kind == NUMBER:
                self.advance()
                expr = NumberLiteral(token.value)
            elif token.kind == PAREN and token.value == "(":
                self.advance()
                head = self.peek()
                if head is None or head.kind != NAME:
                    raise ParseError("expected call name after '('", head)
                self.advance()
                stack.append(CallExpression(head.value, []))
                continue
            elif token.kind == PAREN and token.value == ")" and stack:
                self.advance()
                expr = stack.pop()
            else:
                raise ParseError(f"unexpected {token.kind} token", token)

            if not stack:
                return expr
            stack[-1].params.append(expr)


def parse(tokens: List[Token]) -> Program:
    return SexpParser(tokens).parse()
