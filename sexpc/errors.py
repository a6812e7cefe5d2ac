"""
Errors raised by the compilation pipeline.

Every stage fails fast: the first malformed construct aborts the whole
translation, so each error carries enough context to point at the defect.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from sexpc.frontend.lexer import Token


class CompileError(Exception):
    pass


class LexError(CompileError):
    def __init__(self, msg: str, char: str, pos: int, line: int, column: int):
        super().__init__(f"{msg} {char!r} at line {line}, column {column}")
        self.char = char
        self.pos = pos
        self.line = line
        self.column = column


class ParseError(CompileError):
    def __init__(self, msg: str, token: Optional[Token] = None):
        if token is not None:
            msg = f"{msg} (got {token.kind} {token.value!r} at line {token.line}, column {token.column})"
        else:
            msg = f"{msg} (got end of input)"
        super().__init__(msg)
        self.token = token


class TraversalError(CompileError, TypeError):
    pass


class CodeGenError(CompileError, TypeError):
    pass


class NestingError(CompileError):
    def __init__(self, what: str, depth: int):
        super().__init__(f"{what} failed: nesting depth {depth} is too deep")
        self.depth = depth
