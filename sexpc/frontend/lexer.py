import os
import pathlib
from dataclasses import dataclass, field
from typing import List

from lark import Lark
from lark.exceptions import UnexpectedCharacters

from sexpc.errors import LexError
from sexpc.logger import SEXPC_LOG as LOG

PAREN = "paren"
NUMBER = "number"
NAME = "name"

# lark terminal name -> token kind
TERMINAL_KINDS = {
    "PAREN": PAREN,
    "NUMBER": NUMBER,
    "NAME": NAME,
}


@dataclass(frozen=True)
class Token:
    kind: str
    value: str
    pos: int = field(default=-1, compare=False)
    line: int = field(default=-1, compare=False)
    column: int = field(default=-1, compare=False)

    def __repr__(self):
        return f"{self.kind}({self.value!r})"


class SexpLexer:
    def __init__(self):
        cwd = pathlib.Path(__file__).parent
        with open(os.path.join(cwd, "sexp.lark"), "r") as file:
            grammar = file.read()
        self.lark_parser = Lark(grammar, start="start", parser="lalr", lexer="basic")

    def tokenize(self, text: str) -> List[Token]:
        tokens = []
        try:
            for t in self.lark_parser.lex(text):
                tokens.append(
                    Token(TERMINAL_KINDS[t.type], t.value, t.start_pos, t.line, t.column)
                )
        except UnexpectedCharacters as e:
            LOG.debug(f"lexing stopped at offset {e.pos_in_stream}")
            raise LexError(
                "unknown character", e.char, e.pos_in_stream, e.line, e.column
            ) from None
        LOG.debug(f"lexed {len(tokens)} tokens")
        return tokens


# built once, read-only afterwards
_lexer = SexpLexer()


def tokenize(text: str) -> List[Token]:
    """
    Split source text into paren, number and name tokens, in source order.

    Raises:
        LexError: on the first character that starts none of the three kinds.
    """
    return _lexer.tokenize(text)
