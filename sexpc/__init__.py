import os
from dataclasses import dataclass
from pathlib import Path
from typing import List

from sexpc import node as source
from sexpc.backend import node as target
from sexpc.backend.codegen import generate
from sexpc.backend.transformer import transform
from sexpc.errors import CodeGenError, CompileError, LexError, ParseError, TraversalError
from sexpc.frontend.lexer import Token, tokenize
from sexpc.frontend.parser import parse
from sexpc.logger import SEXPC_LOG as LOG

root_base_dir = Path(__file__).parent.parent
sexpc_base_dir = os.path.join(root_base_dir, "sexpc")
examples_base_dir = os.path.join(root_base_dir, "examples")


@dataclass
class Stages:
    tokens: List[Token]
    ast: source.Program
    new_ast: target.Program
    output: str


def compile_stages(text: str) -> Stages:
    """
    Runs the whole pipeline and keeps every intermediate result.

    Args:
        text (str): Source program in the s-expression language.

    Raises:
        CompileError: The first lexing, parsing, traversal or code generation
            failure. Nothing is returned on failure.
    """
    # Step 1: Split the source text into tokens
    tokens = tokenize(text)
    # Step 2: Build the source AST
    ast = parse(tokens)
    # Step 3: Rebuild it in the shape of the target language
    new_ast = transform(ast)
    # Step 4: Print the target AST
    output = generate(new_ast)
    LOG.debug(f"compiled {len(text)} chars into {len(output)} chars")
    return Stages(tokens, ast, new_ast, output)


def compile(text: str) -> str:
    return compile_stages(text).output
