from sexpc.frontend.lexer import SexpLexer, Token, tokenize
from sexpc.frontend.parser import SexpParser, parse
