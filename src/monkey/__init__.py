from .lexer import Lexer, tokenize
from .tokens import KEYWORDS, Token, TokenKind, lookup_ident

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenKind",
    "KEYWORDS",
    "lookup_ident",
]
