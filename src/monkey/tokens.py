"""
Monkey token kinds and keyword lookup.

Every kind's value is the spelling the REPL prints for it.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TokenKind(Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers / literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"
    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "return": TokenKind.RETURN,
    }
)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    lexeme: str


def lookup_ident(text: str) -> TokenKind:
    """Keyword kind for an exact reserved spelling, otherwise IDENT."""
    return KEYWORDS.get(text, TokenKind.IDENT)


__all__ = ["Token", "TokenKind", "KEYWORDS", "lookup_ident"]
