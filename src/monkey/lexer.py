"""
Monkey lexer.

Single-pass scanner that hands out one token per `next_token()` call. Every
character of the input ends up either skipped as whitespace or inside some
token's lexeme; characters the language doesn't know become ILLEGAL tokens,
so scanning never fails. Once the input is exhausted the lexer keeps
returning EOF.
"""

import string
from typing import Iterator, List, Optional

from .tokens import Token, TokenKind, lookup_ident

WHITESPACE = frozenset(" \t\n\r")
# `?` and `!` are identifier characters: `valid?` and `mutate!` are names.
LETTERS = frozenset(string.ascii_letters + "_?!")
DIGITS = frozenset(string.digits)

SINGLE_CHAR_TOKENS = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.ASTERISK,
    "/": TokenKind.SLASH,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
}

# First char -> (kind alone, kind when followed by "=")
EQ_SUFFIX_TOKENS = {
    "=": (TokenKind.ASSIGN, TokenKind.EQ),
    "!": (TokenKind.BANG, TokenKind.NOT_EQ),
}


def is_letter(ch: Optional[str]) -> bool:
    return ch is not None and ch in LETTERS


def is_digit(ch: Optional[str]) -> bool:
    return ch is not None and ch in DIGITS


class Lexer:
    def __init__(self, source: str):
        self.source = source
        self.length = len(source)
        self.pos = 0
        self.read_pos = 0
        # None once the cursor is past the end of the source
        self.ch: Optional[str] = None
        self._read_char()

    def next_token(self) -> Token:
        self._skip_whitespace()
        ch = self.ch

        if ch is None:
            return Token(TokenKind.EOF, "")

        if ch in EQ_SUFFIX_TOKENS:
            single, double = EQ_SUFFIX_TOKENS[ch]
            if self.peek_char() == "=":
                self._read_char()
                tok = Token(double, ch + self.ch)
            else:
                tok = Token(single, ch)
        elif ch in SINGLE_CHAR_TOKENS:
            tok = Token(SINGLE_CHAR_TOKENS[ch], ch)
        elif is_letter(ch):
            text = self._read_identifier()
            return Token(lookup_ident(text), text)
        elif is_digit(ch):
            return Token(TokenKind.INT, self._read_number())
        else:
            tok = Token(TokenKind.ILLEGAL, ch)

        self._read_char()
        return tok

    def peek_char(self) -> Optional[str]:
        """Character after the current one, without consuming anything."""
        if self.read_pos >= self.length:
            return None
        return self.source[self.read_pos]

    def scan(self) -> List[Token]:
        """Drain the remaining tokens; the list always ends with EOF."""
        tokens = list(self)
        tokens.append(self.next_token())
        return tokens

    def __iter__(self) -> Iterator[Token]:
        # Stops before EOF; the lexer is consumed as it goes.
        while True:
            tok = self.next_token()
            if tok.kind is TokenKind.EOF:
                return
            yield tok

    def _read_char(self) -> None:
        if self.read_pos >= self.length:
            self.ch = None
        else:
            self.ch = self.source[self.read_pos]
        self.pos = self.read_pos
        self.read_pos += 1

    def _skip_whitespace(self) -> None:
        while self.ch is not None and self.ch in WHITESPACE:
            self._read_char()

    def _read_identifier(self) -> str:
        start = self.pos
        while is_letter(self.ch):
            self._read_char()
        return self.source[start : self.pos]

    def _read_number(self) -> str:
        # Decimal digits only, kept as text
        start = self.pos
        while is_digit(self.ch):
            self._read_char()
        return self.source[start : self.pos]


def tokenize(source: str) -> List[Token]:
    return Lexer(source).scan()


__all__ = ["Lexer", "tokenize", "is_letter", "is_digit"]
