import dataclasses
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.append(str(SRC))

from monkey.tokens import KEYWORDS, Token, TokenKind, lookup_ident  # noqa: E402


@pytest.mark.parametrize(
    "word, kind",
    [
        ("fn", TokenKind.FUNCTION),
        ("let", TokenKind.LET),
        ("true", TokenKind.TRUE),
        ("false", TokenKind.FALSE),
        ("if", TokenKind.IF),
        ("else", TokenKind.ELSE),
        ("return", TokenKind.RETURN),
    ],
)
def test_keywords(word: str, kind: TokenKind):
    assert lookup_ident(word) is kind


@pytest.mark.parametrize("word", ["x", "Let", "RETURN", "function", "fn!", "if?", "elsewhere"])
def test_non_keywords_are_identifiers(word: str):
    assert lookup_ident(word) is TokenKind.IDENT


def test_keyword_table_is_read_only():
    assert len(KEYWORDS) == 7
    with pytest.raises(TypeError):
        KEYWORDS["while"] = TokenKind.IDENT  # type: ignore[index]


def test_token_kinds_are_closed_set():
    assert len(TokenKind) == 27
    assert TokenKind.EQ.value == "=="
    assert TokenKind.FUNCTION.value == "FUNCTION"


def test_token_is_immutable_value():
    tok = Token(TokenKind.INT, "5")
    assert tok == Token(TokenKind.INT, "5")
    assert hash(tok) == hash(Token(TokenKind.INT, "5"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        tok.lexeme = "6"  # type: ignore[misc]
