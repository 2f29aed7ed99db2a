"""Simple CLI to lex a Monkey source file and print tokens."""

from __future__ import annotations

import argparse
from pathlib import Path

from .lexer import Lexer
from .tokens import TokenKind


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lex a Monkey source file")
    parser.add_argument("path", type=Path, help="Path to Monkey source")
    parser.add_argument(
        "--no-eof", action="store_true", help="Don't print the trailing EOF token"
    )
    parser.add_argument(
        "--illegal-exit",
        action="store_true",
        help="Exit with status 1 if any ILLEGAL token was produced",
    )
    args = parser.parse_args(argv)

    try:
        text = args.path.read_text(encoding="utf-8")
    except FileNotFoundError:
        log_error(f"file not found: {args.path}")
        return 1
    except UnicodeDecodeError as e:
        log_error(f"{args.path} is not valid UTF-8: {e}")
        return 1

    tokens = Lexer(text).scan()
    if args.no_eof:
        tokens = tokens[:-1]

    for t in tokens:
        print(f"{t.kind.name}\t{t.lexeme!r}")

    illegal = sum(1 for t in tokens if t.kind is TokenKind.ILLEGAL)
    if illegal:
        log_step(f"{illegal} illegal token(s) in {args.path}")
        if args.illegal_exit:
            return 1
    return 0


def log_step(msg: str) -> None:
    print(f"[monkey-lex] {msg}")


def log_error(msg: str) -> None:
    print(f"[monkey-lex:error] {msg}")


if __name__ == "__main__":
    raise SystemExit(main())
