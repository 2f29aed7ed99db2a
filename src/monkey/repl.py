"""Interactive Monkey prompt: lexes each line typed and prints its tokens."""

from __future__ import annotations

import argparse
import getpass
import sys
from typing import TextIO

from .lexer import Lexer
from .tokens import Token

PROMPT = ">> "


def format_token(tok: Token) -> str:
    return f"{{Type:{tok.kind.value} Literal:{tok.lexeme}}}"


def greeting(username: str) -> str:
    return (
        f"Hello {username}! This is the Monkey programming language!\n"
        "Feel free to type in commands\n"
    )


def start(in_stream: TextIO, out_stream: TextIO, prompt: str = PROMPT) -> None:
    """Read lines until the input stream runs dry, printing one token per line."""
    while True:
        out_stream.write(prompt)
        out_stream.flush()
        line = in_stream.readline()
        if not line:
            return

        for tok in Lexer(line.rstrip("\r\n")):
            out_stream.write(format_token(tok) + "\n")


def _current_user() -> str:
    # getuser() raises when neither the env vars nor the pwd database know us
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return "there"


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Monkey token REPL")
    ap.add_argument(
        "--prompt", default=PROMPT, help=f"Prompt string (default: {PROMPT!r})"
    )
    ap.add_argument(
        "--no-banner", action="store_true", help="Skip the welcome message"
    )
    args = ap.parse_args(argv)

    if not args.no_banner:
        sys.stdout.write(greeting(_current_user()))

    try:
        start(sys.stdin, sys.stdout, prompt=args.prompt)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
