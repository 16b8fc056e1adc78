"""Command-line entry point: ``simian [path]`` or ``python -m simian``."""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from pathlib import Path

from simian.lexer import Lexer
from simian.parser import Parser
from simian.repl import print_tokens, start


def _username() -> str:
    try:
        return getpass.getuser()
    except (OSError, KeyError):
        return "there"


def _print_statements(text: str, source_file: str) -> int:
    parser = Parser(Lexer(text), source_file=source_file)
    program = parser.parse_program()
    for err in parser.errors:
        print(f"parse error: {err}", file=sys.stderr)
    for stmt in program.statements:
        value = stmt.value.token_literal() if stmt.value is not None else "..."
        print(f"my {stmt.name.value} = {value}")
    return 1 if parser.errors else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="simian", description="Tokenize Simian source, or start the REPL"
    )
    parser.add_argument("path", type=Path, nargs="?", help="Source file to tokenize")
    parser.add_argument(
        "--parse", action="store_true", help="Print the 'my' statements instead of tokens"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.path is None:
        print(f"Hi {_username()}! This is the Simian language!")
        print("Feel free to type in commands.")
        print("(Use Ctrl-D to stop)")
        start(sys.stdin, sys.stdout)
        return 0

    try:
        text = args.path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        print(f"error: cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    if args.parse:
        return _print_statements(text, str(args.path))
    print_tokens(text, sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
