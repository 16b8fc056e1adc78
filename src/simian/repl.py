"""Interactive read-print loop.

Reads one line at a time and prints its tokens, one per line, in the
TYPE("literal") form. A debugging surface, not a machine-readable protocol.
"""

from __future__ import annotations

from typing import TextIO

from simian.lexer import Lexer
from simian.utils.logger import get_logger

logger = get_logger(__name__)

PROMPT = ">> "


def print_tokens(source: str, out: TextIO) -> int:
    """Write every token of source to out.

    Returns:
        Number of tokens written.
    """
    count = 0
    for token in Lexer(source):
        out.write(f"{token}\n")
        count += 1
    return count


def start(in_stream: TextIO, out: TextIO, prompt: str = PROMPT) -> None:
    """Run the loop until in_stream is exhausted (Ctrl-D on a terminal)."""
    logger.debug("REPL session started")
    while True:
        out.write(prompt)
        out.flush()
        line = in_stream.readline()
        if not line:
            break
        print_tokens(line.rstrip("\r\n"), out)
    logger.debug("REPL session ended")
