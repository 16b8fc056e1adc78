"""Tests ensuring the cursor state stays consistent while scanning.

The lexer's only mutable state is the cursor: the current position, the
read position one ahead of it, and the cached current character.
"""

from __future__ import annotations

from simian.lexer import Lexer
from simian.lexer.classifiers import SENTINEL


class TestPriming:
    """Construction reads the first character."""

    def test_primed_on_first_character(self) -> None:
        lexer = Lexer("my")
        assert lexer._position == 0
        assert lexer._read_position == 1
        assert lexer._ch == "m"

    def test_empty_input_reads_sentinel(self) -> None:
        lexer = Lexer("")
        assert lexer._ch == SENTINEL
        assert lexer.at_end


class TestCursorInvariants:
    """read_position stays one ahead, and position never moves back."""

    def test_read_position_one_ahead_between_tokens(self) -> None:
        lexer = Lexer("my $x = 5; $y **= 2")
        for _ in lexer.tokens():
            assert lexer._read_position == lexer._position + 1

    def test_position_is_monotonic(self) -> None:
        lexer = Lexer("field $id :reader = state $i++;")
        last = lexer.position
        for token in lexer.tokens():
            assert lexer.position >= last + len(token.literal)
            last = lexer.position

    def test_position_at_source_end(self) -> None:
        for source in ["x", "x ", "$x = 5;", "  \n"]:
            lexer = Lexer(source)
            list(lexer.tokens())
            assert lexer.position == len(source)
            assert lexer._ch == SENTINEL

    def test_peek_past_end_is_sentinel(self) -> None:
        lexer = Lexer("a")
        assert lexer._peek_char() == SENTINEL
        lexer.next_token()
        assert lexer._peek_char() == SENTINEL
        assert lexer.position == 1
