"""Property-based tests for lexer invariants using Hypothesis.

These tests verify that certain properties always hold regardless
of the input, helping catch edge cases that example-based tests miss.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from simian.lexer import Lexer
from simian.tokens import TokenType

# Characters the language gives meaning to, plus a few it does not
SIMIAN_ALPHABET = "abcxyz_019$@%&*:;{}()=!<>+-/.|^~?,#\"' \t\n"

LEXEMES = ["my", "$x", "@list", "%h", ":reader", "=", "==", "!=", "**", "++", "5", ";", "{", "}"]


class TestTotality:
    """Every input ends in EOF and stays there."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_always_reaches_eof(self, source: str) -> None:
        lexer = Lexer(source)
        tokens = list(lexer.tokens())

        assert len(tokens) <= len(source)
        for _ in range(3):
            eof = lexer.next_token()
            assert eof.type == TokenType.EOF
            assert eof.literal == ""

    @given(st.binary(max_size=200))
    @settings(max_examples=100)
    def test_any_bytes(self, source: bytes) -> None:
        lexer = Lexer(source)
        list(lexer.tokens())
        assert lexer.next_token().type == TokenType.EOF


class TestProgress:
    """Every token is a non-empty slice of the source, in order."""

    @given(st.text(alphabet=SIMIAN_ALPHABET, max_size=300))
    @settings(max_examples=200)
    def test_literals_are_source_slices(self, source: str) -> None:
        previous_end = 0
        for token in Lexer(source).tokens():
            assert token.literal, "Only EOF may have an empty literal"
            assert token.offset >= previous_end
            assert source[token.offset : token.end_offset] == token.literal
            previous_end = token.end_offset

    @given(st.text(max_size=300))
    @settings(max_examples=200)
    def test_only_whitespace_is_dropped(self, source: str) -> None:
        literals = "".join(t.literal for t in Lexer(source).tokens())
        assert literals == "".join(ch for ch in source if not ch.isspace())

    @given(st.text(alphabet=SIMIAN_ALPHABET, max_size=300))
    @settings(max_examples=100)
    def test_whitespace_never_surfaces(self, source: str) -> None:
        for token in Lexer(source).tokens():
            assert token.type != TokenType.WHITESPACE
            assert token.type != TokenType.EOF


class TestWhitespaceTransparency:
    """Runs of whitespace between lexemes behave like a single space."""

    @given(
        st.lists(st.sampled_from(LEXEMES), min_size=1, max_size=20),
        st.text(alphabet=" \t\r\n", min_size=1, max_size=5),
    )
    @settings(max_examples=100)
    def test_separator_width_is_irrelevant(self, parts: list[str], sep: str) -> None:
        wide = [(t.type, t.literal) for t in Lexer(sep.join(parts)).tokens()]
        narrow = [(t.type, t.literal) for t in Lexer(" ".join(parts)).tokens()]
        assert wide == narrow


class TestDeterminism:
    """Tokenizing the same source twice gives identical results."""

    @given(st.text(max_size=200))
    @settings(max_examples=50)
    def test_repeated_tokenization_identical(self, source: str) -> None:
        first_result = [(t.type, t.literal, t.offset) for t in Lexer(source).tokens()]
        second_result = [(t.type, t.literal, t.offset) for t in Lexer(source).tokens()]

        assert first_result == second_result
