"""Error-path and malformed input tests.

The lexer never raises; these tests cover the exception types used by the
layers above it and confirm garbage input degrades to ILLEGAL tokens.
"""

import pytest

from simian import tokenize
from simian.errors import ParseError, SimianError
from simian.tokens import TokenType

# =========================================================================
# ParseError construction and formatting
# =========================================================================


class TestParseErrorFormatting:
    """Verify ParseError produces well-formatted messages."""

    def test_message_only(self) -> None:
        err = ParseError("unexpected token")
        assert str(err) == "unexpected token"
        assert err.offset is None
        assert err.source_file is None

    def test_with_offset(self) -> None:
        err = ParseError("bad syntax", offset=42)
        assert str(err) == "42 bad syntax"

    def test_with_offset_zero(self) -> None:
        assert str(ParseError("x", offset=0)) == "0 x"

    def test_negative_offset_is_omitted(self) -> None:
        assert str(ParseError("x", offset=-1)) == "x"

    def test_with_source_file(self) -> None:
        err = ParseError("error", offset=7, source_file="test.sim")
        assert str(err) == "test.sim:7 error"

    def test_source_file_only(self) -> None:
        assert str(ParseError("error", source_file="test.sim")) == "test.sim error"

    def test_is_simian_error(self) -> None:
        err = ParseError("x")
        assert isinstance(err, SimianError)
        with pytest.raises(SimianError):
            raise err


# =========================================================================
# Garbage input
# =========================================================================


class TestGarbageInput:
    """The lexer turns anything it cannot read into tokens, never exceptions."""

    def test_all_illegal(self) -> None:
        tokens = list(tokenize("#[]`"))
        assert [t.type for t in tokens] == [TokenType.ILLEGAL] * 4

    def test_control_characters(self) -> None:
        tokens = list(tokenize("\x01\x02"))
        assert [(t.type, t.literal) for t in tokens] == [
            (TokenType.ILLEGAL, "\x01"),
            (TokenType.ILLEGAL, "\x02"),
        ]

    def test_long_operator_chain_terminates(self) -> None:
        tokens = list(tokenize("=" * 10_001))
        assert [t.literal for t in tokens] == ["=="] * 5000 + ["="]
