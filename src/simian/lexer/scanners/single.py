"""Whitespace and single-character scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from simian.lexer.classifiers import is_whitespace, lookup_single_token
from simian.tokens import Token, TokenType


class SingleScannerMixin:
    """Mixin providing the whitespace reader and the fallback reader."""

    _position: int
    _ch: str

    def _read_char(self) -> None:
        """Advance the cursor by one character. Implemented by Lexer."""
        raise NotImplementedError

    def _read_sequence(self, check: Callable[[str], bool]) -> str:
        """Consume characters while check() holds. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, literal: str, start: int) -> Token:
        """Create token at start. Implemented by Lexer."""
        raise NotImplementedError

    def _read_whitespace(self) -> Token:
        """Read a whitespace run. The lexer drops the result."""
        start = self._position
        literal = self._read_sequence(is_whitespace)
        return self._make_token(TokenType.WHITESPACE, literal, start)

    def _read_single_token(self) -> Token:
        """Read exactly one character.

        Delimiters get their own type; anything no other reader claims is
        ILLEGAL. Either way the cursor moves by one.
        """
        start = self._position
        ch = self._ch
        self._read_char()
        return self._make_token(lookup_single_token(ch), ch, start)
