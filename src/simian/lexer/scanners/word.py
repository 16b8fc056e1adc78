"""Identifier and number scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from simian.config import LexConfig
from simian.lexer.classifiers import (
    WORD_OPERATORS,
    is_digit,
    is_letter,
    is_sigil,
    lookup_keyword,
    lookup_operator,
)
from simian.tokens import Token, TokenType


def _is_identifier_char(ch: str) -> bool:
    # ":" keeps attributes (:reader) and package names (Foo::Bar) whole
    return is_letter(ch) or is_sigil(ch) or is_digit(ch) or ch == "_" or ch == ":"


class WordScannerMixin:
    """Mixin providing the identifier and number readers.

    Both readers consume a maximal run, so they always advance the cursor
    when the current character matched the category that selected them.

    """

    # These will be set by the Lexer class
    _position: int
    _config: LexConfig

    def _read_sequence(self, check: Callable[[str], bool]) -> str:
        """Consume characters while check() holds. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, literal: str, start: int) -> Token:
        """Create token at start. Implemented by Lexer."""
        raise NotImplementedError

    def _read_identifier(self) -> Token:
        """Read a bare word, sigil variable or attribute.

        Examples of single tokens: ``method_name``, ``$five``, ``%hash``,
        ``*glob``, ``:reader``. A lone sigil is a one-character identifier.
        """
        start = self._position
        literal = self._read_sequence(_is_identifier_char)
        token_type = lookup_keyword(literal)
        if (
            token_type is TokenType.IDENTIFIER
            and self._config.word_operators
            and literal in WORD_OPERATORS
        ):
            token_type = lookup_operator(literal)
        return self._make_token(token_type, literal, start)

    def _read_number(self) -> Token:
        """Read a run of digits. No fraction or exponent support."""
        start = self._position
        literal = self._read_sequence(is_digit)
        return self._make_token(TokenType.DIGIT, literal, start)
