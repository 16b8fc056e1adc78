"""Operator scanner mixin."""

from __future__ import annotations

from collections.abc import Callable

from simian.config import LexConfig
from simian.lexer.classifiers import is_operator_prefix, lookup_operator
from simian.tokens import Token, TokenType


class OperatorScannerMixin:
    """Mixin providing greedy operator reading.

    The buffer grows while buffer + next character is still a prefix of some
    operator, so ``==`` is one EQUAL and ``**=`` is one OP_POWER_ASSIGN.
    The position never rewinds.

    """

    _position: int
    _config: LexConfig

    def _read_sequence(self, check: Callable[[str], bool]) -> str:
        """Consume characters while check() holds. Implemented by Lexer."""
        raise NotImplementedError

    def _make_token(self, token_type: TokenType, literal: str, start: int) -> Token:
        """Create token at start. Implemented by Lexer."""
        raise NotImplementedError

    def _read_operator(self) -> Token:
        """Read the longest operator starting at the current character.

        A buffer that stops on a bare prefix (a lone ".") resolves to INVALID.
        """
        start = self._position
        buf = ""

        def extends(ch: str) -> bool:
            nonlocal buf
            if is_operator_prefix(buf + ch):
                buf += ch
                return True
            return False

        literal = self._read_sequence(extends)
        token_type = lookup_operator(literal)
        if literal == "++" and self._config.distinct_increment:
            token_type = TokenType.OP_INC
        return self._make_token(token_type, literal, start)
