"""Cursor-based lexer with O(n) guaranteed performance.

Picks a reader strategy from the current character's category, lets the
reader consume one maximal lexeme, and emits one token. The cursor only
moves forward and every reader consumes at least one character, so a scan
always terminates in time linear in the input length.

No regex in the hot path.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; the lookup tables are immutable.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from simian.config import LexConfig, get_lex_config
from simian.lexer.classifiers import SENTINEL, CharCategory, classify, is_letter
from simian.lexer.scanners import (
    OperatorScannerMixin,
    SingleScannerMixin,
    WordScannerMixin,
)
from simian.tokens import Token, TokenType


class Lexer(
    WordScannerMixin,
    OperatorScannerMixin,
    SingleScannerMixin,
):
    """Pull-based lexer for Simian source.

    Usage:
            >>> lexer = Lexer("my $x = 5;")
            >>> for token in lexer.tokens():
            ...     print(token)
        MY("my")
        IDENTIFIER("$x")
        ASSIGN("=")
        DIGIT("5")
        SEMICOLON(";")

    Thread Safety:
        Lexer instances are single-use and must stay with one consumer.
        The cursor is unsynchronized mutable state.

    """

    __slots__ = (
        "_input",
        "_input_len",  # Cached len(input)
        "_position",  # Index of the current character
        "_read_position",  # Index of the next character
        "_ch",  # Current character, SENTINEL past the end
        "_config",
    )

    def __init__(self, source: str | bytes, config: LexConfig | None = None) -> None:
        """Initialize lexer and prime the cursor on the first character.

        Args:
            source: Simian source text. Bytes are decoded as UTF-8 once, here;
                undecodable bytes become U+FFFD and lex as ILLEGAL.
            config: Explicit configuration; defaults to the active LexConfig
        """
        if isinstance(source, bytes):
            source = source.decode("utf-8", errors="replace")
        self._input = source
        self._input_len = len(source)
        self._position = 0
        self._read_position = 0
        self._ch = SENTINEL
        self._config = config if config is not None else get_lex_config()
        self._read_char()

    @property
    def at_end(self) -> bool:
        """True once every character has been consumed."""
        return self._position >= self._input_len

    @property
    def position(self) -> int:
        """Index of the current character."""
        return self._position

    def next_token(self) -> Token:
        """Return the next non-whitespace token.

        At end of input this returns EOF, and keeps returning EOF on every
        later call.
        """
        while not self.at_end:
            reader = self._select_reader()
            token = reader(self)
            if token.type is not TokenType.WHITESPACE:
                return token
        return self._make_token(TokenType.EOF, "", self._input_len)

    def tokens(self) -> Iterator[Token]:
        """Yield every token up to, and excluding, EOF.

        The generator drives this lexer's cursor: it is forward-only and
        cannot be restarted. Build a new Lexer to scan the source again.

        Complexity: O(n) where n = len(source)
        """
        while True:
            token = self.next_token()
            if token.type is TokenType.EOF:
                return
            yield token

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()

    def _select_reader(self) -> Callable[[Lexer], Token]:
        """Pick the reader for the current character."""
        ch = self._ch
        if ch == "*":
            # *glob is a typeglob; any other * starts *, **, *= or **=
            nxt = self._peek_char()
            if nxt == "_" or is_letter(nxt):
                return WordScannerMixin._read_identifier
            return OperatorScannerMixin._read_operator
        return _READERS.get(classify(ch), SingleScannerMixin._read_single_token)

    # =========================================================================
    # Cursor navigation
    # =========================================================================

    def _peek_char(self) -> str:
        """Return the next character without advancing.

        Returns:
            Next character, or SENTINEL when it would be past the end.
        """
        if self._read_position >= self._input_len:
            return SENTINEL
        return self._input[self._read_position]

    def _read_char(self) -> None:
        """Advance the cursor by one character."""
        self._ch = self._peek_char()
        self._position = self._read_position
        self._read_position += 1

    def _read_sequence(self, check: Callable[[str], bool]) -> str:
        """Consume characters while check() holds.

        check() never returns True for SENTINEL, so the scan stops at the
        end of input.

        Returns:
            The consumed slice of the input.
        """
        start = self._position
        while not self.at_end and check(self._ch):
            self._read_char()
        return self._input[start : self._position]

    def _make_token(self, token_type: TokenType, literal: str, start: int) -> Token:
        return Token(type=token_type, literal=literal, offset=start)


# Reader per character category. Categories missing here (SINGLE_CHAR_TOKEN,
# INVALID) fall back to the single-character reader.
_READERS: dict[CharCategory, Callable[[Lexer], Token]] = {
    CharCategory.LETTER: WordScannerMixin._read_identifier,
    CharCategory.SIGIL: WordScannerMixin._read_identifier,
    CharCategory.COLON: WordScannerMixin._read_identifier,
    CharCategory.DIGIT: WordScannerMixin._read_number,
    CharCategory.OPERATOR_START: OperatorScannerMixin._read_operator,
    CharCategory.WHITESPACE: SingleScannerMixin._read_whitespace,
}
