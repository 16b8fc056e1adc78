"""Statement parser producing typed AST.

Pulls tokens one at a time from a Lexer, keeping one token of lookahead
(current + peek), and stops when the current token is EOF. Only the ``my``
declaration is recognized; every other token is skipped.

Errors are collected, not raised: a malformed statement records a
ParseError and parsing resumes with the next token.

Thread Safety:
Parser instances are single-use and not thread-safe, like the Lexer they
drive. The resulting Program is immutable.

"""

from __future__ import annotations

from simian.errors import ParseError
from simian.lexer import Lexer
from simian.nodes import Expression, Identifier, MyStatement, Program, Statement, token_to_node
from simian.tokens import Token, TokenType
from simian.utils.logger import get_logger

logger = get_logger(__name__)


class Parser:
    """Parser for Simian statements.

    Usage:
            >>> program = Parser(Lexer("my $x = 5;")).parse_program()
            >>> program.statements[0].name.value
            '$x'

    """

    __slots__ = (
        "_lexer",
        "_current",
        "_peek",
        "_source_file",
        "errors",
    )

    def __init__(self, lexer: Lexer, source_file: str | None = None) -> None:
        """Initialize parser and read the first two tokens.

        Args:
            lexer: Token source; the parser drives its cursor to EOF
            source_file: Optional source file path for error messages
        """
        self._lexer = lexer
        self._source_file = source_file
        self.errors: list[ParseError] = []
        self._current = lexer.next_token()
        self._peek = lexer.next_token()

    def parse_program(self) -> Program:
        """Parse until EOF.

        Returns:
            Program holding every well-formed statement, in source order.
        """
        statements: list[Statement] = []
        while self._current.type is not TokenType.EOF:
            stmt = self._parse_statement()
            if stmt is not None:
                statements.append(stmt)
            self._next_token()
        return Program(statements=tuple(statements))

    def check(self) -> None:
        """Raise the first recorded error, if any.

        Raises:
            ParseError: If parsing recorded at least one error.
        """
        if self.errors:
            raise self.errors[0]

    # =========================================================================
    # Statements
    # =========================================================================

    def _parse_statement(self) -> Statement | None:
        if self._current.type is TokenType.MY:
            return self._parse_my_statement()
        return None

    def _parse_my_statement(self) -> MyStatement | None:
        """Parse ``my <identifier> = ... ;``.

        The initializer is not parsed as an expression. When it is exactly
        one token it becomes the statement's value; otherwise the tokens up
        to the semicolon are skipped and value is None.
        """
        token = self._current

        if not self._expect_peek(TokenType.IDENTIFIER):
            return None
        name = Identifier(token=self._current, value=self._current.literal)

        if not self._expect_peek(TokenType.ASSIGN):
            return None

        value_tokens: list[Token] = []
        while not self._peek_is(TokenType.SEMICOLON):
            if self._peek_is(TokenType.EOF):
                self._peek_error(TokenType.SEMICOLON)
                return None
            self._next_token()
            value_tokens.append(self._current)
        self._next_token()

        value: Expression | None = None
        if len(value_tokens) == 1:
            value = token_to_node(value_tokens[0])
        return MyStatement(token=token, name=name, value=value)

    # =========================================================================
    # Token navigation
    # =========================================================================

    def _next_token(self) -> None:
        self._current = self._peek
        self._peek = self._lexer.next_token()

    def _peek_is(self, token_type: TokenType) -> bool:
        return self._peek.type is token_type

    def _expect_peek(self, token_type: TokenType) -> bool:
        """Advance if the peek token has the expected type, else record an error."""
        if self._peek_is(token_type):
            self._next_token()
            return True
        self._peek_error(token_type)
        return False

    def _peek_error(self, token_type: TokenType) -> None:
        err = ParseError(
            f"expected next token {token_type.name}, got {self._peek.type.name}",
            offset=self._peek.offset,
            source_file=self._source_file,
        )
        logger.debug("Parse error: %s", err)
        self.errors.append(err)
