"""
Simian: a lexer for a small Perl-flavored scripting language.

Turns source text into typed tokens using local lookahead only, with a
minimal statement parser and a token-printing REPL on top.

Quick Start:
    >>> from simian import tokenize
    >>> [str(t) for t in tokenize("my $x = 5;")]
    ['MY("my")', 'IDENTIFIER("$x")', 'ASSIGN("=")', 'DIGIT("5")', 'SEMICOLON(";")']

    >>> from simian import parse
    >>> parse("my $x = 5;").statements[0].name.value
    '$x'

"""

from collections.abc import Iterator

from simian.config import (
    LexConfig,
    get_lex_config,
    lex_config_context,
    reset_lex_config,
    set_lex_config,
)
from simian.errors import ParseError, SimianError
from simian.lexer import CharCategory, Lexer
from simian.nodes import (
    Expression,
    Identifier,
    IntegerLiteral,
    MyStatement,
    Node,
    Program,
    Statement,
    TokenNode,
)
from simian.parser import Parser
from simian.tokens import Token, TokenType

__version__ = "0.1.0"


def tokenize(source: str | bytes) -> Iterator[Token]:
    """Lazily tokenize source, excluding the final EOF token."""
    return Lexer(source).tokens()


def parse(source: str | bytes, source_file: str | None = None) -> Program:
    """Parse source into a Program.

    Raises:
        ParseError: The first error the parser recorded, if any.
    """
    parser = Parser(Lexer(source), source_file=source_file)
    program = parser.parse_program()
    parser.check()
    return program


__all__ = [
    "__version__",
    # Entry points
    "parse",
    "tokenize",
    # Lexing
    "CharCategory",
    "Lexer",
    "Token",
    "TokenType",
    # Parsing
    "Expression",
    "Identifier",
    "IntegerLiteral",
    "MyStatement",
    "Node",
    "Parser",
    "Program",
    "Statement",
    "TokenNode",
    # Configuration
    "LexConfig",
    "get_lex_config",
    "lex_config_context",
    "reset_lex_config",
    "set_lex_config",
    # Errors
    "ParseError",
    "SimianError",
]
