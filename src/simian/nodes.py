"""Typed AST nodes for Simian.

All AST nodes are frozen dataclasses with slots, so a parsed Program is
immutable and safe to share across threads.

Node Hierarchy:
Node (base)
├── Program
├── Statement
│   └── MyStatement
└── Expression
    ├── Identifier
    ├── IntegerLiteral
    └── TokenNode

"""

from __future__ import annotations

from dataclasses import dataclass

from simian.tokens import Token, TokenType


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes."""

    def token_literal(self) -> str:
        """Literal of the token this node starts with."""
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Statement(Node):
    """Base class for statements."""


@dataclass(frozen=True, slots=True)
class Expression(Node):
    """Base class for expressions."""


@dataclass(frozen=True, slots=True)
class Identifier(Expression):
    """A variable or bare-word name, sigil included (``$x``)."""

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(frozen=True, slots=True)
class IntegerLiteral(Expression):
    """A run of digits, kept as written."""

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(frozen=True, slots=True)
class TokenNode(Expression):
    """Any other single token used as an expression."""

    token: Token

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(frozen=True, slots=True)
class MyStatement(Statement):
    """Lexical variable declaration: ``my $x = <expr>;``.

    Attributes:
        token: The MY keyword token
        name: Declared variable
        value: The initializer when it is a single token, otherwise None

    """

    token: Token
    name: Identifier
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(frozen=True, slots=True)
class Program(Node):
    """Root node: the statements of one source text, in order."""

    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""


def token_to_node(token: Token) -> Expression:
    """Wrap a single token in the matching expression node."""
    if token.type is TokenType.IDENTIFIER:
        return Identifier(token=token, value=token.literal)
    if token.type is TokenType.DIGIT:
        return IntegerLiteral(token=token, value=token.literal)
    return TokenNode(token=token)
