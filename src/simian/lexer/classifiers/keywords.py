"""Keyword table for identifier-like lexemes."""

from __future__ import annotations

from types import MappingProxyType

from simian.tokens import TokenType

KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "sub": TokenType.SUB,
        "my": TokenType.MY,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "class": TokenType.CLASS,
        "field": TokenType.FIELD,
        "method": TokenType.METHOD,
        "state": TokenType.STATE,
    }
)


def lookup_keyword(lexeme: str) -> TokenType:
    """Resolve an identifier-like lexeme to a keyword.

    Exact, case-sensitive match: "my" is MY, "myvar" and "My" are not.

    Returns:
        The keyword's TokenType, or IDENTIFIER on a miss.
    """
    return KEYWORDS.get(lexeme, TokenType.IDENTIFIER)
