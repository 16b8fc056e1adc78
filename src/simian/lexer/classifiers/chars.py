"""Single-character classification for the Simian lexer.

Pure predicates over one decoded character. None of these functions touch
scanner state, and all of them answer False for the empty string and for the
end-of-input sentinel.

Usage:
    from simian.lexer.classifiers.chars import CharCategory, classify

    if classify(ch) is CharCategory.LETTER:
        ...
"""

from __future__ import annotations

from enum import Enum, auto

from simian.lexer.classifiers.operators import OPERATOR_START_CHARS
from simian.tokens import TokenType

# Returned by the scanner for any read past the end of input
SENTINEL = "\0"

# Characters that always stand alone as their own token
DELIMITER_CHARS: frozenset[str] = frozenset("{}();*")

# Variable and reference prefixes ($scalar, @array, %hash, &code, *glob)
SIGIL_CHARS: frozenset[str] = frozenset("$@%&*")

_SINGLE_TOKENS: dict[str, TokenType] = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    ";": TokenType.SEMICOLON,
    "*": TokenType.ASTERISK,
    ":": TokenType.COLON,
}


class CharCategory(Enum):
    """Coarse category of a character, used to pick a reader strategy."""

    LETTER = auto()
    DIGIT = auto()
    SIGIL = auto()
    WHITESPACE = auto()
    OPERATOR_START = auto()
    COLON = auto()
    SINGLE_CHAR_TOKEN = auto()
    INVALID = auto()


def is_letter(ch: str) -> bool:
    """Check if ch is a Unicode letter."""
    return len(ch) == 1 and ch.isalpha()


def is_digit(ch: str) -> bool:
    """Check if ch is a Unicode decimal digit (category Nd)."""
    return len(ch) == 1 and ch.isdecimal()


def is_sigil(ch: str) -> bool:
    """Check if ch is a sigil. The glob marker ``*`` counts as one."""
    return ch in SIGIL_CHARS


def is_whitespace(ch: str) -> bool:
    """Check if ch is Unicode whitespace."""
    return len(ch) == 1 and ch.isspace()


def classify(ch: str) -> CharCategory:
    """Classify a single character.

    Precedence is fixed: explicit delimiters win over every generic
    category, so ``*`` is SINGLE_CHAR_TOKEN here even though it is also a
    sigil and an operator start. The lexer settles which one it is.

    Args:
        ch: One character, or the sentinel/empty string at end of input

    Returns:
        Exactly one CharCategory.
    """
    if ch in DELIMITER_CHARS:
        return CharCategory.SINGLE_CHAR_TOKEN
    if ch == ":":
        return CharCategory.COLON
    if ch == "_" or is_letter(ch):
        return CharCategory.LETTER
    if is_sigil(ch):
        return CharCategory.SIGIL
    if is_digit(ch):
        return CharCategory.DIGIT
    if is_whitespace(ch):
        return CharCategory.WHITESPACE
    if ch in OPERATOR_START_CHARS:
        return CharCategory.OPERATOR_START
    return CharCategory.INVALID


def lookup_single_token(ch: str) -> TokenType:
    """Map an isolated punctuation character to its token type.

    Returns:
        The delimiter's TokenType, or ILLEGAL for anything else.
    """
    return _SINGLE_TOKENS.get(ch, TokenType.ILLEGAL)
