"""Character and lexeme classifiers for the Simian lexer.

Classifiers are pure functions over a single character or a finished
lexeme. They hold no state and never move the scanner's cursor; the lookup
tables they consult are built once at import and never mutated.
"""

from simian.lexer.classifiers.chars import (
    SENTINEL,
    CharCategory,
    classify,
    is_digit,
    is_letter,
    is_sigil,
    is_whitespace,
    lookup_single_token,
)
from simian.lexer.classifiers.keywords import KEYWORDS, lookup_keyword
from simian.lexer.classifiers.operators import (
    OPERATORS,
    WORD_OPERATORS,
    is_operator,
    is_operator_prefix,
    lookup_operator,
)

__all__ = [
    "KEYWORDS",
    "OPERATORS",
    "SENTINEL",
    "WORD_OPERATORS",
    "CharCategory",
    "classify",
    "is_digit",
    "is_letter",
    "is_operator",
    "is_operator_prefix",
    "is_sigil",
    "is_whitespace",
    "lookup_keyword",
    "lookup_operator",
    "lookup_single_token",
]
