"""Cursor-based lexer for the Simian language.

This package turns Simian source into a stream of typed tokens using local
lookahead only. The cursor never rewinds.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, CharCategory
├── core.py              # Lexer class (mixin composition + cursor + dispatch)
├── classifiers/         # Pure predicates and lookup tables
│   ├── chars.py         # Character categories, sigils, delimiters
│   ├── keywords.py      # Keyword table
│   └── operators.py     # Operator table and prefix set
└── scanners/            # Reader strategies
    ├── word.py          # Identifiers and numbers
    ├── operator.py      # Greedy operators
    └── single.py        # Whitespace and single characters

Usage:
    >>> from simian.lexer import Lexer
    >>> for token in Lexer("field $id :reader = state $i++;"):
    ...     print(token)
FIELD("field")
IDENTIFIER("$id")
IDENTIFIER(":reader")
ASSIGN("=")
STATE("state")
IDENTIFIER("$i")
PLUS("++")
SEMICOLON(";")

"""

from simian.lexer.classifiers import CharCategory
from simian.lexer.core import Lexer

__all__ = ["CharCategory", "Lexer"]
