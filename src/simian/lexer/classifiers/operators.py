"""Operator table and greedy-match helpers.

The scanner grows an operator lexeme one character at a time for as long as
the buffer is still a prefix of some operator, then resolves the final
buffer with lookup_operator(). Because the buffer only grows while it is a
valid prefix, this gives longest-match without backtracking.
"""

from __future__ import annotations

from types import MappingProxyType

from simian.tokens import TokenType

# Entries tagged with a generic type (PLUS for "++", COMMA for "=>", ...) are
# the language's current mapping, not typos.
OPERATORS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "->": TokenType.OP_ARROW,
        "++": TokenType.PLUS,
        "--": TokenType.OP_DEC,
        "**": TokenType.OP_POWER,
        "+": TokenType.PLUS,
        "-": TokenType.MINUS,
        "=~": TokenType.OP_MATCH,
        "!~": TokenType.OP_NOMATCH,
        "/": TokenType.SLASH,
        "*": TokenType.ASTERISK,
        "%": TokenType.OP_MODULUS,
        "x": TokenType.OP_REPEAT,
        # Comparison
        "==": TokenType.EQUAL,
        "!=": TokenType.NOT_EQUAL,
        "<=": TokenType.OP_LESS_THAN_EQUAL,
        ">=": TokenType.OP_GREATER_THAN_EQUAL,
        "<": TokenType.LT,
        ">": TokenType.GT,
        "<=>": TokenType.OP_COMPARE,
        # Bitwise
        "&": TokenType.OP_BITWISE_AND,
        "|": TokenType.OP_BITWISE_OR,
        "^": TokenType.OP_BITWISE_XOR,
        "<<": TokenType.OP_LEFT_SHIFT,
        ">>": TokenType.OP_RIGHT_SHIFT,
        "~": TokenType.OP_COMPLEMENT,
        # Logical
        "!": TokenType.NOT,
        "&&": TokenType.OP_LOGICAL_AND,
        "||": TokenType.OP_LOGICAL_OR,
        "//": TokenType.OP_LOGICAL_DEFINED_OR,
        "and": TokenType.OP_LOGICAL_AND_LOW_PRECEDENCE,
        "or": TokenType.OP_LOGICAL_OR_LOW_PRECEDENCE,
        "xor": TokenType.OP_LOGICAL_XOR_LOW_PRECEDENCE,
        "not": TokenType.OP_LOGICAL_NOT_LOW_PRECEDENCE,
        # Assignment
        "=": TokenType.ASSIGN,
        "+=": TokenType.OP_ADD_ASSIGN,
        "-=": TokenType.OP_SUB_ASSIGN,
        "*=": TokenType.OP_MUL_ASSIGN,
        "/=": TokenType.OP_DIV_ASSIGN,
        "%=": TokenType.OP_MOD_ASSIGN,
        "**=": TokenType.OP_POWER_ASSIGN,
        "x=": TokenType.OP_REPEAT_ASSIGN,
        "<<=": TokenType.OP_LEFT_SHIFT_ASSIGN,
        ">>=": TokenType.OP_RIGHT_SHIFT_ASSIGN,
        "&=": TokenType.OP_BITWISE_AND_ASSIGN,
        "|=": TokenType.OP_BITWISE_OR_ASSIGN,
        "^=": TokenType.OP_BITWISE_XOR_ASSIGN,
        "&&=": TokenType.OP_LOGICAL_AND_ASSIGN,
        "||=": TokenType.OP_LOGICAL_OR_ASSIGN,
        # Structure
        "..": TokenType.OP_RANGE,
        "...": TokenType.OP_RANGE_INCLUSIVE,
        "?": TokenType.OP_TRI_THEN,
        ":": TokenType.OP_TRI_ELSE,
        ",": TokenType.COMMA,
        "=>": TokenType.COMMA,
    }
)

# Spelled with letters; reachable only through the identifier reader
WORD_OPERATORS: frozenset[str] = frozenset(op for op in OPERATORS if op[0].isalpha())

# Every non-empty prefix of every symbolic operator
OPERATOR_PREFIXES: frozenset[str] = frozenset(
    op[:i] for op in OPERATORS if op not in WORD_OPERATORS for i in range(1, len(op) + 1)
)

OPERATOR_START_CHARS: frozenset[str] = frozenset(p for p in OPERATOR_PREFIXES if len(p) == 1)


def lookup_operator(lexeme: str) -> TokenType:
    """Resolve a complete operator lexeme.

    Returns:
        The operator's TokenType, or INVALID if lexeme is not an operator.
    """
    return OPERATORS.get(lexeme, TokenType.INVALID)


def is_operator(lexeme: str) -> bool:
    """Check if lexeme is exactly an operator."""
    return lexeme in OPERATORS


def is_operator_prefix(lexeme: str) -> bool:
    """Check if lexeme can still grow into a symbolic operator."""
    return lexeme in OPERATOR_PREFIXES
