"""Token and TokenType definitions for the Simian lexer.

The lexer produces a stream of Token objects that the parser consumes.
Each Token has a type and the literal text it was read from.

Thread Safety:
Token is frozen (immutable) and safe to share across threads.
TokenType is an enum (inherently immutable).

"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types produced by the lexer.

    Organized by category for clarity:
    - Stream structure (EOF, WHITESPACE, ILLEGAL, INVALID)
    - Identifiers and literals
    - Keywords
    - Delimiters
    - Operators

    """

    # Stream structure
    EOF = auto()
    WHITESPACE = auto()  # Never surfaced by Lexer.next_token()
    ILLEGAL = auto()  # Character no reader claims
    INVALID = auto()  # Operator-looking lexeme missing from the table

    # Identifiers and literals
    IDENTIFIER = auto()  # foo, $five, @array, :reader
    DIGIT = auto()  # 5, 838383

    # Keywords
    MY = auto()
    SUB = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()
    TRUE = auto()
    FALSE = auto()
    CLASS = auto()
    FIELD = auto()
    METHOD = auto()
    STATE = auto()

    # Delimiters
    LBRACE = auto()  # {
    RBRACE = auto()  # }
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    SEMICOLON = auto()  # ;
    COLON = auto()  # :
    COMMA = auto()  # , =>

    # Arithmetic
    PLUS = auto()  # + ++
    MINUS = auto()  # -
    ASTERISK = auto()  # *
    SLASH = auto()  # /
    OP_MODULUS = auto()  # %
    OP_POWER = auto()  # **
    OP_INC = auto()  # ++ (distinct_increment)
    OP_DEC = auto()  # --
    OP_REPEAT = auto()  # x

    # Comparison
    EQUAL = auto()  # ==
    NOT_EQUAL = auto()  # !=
    LT = auto()  # <
    GT = auto()  # >
    OP_LESS_THAN_EQUAL = auto()  # <=
    OP_GREATER_THAN_EQUAL = auto()  # >=
    OP_COMPARE = auto()  # <=>

    # Pattern binding
    OP_MATCH = auto()  # =~
    OP_NOMATCH = auto()  # !~

    # Bitwise
    OP_BITWISE_AND = auto()  # &
    OP_BITWISE_OR = auto()  # |
    OP_BITWISE_XOR = auto()  # ^
    OP_COMPLEMENT = auto()  # ~
    OP_LEFT_SHIFT = auto()  # <<
    OP_RIGHT_SHIFT = auto()  # >>

    # Logical
    NOT = auto()  # !
    OP_LOGICAL_AND = auto()  # &&
    OP_LOGICAL_OR = auto()  # ||
    OP_LOGICAL_DEFINED_OR = auto()  # //
    OP_LOGICAL_AND_LOW_PRECEDENCE = auto()  # and
    OP_LOGICAL_OR_LOW_PRECEDENCE = auto()  # or
    OP_LOGICAL_XOR_LOW_PRECEDENCE = auto()  # xor
    OP_LOGICAL_NOT_LOW_PRECEDENCE = auto()  # not

    # Assignment
    ASSIGN = auto()  # =
    OP_ADD_ASSIGN = auto()  # +=
    OP_SUB_ASSIGN = auto()  # -=
    OP_MUL_ASSIGN = auto()  # *=
    OP_DIV_ASSIGN = auto()  # /=
    OP_MOD_ASSIGN = auto()  # %=
    OP_POWER_ASSIGN = auto()  # **=
    OP_REPEAT_ASSIGN = auto()  # x=
    OP_LEFT_SHIFT_ASSIGN = auto()  # <<=
    OP_RIGHT_SHIFT_ASSIGN = auto()  # >>=
    OP_BITWISE_AND_ASSIGN = auto()  # &=
    OP_BITWISE_OR_ASSIGN = auto()  # |=
    OP_BITWISE_XOR_ASSIGN = auto()  # ^=
    OP_LOGICAL_AND_ASSIGN = auto()  # &&=
    OP_LOGICAL_OR_ASSIGN = auto()  # ||=

    # Structure
    OP_ARROW = auto()  # ->
    OP_RANGE = auto()  # ..
    OP_RANGE_INCLUSIVE = auto()  # ...
    OP_TRI_THEN = auto()  # ?
    OP_TRI_ELSE = auto()  # :


@dataclass(frozen=True, slots=True)
class Token:
    """A token produced by the lexer.

    Tokens are the atomic units passed from lexer to parser.

    Attributes:
        type: The token type (from TokenType enum)
        literal: The exact source text, sigils included ("" for EOF)
        offset: Absolute start position in source. Excluded from comparison,
            so a Token built by hand equals one read from any position.

    """

    type: TokenType
    literal: str
    offset: int = field(default=-1, compare=False)

    @property
    def end_offset(self) -> int:
        """Absolute position one past the last character of the literal."""
        return self.offset + len(self.literal)

    def __str__(self) -> str:
        """Render as TYPE("literal"), the form printed by the REPL."""
        return f"{self.type.name}({json.dumps(self.literal, ensure_ascii=False)})"

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.literal
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Token({self.type.name}, {val!r}, @{self.offset})"
