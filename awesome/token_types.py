"""
Token definitions for the Awesome programming language.

Named kinds live in ``TokenType``. Operators and punctuation have no enum
member: their kind is the operator text itself.
"""

from enum import Enum, auto


class TokenType(Enum):
    # Keywords
    DEF = auto()
    CLASS = auto()
    IF = auto()
    TRUE = auto()
    FALSE = auto()
    NIL = auto()

    # Names
    IDENTIFIER = auto()
    CONSTANT = auto()

    # Literals
    NUMBER = auto()
    STRING = auto()

    # Block structure
    INDENT = auto()
    DEDENT = auto()
    NEWLINE = auto()


# Reserved words, checked before a lowercase name becomes an IDENTIFIER
KEYWORDS = {
    'def': TokenType.DEF,
    'class': TokenType.CLASS,
    'if': TokenType.IF,
    'true': TokenType.TRUE,
    'false': TokenType.FALSE,
    'nil': TokenType.NIL,
}

# Multi-character operators; single characters fall through to the catch-all
LONG_OPERATORS = ('||', '&&', '==', '!=', '<=', '>=')
