"""
Token class for representing lexical tokens.
"""

from .token_types import TokenType


class Token:
    """Represents a single lexical token with position information."""

    def __init__(self, token_type, value, line=1, column=1, filename=None):
        self.type = token_type
        self.value = value
        self.line = line
        self.column = column
        self.filename = filename

    @property
    def kind_name(self):
        """Printable name of the token kind."""
        if isinstance(self.type, TokenType):
            return self.type.name
        return self.type

    def __str__(self):
        return f"Token({self.kind_name}, {repr(self.value)}, {self.line}:{self.column})"

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def as_pair(self):
        """Return the ``(type, value)`` pair, without position."""
        return (self.type, self.value)

    def is_type(self, token_type):
        """Check if token is of specified type."""
        return self.type == token_type

    def is_keyword(self):
        """Check if token is a reserved word."""
        return self.type in {
            TokenType.DEF,
            TokenType.CLASS,
            TokenType.IF,
            TokenType.TRUE,
            TokenType.FALSE,
            TokenType.NIL,
        }

    def is_literal(self):
        """Check if token is a literal value."""
        return self.type in {
            TokenType.NUMBER,
            TokenType.STRING,
            TokenType.TRUE,
            TokenType.FALSE,
            TokenType.NIL,
        }

    def is_operator(self):
        """Check if token is an operator or punctuation character."""
        return isinstance(self.type, str)
