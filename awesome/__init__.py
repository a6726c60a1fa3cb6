"""
Awesome Programming Language
Indentation-sensitive lexer and class-based object runtime.

Version: 0.1.0
"""

__version__ = "0.1.0"

from .lexer import Lexer, tokenize
from .token_types import TokenType, KEYWORDS, LONG_OPERATORS
from .token import Token
from .errors import (
    AwesomeError,
    LexerError,
    MalformedIndentError,
    MissingBlockHeaderError,
    AwesomeRuntimeError,
    MethodNotFoundError,
    ArgumentCountError,
)
from .runtime import (
    AwesomeObject,
    AwesomeClass,
    NativeMethod,
    AwesomeMethod,
    Context,
    Constants,
    bootstrap,
    root_context,
)

__all__ = [
    "Lexer",
    "tokenize",
    "TokenType",
    "KEYWORDS",
    "LONG_OPERATORS",
    "Token",
    "AwesomeError",
    "LexerError",
    "MalformedIndentError",
    "MissingBlockHeaderError",
    "AwesomeRuntimeError",
    "MethodNotFoundError",
    "ArgumentCountError",
    "AwesomeObject",
    "AwesomeClass",
    "NativeMethod",
    "AwesomeMethod",
    "Context",
    "Constants",
    "bootstrap",
    "root_context",
]
