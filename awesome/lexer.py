"""
Lexical analyzer for the Awesome programming language.

Indentation is significant: a line ending in ``:`` opens a block whose body
must be indented further, and returning to an outer indent closes blocks.
The lexer turns this into explicit INDENT / DEDENT / NEWLINE tokens so the
parser never has to count spaces.
"""

import logging
import re
from typing import List, Optional

from .token import Token
from .token_types import TokenType, KEYWORDS, LONG_OPERATORS
from .errors import MalformedIndentError, MissingBlockHeaderError

logger = logging.getLogger(__name__)

# Ordered token specs: order matters (keywords and names before the catch-all)
TOKEN_SPECS = [
    ("NAME",       r"[a-z]\w*"),                       # identifiers and keywords
    ("CONSTANT",   r"[A-Z]\w*"),                       # class names
    ("NUMBER",     r"[0-9]+"),                         # integers only
    ("STRING",     r'"([^"]*)"'),                      # no escapes
    ("BLOCK_OPEN", r":\n( +)"),                        # ':' ending a line, then the new indent
    ("LINE_BREAK", r"\n( *)"),                         # newline, then the line's indent
    ("OPERATOR",   "|".join(re.escape(op) for op in LONG_OPERATORS)),
    ("SKIP",       r" "),                              # spaces only separate tokens
    ("CHAR",       r"."),                              # any other single char
]

# Precompile regexes for performance
_TOKEN_REGEXES = [(typ, re.compile(pattern, re.ASCII | re.DOTALL))
                  for typ, pattern in TOKEN_SPECS]


class Lexer:
    """
    Indentation-aware lexical analyzer for Awesome source code.

    All scanning state (cursor, position counters and the indent stack) is
    reset at the start of each ``tokenize`` call.
    """

    def __init__(self, source_code: str, filename: Optional[str] = None):
        self.source = source_code
        self.filename = filename
        self.tokens: List[Token] = []
        self._reset()

    def _reset(self):
        self.code = _chomp(self.source)
        self.position = 0
        self.line = 1
        self.column = 1
        self.current_indent = 0
        self.indent_stack: List[int] = []
        self._scanned: List[Token] = []

    def advance(self, count: int = 1) -> str:
        """Consume ``count`` characters and return them."""
        text = self.code[self.position:self.position + count]
        self.position += len(text)

        newlines = text.count('\n')
        if newlines:
            self.line += newlines
            self.column = len(text) - text.rfind('\n')
        else:
            self.column += len(text)

        return text

    def create_token(self, token_type, value, line: int, column: int) -> Token:
        """Create token with the given position information."""
        return Token(token_type, value, line, column, self.filename)

    def _emit(self, token_type, value, line: int, column: int):
        self._scanned.append(self.create_token(token_type, value, line, column))

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Raises MalformedIndentError or MissingBlockHeaderError on bad
        indentation; nothing is returned for a failed scan.
        """
        self._reset()
        length = len(self.code)

        while self.position < length:
            for typ, regex in _TOKEN_REGEXES:
                match = regex.match(self.code, self.position)
                if match:
                    break

            text = match.group(0)
            line, column = self.line, self.column

            if typ == "NAME":
                self._emit(KEYWORDS.get(text, TokenType.IDENTIFIER), text, line, column)
            elif typ == "CONSTANT":
                self._emit(TokenType.CONSTANT, text, line, column)
            elif typ == "NUMBER":
                self._emit(TokenType.NUMBER, int(text), line, column)
            elif typ == "STRING":
                self._emit(TokenType.STRING, match.group(1), line, column)
            elif typ == "BLOCK_OPEN":
                self.open_block(len(match.group(1)), line, column)
            elif typ == "LINE_BREAK":
                self.line_break(len(match.group(1)), line, column)
            elif typ == "SKIP":
                pass
            else:
                # Operators: the text is both the kind and the value
                self._emit(text, text, line, column)

            self.advance(len(text))

        # Close all blocks still open at end of input
        while self.indent_stack:
            self.close_block(self.line, self.column)

        logger.debug("Tokenized %s: %d tokens",
                     self.filename or "<string>", len(self._scanned))
        self.tokens = self._scanned
        return self.tokens

    def open_block(self, width: int, line: int, column: int):
        """Enter a block indented ``width`` spaces."""
        if width <= self.current_indent:
            raise MalformedIndentError(width, self.current_indent,
                                       line + 1, 1, self.filename)

        self.current_indent = width
        self.indent_stack.append(width)
        self._emit(TokenType.INDENT, width, line, column)

    def close_block(self, line: int, column: int):
        """Leave the innermost block, emitting the width returned to."""
        self.indent_stack.pop()
        self.current_indent = self.indent_stack[-1] if self.indent_stack else 0
        self._emit(TokenType.DEDENT, self.current_indent, line, column)

    def line_break(self, width: int, line: int, column: int):
        """
        Handle a new line indented ``width`` spaces.

        Same level: the line continues the current block. Lower level: close
        blocks until the line is no deeper than the current level. Higher
        level without a preceding ':' is an error.
        """
        if width > self.current_indent:
            raise MissingBlockHeaderError(width, self.current_indent,
                                          line + 1, 1, self.filename)

        while width < self.current_indent:
            self.close_block(line, column)

        self._emit(TokenType.NEWLINE, '\n', line, column)


def _chomp(code: str) -> str:
    """Strip one trailing line break."""
    if code.endswith('\r\n'):
        return code[:-2]
    if code.endswith('\n') or code.endswith('\r'):
        return code[:-1]
    return code


def tokenize(code: str, filename: Optional[str] = None) -> List[Token]:
    """Tokenize Awesome source ``code`` and return the list of tokens."""
    return Lexer(code, filename).tokenize()
