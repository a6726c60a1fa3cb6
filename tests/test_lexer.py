#!/usr/bin/env python3
"""
Awesome Lexer Test Suite

Covers token classification, block structure and indentation errors.
"""

import sys
import unittest
from pathlib import Path

# Add the project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from awesome.lexer import Lexer, tokenize
from awesome.token import Token
from awesome.token_types import TokenType
from awesome.errors import LexerError, MalformedIndentError, MissingBlockHeaderError


def pairs(tokens):
    """Strip positions so token streams compare as (type, value) pairs."""
    return [token.as_pair() for token in tokens]


class TestTokens(unittest.TestCase):
    """Test cases for token classification."""

    def test_basic_tokens(self):
        """Test basic token recognition."""
        tokens = tokenize("x = 42")

        self.assertEqual(pairs(tokens), [
            (TokenType.IDENTIFIER, "x"),
            ("=", "="),
            (TokenType.NUMBER, 42),
        ])

    def test_keywords(self):
        """Test keyword recognition."""
        tokens = tokenize("def class if true false nil")

        expected_types = [TokenType.DEF, TokenType.CLASS, TokenType.IF,
                          TokenType.TRUE, TokenType.FALSE, TokenType.NIL]
        self.assertEqual([token.type for token in tokens], expected_types)
        self.assertEqual([token.value for token in tokens],
                         ["def", "class", "if", "true", "false", "nil"])
        self.assertTrue(all(token.is_keyword() for token in tokens))

    def test_keyword_prefix_is_identifier(self):
        """Names that only start with a keyword stay identifiers."""
        tokens = tokenize("define iffy nils true_value")

        for token in tokens:
            self.assertEqual(token.type, TokenType.IDENTIFIER)

    def test_constants(self):
        """Capitalized names are constants."""
        tokens = tokenize("Object Point3 If")

        self.assertEqual(pairs(tokens), [
            (TokenType.CONSTANT, "Object"),
            (TokenType.CONSTANT, "Point3"),
            (TokenType.CONSTANT, "If"),
        ])

    def test_numbers(self):
        """Test number tokenization."""
        tokens = tokenize("7 1024")

        self.assertEqual(pairs(tokens), [(TokenType.NUMBER, 7), (TokenType.NUMBER, 1024)])
        self.assertIsInstance(tokens[1].value, int)

    def test_string_literals(self):
        """Test string literal tokenization."""
        tokens = tokenize('"Hello, World!" ""')

        self.assertEqual(pairs(tokens), [
            (TokenType.STRING, "Hello, World!"),
            (TokenType.STRING, ""),
        ])

    def test_long_operators(self):
        """Test multi-character operator tokenization."""
        tokens = tokenize("a || b && c == d != e <= f >= g")

        operators = [token.type for token in tokens if token.is_operator()]
        self.assertEqual(operators, ["||", "&&", "==", "!=", "<=", ">="])
        for token in tokens:
            if token.is_operator():
                self.assertEqual(token.type, token.value)

    def test_single_characters(self):
        """Any other character is a token of its own."""
        tokens = tokenize("( ) , . ! + - < |")

        self.assertEqual([token.value for token in tokens],
                         ["(", ")", ",", ".", "!", "+", "-", "<", "|"])
        self.assertEqual([token.type for token in tokens],
                         ["(", ")", ",", ".", "!", "+", "-", "<", "|"])

    def test_call_with_arguments(self):
        tokens = tokenize('obj.method(1, "two")')

        self.assertEqual(pairs(tokens), [
            (TokenType.IDENTIFIER, "obj"),
            (".", "."),
            (TokenType.IDENTIFIER, "method"),
            ("(", "("),
            (TokenType.NUMBER, 1),
            (",", ","),
            (TokenType.STRING, "two"),
            (")", ")"),
        ])

    def test_colon_inside_line(self):
        """A colon that does not end a line is plain punctuation."""
        tokens = tokenize("a: b")

        self.assertEqual(pairs(tokens), [
            (TokenType.IDENTIFIER, "a"),
            (":", ":"),
            (TokenType.IDENTIFIER, "b"),
        ])

    def test_colon_before_unindented_line(self):
        """A line-final colon without an indented body does not open a block."""
        tokens = tokenize("if a:\nb")

        self.assertEqual(pairs(tokens), [
            (TokenType.IF, "if"),
            (TokenType.IDENTIFIER, "a"),
            (":", ":"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENTIFIER, "b"),
        ])

    def test_positions(self):
        """Tokens record the line and column they start at."""
        tokens = tokenize("foo bar\nbaz")

        self.assertEqual((tokens[1].line, tokens[1].column), (1, 5))
        self.assertEqual((tokens[3].line, tokens[3].column), (2, 1))

    def test_equality_ignores_position(self):
        self.assertEqual(Token(TokenType.NUMBER, 1, 1, 1), Token(TokenType.NUMBER, 1, 4, 9))
        self.assertNotEqual(Token(TokenType.NUMBER, 1), Token(TokenType.NUMBER, 2))


class TestBlocks(unittest.TestCase):
    """Test cases for INDENT / DEDENT / NEWLINE synthesis."""

    def test_if_block(self):
        tokens = tokenize("if true:\n  true\n")

        self.assertEqual(pairs(tokens), [
            (TokenType.IF, "if"),
            (TokenType.TRUE, "true"),
            (TokenType.INDENT, 2),
            (TokenType.TRUE, "true"),
            (TokenType.DEDENT, 0),
        ])

    def test_method_definition(self):
        tokens = tokenize('def p():\n  print("hi")\n')

        self.assertEqual(pairs(tokens), [
            (TokenType.DEF, "def"),
            (TokenType.IDENTIFIER, "p"),
            ("(", "("),
            (")", ")"),
            (TokenType.INDENT, 2),
            (TokenType.IDENTIFIER, "print"),
            ("(", "("),
            (TokenType.STRING, "hi"),
            (")", ")"),
            (TokenType.DEDENT, 0),
        ])

    def test_trailing_newline_is_dropped(self):
        self.assertEqual(pairs(tokenize("a\n")), [(TokenType.IDENTIFIER, "a")])

    def test_newline_at_same_level(self):
        tokens = tokenize("a\nb")

        self.assertEqual(pairs(tokens), [
            (TokenType.IDENTIFIER, "a"),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENTIFIER, "b"),
        ])

    def test_dedent_then_newline(self):
        tokens = tokenize("if true:\n  a\nb")

        self.assertEqual(pairs(tokens), [
            (TokenType.IF, "if"),
            (TokenType.TRUE, "true"),
            (TokenType.INDENT, 2),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.DEDENT, 0),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENTIFIER, "b"),
        ])

    def test_nested_blocks_close_together(self):
        source = "class Foo:\n  def bar:\n    x\ny"
        tokens = tokenize(source)

        self.assertEqual(pairs(tokens), [
            (TokenType.CLASS, "class"),
            (TokenType.CONSTANT, "Foo"),
            (TokenType.INDENT, 2),
            (TokenType.DEF, "def"),
            (TokenType.IDENTIFIER, "bar"),
            (TokenType.INDENT, 4),
            (TokenType.IDENTIFIER, "x"),
            (TokenType.DEDENT, 2),
            (TokenType.DEDENT, 0),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENTIFIER, "y"),
        ])

    def test_partial_dedent(self):
        tokens = tokenize("if a:\n  if b:\n    c\n  d")

        self.assertEqual(pairs(tokens)[-5:], [
            (TokenType.IDENTIFIER, "c"),
            (TokenType.DEDENT, 2),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENTIFIER, "d"),
            (TokenType.DEDENT, 0),
        ])

    def test_dedent_between_levels(self):
        """Unindenting past a level closes blocks until the line fits."""
        tokens = tokenize("if a:\n    b\n  c")

        self.assertEqual(pairs(tokens), [
            (TokenType.IF, "if"),
            (TokenType.IDENTIFIER, "a"),
            (TokenType.INDENT, 4),
            (TokenType.IDENTIFIER, "b"),
            (TokenType.DEDENT, 0),
            (TokenType.NEWLINE, "\n"),
            (TokenType.IDENTIFIER, "c"),
        ])

    def test_open_blocks_closed_at_end_of_input(self):
        tokens = tokenize("if a:\n  if b:\n    c")

        self.assertEqual(pairs(tokens)[-3:], [
            (TokenType.IDENTIFIER, "c"),
            (TokenType.DEDENT, 2),
            (TokenType.DEDENT, 0),
        ])

    def test_indents_and_dedents_balance(self):
        sources = [
            "if true:\n  true\n",
            "a\nb\nc",
            "class Foo:\n  def bar:\n    x\n  def baz:\n    y\nFoo",
            "if a:\n  if b:\n    if c:\n      d",
            "if a:\n  b\nif c:\n  d\n",
            "",
        ]
        for source in sources:
            with self.subTest(source=source):
                types = [token.type for token in tokenize(source)]
                self.assertEqual(types.count(TokenType.INDENT),
                                 types.count(TokenType.DEDENT))

    def test_tokenize_is_repeatable(self):
        """Each call starts from a clean indent stack."""
        lexer = Lexer("if a:\n  b", "<test>")

        first = lexer.tokenize()
        second = lexer.tokenize()

        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertEqual(second[0].filename, "<test>")


class TestIndentErrors(unittest.TestCase):
    """Test indentation error handling."""

    def test_missing_block_header(self):
        with self.assertRaises(MissingBlockHeaderError) as caught:
            tokenize("a\n  b")

        error = caught.exception
        self.assertEqual(error.width, 2)
        self.assertEqual(error.current, 0)
        self.assertEqual(error.line, 2)
        self.assertIn("line 2", str(error))

    def test_missing_block_header_inside_block(self):
        with self.assertRaises(MissingBlockHeaderError):
            tokenize("if a:\n  b\n    c")

    def test_block_not_indented_further(self):
        with self.assertRaises(MalformedIndentError) as caught:
            tokenize("if a:\n  if b:\n  c")

        self.assertEqual(caught.exception.width, 2)
        self.assertEqual(caught.exception.current, 2)

    def test_deeper_line_after_partial_dedent(self):
        """A line left between two block levels cannot be followed by a deeper one."""
        with self.assertRaises(MissingBlockHeaderError):
            tokenize("if a:\n    b\n  c\n  d")

    def test_errors_are_lexer_errors(self):
        for source in ("a\n  b", "if a:\n  if b:\n  c"):
            with self.subTest(source=source):
                with self.assertRaises(LexerError):
                    tokenize(source, "example.aw")

    def test_error_reports_filename(self):
        with self.assertRaises(MissingBlockHeaderError) as caught:
            tokenize("a\n  b", "example.aw")

        self.assertEqual(caught.exception.filename, "example.aw")
        self.assertIn('File "example.aw"', str(caught.exception))


def run_tests():
    """Run all lexer tests."""
    loader = unittest.TestLoader()
    suite = unittest.TestSuite()

    suite.addTests(loader.loadTestsFromTestCase(TestTokens))
    suite.addTests(loader.loadTestsFromTestCase(TestBlocks))
    suite.addTests(loader.loadTestsFromTestCase(TestIndentErrors))

    runner = unittest.TextTestRunner(verbosity=2)
    result = runner.run(suite)

    return result.wasSuccessful()


if __name__ == '__main__':
    success = run_tests()
    sys.exit(0 if success else 1)
