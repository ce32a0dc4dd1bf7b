"""
Tests for lexer error records and error report rendering.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jks.lexer import Lexer, LexerError, ERROR_CODES, format_error, format_errors
from jks.lexer.errors import split_source_lines


class TestLexerError(unittest.TestCase):
    """Test the LexerError record."""

    def test_create_uses_code_title(self):
        error = LexerError.create("L012", 4, 2)
        self.assertEqual(error, LexerError(ERROR_CODES["L012"], 4, 2, "L012"))

    def test_create_with_detail(self):
        error = LexerError.create("L011", 1, 3, "'z'")
        self.assertEqual(error.message, "Invalid digit found in number literal: 'z'")

    def test_unknown_code(self):
        with self.assertRaises(KeyError):
            LexerError.create("L999", 1, 1)

    def test_str(self):
        error = LexerError.create("L001", 2, 5, "'@'")
        self.assertEqual(str(error), "2:5: SyntaxError: Unknown token found: '@'")

    def test_codes_are_unique_messages(self):
        self.assertEqual(len(set(ERROR_CODES.values())), len(ERROR_CODES))


class TestErrorReports(unittest.TestCase):
    """Test rendering errors with the offending line and a caret."""

    def test_caret_under_column(self):
        source = "int x;\nint y = 12a;\n"
        error = LexerError.create("L011", 2, 11, "'a'")
        report = format_error(error, split_source_lines(source), "main.jks")
        lines = report.splitlines()
        self.assertEqual(lines[0], "main.jks:2:11: SyntaxError: Invalid digit found in number literal: 'a'")
        self.assertEqual(lines[1], "2|int y = 12a;")
        self.assertEqual(lines[2].index("^"), lines[1].index("a;"))

    def test_caret_with_wide_line_number(self):
        source = "\n" * 11 + "$"
        error = LexerError.create("L001", 12, 1)
        lines = format_error(error, split_source_lines(source), "f.jks").splitlines()
        self.assertEqual(lines[1], "12|$")
        self.assertEqual(lines[2], "   ^")

    def test_error_past_last_line(self):
        error = LexerError.create("L002", 5, 1)
        lines = format_error(error, ["only"], "f.jks").splitlines()
        self.assertEqual(lines[1], "5|")

    def test_split_source_lines(self):
        self.assertEqual(split_source_lines("a\r\nb\n\vc"), ["a", "b", "\vc"])

    def test_format_errors_summary(self):
        source = "a $ b\n\"open"
        lexer = Lexer(source, "main.jks")
        lexer.tokenize()
        report = lexer.report()
        self.assertIn("main.jks:1:3: SyntaxError: Unknown token found", report)
        self.assertIn("main.jks:2:1: SyntaxError: Unclosed string literal found", report)
        self.assertTrue(report.endswith("2 errors generated.\n"))

    def test_format_errors_single(self):
        report = format_errors([LexerError.create("L015", 1, 1)], "*/", "x.jks")
        self.assertTrue(report.endswith("1 error generated.\n"))

    def test_format_errors_empty(self):
        self.assertEqual(format_errors([], "int x;"), "")


if __name__ == "__main__":
    unittest.main(verbosity=2)
