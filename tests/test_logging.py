"""
Tests for the package logging setup.
"""

import logging
import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jks.lexer import Lexer
from jks.utils.logging import get_logger


class TestGetLogger(unittest.TestCase):
    """Test that module loggers defer to the package logger."""

    def test_module_logger_inherits_from_package(self):
        logger = get_logger("jks.lexer.lexer")
        self.assertEqual(logger.level, logging.NOTSET)
        self.assertEqual(logger.handlers, [])
        self.assertTrue(logger.propagate)

    def test_package_logger_has_single_handler(self):
        get_logger("jks.lexer.config")
        get_logger("jks.lexer.lexer")
        self.assertEqual(len(logging.getLogger("jks").handlers), 1)

    def test_debug_enabled_from_package_logger(self):
        """Raising verbosity on "jks" shows the per-run lexer counts."""
        with self.assertLogs("jks", level="DEBUG") as captured:
            Lexer("int x = 1; $", "count.jks").tokenize()

        messages = [record.getMessage() for record in captured.records]
        self.assertIn("Tokenized count.jks: 7 tokens, 1 errors", messages)


if __name__ == "__main__":
    unittest.main(verbosity=2)
