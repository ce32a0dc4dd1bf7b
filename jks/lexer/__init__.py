"""
JKS Lexer Package

Implements a from-scratch lexical analyzer (tokenizer) for the JKS language,
a small C-like language.

Key Features:
- Binary, octal, decimal and hexadecimal number literals with digit
  separators, decimal points and scientific notation
- String literals with C-style escape sequences (including \\xHH and \\NNN)
- Longest-match operator and separator recognition
- Line and block comments
- Error recovery: every problem is recorded with its line and column and
  scanning carries on
"""

from .tokens import Token, TokenType, KEYWORDS, SYMBOLS
from .config import LexerConfig, default_config
from .lexer import Lexer, tokenize
from .errors import LexerError, LexerConfigError, ERROR_CODES, format_error, format_errors

__all__ = [
    "Lexer",
    "tokenize",
    "Token",
    "TokenType",
    "KEYWORDS",
    "SYMBOLS",
    "LexerConfig",
    "default_config",
    "LexerError",
    "LexerConfigError",
    "ERROR_CODES",
    "format_error",
    "format_errors",
]
