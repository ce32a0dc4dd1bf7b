"""
JKS Compiler Package

Front end for the JKS language. Only the lexer is implemented so far; the
parser will consume the token stream it produces.

Architecture:
    jks/
    ├── lexer/           # Tokenization and lexical analysis
    └── utils/           # Logging helpers
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, LexerError, tokenize

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize",

    # Version info
    "__version__",
    "__license__",
]
