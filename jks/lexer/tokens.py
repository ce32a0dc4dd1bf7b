"""
Token definitions for the JKS lexer.

This module defines the closed token vocabulary of JKS:
- Keywords and identifiers
- Number and string literals
- Operators (assignment, arithmetic, bitwise, logical, comparison)
- Separators and brackets

Adding an operator means adding a TokenType member here *and* an entry
in SYMBOLS below.
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """
    Enumeration of all token types in JKS.

    Organized by category for clarity and maintainability.
    """

    # ========================================================================
    # Words and Literals
    # ========================================================================
    KEYWORD = auto()                # int, if, while, true, ...
    IDENTIFIER = auto()             # variable_name
    NUMBER = auto()                 # 42, 0x1F, 1'000, 1.5e-3
    STRING = auto()                 # "hello\n"

    # ========================================================================
    # Operators
    # ========================================================================

    # Assignment
    ASSIGN = auto()                 # =

    # Arithmetic
    PLUS = auto()                   # +
    PLUS_EQ = auto()                # +=
    MINUS = auto()                  # -
    MINUS_EQ = auto()               # -=
    STAR = auto()                   # *
    STAR_EQ = auto()                # *=
    SLASH = auto()                  # /
    SLASH_EQ = auto()               # /=
    PERCENT = auto()                # %
    PERCENT_EQ = auto()             # %=
    POWER = auto()                  # **
    POWER_EQ = auto()               # **=

    # Bitwise
    AMPERSAND = auto()              # &
    AMPERSAND_EQ = auto()           # &=
    PIPE = auto()                   # |
    PIPE_EQ = auto()                # |=
    CARET = auto()                  # ^
    CARET_EQ = auto()               # ^=
    TILDE = auto()                  # ~
    LSHIFT = auto()                 # <<
    LSHIFT_EQ = auto()              # <<=
    RSHIFT = auto()                 # >>
    RSHIFT_EQ = auto()              # >>=

    # Logical
    DOUBLE_AMPERSAND = auto()       # &&
    DOUBLE_PIPE = auto()            # ||
    BANG = auto()                   # !

    # Comparison
    EQ_EQ = auto()                  # ==
    BANG_EQ = auto()                # !=
    LESS = auto()                   # <
    LESS_EQ = auto()                # <=
    GREATER = auto()                # >
    GREATER_EQ = auto()             # >=

    # ========================================================================
    # Separators
    # ========================================================================
    SEMICOLON = auto()              # ;
    DOT = auto()                    # .
    COMMA = auto()                  # ,
    LPAREN = auto()                 # (
    RPAREN = auto()                 # )
    LSQUARE = auto()                # [
    RSQUARE = auto()                # ]
    LBRACE = auto()                 # {
    RBRACE = auto()                 # }

    # ========================================================================
    # Special
    # ========================================================================
    UNKNOWN = auto()                # Unrecognized character(s)
    END_OF_INPUT = auto()           # Always the last token


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token in the JKS language.

    `value` holds the identifier or literal text (decoded, for strings).
    Fixed-form operators and separators carry an empty value, UNKNOWN
    tokens carry the offending characters.
    """
    type: TokenType
    value: str
    line: int                       # 1-based
    column: int                     # 1-based, first character of the token

    def __str__(self) -> str:
        if self.value:
            return f"{self.type.name}({self.value!r}):({self.line}:{self.column})"
        return f"{self.type.name}:({self.line}:{self.column})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.value!r}, "
                f"{self.line}, {self.column})")

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a reserved keyword."""
        return self.type == TokenType.KEYWORD

    @property
    def is_identifier(self) -> bool:
        """Check if this token is an identifier."""
        return self.type == TokenType.IDENTIFIER

    @property
    def is_literal(self) -> bool:
        """Check if this token is a number or string literal."""
        return self.type in (TokenType.NUMBER, TokenType.STRING)

    @property
    def is_operator(self) -> bool:
        """Check if this token is an operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_separator(self) -> bool:
        """Check if this token is a separator or bracket."""
        return self.type in SEPARATOR_TYPES

    @property
    def is_eof(self) -> bool:
        return self.type == TokenType.END_OF_INPUT


# Lookup tables used to build the default LexerConfig

KEYWORDS = frozenset({
    # Data types
    "bool",
    "int",
    "string",

    # Control flow
    "if",
    "else",
    "for",
    "while",
    "continue",
    "break",

    # Constants
    "true",
    "false",
})

OPERATORS = {
    # Assignment
    "=": TokenType.ASSIGN,

    # Arithmetic
    "+": TokenType.PLUS,
    "+=": TokenType.PLUS_EQ,
    "-": TokenType.MINUS,
    "-=": TokenType.MINUS_EQ,
    "*": TokenType.STAR,
    "*=": TokenType.STAR_EQ,
    "/": TokenType.SLASH,
    "/=": TokenType.SLASH_EQ,
    "%": TokenType.PERCENT,
    "%=": TokenType.PERCENT_EQ,
    "**": TokenType.POWER,
    "**=": TokenType.POWER_EQ,

    # Bitwise
    "&": TokenType.AMPERSAND,
    "&=": TokenType.AMPERSAND_EQ,
    "|": TokenType.PIPE,
    "|=": TokenType.PIPE_EQ,
    "^": TokenType.CARET,
    "^=": TokenType.CARET_EQ,
    "~": TokenType.TILDE,
    "<<": TokenType.LSHIFT,
    "<<=": TokenType.LSHIFT_EQ,
    ">>": TokenType.RSHIFT,
    ">>=": TokenType.RSHIFT_EQ,

    # Logical
    "&&": TokenType.DOUBLE_AMPERSAND,
    "||": TokenType.DOUBLE_PIPE,
    "!": TokenType.BANG,

    # Comparison
    "==": TokenType.EQ_EQ,
    "!=": TokenType.BANG_EQ,
    "<": TokenType.LESS,
    "<=": TokenType.LESS_EQ,
    ">": TokenType.GREATER,
    ">=": TokenType.GREATER_EQ,
}

SEPARATORS = {
    ";": TokenType.SEMICOLON,
    ".": TokenType.DOT,
    ",": TokenType.COMMA,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LSQUARE,
    "]": TokenType.RSQUARE,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

SYMBOLS = {**OPERATORS, **SEPARATORS}

OPERATOR_TYPES = frozenset(OPERATORS.values())
SEPARATOR_TYPES = frozenset(SEPARATORS.values())
