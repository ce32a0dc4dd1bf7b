"""
Error handling for the JKS lexer.

Lexical errors never stop the scanner. Each one is recorded as a
LexerError carrying a stable code and the 1-based position of the
offending character, so a presentation layer can point a caret at it.
"""

from typing import Iterable, List, Optional, Sequence
from dataclasses import dataclass


# Error codes for categorization. The title doubles as the message.
ERROR_CODES = {
    "L001": "Unknown token found",
    "L002": "Unterminated block comment found",
    "L003": "Expected digits after non-decimal literal prefix",
    "L004": "Non-decimal literal found with a decimal point",
    "L005": "Number literal with two decimal points found",
    "L006": "Non-integer scientific index of number literal found",
    "L007": "Expected decimal part of number literal",
    "L008": "Expected scientific index of decimal number literal",
    "L009": "Number literal with two scientific indices found",
    "L010": "Misplaced digit separator in number literal",
    "L011": "Invalid digit found in number literal",
    "L012": "Unclosed string literal found",
    "L013": "Expected hexadecimal value after hexadecimal escape sequence",
    "L014": "Unknown escape sequence found inside string literal",
    "L015": "Unmatched close-comment found",
}

UNKNOWN_TOKEN = "L001"
UNTERMINATED_COMMENT = "L002"
EMPTY_PREFIXED_LITERAL = "L003"
NON_DECIMAL_POINT = "L004"
DUPLICATE_POINT = "L005"
POINT_IN_EXPONENT = "L006"
MISSING_FRACTION = "L007"
MISSING_EXPONENT = "L008"
DUPLICATE_EXPONENT = "L009"
MISPLACED_SEPARATOR = "L010"
INVALID_DIGIT = "L011"
UNCLOSED_STRING = "L012"
EMPTY_HEX_ESCAPE = "L013"
UNKNOWN_ESCAPE = "L014"
UNMATCHED_CLOSE_COMMENT = "L015"


class LexerConfigError(ValueError):
    """Raised when a LexerConfig is built from invalid tables."""


@dataclass(frozen=True)
class LexerError:
    """
    A recoverable syntax error found while scanning.

    Errors are appended in discovery order, which is also source order.
    """
    message: str
    line: int
    column: int
    code: Optional[str] = None

    @classmethod
    def create(cls, code: str, line: int, column: int, detail: Optional[str] = None) -> "LexerError":
        """Build an error whose message comes from ERROR_CODES."""
        message = ERROR_CODES[code]
        if detail:
            message = f"{message}: {detail}"
        return cls(message, line, column, code)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: SyntaxError: {self.message}"


def split_source_lines(source: str) -> List[str]:
    """Split source text the way the lexer counts lines (on '\\n' only)."""
    return [line[:-1] if line.endswith('\r') else line for line in source.split('\n')]


def format_error(error: LexerError, source_lines: Sequence[str], filename: str = "<string>") -> str:
    """
    Render one error with the offending source line and a caret.

    Example:
        main.jks:2:9: SyntaxError: Invalid digit found in number literal
        2|int x = 12a;
                    ^
    """
    if 1 <= error.line <= len(source_lines):
        text = source_lines[error.line - 1]
    else:
        text = ""

    # "<line>|" occupies len(str(line)) + 1 columns before column 1
    caret_indent = len(str(error.line)) + error.column

    return (
        f"{filename}:{error.line}:{error.column}: SyntaxError: {error.message}\n"
        f"{error.line}|{text}\n"
        f"{' ' * caret_indent}^\n"
    )


def format_errors(errors: Iterable[LexerError], source: str, filename: str = "<string>") -> str:
    """Render every error followed by a count line; empty when there are none."""
    errors = list(errors)
    if not errors:
        return ""

    source_lines = split_source_lines(source)
    report = "".join(format_error(error, source_lines, filename) for error in errors)

    noun = "error" if len(errors) == 1 else "errors"
    report += f"{len(errors)} {noun} generated.\n"
    return report
