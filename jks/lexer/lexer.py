"""
JKS Lexer - turns source text into tokens

Single left-to-right pass over the whole buffer. Nothing here raises on
bad input: every malformed construct becomes a best-effort token plus an
entry in `Lexer.errors`, and the token list always ends with exactly one
END_OF_INPUT.
"""

from typing import List, Optional, Tuple

from .tokens import Token, TokenType
from .config import LexerConfig, default_config
from .errors import (
    LexerError, format_errors,
    UNKNOWN_TOKEN, UNTERMINATED_COMMENT, EMPTY_PREFIXED_LITERAL,
    NON_DECIMAL_POINT, DUPLICATE_POINT, POINT_IN_EXPONENT, MISSING_FRACTION,
    MISSING_EXPONENT, DUPLICATE_EXPONENT, MISPLACED_SEPARATOR, INVALID_DIGIT,
    UNCLOSED_STRING, EMPTY_HEX_ESCAPE, UNKNOWN_ESCAPE, UNMATCHED_CLOSE_COMMENT,
)
from ..utils.logging import get_logger


logger = get_logger(__name__)

# Returned by peek() outside the buffer
END = '\0'

WHITESPACE = frozenset(' \t\n\r\v\f')

BASE_PREFIXES = {
    'b': 2, 'B': 2,
    'o': 8, 'O': 8,
    'x': 16, 'X': 16,
}

SIMPLE_ESCAPES = {
    "'": "'",
    '"': '"',
    '\\': '\\',
    'a': '\a',
    'b': '\b',
    'f': '\f',
    'n': '\n',
    'r': '\r',
    't': '\t',
    'v': '\v',
}


def is_digit_in_base(char: str, base: int) -> bool:
    """Check if `char` is a valid digit for `base` (letters count from 10)."""
    if not char.isascii():
        return False
    if char.isdigit():
        digit = ord(char) - ord('0')
    elif char.isalpha():
        digit = ord(char.upper()) - ord('A') + 10
    else:
        return False
    return digit < base


def _is_word_start(char: str) -> bool:
    return char.isascii() and (char.isalpha() or char == '_')


def _is_word_char(char: str) -> bool:
    return char.isascii() and (char.isalnum() or char == '_')


class Lexer:
    """
    JKS lexical analyzer.

    Owns a read-only copy of the source and a cursor (pos, line, column).
    Call tokenize() for the whole token list, or next_token() to pull
    tokens one at a time.
    """

    def __init__(self, source: str, filename: str = "<string>", config: Optional[LexerConfig] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Full source text
            filename: Name used when rendering error reports
            config: Keyword/symbol tables; the shared default when omitted
        """
        if not isinstance(source, str):
            raise TypeError(f"Lexer source must be str, not {type(source).__name__}")

        self.source = source
        self.filename = filename
        self.config = config if config is not None else default_config()
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens ending with a single END_OF_INPUT token
        """
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors = []

        while True:
            token = self.next_token()
            self.tokens.append(token)
            if token.type == TokenType.END_OF_INPUT:
                break

        logger.debug(
            "Tokenized %s: %d tokens, %d errors",
            self.filename, len(self.tokens), len(self.errors)
        )
        return self.tokens

    def next_token(self) -> Token:
        """Skip whitespace and comments, then scan a single token."""
        self._skip_whitespace_and_comments()

        if self._at_end():
            return Token(TokenType.END_OF_INPUT, "", self.line, self.column)

        current_char = self.peek()

        if _is_word_start(current_char):
            return self._scan_identifier_or_keyword()

        if is_digit_in_base(current_char, 10) or (current_char == '.' and is_digit_in_base(self.peek(1), 10)):
            return self._scan_number()

        if current_char == '"':
            return self._scan_string()

        return self._scan_symbol()

    def peek(self, offset: int = 0) -> str:
        """Look at the character `offset` places from the cursor, or END."""
        peek_pos = self.pos + offset
        if 0 <= peek_pos < len(self.source):
            return self.source[peek_pos]
        return END

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0

    def report(self) -> str:
        """Render the collected errors with source lines and carets."""
        return format_errors(self.errors, self.source, self.filename)

    # ------------------------------------------------------------------
    # Skipping
    # ------------------------------------------------------------------

    def _skip_whitespace_and_comments(self):
        """Skip whitespace and comments. Never produces a token."""
        while not self._at_end():
            char = self.peek()

            if char in WHITESPACE:
                self._advance()
                continue

            # Line comment, the newline itself is whitespace
            if char == '/' and self.peek(1) == '/':
                while not self._at_end() and self.peek() != '\n':
                    self._advance()
                continue

            if char == '/' and self.peek(1) == '*':
                start_line, start_column = self.line, self.column
                self._advance_by(2)
                while not self._at_end() and not (self.peek() == '*' and self.peek(1) == '/'):
                    self._advance()
                if self._at_end():
                    self._error(UNTERMINATED_COMMENT, start_line, start_column)
                    return
                self._advance_by(2)
                continue

            break

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _scan_identifier_or_keyword(self) -> Token:
        line, column, start_pos = self.line, self.column, self.pos

        while _is_word_char(self.peek()):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = TokenType.KEYWORD if self.config.is_keyword(lexeme) else TokenType.IDENTIFIER
        return Token(token_type, lexeme, line, column)

    def _scan_number(self) -> Token:
        """
        Scan a number literal in base 2, 8, 10 or 16.

        The checks below run in a fixed order so that a malformed literal
        gets the most specific message: decimal point, then exponent,
        then sign, then digit separator, then plain invalid digit.
        """
        line, column, start_pos = self.line, self.column, self.pos
        base = 10

        if self.peek() == '0' and self.peek(1) in BASE_PREFIXES:
            base = BASE_PREFIXES[self.peek(1)]
            self._advance_by(2)
            if not is_digit_in_base(self.peek(), base):
                self._error(EMPTY_PREFIXED_LITERAL, self.line, self.column)
                return Token(TokenType.NUMBER, self.source[start_pos:self.pos], line, column)

        value_parts = [self.source[start_pos:self.pos]]
        has_point = False
        in_exponent = False

        while not self._at_end():
            char = self.peek()

            if char == '.':
                if base != 10:
                    self._error(NON_DECIMAL_POINT, self.line, self.column)
                    break
                if in_exponent:
                    self._error(POINT_IN_EXPONENT, self.line, self.column)
                    break
                if has_point:
                    self._error(DUPLICATE_POINT, self.line, self.column)
                    break
                if not is_digit_in_base(self.peek(1), base):
                    self._error(MISSING_FRACTION, self.line, self.column)
                    break
                has_point = True

            elif base == 10 and char in ('e', 'E'):
                if in_exponent:
                    self._error(DUPLICATE_EXPONENT, self.line, self.column)
                    break
                following = self.peek(1)
                signed_index = following in ('+', '-') and is_digit_in_base(self.peek(2), 10)
                if not (is_digit_in_base(following, 10) or signed_index):
                    self._error(MISSING_EXPONENT, self.line, self.column)
                    break
                in_exponent = True

            elif char in ('+', '-'):
                # Only the sign of an exponent belongs to the literal
                if not (in_exponent and self.peek(-1) in ('e', 'E')):
                    break

            elif char == "'":
                if not (is_digit_in_base(self.peek(-1), base) and is_digit_in_base(self.peek(1), base)):
                    self._error(MISPLACED_SEPARATOR, self.line, self.column)
                    self._advance()
                    break

            elif not is_digit_in_base(char, base):
                if char not in WHITESPACE and char not in self.config.symbol_starts:
                    self._error(INVALID_DIGIT, self.line, self.column, f"'{char}'")
                break

            value_parts.append(self._advance())

        return Token(TokenType.NUMBER, ''.join(value_parts), line, column)

    def _scan_string(self) -> Token:
        """Scan a string literal. Strings never span lines."""
        line, column = self.line, self.column
        self._advance()  # Skip opening quote

        value_parts = []

        while not self._at_end():
            char = self.peek()

            if char == '\n':
                break

            if char == '"':
                self._advance()  # Skip closing quote
                return Token(TokenType.STRING, ''.join(value_parts), line, column)

            if char == '\\':
                decoded = self._scan_escape_sequence()
                if decoded is not None:
                    value_parts.append(decoded)
                continue

            value_parts.append(self._advance())

        self._error(UNCLOSED_STRING, line, column)
        return Token(TokenType.STRING, ''.join(value_parts), line, column)

    def _scan_escape_sequence(self) -> Optional[str]:
        """
        Decode the escape sequence at the cursor (which sits on the backslash).

        Returns the decoded character, or None when nothing should be
        appended (bad \\x escape, or the line/input ends after the backslash).
        """
        line, column = self.line, self.column
        self._advance()  # Skip backslash

        if self._at_end() or self.peek() == '\n':
            return None

        escape_char = self.peek()

        if escape_char in SIMPLE_ESCAPES:
            self._advance()
            return SIMPLE_ESCAPES[escape_char]

        if escape_char == 'x':
            self._advance()
            if not is_digit_in_base(self.peek(), 16):
                self._error(EMPTY_HEX_ESCAPE, line, column)
                return None
            number = 0
            while is_digit_in_base(self.peek(), 16):
                number = (number * 16 + int(self._advance(), 16)) % 256
            return chr(number)

        if is_digit_in_base(escape_char, 8):
            number = 0
            for _ in range(3):
                if not is_digit_in_base(self.peek(), 8):
                    break
                number = (number * 8 + int(self._advance(), 8)) % 256
            return chr(number)

        # Unknown escape, keep the character itself
        self._advance()
        self._error(UNKNOWN_ESCAPE, line, column, f"'\\{escape_char}'")
        return escape_char

    def _scan_symbol(self) -> Token:
        """Scan an operator or separator, preferring the longest spelling."""
        line, column = self.line, self.column

        if self.peek() == '*' and self.peek(1) == '/':
            self._advance_by(2)
            self._error(UNMATCHED_CLOSE_COMMENT, line, column)
            return Token(TokenType.UNKNOWN, '*/', line, column)

        for length in range(self.config.max_symbol_length, 0, -1):
            if self.pos + length > len(self.source):
                continue
            token_type = self.config.lookup_symbol(self.source[self.pos:self.pos + length])
            if token_type is not None:
                self._advance_by(length)
                return Token(token_type, "", line, column)

        char = self._advance()
        self._error(UNKNOWN_TOKEN, line, column, repr(char))
        return Token(TokenType.UNKNOWN, char, line, column)

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _at_end(self) -> bool:
        return self.pos >= len(self.source)

    def _advance(self) -> str:
        """Consume one character, updating line/column, and return it."""
        if self._at_end():
            return END
        char = self.source[self.pos]
        if char == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        self.pos += 1
        return char

    def _advance_by(self, count: int):
        for _ in range(count):
            self._advance()

    def _error(self, code: str, line: int, column: int, detail: Optional[str] = None):
        self.errors.append(LexerError.create(code, line, column, detail))


def tokenize(
    source: str,
    filename: str = "<string>",
    config: Optional[LexerConfig] = None
) -> Tuple[List[Token], List[LexerError]]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        config: Keyword/symbol tables; the shared default when omitted

    Returns:
        (tokens, errors). Tokens always end with END_OF_INPUT; errors are
        in source order and never stop the scan.
    """
    lexer = Lexer(source, filename, config)
    tokens = lexer.tokenize()
    return tokens, lexer.errors
