"""
Lexer configuration: the reserved keywords and the symbol table.

A LexerConfig is immutable once built. The default one is created lazily
on first use and then shared by reference between every Lexer that is
not given its own.
"""

import threading
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional
from dataclasses import dataclass

from .tokens import TokenType, KEYWORDS, SYMBOLS
from .errors import LexerConfigError
from ..utils.logging import get_logger


logger = get_logger(__name__)

MAX_SYMBOL_LENGTH = 3


@dataclass(frozen=True)
class LexerConfig:
    """
    Keyword set and symbol table used by the lexer.

    `symbol_starts` holds every character that can begin a symbol; the
    number scanner uses it to tell a legitimate operator from a bad digit.
    """
    keywords: FrozenSet[str]
    symbols: Mapping[str, TokenType]
    symbol_starts: FrozenSet[str]
    max_symbol_length: int

    @classmethod
    def create(
        cls,
        keywords: Optional[Iterable[str]] = None,
        symbols: Optional[Mapping[str, TokenType]] = None
    ) -> "LexerConfig":
        """
        Build a validated configuration.

        Args:
            keywords: Reserved words (defaults to the JKS keywords)
            symbols: Operator/separator spelling to TokenType (defaults to SYMBOLS)

        Raises:
            LexerConfigError: If either table is malformed
        """
        keyword_set = frozenset(KEYWORDS if keywords is None else keywords)
        symbol_table: Dict[str, TokenType] = dict(SYMBOLS if symbols is None else symbols)

        for word in keyword_set:
            if not _is_identifier_shaped(word):
                raise LexerConfigError(f"Keyword {word!r} is not a valid identifier")

        for spelling, token_type in symbol_table.items():
            if not isinstance(spelling, str) or not 1 <= len(spelling) <= MAX_SYMBOL_LENGTH:
                raise LexerConfigError(
                    f"Symbol {spelling!r} must be 1 to {MAX_SYMBOL_LENGTH} characters long"
                )
            if not spelling.isascii() or not spelling.isprintable() or ' ' in spelling:
                raise LexerConfigError(f"Symbol {spelling!r} must be printable ASCII")
            if _is_identifier_shaped(spelling[0]) or spelling[0].isdigit() or spelling[0] == '"':
                raise LexerConfigError(f"Symbol {spelling!r} starts like another token")
            if not isinstance(token_type, TokenType):
                raise LexerConfigError(f"Symbol {spelling!r} maps to {token_type!r}, not a TokenType")

        return cls(
            keywords=keyword_set,
            symbols=MappingProxyType(symbol_table),
            symbol_starts=frozenset(spelling[0] for spelling in symbol_table),
            max_symbol_length=max((len(s) for s in symbol_table), default=0),
        )

    def is_keyword(self, word: str) -> bool:
        return word in self.keywords

    def lookup_symbol(self, spelling: str) -> Optional[TokenType]:
        return self.symbols.get(spelling)


def _is_identifier_shaped(word: str) -> bool:
    if not word or not word.isascii():
        return False
    if not (word[0].isalpha() or word[0] == '_'):
        return False
    return all(c.isalnum() or c == '_' for c in word)


_default_config: Optional[LexerConfig] = None
_default_lock = threading.Lock()


def default_config() -> LexerConfig:
    """Get the shared default configuration, building it on first call."""
    global _default_config
    if _default_config is None:
        with _default_lock:
            if _default_config is None:  # Double-checked locking
                _default_config = LexerConfig.create()
                logger.debug(
                    "Built default lexer config: %d keywords, %d symbols",
                    len(_default_config.keywords), len(_default_config.symbols)
                )
    return _default_config
