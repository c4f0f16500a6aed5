"""
tabledb/lexer.py

Tokenizer (lexer) for the tabledb statement language.

Responsibilities:
- Convert one statement's text into a list of tokens with line/column positions
- Recognize keywords, identifiers, literals, comparison operators and symbols
- Drop whitespace and any character no token shape accepts

Notes:
- Token shapes are tried in a fixed priority order (see _MATCHERS); the first
  matcher that succeeds at the current position wins.
- Keywords are a reserved subset of identifiers. The keyword matcher runs first
  and requires a word boundary, so "FROM" is a keyword while "FROMAGE" is an
  identifier.
- Quoted strings ('...' or "...") are copied verbatim, quotes included; there is
  no escape processing. The parser strips quotes where it needs the bare text.
- The lexer never raises. Unrecognized characters are skipped and only logged.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable

from .errors import Position

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Token categories recognized by the lexer."""
    KEYWORD = auto()
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()
    COMPARISON = auto()
    SYMBOL = auto()
    UNKNOWN = auto()


KEYWORDS = (
    "CREATE",
    "TABLE",
    "INSERT",
    "INTO",
    "VALUES",
    "SELECT",
    "FROM",
    "WHERE",
    "ORDER_BY",
    "ASC",
    "DESC",
    "INDEXED",
)

COMPARISON_OPERATORS = ("=", "<", ">")
SYMBOLS = ("(", ")", ",", ";", "*")


@dataclass(frozen=True)
class Token:
    """
    A lexical token.

    Attributes:
        kind: TokenKind
        value: Matched text. Keywords are canonical upper case ("order by" and
               "ORDER_BY" both give "ORDER_BY"); strings keep their quotes.
        pos: Position in input (line/col)
    """
    kind: TokenKind
    value: str
    pos: Position

    def is_keyword(self, word: str) -> bool:
        return self.kind is TokenKind.KEYWORD and self.value == word

    def is_symbol(self, sym: str) -> bool:
        return self.kind is TokenKind.SYMBOL and self.value == sym


# A matcher looks at text[i:] and returns None when its shape does not start
# there, otherwise (token or None for discarded text, end index).
Matcher = Callable[[str, int, Position], "tuple[Token | None, int] | None"]

_WHITESPACE_RE = re.compile(r"\s+")
_KEYWORD_RE = re.compile(
    r"(?:ORDER\s+BY|" + "|".join(KEYWORDS) + r")\b",
    re.IGNORECASE,
)
_IDENTIFIER_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")
_STRING_RE = re.compile(r"'[^']*'|\"[^\"]*\"")
_NUMBER_RE = re.compile(r"-?\d+")


def _match_whitespace(text: str, i: int, pos: Position):
    m = _WHITESPACE_RE.match(text, i)
    if not m:
        return None
    return None, m.end()


def _match_keyword(text: str, i: int, pos: Position):
    m = _KEYWORD_RE.match(text, i)
    if not m:
        return None
    canonical = re.sub(r"\s+", "_", m.group(0).upper())
    return Token(TokenKind.KEYWORD, canonical, pos), m.end()


def _match_identifier(text: str, i: int, pos: Position):
    m = _IDENTIFIER_RE.match(text, i)
    if not m:
        return None
    return Token(TokenKind.IDENTIFIER, m.group(0), pos), m.end()


def _match_comparison(text: str, i: int, pos: Position):
    if text[i] not in COMPARISON_OPERATORS:
        return None
    return Token(TokenKind.COMPARISON, text[i], pos), i + 1


def _match_string(text: str, i: int, pos: Position):
    # An unterminated quote does not match; the quote char is then skipped.
    m = _STRING_RE.match(text, i)
    if not m:
        return None
    return Token(TokenKind.STRING, m.group(0), pos), m.end()


def _match_number(text: str, i: int, pos: Position):
    m = _NUMBER_RE.match(text, i)
    if not m:
        return None
    return Token(TokenKind.NUMBER, m.group(0), pos), m.end()


def _match_symbol(text: str, i: int, pos: Position):
    if text[i] not in SYMBOLS:
        return None
    return Token(TokenKind.SYMBOL, text[i], pos), i + 1


_MATCHERS: tuple[Matcher, ...] = (
    _match_whitespace,
    _match_keyword,
    _match_identifier,
    _match_comparison,
    _match_string,
    _match_number,
    _match_symbol,
)


def _position_at(text: str, i: int) -> Position:
    line = text.count("\n", 0, i) + 1
    col = i - (text.rfind("\n", 0, i) + 1) + 1
    return Position(line=line, col=col)


def unquote(text: str) -> str:
    """Strip one pair of matching surrounding quotes ('...' or "..."), if present."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    return text


def tokenize(text: str) -> list[Token]:
    """
    Tokenize one statement into a list of Token objects.

    Args:
        text: Raw statement text.

    Returns:
        List of Token in input order. Whitespace and unrecognized characters
        produce no tokens; the list may be empty.
    """
    tokens: list[Token] = []
    i = 0
    while i < len(text):
        pos = _position_at(text, i)
        for matcher in _MATCHERS:
            hit = matcher(text, i, pos)
            if hit is None:
                continue
            token, end = hit
            if token is not None:
                tokens.append(token)
            i = end
            break
        else:
            logger.debug("Skipping unrecognized character %r at line %d, col %d", text[i], pos.line, pos.col)
            i += 1

    return tokens
