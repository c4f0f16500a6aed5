"""
tabledb/parser.py

Recursive-descent parser for the tabledb statement language.

Responsibilities:
- Convert one statement's tokens into a command (see tabledb/ast.py)
- Provide syntax errors that name the expected construct, with positions
- Support exactly three statement forms:
    - CREATE [TABLE] name (col type [INDEXED], ...)
    - INSERT INTO name [VALUES] (value, ...)
    - SELECT cols FROM name [WHERE ...] [ORDER_BY col [ASC|DESC], ...]
  Each may end with an optional ';'.

Notes:
- Running out of tokens raises UnexpectedEndOfStatement; the parser never
  indexes past the end of the token list.
- There is no statement splitter: the caller passes exactly one statement.
- The WHERE clause is kept as whitespace-joined token text. The executor splits
  it again when filtering.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .ast import (
    ColumnDef,
    CreateTable,
    Direction,
    Insert,
    Literal,
    OrderBy,
    Select,
    Statement,
)
from .errors import SqlSyntaxError, UnexpectedEndOfStatement
from .lexer import Token, TokenKind, tokenize, unquote
from .types import resolve_type

logger = logging.getLogger(__name__)


@dataclass
class Parser:
    """
    Cursor over a token list.

    Attributes:
        tokens: List of Token for one statement.
        i: Current token index.
    """
    tokens: list[Token]
    i: int = 0

    def at_end(self) -> bool:
        return self.i >= len(self.tokens)

    def peek(self) -> Token | None:
        """Return the current token without consuming, or None at the end."""
        if self.at_end():
            return None
        return self.tokens[self.i]

    def consume(self, expected: str | None = None) -> Token:
        """
        Consume and return the current token.

        Raises:
            UnexpectedEndOfStatement if no tokens remain.
        """
        if self.at_end():
            raise UnexpectedEndOfStatement(expected)
        t = self.tokens[self.i]
        self.i += 1
        return t

    def expect_keyword(self, word: str, msg: str) -> Token:
        t = self.consume(msg)
        if not t.is_keyword(word):
            raise SqlSyntaxError(msg, t.pos)
        return t

    def expect_symbol(self, sym: str, msg: str) -> Token:
        t = self.consume(msg)
        if not t.is_symbol(sym):
            raise SqlSyntaxError(msg, t.pos)
        return t

    def expect_identifier(self, msg: str) -> str:
        t = self.consume(msg)
        if t.kind is not TokenKind.IDENTIFIER:
            raise SqlSyntaxError(msg, t.pos)
        return t.value

    def match_keyword(self, word: str) -> bool:
        """If the current token is keyword `word`, consume it and return True."""
        t = self.peek()
        if t is not None and t.is_keyword(word):
            self.i += 1
            return True
        return False

    def match_symbol(self, sym: str) -> bool:
        """If the current token is symbol `sym`, consume it and return True."""
        t = self.peek()
        if t is not None and t.is_symbol(sym):
            self.i += 1
            return True
        return False

    def finish(self) -> None:
        """Accept an optional ';' and require that nothing follows it."""
        self.match_symbol(";")
        t = self.peek()
        if t is not None:
            raise SqlSyntaxError(f"Unexpected token after end of statement: {t.value!r}", t.pos)

    # ---------------- CREATE ----------------

    def parse_create(self) -> CreateTable:
        """
        Parse:
          CREATE [TABLE] <name> ( <coldef> (, <coldef>)* ) [;]
        """
        self.expect_keyword("CREATE", "Expected CREATE")
        self.match_keyword("TABLE")
        table = self.expect_identifier("Expected table name after CREATE")
        self.expect_symbol("(", "Expected '(' after table name")

        cols = [self.parse_column_def()]
        while self.match_symbol(","):
            cols.append(self.parse_column_def())

        self.expect_symbol(")", "Expected ')' to close table definition")
        self.finish()
        return CreateTable(table_name=table, columns=tuple(cols))

    def parse_column_def(self) -> ColumnDef:
        """
        Parse:
          <colname> <type> [INDEXED]
        """
        name = self.expect_identifier("Expected column name")
        declared = self.expect_identifier(f"Expected column type after column name {name!r}")
        indexed = self.match_keyword("INDEXED")
        return ColumnDef(name=name, typ=resolve_type(declared), indexed=indexed)

    # ---------------- INSERT ----------------

    def parse_insert(self) -> Insert:
        """
        Parse:
          INSERT INTO <name> [VALUES] ( <value> (, <value>)* ) [;]

        Only string and number tokens inside the parentheses become values;
        anything else there (commas included) is skipped.
        """
        self.expect_keyword("INSERT", "Expected INSERT")
        self.expect_keyword("INTO", "Expected INTO after INSERT")
        table = self.expect_identifier("Expected table name after INSERT INTO")
        self.match_keyword("VALUES")
        self.expect_symbol("(", "Expected '(' before values")

        values: list[Literal] = []
        while True:
            t = self.consume("expected ')' after values")
            if t.is_symbol(")"):
                break
            if t.kind in (TokenKind.STRING, TokenKind.NUMBER):
                values.append(Literal(kind=t.kind, text=unquote(t.value)))
            elif not t.is_symbol(","):
                logger.debug("Ignoring non-literal token %r in INSERT value list", t.value)

        self.finish()
        return Insert(table_name=table, values=tuple(values))

    # ---------------- SELECT ----------------

    def parse_select(self) -> Select:
        """
        Parse:
          SELECT <cols> FROM <name> [WHERE <tokens...>] [ORDER_BY <item> (, <item>)*] [;]
        """
        self.expect_keyword("SELECT", "Expected SELECT")
        cols = self.parse_select_list()
        self.expect_keyword("FROM", "Expected FROM after column list")
        table = self.expect_identifier("Expected table name after FROM")

        where = ""
        where_tok = self.peek()
        if self.match_keyword("WHERE"):
            parts: list[str] = []
            while not self.at_end():
                t = self.peek()
                if t.is_keyword("ORDER_BY") or t.is_symbol(";"):
                    break
                parts.append(self.consume().value)
            if not parts:
                raise SqlSyntaxError("Expected condition after WHERE", where_tok.pos)
            where = " ".join(parts)

        order_by: list[OrderBy] = []
        if self.match_keyword("ORDER_BY"):
            order_by.append(self.parse_order_item())
            while self.match_symbol(","):
                order_by.append(self.parse_order_item())

        self.finish()
        return Select(table_name=table, columns=cols, where=where, order_by=tuple(order_by))

    def parse_select_list(self) -> tuple[str, ...]:
        """
        Parse:
          '*' OR <col> (, <col>)*
        """
        if self.match_symbol("*"):
            return ("*",)
        cols = [self.expect_identifier("Expected column name or '*' after SELECT")]
        while self.match_symbol(","):
            cols.append(self.expect_identifier("Expected column name after ','"))
        return tuple(cols)

    def parse_order_item(self) -> OrderBy:
        """
        Parse:
          <col> [ASC | DESC]
        """
        col = self.expect_identifier("Expected column name in ORDER BY")
        if self.match_keyword("DESC"):
            return OrderBy(column=col, direction=Direction.DESC)
        self.match_keyword("ASC")
        return OrderBy(column=col, direction=Direction.ASC)


# ---------- public helpers ----------

def parse_create(tokens: list[Token]) -> CreateTable:
    """Parse a CREATE statement from its tokens."""
    return Parser(tokens).parse_create()


def parse_insert(tokens: list[Token]) -> Insert:
    """Parse an INSERT statement from its tokens."""
    return Parser(tokens).parse_insert()


def parse_select(tokens: list[Token]) -> Select:
    """Parse a SELECT statement from its tokens."""
    return Parser(tokens).parse_select()


_PARSERS = {
    "CREATE": parse_create,
    "INSERT": parse_insert,
    "SELECT": parse_select,
}


def parse_statement(text: str) -> Statement:
    """
    Tokenize one statement and parse it according to its leading keyword.

    Args:
        text: Statement text (semicolon optional).

    Returns:
        CreateTable, Insert or Select.

    Raises:
        SqlSyntaxError: on empty input, an unknown leading word, or any
        structural mismatch.
    """
    tokens = tokenize(text)
    if not tokens:
        raise SqlSyntaxError("No input detected")

    first = tokens[0]
    parse = _PARSERS.get(first.value) if first.kind is TokenKind.KEYWORD else None
    if parse is None:
        raise SqlSyntaxError("Unknown or incorrect command", first.pos)
    return parse(tokens)
