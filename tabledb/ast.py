"""
tabledb/ast.py

Command value objects produced by the parser.

The parser turns one statement's tokens into exactly one of the commands below;
the executor applies it to the catalog.

Design notes:
- Commands are frozen dataclasses and never partially built.
- ColumnDef carries its resolved ColumnType variant, chosen at parse time.
- Select keeps the WHERE clause as raw text; the executor splits it.
- Select.columns and Select.order_by are captured but not applied by the
  executor: every query returns all columns in insertion order.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .lexer import TokenKind
from .types import ColumnType


class Statement:
    """Base class marker for all commands."""


class Direction(str, Enum):
    """Sort direction for ORDER BY."""
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class ColumnDef:
    """
    Column definition in CREATE TABLE.

    Attributes:
        name: Column name.
        typ: ColumnType variant resolved from the declared type name.
        indexed: Whether INDEXED was declared. Recorded only; no index exists.
    """
    name: str
    typ: ColumnType
    indexed: bool = False


@dataclass(frozen=True)
class Literal:
    """
    A value from an INSERT list.

    Attributes:
        kind: TokenKind.STRING or TokenKind.NUMBER.
        text: Literal text with surrounding quotes removed.
    """
    kind: TokenKind
    text: str


@dataclass(frozen=True)
class OrderBy:
    """One ORDER BY item."""
    column: str
    direction: Direction = Direction.ASC


# ---------- Statements ----------

@dataclass(frozen=True)
class CreateTable(Statement):
    """CREATE TABLE statement."""
    table_name: str
    columns: tuple[ColumnDef, ...]


@dataclass(frozen=True)
class Insert(Statement):
    """INSERT INTO statement."""
    table_name: str
    values: tuple[Literal, ...]


@dataclass(frozen=True)
class Select(Statement):
    """
    SELECT statement.

    Attributes:
        table_name: Table to read.
        columns: Selected column names; ("*",) for all columns.
        where: Raw condition text, "" when there is no WHERE clause.
        order_by: ORDER BY items in written order.
    """
    table_name: str
    columns: tuple[str, ...]
    where: str = ""
    order_by: tuple[OrderBy, ...] = ()
