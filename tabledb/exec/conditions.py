"""
tabledb/exec/conditions.py

WHERE clause handling for the tabledb executor.

Responsibilities:
- Split the raw WHERE text kept by the parser into (column, operator, literal)
- Bind a condition to a table schema, failing on unknown columns, unsupported
  operators and literals that do not parse as the column's type
- Evaluate a bound condition against rows through evaluate_condition(), the
  one place where typed comparison happens

Notes:
- Only the three-part shape `column op literal` is recognized. Any other shape
  yields None from split_condition() and the caller decides what to do.
- The literal loses one pair of matching surrounding quotes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..catalog import Table
from ..errors import ExecutionError
from ..lexer import COMPARISON_OPERATORS, unquote
from ..types import ColumnType


@dataclass(frozen=True)
class Condition:
    """
    A three-part WHERE condition.

    Attributes:
        column: Column name on the left side.
        op: Comparison operator text.
        literal: Right-hand literal text, quotes removed.
    """
    column: str
    op: str
    literal: str


@dataclass(frozen=True)
class BoundCondition:
    """A Condition resolved against one table's schema."""
    index: int
    typ: ColumnType
    op: str
    value: Any

    def matches(self, row: list[Any]) -> bool:
        return evaluate_condition(self.typ, row[self.index], self.op, self.value)


def split_condition(where: str) -> Condition | None:
    """
    Split raw WHERE text on whitespace.

    Returns:
        Condition when the text has exactly three parts, otherwise None.
    """
    parts = where.split()
    if len(parts) != 3:
        return None
    column, op, literal = parts
    return Condition(column=column, op=op, literal=unquote(literal))


def bind_condition(table: Table, cond: Condition) -> BoundCondition:
    """
    Resolve a condition's column and parse its literal once.

    Raises:
        ExecutionError: unknown column or unsupported operator.
        TypeMismatchError: literal does not parse as the column's type.
    """
    idx = table.column_index(cond.column)
    if idx is None:
        raise ExecutionError(f"Column not found: {table.name}.{cond.column}")
    if cond.op not in COMPARISON_OPERATORS:
        raise ExecutionError(f"Unsupported operator in WHERE: {cond.op}")

    typ = table.columns[idx].typ
    return BoundCondition(index=idx, typ=typ, op=cond.op, value=typ.parse(cond.literal))


def evaluate_condition(typ: ColumnType, cell: Any, op: str, value: Any) -> bool:
    """
    Compare a stored cell against a parsed literal using the column's type.

    INT columns compare numerically. TEXT (and every other type) compares
    case-insensitively for '=', '<' and '>'.
    """
    return typ.compare(cell, op, value)
