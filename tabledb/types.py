"""
tabledb/types.py

Column type variants.

A column's declared type name is resolved exactly once, when CREATE TABLE is
parsed, into one of a closed set of ColumnType variants. Each variant knows how
to turn literal text into a value and how to compare two values, so row
filtering never re-inspects type names.

Variants:
- IntType: declared INT or INTEGER. Values are Python ints.
- TextType: declared TEXT and any other type name. Values are Python strs and
  compare case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import ExecutionError, TypeMismatchError

INT_TYPE_NAMES = {"INT", "INTEGER"}


class ColumnType:
    """Base class for column type variants."""

    name: str

    def parse(self, raw: str) -> Any:
        """Convert literal text into a value, or raise TypeMismatchError."""
        raise NotImplementedError

    def compare(self, left: Any, op: str, right: Any) -> bool:
        """Evaluate `left <op> right` for two parsed values, op in {'=', '<', '>'}."""
        raise NotImplementedError


@dataclass(frozen=True)
class IntType(ColumnType):
    name: str = "INT"

    def parse(self, raw: str) -> int:
        try:
            return int(raw.strip())
        except ValueError:
            raise TypeMismatchError(f"Invalid integer literal: {raw!r}") from None

    def compare(self, left: Any, op: str, right: Any) -> bool:
        if op == "=":
            return left == right
        if op == "<":
            return left < right
        if op == ">":
            return left > right
        raise ExecutionError(f"Unsupported operator in WHERE: {op}")


@dataclass(frozen=True)
class TextType(ColumnType):
    name: str = "TEXT"

    def parse(self, raw: str) -> str:
        return raw

    def compare(self, left: Any, op: str, right: Any) -> bool:
        a = str(left).casefold()
        b = str(right).casefold()
        if op == "=":
            return a == b
        if op == "<":
            return a < b
        if op == ">":
            return a > b
        raise ExecutionError(f"Unsupported operator in WHERE: {op}")


def resolve_type(declared: str) -> ColumnType:
    """
    Map a declared type name to its ColumnType variant.

    Args:
        declared: Type name as written in CREATE TABLE (any case).

    Returns:
        IntType for INT/INTEGER, otherwise TextType carrying the upper-cased name.
    """
    upper = declared.upper()
    if upper in INT_TYPE_NAMES:
        return IntType(name=upper)
    return TextType(name=upper)
