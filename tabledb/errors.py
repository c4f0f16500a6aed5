"""
tabledb/errors.py

Exception types for the tabledb in-memory SQL interpreter.

This module defines:
- A common base exception for every interpreter error
- A Position structure for reporting syntax errors with line/column context
- Specialized error types raised by the parser, catalog and executor

The lexer never raises: characters it does not recognize are skipped, so
malformed input surfaces here as a parser or executor error.
"""

from __future__ import annotations

from dataclasses import dataclass


class TableDBError(Exception):
    """
    Base class for all tabledb errors.

    Database.run() and the REPL catch this type to turn a failed statement into
    text without swallowing unrelated exceptions.
    """


@dataclass(frozen=True)
class Position:
    """
    Represents a location in a statement.

    Attributes:
        line: 1-based line number
        col:  1-based column number
    """
    line: int
    col: int


class SqlSyntaxError(TableDBError):
    """
    Raised when a statement does not match the grammar of its kind.

    Args:
        message: Human readable explanation, naming the expected construct.
        position: Optional Position of the offending token.
    """

    def __init__(self, message: str, position: Position | None = None):
        self.message = message
        self.position = position
        super().__init__(self.__str__())

    def __str__(self) -> str:
        if self.position is None:
            return f"Syntax error: {self.message}"
        return f"Syntax error at line {self.position.line}, col {self.position.col}: {self.message}"


class UnexpectedEndOfStatement(SqlSyntaxError):
    """Raised when the parser needs another token but the statement has ended."""

    def __init__(self, expected: str | None = None):
        msg = "Unexpected end of statement"
        if expected:
            msg = f"{msg} ({expected})"
        super().__init__(msg)


class ExecutionError(TableDBError):
    """
    Raised when a statement is syntactically valid but cannot be applied.

    Examples:
      - Table already exists / table not found
      - Unknown column in WHERE
      - Unsupported comparison operator
    """


class TypeMismatchError(ExecutionError):
    """
    Raised when a literal cannot be interpreted as its column's type.

    Examples:
      - INSERT of 'abc' into an INT column
      - WHERE id = abc against an INT column
    """


class ConstraintError(TableDBError):
    """
    Raised when a schema rule is violated.

    Examples:
      - INSERT value count differs from the table's column count
      - Duplicate column name in CREATE TABLE
    """
