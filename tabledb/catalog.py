"""
tabledb/catalog.py

In-memory table catalog for the tabledb interpreter.

Responsibilities:
- Own every table (schema + rows) for the lifetime of the process
- Apply CREATE TABLE: reject duplicate table and column names
- Apply INSERT: enforce strict arity and parse each value by its column type

Design notes:
- Tables are append-only. There is no UPDATE, DELETE, ALTER or DROP.
- A table's column tuple is fixed at creation.
- Every row is a list as long as its table's column tuple. An INSERT either
  appends one such row or changes nothing.
- The catalog is not thread-safe. A multi-client front end must serialize all
  access to it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from .ast import ColumnDef, CreateTable, Insert
from .errors import ConstraintError, ExecutionError, TypeMismatchError
from .result import CommandOk

logger = logging.getLogger(__name__)


@dataclass
class Table:
    """
    A table and its rows.

    Attributes:
        name: Table name.
        columns: Column definitions in declaration order.
        rows: Stored rows in insertion order.
    """
    name: str
    columns: tuple[ColumnDef, ...]
    rows: list[list[Any]] = field(default_factory=list)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    def column_names(self) -> list[str]:
        """Return column names in declaration order."""
        return [c.name for c in self.columns]

    def column_index(self, name: str) -> int | None:
        """Return the position of column `name`, or None if not found."""
        for i, c in enumerate(self.columns):
            if c.name == name:
                return i
        return None


@dataclass
class Catalog:
    """
    Mapping of table name -> Table.

    Attributes:
        tables: All tables created in this session.
    """
    tables: dict[str, Table] = field(default_factory=dict)

    # ---------- lookup helpers ----------

    def require_table(self, table_name: str) -> Table:
        """
        Fetch a table by name or raise ExecutionError.

        Raises:
            ExecutionError: if table does not exist.
        """
        t = self.tables.get(table_name)
        if t is None:
            raise ExecutionError(f"Table not found: {table_name}")
        return t

    def table_names(self) -> list[str]:
        return sorted(self.tables)

    # ---------- DDL ----------

    def create_table(self, cmd: CreateTable) -> CommandOk:
        """
        Register a new, empty table.

        Raises:
            ExecutionError: if the table already exists.
            ConstraintError: if a column name is repeated.
        """
        if cmd.table_name in self.tables:
            raise ExecutionError(f"Table already exists: {cmd.table_name}")

        seen: set[str] = set()
        for c in cmd.columns:
            if c.name in seen:
                raise ConstraintError(f"Duplicate column name in CREATE TABLE: {c.name}")
            seen.add(c.name)

        self.tables[cmd.table_name] = Table(name=cmd.table_name, columns=tuple(cmd.columns))
        logger.info("Created table %s with %d columns", cmd.table_name, len(cmd.columns))
        return CommandOk(
            rows_affected=0,
            message=f"Table {cmd.table_name} created successfully with {len(cmd.columns)} columns.",
        )

    # ---------- DML ----------

    def insert_into(self, cmd: Insert) -> CommandOk:
        """
        Append one row to an existing table.

        Every value is parsed by its column's type before anything is stored.

        Raises:
            ExecutionError: if the table does not exist.
            ConstraintError: if the value count differs from the column count.
            TypeMismatchError: if a value cannot be parsed as its column's type.
        """
        table = self.require_table(cmd.table_name)
        if len(cmd.values) != table.column_count:
            raise ConstraintError(
                f"The number of values ({len(cmd.values)}) does not match "
                f"the number of columns ({table.column_count}) in {table.name}"
            )

        row: list[Any] = []
        for col, lit in zip(table.columns, cmd.values):
            try:
                row.append(col.typ.parse(lit.text))
            except TypeMismatchError:
                raise TypeMismatchError(
                    f"Type error: {table.name}.{col.name} expects {col.typ.name}, got {lit.text!r}"
                ) from None

        table.rows.append(row)
        logger.debug("Inserted row %r into %s", row, table.name)
        return CommandOk(rows_affected=1, message="Data inserted successfully.")
