"""
tabledb/exec/executor.py

Statement execution engine for the tabledb interpreter.

Responsibilities:
- Apply commands produced by the parser to the in-memory catalog:
    - CREATE TABLE and INSERT are delegated to the Catalog
    - SELECT scans a table and filters it with the WHERE evaluator
- Report how the WHERE clause was handled in QueryResult.stats

Core design:
- A SELECT always returns every column in schema order and every row in
  insertion order. The selected column list and ORDER BY items are parsed but
  not applied.
- A WHERE clause that does not split into exactly `column op literal` is
  ignored (every row passes) and a warning is logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..ast import CreateTable, Insert, Select, Statement
from ..catalog import Catalog
from ..errors import ExecutionError
from ..result import CommandOk, QueryResult
from .conditions import bind_condition, split_condition

logger = logging.getLogger(__name__)


@dataclass
class Executor:
    """
    Executes parsed commands against a catalog.

    Args:
        catalog: The session's Catalog.
    """
    catalog: Catalog

    def execute(self, stmt: Statement):
        """
        Execute a single command.

        Returns:
            CommandOk for CREATE/INSERT or QueryResult for SELECT.

        Raises:
            TableDBError subclasses on failure.
        """
        if isinstance(stmt, CreateTable):
            return self.catalog.create_table(stmt)
        if isinstance(stmt, Insert):
            return self.catalog.insert_into(stmt)
        if isinstance(stmt, Select):
            return self._select(stmt)

        raise ExecutionError(f"Unsupported statement: {type(stmt).__name__}")

    def _select(self, stmt: Select) -> QueryResult:
        """
        SELECT execution: full scan with an optional single-condition filter.

        Returns:
            QueryResult(columns, rows, stats)
        """
        table = self.catalog.require_table(stmt.table_name)

        if stmt.columns != ("*",) or stmt.order_by:
            logger.debug(
                "Projection %s and ORDER BY %s are not applied for %s",
                stmt.columns, stmt.order_by, table.name,
            )

        where_state = "none"
        bound = None
        if stmt.where:
            cond = split_condition(stmt.where)
            if cond is None:
                logger.warning("WHERE clause %r is not of the form 'column op value'; ignoring it", stmt.where)
                where_state = "ignored"
            else:
                bound = bind_condition(table, cond)
                where_state = "applied"

        rows_out: list[list[Any]] = []
        for row in table.rows:
            if bound is not None and not bound.matches(row):
                continue
            rows_out.append(list(row))

        return QueryResult(
            columns=table.column_names(),
            rows=rows_out,
            stats={"plan": "scan", "where": where_state, "scanned": len(table.rows)},
        )
