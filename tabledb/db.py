"""
tabledb/db.py

Public Database API for the tabledb interpreter.

Responsibilities:
- Provide a simple library interface:
    - Database()
    - db.execute(sql) -> CommandOk | QueryResult   (raises TableDBError)
    - db.run(sql) -> str                            (never raises TableDBError)
- Own the session's Catalog

Everything lives in memory; a Database is gone when the process exits.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .catalog import Catalog
from .errors import TableDBError
from .exec.executor import Executor
from .parser import parse_statement

logger = logging.getLogger(__name__)


@dataclass
class Database:
    """
    In-memory database instance.

    Attributes:
        catalog: All tables of this session.
    """
    catalog: Catalog = field(default_factory=Catalog)

    def execute(self, sql: str):
        """
        Execute a single statement.

        Args:
            sql: Text of exactly one statement (semicolon optional).

        Returns:
            CommandOk for CREATE/INSERT, or QueryResult for SELECT.

        Raises:
            SqlSyntaxError: on parse errors.
            ExecutionError / ConstraintError: on execution failure.
        """
        stmt = parse_statement(sql)
        logger.debug("Parsed %r as %r", sql, stmt)
        return Executor(catalog=self.catalog).execute(stmt)

    def run(self, sql: str) -> str:
        """
        Execute a single statement and render the outcome as text.

        Failures come back as "Error: <message>" instead of being raised.
        """
        try:
            return self.execute(sql).render()
        except TableDBError as e:
            logger.debug("Statement failed: %s", e)
            return f"Error: {e}"
