"""
tabledb/result.py

Result objects returned by Database.execute().

The engine returns one of:
- CommandOk: for CREATE TABLE and INSERT
- QueryResult: for SELECT

Both know how to render themselves as the text shown to the user.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

NO_ROWS = "No rows found."


@dataclass(frozen=True)
class CommandOk:
    """
    Represents successful execution of a non-SELECT statement.

    Attributes:
        rows_affected: Number of rows appended (INSERT).
        message: Human-readable status message.
    """
    rows_affected: int = 0
    message: str = "OK"

    def render(self) -> str:
        return self.message


@dataclass(frozen=True)
class QueryResult:
    """
    Represents the output of a SELECT query.

    Attributes:
        columns: Output column names in schema order.
        rows: Matching rows in insertion order; each row aligned with `columns`.
        stats: Execution details for debugging, e.g. {"plan": "scan", "where": "applied"}.
    """
    columns: list[str]
    rows: list[list[Any]]
    stats: dict[str, Any] | None = None

    def render(self) -> str:
        """Cells joined by ', ', rows joined by newlines, or NO_ROWS."""
        if not self.rows:
            return NO_ROWS
        return "\n".join(", ".join(str(v) for v in row) for row in self.rows)
