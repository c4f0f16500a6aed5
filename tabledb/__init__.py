"""
tabledb: an in-memory interpreter for a minimal SQL subset
(CREATE TABLE, INSERT INTO, SELECT ... WHERE ... ORDER BY).

Typical use:

    from tabledb import Database

    db = Database()
    db.run("CREATE TABLE Users (id INT, name TEXT);")
    db.run("INSERT INTO Users (1, 'Bob');")
    print(db.run("SELECT * FROM Users WHERE id = 1;"))
"""

from .db import Database
from .errors import (
    ConstraintError,
    ExecutionError,
    SqlSyntaxError,
    TableDBError,
    TypeMismatchError,
    UnexpectedEndOfStatement,
)
from .result import CommandOk, QueryResult

__version__ = "0.1.0"

__all__ = [
    "CommandOk",
    "ConstraintError",
    "Database",
    "ExecutionError",
    "QueryResult",
    "SqlSyntaxError",
    "TableDBError",
    "TypeMismatchError",
    "UnexpectedEndOfStatement",
]
