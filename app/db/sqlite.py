"""SQLite persistence handle.

Wraps a single long-lived ``sqlite3`` connection that is opened once during
the FastAPI lifespan and injected into routes through ``get_database``.
Every driver failure is re-raised as ``DatabaseError`` carrying the driver's
message verbatim.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Sequence
from typing import Any, NamedTuple

from fastapi import Request

logger = logging.getLogger(__name__)

Params = Sequence[Any]


class DatabaseError(Exception):
    """Raised when the SQLite driver rejects a statement or cannot open the file."""


class ExecuteResult(NamedTuple):
    """Outcome of an INSERT / UPDATE / DELETE statement."""
    changes: int
    last_id: int | None


class Database:
    """One connection to an embedded SQLite file."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Open the connection.  Calling it on an open handle does nothing."""
        if self._conn is not None:
            return
        try:
            # Autocommit: each statement is its own transaction.
            conn = sqlite3.connect(
                self.path,
                check_same_thread=False,
                isolation_level=None,
            )
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        conn.row_factory = sqlite3.Row
        self._conn = conn
        logger.info("database_connected", extra={"db_path": self.path})

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("database_closed", extra={"db_path": self.path})

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise DatabaseError("Database is not open")
        return self._conn

    def query_all(self, sql: str, params: Params = ()) -> list[dict[str, Any]]:
        """Run a read and return every matching row as a dict."""
        conn = self._connection()
        try:
            rows = conn.execute(sql, params).fetchall()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return [dict(row) for row in rows]

    def query_one(self, sql: str, params: Params = ()) -> dict[str, Any] | None:
        """Run a read expected to match at most one row."""
        conn = self._connection()
        try:
            row = conn.execute(sql, params).fetchone()
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return dict(row) if row is not None else None

    def execute(self, sql: str, params: Params = ()) -> ExecuteResult:
        """Run a write and report affected rows and the inserted row id."""
        conn = self._connection()
        try:
            cursor = conn.execute(sql, params)
        except sqlite3.Error as exc:
            raise DatabaseError(str(exc)) from exc
        return ExecuteResult(changes=cursor.rowcount, last_id=cursor.lastrowid)


def get_database(request: Request) -> Database:
    """FastAPI dependency returning the handle opened during startup."""
    return request.app.state.db
