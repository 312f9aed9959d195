"""Base repository shared by the blog repositories."""
from typing import Protocol
import sqlite3


class ConnectionProtocol(Protocol):
    """What a repository needs from a database connection."""

    def execute(self, sql: str, parameters: tuple = ...) -> sqlite3.Cursor: ...
    def executemany(self, sql: str, parameters: list = ...) -> sqlite3.Cursor: ...
    def commit(self) -> None: ...


class Repository:
    """Holds the connection and wraps statement execution.

    Subclasses own their SQL and row mapping; every write commits
    immediately, so one call is one transaction.
    """

    def __init__(self, connection: ConnectionProtocol):
        self._conn = connection

    def _execute(self, sql: str, parameters: tuple = ()) -> sqlite3.Cursor:
        """Run one parameterized statement."""
        return self._conn.execute(sql, parameters)

    def _execute_many(self, sql: str, parameters_list: list[tuple]) -> sqlite3.Cursor:
        """Run one statement for each parameter tuple."""
        return self._conn.executemany(sql, parameters_list)

    def _commit(self) -> None:
        self._conn.commit()
