import sqlite3
import threading
from contextlib import contextmanager
from sqlite3 import Connection
from typing import Iterator, List, Optional, Sequence


class SqliteClient:
    """SQLite database client with connection management.

    One connection is shared across threads; every statement and every
    transaction runs under a re-entrant lock so callers never interleave.
    The connection runs in autocommit mode and transactions are explicit.
    """

    def __init__(self, connection_string: str):
        self.connection_string = connection_string
        self._lock = threading.RLock()
        self._in_transaction = False
        self._connection = sqlite3.connect(
            self.connection_string,
            check_same_thread=False,
            isolation_level=None,
        )
        self._connection.row_factory = sqlite3.Row

    @property
    def connection(self) -> Connection:
        """Get the database connection."""
        return self._connection

    @property
    def in_transaction(self) -> bool:
        return self._in_transaction

    def execute_query(self, query: str, params: Optional[Sequence] = None) -> List[sqlite3.Row]:
        """Execute a query and return all results."""
        with self._lock:
            cursor = self._connection.cursor()
            try:
                cursor.execute(query, params or ())
                return cursor.fetchall()
            finally:
                cursor.close()

    def execute_write(self, query: str, params: Optional[Sequence] = None) -> sqlite3.Cursor:
        """Execute a write statement and return the cursor for rowcount/lastrowid."""
        with self._lock:
            cursor = self._connection.cursor()
            cursor.execute(query, params or ())
            return cursor

    def execute_script(self, statements: Sequence[str]) -> None:
        """Execute several DDL statements in order."""
        with self._lock:
            for statement in statements:
                self._connection.execute(statement)

    @contextmanager
    def transaction(self) -> Iterator["SqliteClient"]:
        """Run the enclosed statements in one BEGIN/COMMIT block.

        Rolls back and re-raises on any exception. Nested use from the
        holder of the lock joins the outer transaction.
        """
        with self._lock:
            if self._in_transaction:
                yield self
                return

            self._connection.execute("BEGIN")
            self._in_transaction = True
            try:
                yield self
                self._connection.execute("COMMIT")
            except BaseException:
                if self._connection.in_transaction:
                    self._connection.execute("ROLLBACK")
                raise
            finally:
                self._in_transaction = False

    def close(self):
        """Close the database connection."""
        with self._lock:
            self._connection.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit with cleanup."""
        self.close()
        return False
