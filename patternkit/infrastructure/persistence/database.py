"""SQLite database resource with an explicit, owner-controlled lifetime."""
import os
import sqlite3
import threading
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Sequence

from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.persistence.exceptions import ConstraintViolationError, StorageError

MEMORY_PATH = ":memory:"


class Database:
    """
    One SQLite connection, opened and closed by whoever constructed it.

    The application entry point creates the Database and passes it to the
    repositories that need it. Statements are serialized by a lock so the
    connection can be shared between threads.
    """

    def __init__(self, path: str):
        """
        Initialize database resource.

        Args:
            path: Database file path, or ':memory:'
        """
        self.path = path
        self._connection: Optional[sqlite3.Connection] = None
        self._lock = threading.RLock()
        self.logger = get_logger(__name__)

    @property
    def is_open(self) -> bool:
        return self._connection is not None

    def open(self) -> "Database":
        """Open the connection; opening an open database is a no-op."""
        with self._lock:
            if self._connection is not None:
                return self
            if self.path != MEMORY_PATH:
                directory = os.path.dirname(os.path.abspath(self.path))
                os.makedirs(directory, exist_ok=True)
            try:
                self._connection = sqlite3.connect(self.path, check_same_thread=False)
            except sqlite3.Error as e:
                raise StorageError(f"Failed to open database {self.path}: {e}") from e
            self._connection.row_factory = sqlite3.Row
            self._connection.execute("PRAGMA foreign_keys = ON")
            self.logger.info("Database opened", path=self.path)
        return self

    def close(self) -> None:
        """Close the connection; closing a closed database is a no-op."""
        with self._lock:
            if self._connection is None:
                return
            self._connection.close()
            self._connection = None
            self.logger.info("Database closed", path=self.path)

    def __enter__(self) -> "Database":
        return self.open()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def connection(self) -> sqlite3.Connection:
        if self._connection is None:
            raise StorageError(f"Database {self.path} is not open")
        return self._connection

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run statements atomically: commit on success, roll back on error."""
        with self._lock:
            conn = self.connection
            try:
                yield conn
                conn.commit()
            except sqlite3.IntegrityError as e:
                conn.rollback()
                raise ConstraintViolationError(f"Constraint violated: {e}") from e
            except sqlite3.Error as e:
                conn.rollback()
                raise StorageError(f"Database error: {e}") from e
            except Exception:
                conn.rollback()
                raise

    def execute(self, sql: str, params: Sequence[Any] = ()) -> int:
        """Execute a write statement in its own transaction; returns the row count."""
        with self.transaction() as conn:
            cursor = conn.execute(sql, params)
            return cursor.rowcount

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[sqlite3.Row]:
        """Run a read statement and fetch all rows."""
        with self._lock:
            try:
                return self.connection.execute(sql, params).fetchall()
            except sqlite3.Error as e:
                raise StorageError(f"Database error: {e}") from e
