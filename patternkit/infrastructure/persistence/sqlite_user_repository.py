"""SQLite implementation of the user repository."""
from datetime import datetime
from typing import List, Optional

import sqlite3

from patternkit.domain.user.exceptions import DuplicateEmailError, UserNotFoundError
from patternkit.domain.user.repository import UserRepository
from patternkit.domain.user.user_aggregate import User
from patternkit.infrastructure.persistence.database import Database
from patternkit.infrastructure.persistence.exceptions import ConstraintViolationError

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    created_at TEXT NOT NULL
)
"""

# Also applies to users tables created without it
_EMAIL_INDEX = "CREATE UNIQUE INDEX IF NOT EXISTS users_email ON users (email)"


class SQLiteUserRepository(UserRepository):
    """
    Stores users in the 'users' table of a Database it does not own.

    The caller opens and closes the Database; this class only issues SQL.
    """

    def __init__(self, database: Database):
        self._db = database
        self._db.execute(_SCHEMA)
        self._db.execute(_EMAIL_INDEX)

    def find_by_id(self, user_id: str) -> Optional[User]:
        rows = self._db.query(
            "SELECT id, name, email, created_at FROM users WHERE id = ?", (user_id,)
        )
        return self._to_user(rows[0]) if rows else None

    def find_all(self) -> List[User]:
        rows = self._db.query(
            "SELECT id, name, email, created_at FROM users ORDER BY created_at, id"
        )
        return [self._to_user(row) for row in rows]

    def save(self, user: User) -> None:
        try:
            self._db.execute(
                "INSERT INTO users (id, name, email, created_at) VALUES (?, ?, ?, ?) "
                "ON CONFLICT(id) DO UPDATE SET name = excluded.name, email = excluded.email",
                (user.id, user.name, user.email, user.created_at.isoformat()),
            )
        except ConstraintViolationError as e:
            raise DuplicateEmailError(user.email) from e

    def delete(self, user_id: str) -> None:
        if self._db.execute("DELETE FROM users WHERE id = ?", (user_id,)) == 0:
            raise UserNotFoundError(user_id)

    def exists(self, user_id: str) -> bool:
        return bool(self._db.query("SELECT 1 FROM users WHERE id = ?", (user_id,)))

    @staticmethod
    def _to_user(row: sqlite3.Row) -> User:
        return User(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
