"""Persistence infrastructure."""

from .database import Database
from .exceptions import ConstraintViolationError, PersistenceError, StorageError
from .memory_user_repository import InMemoryUserRepository
from .registration import register_user_repositories
from .sqlite_user_repository import SQLiteUserRepository

__all__ = [
    'Database',
    'PersistenceError',
    'StorageError',
    'ConstraintViolationError',
    'InMemoryUserRepository',
    'SQLiteUserRepository',
    'register_user_repositories',
]
