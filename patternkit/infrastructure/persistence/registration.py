"""User repository registration."""
from typing import Callable

from patternkit.domain.user.repository import UserRepository
from patternkit.infrastructure.persistence.database import Database
from patternkit.infrastructure.persistence.memory_user_repository import InMemoryUserRepository
from patternkit.infrastructure.persistence.sqlite_user_repository import SQLiteUserRepository
from patternkit.infrastructure.registry.strategy_registry import StrategyRegistry


def register_user_repositories(registry: StrategyRegistry[UserRepository],
                               database_provider: Callable[[], Database]) -> None:
    """
    Register the built-in user repositories.

    Args:
        registry: Registry to populate
        database_provider: Returns the open Database; only called when the
            sqlite repository is actually created
    """
    registry.register("memory", InMemoryUserRepository)
    registry.register("sqlite", lambda: SQLiteUserRepository(database_provider()))
