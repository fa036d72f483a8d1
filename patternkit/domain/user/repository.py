"""Domain port for user persistence."""
from abc import ABC, abstractmethod
from typing import List, Optional

from .user_aggregate import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by ID.

        Args:
            user_id: ID of the user to find

        Returns:
            User if found, None otherwise
        """

    @abstractmethod
    def find_all(self) -> List[User]:
        """Find all users ordered by creation time."""

    @abstractmethod
    def save(self, user: User) -> None:
        """
        Insert the user, or update it if the ID already exists.

        Raises:
            DuplicateEmailError: If a different user already has the email
        """

    @abstractmethod
    def delete(self, user_id: str) -> None:
        """
        Delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """

    @abstractmethod
    def exists(self, user_id: str) -> bool:
        """Check if a user exists."""
