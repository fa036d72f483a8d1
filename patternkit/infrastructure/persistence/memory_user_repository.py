"""In-memory user repository."""
import threading
from typing import Dict, List, Optional

from patternkit.domain.user.exceptions import DuplicateEmailError, UserNotFoundError
from patternkit.domain.user.repository import UserRepository
from patternkit.domain.user.user_aggregate import User


class InMemoryUserRepository(UserRepository):
    """Dict-backed repository; contents live as long as the instance."""

    def __init__(self):
        self._users: Dict[str, User] = {}
        self._lock = threading.Lock()

    def find_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            user = self._users.get(user_id)
            return user.model_copy() if user else None

    def find_all(self) -> List[User]:
        with self._lock:
            users = sorted(self._users.values(), key=lambda u: u.created_at)
            return [user.model_copy() for user in users]

    def save(self, user: User) -> None:
        with self._lock:
            if any(other.email == user.email and other_id != user.id
                   for other_id, other in self._users.items()):
                raise DuplicateEmailError(user.email)
            self._users[user.id] = user.model_copy()

    def delete(self, user_id: str) -> None:
        with self._lock:
            if user_id not in self._users:
                raise UserNotFoundError(user_id)
            del self._users[user_id]

    def exists(self, user_id: str) -> bool:
        with self._lock:
            return user_id in self._users
