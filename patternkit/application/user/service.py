# patternkit/application/user/service.py
from typing import List

from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.base.exceptions import ValidationError
from patternkit.domain.user.exceptions import UserNotFoundError
from patternkit.domain.user.repository import UserRepository
from patternkit.domain.user.user_aggregate import User
from patternkit.infrastructure.logging.logger import get_logger


class UserService:
    """Application service for user operations over any UserRepository."""

    def __init__(self, repository: UserRepository):
        self._repository = repository
        self._logger = get_logger(__name__)

    def register_user(self, name: str, email: str) -> User:
        """
        Create and store a new user.

        Raises:
            ValidationError: If name or email is invalid
            DuplicateEmailError: If the email is already registered
        """
        try:
            user = User(name=name, email=email)
        except PydanticValidationError as e:
            errors = {".".join(str(p) for p in err["loc"]): err["msg"] for err in e.errors()}
            raise ValidationError(f"Invalid user: {errors}", errors) from e

        # The repository enforces email uniqueness atomically
        self._repository.save(user)
        self._logger.info("User registered", user_id=user.id)
        return user

    def get_user(self, user_id: str) -> User:
        user = self._repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def list_users(self) -> List[User]:
        return self._repository.find_all()

    def remove_user(self, user_id: str) -> None:
        self._repository.delete(user_id)
        self._logger.info("User removed", user_id=user_id)
