"""User domain."""

from .exceptions import DuplicateEmailError, UserNotFoundError
from .repository import UserRepository
from .user_aggregate import User

__all__ = ['User', 'UserRepository', 'UserNotFoundError', 'DuplicateEmailError']
