from patternkit.domain.base.exceptions import ResourceNotFoundError, ValidationError


class UserNotFoundError(ResourceNotFoundError):
    """Raised when a user cannot be found."""
    def __init__(self, user_id: str):
        super().__init__("User", user_id)


class DuplicateEmailError(ValidationError):
    """Raised when another user already has this email address."""
    def __init__(self, email: str):
        super().__init__(f"A user with email {email} already exists", {"email": "already registered"})
        self.email = email
