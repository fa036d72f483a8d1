"""User aggregate."""
import re
import uuid

from pydantic import Field, field_validator

from patternkit.domain.base.entity import Entity

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def new_user_id() -> str:
    return uuid.uuid4().hex


class User(Entity):
    """A registered user."""

    id: str = Field(default_factory=new_user_id)
    name: str
    email: str

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("User name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if not EMAIL_PATTERN.match(v):
            raise ValueError(f"Invalid email address: {v}")
        return v
