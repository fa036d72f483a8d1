"""Notification value objects."""
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from patternkit.domain.base.entity import ValueObject, utc_now


class Message(ValueObject):
    """A message to be delivered over some channel."""

    recipient: str = Field(..., description="Channel-specific address of the recipient")
    body: str = Field(..., description="Message text")
    subject: Optional[str] = Field(None, description="Optional subject or title")

    @field_validator("recipient")
    @classmethod
    def strip_recipient(cls, v: str) -> str:
        return v.strip()

    @field_validator("body")
    @classmethod
    def validate_body(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Message body must not be empty")
        return v


class DeliveryResult(ValueObject):
    """Outcome of a single delivery attempt."""

    channel: str
    recipient: str
    delivered: bool
    detail: str = ""
    sent_at: datetime = Field(default_factory=utc_now)
