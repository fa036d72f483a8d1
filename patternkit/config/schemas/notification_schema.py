"""Notification configuration schema."""
from pydantic import BaseModel, Field


class NotificationConfig(BaseModel):
    """Per-channel sender settings."""

    email_from: str = Field("noreply@patternkit.local", description="Sender address for email")
    sms_sender_id: str = Field("PATTERNKIT", description="Sender ID shown on SMS")
    push_app_id: str = Field("patternkit", description="Application ID for push notifications")
