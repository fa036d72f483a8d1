"""Notification sender variants.

Senders perform no network I/O: a delivery is validated, logged and recorded
in the shared DeliveryLog. A recipient the channel cannot address produces a
result with delivered=False rather than an exception.
"""
import math
import re
from abc import abstractmethod
from typing import Optional

from patternkit.domain.notification.ports import NotificationSender
from patternkit.domain.notification.value_objects import DeliveryResult, Message
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.notification.delivery_log import DeliveryLog

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
E164_PATTERN = re.compile(r"^\+[1-9]\d{6,14}$")
SMS_SEGMENT_LENGTH = 160
PUSH_TITLE_LENGTH = 40


class BaseSender(NotificationSender):
    """Template for senders: validate, build the result, record it."""

    def __init__(self, delivery_log: DeliveryLog):
        self._delivery_log = delivery_log
        self.logger = get_logger(self.__class__.__name__)

    def deliver(self, message: Message) -> DeliveryResult:
        problem = self._validate_recipient(message.recipient)
        if problem:
            result = DeliveryResult(
                channel=self.channel,
                recipient=message.recipient,
                delivered=False,
                detail=problem,
            )
            self.logger.warning(
                "Delivery rejected", channel=self.channel, recipient=message.recipient, reason=problem
            )
        else:
            result = DeliveryResult(
                channel=self.channel,
                recipient=message.recipient,
                delivered=True,
                detail=self._describe(message),
            )
            self.logger.info("Message delivered", channel=self.channel, recipient=message.recipient)

        self._delivery_log.record(result)
        return result

    @abstractmethod
    def _validate_recipient(self, recipient: str) -> Optional[str]:
        """Return a reason the recipient is unusable, or None."""

    @abstractmethod
    def _describe(self, message: Message) -> str:
        """Describe a successful delivery."""


class EmailSender(BaseSender):
    channel = "email"

    def __init__(self, delivery_log: DeliveryLog, from_address: str):
        super().__init__(delivery_log)
        self.from_address = from_address

    def _validate_recipient(self, recipient: str) -> Optional[str]:
        if not EMAIL_PATTERN.match(recipient):
            return f"'{recipient}' is not a valid email address"
        return None

    def _describe(self, message: Message) -> str:
        subject = message.subject or "(no subject)"
        return f"from {self.from_address}, subject: {subject}"


class SmsSender(BaseSender):
    channel = "sms"

    def __init__(self, delivery_log: DeliveryLog, sender_id: str):
        super().__init__(delivery_log)
        self.sender_id = sender_id

    def _validate_recipient(self, recipient: str) -> Optional[str]:
        if not E164_PATTERN.match(recipient):
            return f"'{recipient}' is not an E.164 phone number"
        return None

    def _describe(self, message: Message) -> str:
        segments = segment_count(message.body)
        return f"from {self.sender_id}, {segments} segment{'s' if segments != 1 else ''}"


class PushSender(BaseSender):
    channel = "push"

    def __init__(self, delivery_log: DeliveryLog, app_id: str):
        super().__init__(delivery_log)
        self.app_id = app_id

    def _validate_recipient(self, recipient: str) -> Optional[str]:
        if not recipient:
            return "device token must not be empty"
        return None

    def _describe(self, message: Message) -> str:
        return f"app {self.app_id}, title: {push_title(message)}"


def segment_count(body: str) -> int:
    """Number of SMS segments needed for a body."""
    return max(1, math.ceil(len(body) / SMS_SEGMENT_LENGTH))


def push_title(message: Message) -> str:
    if message.subject:
        return message.subject
    return message.body[:PUSH_TITLE_LENGTH]
