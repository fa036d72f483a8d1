# patternkit/application/notification/service.py
from typing import List, Optional

from pydantic import ValidationError as PydanticValidationError

from patternkit.domain.base.exceptions import ValidationError
from patternkit.domain.notification.ports import NotificationSender
from patternkit.domain.notification.value_objects import DeliveryResult, Message
from patternkit.infrastructure.logging.logger import get_logger
from patternkit.infrastructure.registry.strategy_registry import StrategyRegistry


class NotificationService:
    """Application service sending messages over a caller-chosen channel."""

    def __init__(self, senders: StrategyRegistry[NotificationSender]):
        self._senders = senders
        self._logger = get_logger(__name__)

    def send(self, channel: str, recipient: str, body: str,
             subject: Optional[str] = None) -> DeliveryResult:
        """
        Send a message over a channel.

        Raises:
            UnknownDiscriminatorError: If no sender handles the channel
            ValidationError: If the message itself is malformed
        """
        sender = self._senders.create(channel)
        try:
            message = Message(recipient=recipient, body=body, subject=subject)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid message: {e.errors()[0]['msg']}", e.errors()) from e

        result = sender.deliver(message)
        self._logger.debug(f"Sent via {result.channel}: delivered={result.delivered}")
        return result

    def available_channels(self) -> List[str]:
        return list(self._senders.discriminators())
