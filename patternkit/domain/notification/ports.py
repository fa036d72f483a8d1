"""Domain port for notification delivery."""

from abc import ABC, abstractmethod

from .value_objects import DeliveryResult, Message


class NotificationSender(ABC):
    """Capability contract shared by every notification channel."""

    channel: str = ""

    @abstractmethod
    def deliver(self, message: Message) -> DeliveryResult:
        """Deliver a message and report the outcome."""
