"""Notification domain - message types and the sender contract."""

from .ports import NotificationSender
from .value_objects import DeliveryResult, Message

__all__ = ['Message', 'DeliveryResult', 'NotificationSender']
