"""Notification infrastructure - sender variants and their registration."""

from .delivery_log import DeliveryLog
from .registration import register_notification_senders
from .senders import EmailSender, PushSender, SmsSender

__all__ = [
    'DeliveryLog',
    'EmailSender',
    'SmsSender',
    'PushSender',
    'register_notification_senders',
]
