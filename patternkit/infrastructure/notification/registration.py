"""Notification sender registration."""
from functools import partial

from patternkit.config.schemas.notification_schema import NotificationConfig
from patternkit.domain.notification.ports import NotificationSender
from patternkit.infrastructure.notification.delivery_log import DeliveryLog
from patternkit.infrastructure.notification.senders import EmailSender, PushSender, SmsSender
from patternkit.infrastructure.registry.strategy_registry import StrategyRegistry


def register_notification_senders(registry: StrategyRegistry[NotificationSender],
                                  config: NotificationConfig,
                                  delivery_log: DeliveryLog) -> None:
    """Register the built-in senders, binding their settings and the shared log."""
    registry.register("email", partial(EmailSender, delivery_log, config.email_from))
    registry.register("sms", partial(SmsSender, delivery_log, config.sms_sender_id))
    registry.register("push", partial(PushSender, delivery_log, config.push_app_id))
