"""Configuration schemas."""

from .app_schema import AppConfig
from .logging_schema import LoggingConfig
from .notification_schema import NotificationConfig
from .pricing_schema import PricingConfig
from .storage_schema import StorageConfig

__all__ = [
    # Main configuration
    "AppConfig",
    # Section configurations
    "LoggingConfig",
    "StorageConfig",
    "NotificationConfig",
    "PricingConfig",
]
