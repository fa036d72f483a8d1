"""Configuration package with clean public API."""

# Main configuration classes
from .schemas import (
    AppConfig,
    LoggingConfig,
    NotificationConfig,
    PricingConfig,
    StorageConfig,
)

# Configuration management
from .loader import ConfigurationLoader
from .manager import ConfigurationManager

__all__ = [
    # Main configuration
    'AppConfig',

    # Specific configurations
    'LoggingConfig',
    'StorageConfig',
    'NotificationConfig',
    'PricingConfig',

    # Configuration management
    'ConfigurationManager',
    'ConfigurationLoader',
]
