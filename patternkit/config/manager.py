"""Unified configuration management for the application."""
from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from patternkit.config.loader import ConfigurationLoader
from patternkit.config.schemas import (
    AppConfig,
    LoggingConfig,
    NotificationConfig,
    PricingConfig,
    StorageConfig,
)
from patternkit.domain.base.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)

_SECTION_ATTRIBUTES: Dict[Type[Any], str] = {
    LoggingConfig: 'logging',
    StorageConfig: 'storage',
    NotificationConfig: 'notification',
    PricingConfig: 'pricing',
}


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Provides:
    - Type safety through pydantic models
    - Environment variable overrides
    - Configuration validation
    - Lazy loading

    Each Application owns its own manager; there is no process-wide instance.
    """

    def __init__(self, config_file: Optional[str] = None,
                 environ: Optional[Mapping[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._loader = ConfigurationLoader(environ)
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load and validate application configuration."""
        config_data = self._loader.load_configuration(self._config_file)
        try:
            config = AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(fields)}", missing_fields=fields
            ) from e
        logger.debug("Configuration loaded for environment %s", config.environment)
        return config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get a configuration section by its schema type."""
        if config_type is AppConfig:
            return self.app_config  # type: ignore[return-value]
        attr_name = _SECTION_ATTRIBUTES.get(config_type)
        if attr_name is None:
            raise ValueError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attr_name)

    def reload(self) -> None:
        """Reload configuration from sources on next access."""
        with self._lock:
            self._app_config = None
