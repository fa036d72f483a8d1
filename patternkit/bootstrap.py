"""Application bootstrap - the process-level owner of every shared object.

Nothing here is global: the entry point creates one Application, which builds
the registries during setup, owns the Database lifetime, and hands services
their collaborators through constructor parameters.
"""

from __future__ import annotations

from typing import Dict, Optional

from patternkit.application.notification.service import NotificationService
from patternkit.application.pricing.service import PricingService
from patternkit.application.user.service import UserService
from patternkit.config import AppConfig, ConfigurationManager
from patternkit.config.utils.env_expansion import expand_env_vars
from patternkit.domain.notification.ports import NotificationSender
from patternkit.domain.pricing.ports import DiscountStrategy
from patternkit.domain.user.repository import UserRepository
from patternkit.infrastructure.logging.logger import get_logger, setup_logging
from patternkit.infrastructure.notification import DeliveryLog, register_notification_senders
from patternkit.infrastructure.persistence import Database, register_user_repositories
from patternkit.infrastructure.pricing import register_discount_strategies
from patternkit.infrastructure.registry import StrategyRegistry


class Application:
    """Application context owning configuration, registries and resources."""

    def __init__(self, config_path: Optional[str] = None,
                 config: Optional[AppConfig] = None) -> None:
        """
        Initialize the instance.

        Args:
            config_path: Configuration file; ignored when config is given
            config: Already-built configuration, mainly for tests
        """
        self.config_path = config_path
        self._config = config
        self._initialized = False
        self._shut_down = False

        self.delivery_log = DeliveryLog()
        self.senders: StrategyRegistry[NotificationSender] = StrategyRegistry("notification")
        self.discounts: StrategyRegistry[DiscountStrategy] = StrategyRegistry("discount")
        self.repositories: StrategyRegistry[UserRepository] = StrategyRegistry("user_repository")

        self._database: Optional[Database] = None
        self._user_service: Optional[UserService] = None
        self._notification_service: Optional[NotificationService] = None
        self._pricing_service: Optional[PricingService] = None

        self.logger = get_logger(__name__)

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            self._config = ConfigurationManager(self.config_path).app_config
        return self._config

    def initialize(self) -> "Application":
        """Run the setup phase: logging, then every registration."""
        if self._shut_down:
            raise RuntimeError("Application has been shut down; create a new one")
        if self._initialized:
            return self

        setup_logging(self.config.logging)

        register_notification_senders(self.senders, self.config.notification, self.delivery_log)
        register_discount_strategies(self.discounts, self.config.pricing)
        register_user_repositories(self.repositories, self._open_database)

        self._notification_service = NotificationService(self.senders)
        self._pricing_service = PricingService(self.discounts)

        self._initialized = True
        self.logger.info(
            "Application initialized",
            environment=self.config.environment,
            storage=self.config.storage.strategy,
        )
        return self

    def shutdown(self) -> None:
        """Release owned resources."""
        if self._database is not None:
            self._database.close()
            self._database = None
        self._user_service = None
        self._notification_service = None
        self._pricing_service = None
        self._shut_down = True
        self.logger.debug("Application shut down")

    def __enter__(self) -> "Application":
        return self.initialize()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.shutdown()

    def _open_database(self) -> Database:
        if self._database is None:
            path = expand_env_vars(self.config.storage.sqlite_path)
            self._database = Database(path).open()
        return self._database

    def _require_initialized(self) -> None:
        if self._shut_down:
            raise RuntimeError("Application has been shut down")
        if not self._initialized:
            raise RuntimeError("Application is not initialized; call initialize() first")

    @property
    def notifications(self) -> NotificationService:
        self._require_initialized()
        return self._notification_service

    @property
    def pricing(self) -> PricingService:
        self._require_initialized()
        return self._pricing_service

    @property
    def users(self) -> UserService:
        """User service over the configured repository, created on first use."""
        self._require_initialized()
        if self._user_service is None:
            repository = self.repositories.create(self.config.storage.strategy)
            self._user_service = UserService(repository)
        return self._user_service

    def registries(self) -> Dict[str, StrategyRegistry]:
        """All registries keyed by the capability they select."""
        return {
            registry.name: registry
            for registry in (self.senders, self.discounts, self.repositories)
        }


def create_application(config_path: Optional[str] = None) -> Application:
    """Create and initialize an application."""
    return Application(config_path).initialize()
