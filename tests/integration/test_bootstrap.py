"""Integration tests for application bootstrap and wiring."""

import pytest
import yaml

from patternkit.bootstrap import Application, create_application
from patternkit.config.schemas import AppConfig
from patternkit.domain.registry import DuplicateDiscriminatorError, UnknownDiscriminatorError
from patternkit.infrastructure.persistence import InMemoryUserRepository, SQLiteUserRepository


@pytest.mark.integration
class TestApplicationBootstrap:
    """Test the application builds registries and services."""

    def test_registries_populated_on_initialize(self, application):
        registries = application.registries()

        assert set(registries) == {"notification", "discount", "user_repository"}
        assert registries["notification"].discriminators() == ("email", "push", "sms")
        assert registries["discount"].discriminators() == ("fixed", "none", "percentage")
        assert registries["user_repository"].discriminators() == ("memory", "sqlite")

    def test_initialize_is_idempotent(self, application):
        application.initialize()

        assert len(application.senders) == 3

    def test_services_require_initialization(self, app_config):
        app = Application(config=app_config)

        with pytest.raises(RuntimeError, match="not initialized"):
            app.notifications

    def test_separate_applications_do_not_share_registries(self, app_config):
        with Application(config=app_config) as first, Application(config=app_config) as second:
            first.senders.register("pager", object)

            assert "pager" in first.senders
            assert "pager" not in second.senders

    def test_services_unavailable_after_shutdown(self, sqlite_config):
        """Test a shut down application does not reopen its database."""
        app = Application(config=sqlite_config).initialize()
        app.users.register_user("Ada", "ada@example.com")
        app.shutdown()

        with pytest.raises(RuntimeError, match="shut down"):
            app.users
        with pytest.raises(RuntimeError, match="shut down"):
            app.pricing
        assert app._database is None

    def test_initialize_after_shutdown_fails(self, app_config):
        app = Application(config=app_config).initialize()
        app.shutdown()
        app.shutdown()

        with pytest.raises(RuntimeError, match="shut down"):
            app.initialize()

    def test_registering_builtin_variant_again_fails(self, application):
        with pytest.raises(DuplicateDiscriminatorError):
            application.senders.register("Email", object)

    def test_end_to_end_services(self, application):
        result = application.notifications.send("email", "ada@example.com", "Welcome", "Hello")
        quote = application.pricing.quote("percentage", "50")
        user = application.users.register_user("Ada", "ada@example.com")

        assert result.delivered
        assert application.delivery_log.results() == [result]
        assert str(quote.total) == "45.00"
        assert application.users.get_user(user.id) == user

    def test_memory_storage(self, application):
        assert isinstance(application.users._repository, InMemoryUserRepository)
        assert application._database is None

    def test_sqlite_storage_owns_database(self, sqlite_config):
        app = Application(config=sqlite_config)
        with app:
            user = app.users.register_user("Ada", "ada@example.com")
            assert isinstance(app.users._repository, SQLiteUserRepository)
            database = app._database
            assert database.is_open

        assert not database.is_open

        with Application(config=sqlite_config) as reopened:
            assert reopened.users.get_user(user.id).email == "ada@example.com"

    def test_unknown_storage_strategy(self, tmp_path):
        config = AppConfig(
            logging={"level": "WARNING"},
            storage={"strategy": "mongo", "sqlite_path": str(tmp_path / "x.db")},
        )

        with Application(config=config) as app:
            with pytest.raises(UnknownDiscriminatorError) as exc_info:
                app.users

        assert exc_info.value.valid == ["memory", "sqlite"]

    def test_configured_pricing_parameters(self, tmp_path):
        config = AppConfig(
            logging={"level": "WARNING"},
            storage={"strategy": "memory", "sqlite_path": str(tmp_path / "x.db")},
            pricing={"percentage_rate": "25", "fixed_amount": "1.50"},
        )

        with Application(config=config) as app:
            assert str(app.pricing.quote("percentage", "10").total) == "7.50"
            assert str(app.pricing.quote("fixed", "10").total) == "8.50"


@pytest.mark.integration
class TestCreateApplication:
    """Test creating an application from a configuration file."""

    def test_create_from_file(self, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text(yaml.safe_dump({
            "environment": "testing",
            "logging": {"level": "WARNING"},
            "storage": {"strategy": "memory"},
            "notification": {"email_from": "team@example.com"},
        }))

        app = create_application(str(path))
        try:
            result = app.notifications.send("email", "ada@example.com", "Hi")
        finally:
            app.shutdown()

        assert result.detail.startswith("from team@example.com")
        assert app.config.environment == "testing"
