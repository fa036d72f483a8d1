"""Tests for structured logging setup."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from patternkit.config.schemas import LoggingConfig
from patternkit.infrastructure.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put the root logger back the way the test found it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
    structlog.reset_defaults()


@pytest.mark.unit
class TestSetupLogging:
    """Test logging configuration."""

    def test_console_destination_uses_single_stream_handler(self):
        setup_logging(LoggingConfig(level="debug"))

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)
        assert not isinstance(root.handlers[0], RotatingFileHandler)

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(LoggingConfig())
        setup_logging(LoggingConfig())

        assert len(logging.getLogger().handlers) == 1

    def test_both_destinations(self, tmp_path):
        setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "logs" / "app.log")))

        handler_types = {type(h) for h in logging.getLogger().handlers}
        assert RotatingFileHandler in handler_types
        assert logging.StreamHandler in handler_types

    def test_json_file_records(self, tmp_path):
        """Test structured events land in the file as JSON lines."""
        # Setup
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(LoggingConfig(level="INFO", destination="file", format="json", file_path=str(log_file)))

        # Execute
        get_logger("patternkit.test").info("Variant created", discriminator="email")
        for handler in logging.getLogger().handlers:
            handler.flush()

        # Verify
        records = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert records[-1]["event"] == "Variant created"
        assert records[-1]["discriminator"] == "email"
        assert records[-1]["level"] == "info"
        assert records[-1]["logger"] == "patternkit.test"

    def test_level_filters_records(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(LoggingConfig(level="WARNING", destination="file", format="json", file_path=str(log_file)))

        get_logger("patternkit.test").info("hidden")
        get_logger("patternkit.test").warning("shown")
        for handler in logging.getLogger().handlers:
            handler.flush()

        events = [json.loads(line)["event"] for line in log_file.read_text().splitlines()]
        assert events == ["shown"]

    def test_stdlib_records_are_formatted(self, tmp_path):
        log_file = tmp_path / "app.log"
        setup_logging(LoggingConfig(destination="file", format="json", file_path=str(log_file)))

        logging.getLogger("patternkit.config").warning("Loaded %s", "config.yml")
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text().splitlines()[-1])
        assert record["event"] == "Loaded config.yml"
        assert record["level"] == "warning"
