import os

import pytest

from patternkit.bootstrap import Application
from patternkit.config.schemas import AppConfig


@pytest.fixture(autouse=True)
def clean_patternkit_env(monkeypatch):
    """Keep the developer's PATTERNKIT_* variables out of the tests."""
    for name in list(os.environ):
        if name.startswith("PATTERNKIT_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def app_config(tmp_path):
    """Configuration using in-memory storage and quiet logging."""
    return AppConfig(
        environment="testing",
        logging={"level": "WARNING", "destination": "stdout"},
        storage={"strategy": "memory", "sqlite_path": str(tmp_path / "test.db")},
    )


@pytest.fixture
def sqlite_config(tmp_path):
    return AppConfig(
        environment="testing",
        logging={"level": "WARNING", "destination": "stdout"},
        storage={"strategy": "sqlite", "sqlite_path": str(tmp_path / "test.db")},
    )


@pytest.fixture
def application(app_config):
    """Initialized application, shut down after the test."""
    app = Application(config=app_config)
    with app:
        yield app

