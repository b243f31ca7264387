"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import pytest

from campaigen.core import config as config_module
from campaigen.core.config import reload_config
from campaigen.core.database import open_database, session_scope


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point every test at its own data directory and database."""
    # Ensure tests never touch the default database
    monkeypatch.setenv("CAMPAIGEN_ENV", "test")
    monkeypatch.setenv("CAMPAIGEN_DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("CAMPAIGEN_DATABASE_URL", f"sqlite:///{tmp_path / 'campaigen_test.db'}")
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("CAMPAIGEN_DB_ECHO", raising=False)

    reload_config()
    yield
    config_module._config = None


@pytest.fixture
def database_url(tmp_path) -> str:
    """URL of the database the CLI uses in this test."""
    return f"sqlite:///{tmp_path / 'campaigen_test.db'}"


@pytest.fixture
def engine(database_url):
    """Engine with the schema created."""
    engine = open_database(database_url)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    """Open unit of work against the test database."""
    with session_scope(engine) as session:
        yield session
