#!/usr/bin/env python3
"""
Configuration Management for Campaigen

Handles environment-based configuration with safe defaults and validation.
Supports multiple environments (development, test, production); the storage
location can always be overridden through CAMPAIGEN_DATABASE_URL so tests
and ad-hoc runs never touch the default database.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError

# Load environment variables from .env file
load_dotenv()

DEFAULT_DATABASE_FILENAME = "campaigen.db"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class DatabaseConfig:
    """Database configuration settings."""

    url: str
    echo: bool = False

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    def safe_url(self) -> str:
        """Database URL with any password masked."""
        try:
            return make_url(self.url).render_as_string(hide_password=True)
        except ArgumentError:
            return self.url


@dataclass
class Config:
    """
    Main configuration class for the campaigen application.

    Loads configuration from environment variables with defaults suited
    to each environment type.
    """

    environment: Environment
    data_dir: Path
    database: DatabaseConfig

    # Application settings
    debug: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("CAMPAIGEN_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_campaigen"
            data_dir = Path(os.getenv("CAMPAIGEN_DATA_DIR", str(default_test_dir)))
        else:
            data_dir = Path(os.getenv("CAMPAIGEN_DATA_DIR", "./data")).expanduser().resolve()

        data_dir.mkdir(parents=True, exist_ok=True)

        default_url = f"sqlite:///{data_dir / DEFAULT_DATABASE_FILENAME}"
        database = DatabaseConfig(
            url=os.getenv("CAMPAIGEN_DATABASE_URL") or default_url,
            echo=os.getenv("CAMPAIGEN_DB_ECHO", "false").lower() == "true",
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            database=database,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        if not self.data_dir.exists():
            errors.append(f"data_dir does not exist: {self.data_dir}")

        if not self.database.url:
            errors.append("CAMPAIGEN_DATABASE_URL must not be empty")
        else:
            try:
                make_url(self.database.url)
            except ArgumentError as e:
                errors.append(f"Invalid database URL: {e}")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown log level: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.WARNING)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")
        logging.getLogger("campaigen").setLevel(level)

        # SQL echo goes through the sqlalchemy.engine logger
        if not self.database.echo:
            logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    def to_dict(self, include_sensitive: bool = False) -> dict[str, Any]:
        """Convert configuration to dictionary, optionally excluding sensitive data."""
        return {
            "environment": self.environment.value,
            "data_dir": str(self.data_dir),
            "database": {
                "url": self.database.url if include_sensitive else self.database.safe_url(),
                "echo": self.database.echo,
            },
            "debug": self.debug,
            "log_level": self.log_level,
        }


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        config = Config.from_environment()

        errors = config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        config.setup_logging()
        _config = config

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()


def get_data_dir() -> Path:
    """Get the data directory path."""
    return get_config().data_dir


def get_database_url() -> str:
    """Get the configured database URL."""
    return get_config().database.url


def is_development() -> bool:
    """Check if running in development environment."""
    return get_config().environment == Environment.DEVELOPMENT


def is_test() -> bool:
    """Check if running in test environment."""
    return get_config().environment == Environment.TEST


def is_production() -> bool:
    """Check if running in production environment."""
    return get_config().environment == Environment.PRODUCTION
