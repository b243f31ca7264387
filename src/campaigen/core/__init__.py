"""
Core Utilities Package

Shared infrastructure used by the spend and influencer domains.

This package provides:
- Configuration management for environment-specific settings
- SQLAlchemy schema, engine creation and the per-invocation session scope
- The DataStore protocol and the table-backed store base class
- Decimal currency parsing and UTC date handling
"""

from .config import (
    Config,
    DatabaseConfig,
    Environment,
    get_config,
    get_data_dir,
    get_database_url,
    is_development,
    is_production,
    is_test,
    reload_config,
)
from .currency import format_amount, parse_amount
from .database import (
    create_db_engine,
    create_schema,
    drop_schema,
    influencers_table,
    metadata,
    open_database,
    session_scope,
    spend_records_table,
)
from .datastore import CampaigenError, DataStore, RecordNotFoundError, TableStore
from .dates import ensure_utc, format_date, parse_date, utc_now

__all__ = [
    # Configuration
    "Config",
    "DatabaseConfig",
    "Environment",
    "get_config",
    "get_data_dir",
    "get_database_url",
    "is_development",
    "is_production",
    "is_test",
    "reload_config",
    # Database
    "create_db_engine",
    "create_schema",
    "drop_schema",
    "influencers_table",
    "metadata",
    "open_database",
    "session_scope",
    "spend_records_table",
    # Persistence
    "CampaigenError",
    "DataStore",
    "RecordNotFoundError",
    "TableStore",
    # Currency and dates
    "ensure_utc",
    "format_amount",
    "format_date",
    "parse_amount",
    "parse_date",
    "utc_now",
]
