#!/usr/bin/env python3
"""
Database Engine and Schema

SQLAlchemy table definitions for the two campaign tables, schema creation
with create-if-missing semantics, and the per-invocation unit of work.

Column names match the on-disk schema (``Id``, ``Date``, ...); each column
also carries a lowercase ``key`` so Python code reads ``row.id``,
``row.amount`` and so on.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from sqlalchemy import Column, DateTime, Engine, MetaData, String, Table, Text, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.types import TypeDecorator

from .dates import ensure_utc

logger = logging.getLogger(__name__)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC datetime.

    SQLite stores datetimes as naive ISO-8601 text; values are normalised to
    UTC on the way in and tagged as UTC on the way out.
    """

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return ensure_utc(value).replace(tzinfo=None)

    def process_result_value(self, value: datetime | None, dialect) -> datetime | None:
        if value is None:
            return None
        return ensure_utc(value)


class DecimalText(TypeDecorator):
    """Exact decimal stored as canonical text (SQLite has no decimal type)."""

    impl = String(64)
    cache_ok = True

    def process_bind_param(self, value: Decimal | int | str | None, dialect) -> str | None:
        if value is None:
            return None
        return f"{Decimal(value):f}"

    def process_result_value(self, value: str | None, dialect) -> Decimal | None:
        if value is None:
            return None
        return Decimal(value)


metadata = MetaData()

spend_records_table = Table(
    "SpendRecords",
    metadata,
    Column("Id", String(36), key="id", primary_key=True),
    Column("Date", UTCDateTime(), key="date", nullable=False),
    Column("Amount", DecimalText(), key="amount", nullable=False),
    Column("Description", Text, key="description", nullable=True),
    Column("Category", Text, key="category", nullable=True),
)

influencers_table = Table(
    "Influencers",
    metadata,
    Column("Id", String(36), key="id", primary_key=True),
    Column("Name", Text, key="name", nullable=True),
    Column("Handle", Text, key="handle", nullable=True),
    Column("Platform", Text, key="platform", nullable=True),
    Column("Niche", Text, key="niche", nullable=True),
)


def create_db_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for the given database URL.

    For file-backed SQLite URLs the parent directory is created first so a
    fresh data directory works on first run.
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).expanduser().parent.mkdir(parents=True, exist_ok=True)

    logger.debug("Creating engine for %s", parsed.render_as_string(hide_password=True))
    return create_engine(url, echo=echo)


def create_schema(engine: Engine) -> None:
    """Create any missing tables. Safe to call on every start."""
    metadata.create_all(engine, checkfirst=True)


def drop_schema(engine: Engine) -> None:
    """Drop all campaign tables."""
    metadata.drop_all(engine, checkfirst=True)


def open_database(url: str, echo: bool = False) -> Engine:
    """Create the engine and ensure the schema exists."""
    engine = create_db_engine(url, echo=echo)
    create_schema(engine)
    return engine


@contextmanager
def session_scope(engine: Engine) -> Iterator[Session]:
    """
    One unit of work per command invocation.

    Stores commit their own mutations and roll back their own failures.
    When the block itself raises, uncommitted work is rolled back here too;
    under click's ctx.with_resource the scope is closed without the error,
    so that path relies on the stores. The session is always closed.
    """
    factory = sessionmaker(bind=engine, expire_on_commit=False)
    session = factory()
    try:
        yield session
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
        logger.debug("Session closed")
