#!/usr/bin/env python3
"""
Unit tests for schema creation and custom column types.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy import inspect, select, text

from campaigen.core.database import (
    create_schema,
    drop_schema,
    open_database,
    session_scope,
    spend_records_table,
)


@pytest.mark.unit
class TestSchema:
    """Test create-if-missing schema behaviour."""

    def test_creates_both_tables_with_expected_columns(self, engine):
        inspector = inspect(engine)

        assert set(inspector.get_table_names()) >= {"SpendRecords", "Influencers"}
        spend_columns = [c["name"] for c in inspector.get_columns("SpendRecords")]
        assert spend_columns == ["Id", "Date", "Amount", "Description", "Category"]
        influencer_columns = [c["name"] for c in inspector.get_columns("Influencers")]
        assert influencer_columns == ["Id", "Name", "Handle", "Platform", "Niche"]

    def test_primary_key_is_id(self, engine):
        inspector = inspect(engine)
        assert inspector.get_pk_constraint("SpendRecords")["constrained_columns"] == ["Id"]
        assert inspector.get_pk_constraint("Influencers")["constrained_columns"] == ["Id"]

    def test_create_schema_is_idempotent(self, engine):
        create_schema(engine)
        create_schema(engine)
        assert "SpendRecords" in inspect(engine).get_table_names()

    def test_drop_schema_removes_tables_and_create_restores_them(self, engine):
        drop_schema(engine)
        assert "SpendRecords" not in inspect(engine).get_table_names()

        create_schema(engine)
        assert set(inspect(engine).get_table_names()) >= {"SpendRecords", "Influencers"}

    def test_open_database_creates_missing_parent_directory(self, tmp_path):
        db_file = tmp_path / "nested" / "dir" / "campaigen.db"
        engine = open_database(f"sqlite:///{db_file}")
        try:
            assert db_file.exists()
        finally:
            engine.dispose()


@pytest.mark.unit
class TestColumnTypes:
    """Test decimal and UTC datetime storage."""

    def test_amount_is_stored_as_exact_decimal_text(self, engine):
        with session_scope(engine) as session:
            session.execute(
                spend_records_table.insert().values(
                    id="a" * 36,
                    date=datetime(2024, 3, 30, tzinfo=timezone.utc),
                    amount=Decimal("12.34"),
                )
            )
            session.commit()

            raw = session.execute(text('SELECT "Amount" FROM "SpendRecords"')).scalar_one()
            assert raw == "12.34"

            amount = session.execute(select(spend_records_table.c.amount)).scalar_one()
            assert amount == Decimal("12.34")

    def test_large_amount_is_stored_in_positional_form(self, engine):
        with session_scope(engine) as session:
            session.execute(
                spend_records_table.insert().values(
                    id="d" * 36,
                    date=datetime(2024, 3, 30, tzinfo=timezone.utc),
                    amount=Decimal("1E+26"),
                )
            )
            session.commit()

            raw = session.execute(text('SELECT "Amount" FROM "SpendRecords"')).scalar_one()
            assert raw == "100000000000000000000000000"

            amount = session.execute(select(spend_records_table.c.amount)).scalar_one()
            assert amount == Decimal("1E+26")

    def test_dates_come_back_as_aware_utc(self, engine):
        with session_scope(engine) as session:
            session.execute(
                spend_records_table.insert().values(
                    id="b" * 36,
                    date=datetime(2024, 3, 30, 9, 30, tzinfo=timezone.utc),
                    amount=Decimal("1"),
                )
            )
            session.commit()

            stored = session.execute(select(spend_records_table.c.date)).scalar_one()
            assert stored == datetime(2024, 3, 30, 9, 30, tzinfo=timezone.utc)
            assert stored.tzinfo is not None


@pytest.mark.unit
class TestSessionScope:
    """Test the unit-of-work context manager."""

    def test_uncommitted_work_is_rolled_back_on_error(self, engine):
        with pytest.raises(RuntimeError):
            with session_scope(engine) as session:
                session.execute(
                    spend_records_table.insert().values(
                        id="c" * 36,
                        date=datetime(2024, 3, 30, tzinfo=timezone.utc),
                        amount=Decimal("1"),
                    )
                )
                raise RuntimeError("boom")

        with session_scope(engine) as session:
            count = session.execute(text('SELECT count(*) FROM "SpendRecords"')).scalar_one()
        assert count == 0
