#!/usr/bin/env python3
"""
Spend Tracking Data Models

SpendRecord is the persisted entity; the DTOs are what the CLI sends to and
receives from SpendTrackingService.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any
from uuid import UUID

from ..core.currency import format_amount
from ..core.dates import ensure_utc, format_date


@dataclass
class SpendRecord:
    """One marketing spend entry as stored in the SpendRecords table."""

    id: UUID
    date: datetime
    amount: Decimal
    description: str | None = None
    category: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "SpendRecord":
        """Create a SpendRecord from a database row mapping."""
        return cls(
            id=UUID(row["id"]),
            date=ensure_utc(row["date"]),
            amount=Decimal(row["amount"]),
            description=row["description"],
            category=row["category"],
        )

    def to_row(self) -> dict[str, Any]:
        """Column values keyed by column key."""
        return {
            "id": str(self.id),
            "date": self.date,
            "amount": self.amount,
            "description": self.description,
            "category": self.category,
        }


@dataclass
class CreateSpendRecordDto:
    """Input for creating a spend record. Date defaults to now (UTC) when None."""

    amount: Decimal
    description: str | None = None
    category: str | None = None
    date: datetime | None = None


@dataclass
class SpendRecordDto:
    """Spend record as returned by the service layer."""

    id: UUID
    date: datetime
    amount: Decimal
    description: str | None = None
    category: str | None = None

    @property
    def date_str(self) -> str:
        return format_date(self.date)

    @property
    def amount_str(self) -> str:
        return format_amount(self.amount)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display and JSON serialization."""
        return {
            "id": str(self.id),
            "date": self.date.isoformat(),
            "amount": str(self.amount),
            "description": self.description,
            "category": self.category,
        }
