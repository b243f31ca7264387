#!/usr/bin/env python3
"""
Spend Tracking Service

Maps between transfer objects and SpendRecord entities and owns id
assignment. Store errors are not caught here.
"""

import logging
import uuid
from uuid import UUID

from ..core.dates import ensure_utc, utc_now
from ..core.datastore import DataStore
from .models import CreateSpendRecordDto, SpendRecord, SpendRecordDto

logger = logging.getLogger(__name__)


def to_dto(record: SpendRecord) -> SpendRecordDto:
    """Map a persisted entity to its transfer object."""
    return SpendRecordDto(
        id=record.id,
        date=record.date,
        amount=record.amount,
        description=record.description,
        category=record.category,
    )


class SpendTrackingService:
    """Application service for marketing spend records."""

    def __init__(self, store: DataStore[SpendRecord]):
        self.store = store

    def create_spend_record(self, dto: CreateSpendRecordDto) -> SpendRecordDto:
        """
        Create and persist a new spend record.

        A fresh random id is generated for every call. When dto.date is
        unset the record is dated now (UTC).

        Args:
            dto: Caller-supplied fields

        Returns:
            The stored record, including its generated id
        """
        record = SpendRecord(
            id=uuid.uuid4(),
            date=ensure_utc(dto.date) if dto.date is not None else utc_now(),
            amount=dto.amount,
            description=dto.description,
            category=dto.category,
        )
        self.store.add(record)
        logger.debug(f"Created spend record {record.id} for {record.amount}")
        return to_dto(record)

    def get_spend_record(self, record_id: UUID) -> SpendRecordDto | None:
        """Fetch one record, or None if it does not exist."""
        record = self.store.get_by_id(record_id)
        if record is None:
            return None
        return to_dto(record)

    def list_spend_records(self) -> list[SpendRecordDto]:
        """All records in store order."""
        return [to_dto(record) for record in self.store.get_all()]

    def update_spend_record(self, record_id: UUID, dto: CreateSpendRecordDto) -> SpendRecordDto:
        """
        Replace every field of an existing record.

        When dto.date is unset the stored date is kept.

        Raises:
            RecordNotFoundError: If no record has that id
        """
        date = ensure_utc(dto.date) if dto.date is not None else None
        if date is None:
            existing = self.store.get_by_id(record_id)
            date = existing.date if existing is not None else utc_now()

        record = SpendRecord(
            id=record_id,
            date=date,
            amount=dto.amount,
            description=dto.description,
            category=dto.category,
        )
        self.store.update(record)
        return to_dto(record)

    def delete_spend_record(self, record_id: UUID) -> bool:
        """Delete a record; returns False if it was already absent."""
        return self.store.delete(record_id)
