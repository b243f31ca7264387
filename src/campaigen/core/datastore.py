#!/usr/bin/env python3
"""
DataStore Protocol - Standard interface for campaign data persistence.

Provides the repository contract shared by every entity type, plus a
table-backed base class that implements it on top of a SQLAlchemy session.
Stores are the only components that issue queries against the schema.
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Generic, Protocol, TypeVar
from uuid import UUID

from sqlalchemy import Table, delete, func, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CampaigenError(Exception):
    """Base class for application errors."""


class RecordNotFoundError(CampaigenError):
    """Raised when an update targets an id that has no row."""

    def __init__(self, entity_name: str, record_id: UUID | str):
        self.entity_name = entity_name
        self.record_id = str(record_id)
        super().__init__(f"{entity_name} not found: {self.record_id}")


class Entity(Protocol):
    """Shape every persisted record type provides."""

    id: UUID

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> Any: ...

    def to_row(self) -> dict[str, Any]: ...


class DataStore(Protocol[T]):
    """
    Protocol for CRUD persistence of one entity type.

    Type parameter T is the entity (e.g. SpendRecord, Influencer).
    """

    def add(self, record: T) -> None:
        """
        Insert a new record using its already-assigned id.

        Raises:
            sqlalchemy.exc.IntegrityError: If the id already exists
        """
        ...

    def get_by_id(self, record_id: UUID) -> T | None:
        """
        Point lookup by primary key.

        Returns:
            The record, or None if no row has that id
        """
        ...

    def get_all(self) -> list[T]:
        """
        Load every record in the store's deterministic order.

        Returns:
            List of records, empty when the table is empty
        """
        ...

    def update(self, record: T) -> None:
        """
        Replace every field of the row matching record.id.

        Raises:
            RecordNotFoundError: If no row has that id
        """
        ...

    def delete(self, record_id: UUID) -> bool:
        """
        Remove the row with that id if present.

        Returns:
            True if a row was removed, False if it was already absent
        """
        ...


E = TypeVar("E", bound=Entity)


class TableStore(Generic[E]):
    """
    DataStore implementation over a single table.

    Subclasses set:
    - table: the SQLAlchemy Table
    - entity_type: dataclass with from_row()/to_row()
    - entity_name: human-readable name for messages
    - order_by: column keys giving get_all() a stable order

    Every mutation commits immediately; a failed mutation is rolled back and
    the original exception propagates unchanged.
    """

    table: ClassVar[Table]
    entity_type: ClassVar[type]
    entity_name: ClassVar[str] = "Record"
    order_by: ClassVar[tuple[str, ...]] = ("id",)

    def __init__(self, session: Session):
        """
        Initialize store.

        Args:
            session: Open session for the current unit of work
        """
        self.session = session

    def _row_to_entity(self, row: Any) -> E:
        mapping = row._mapping
        return self.entity_type.from_row({column.key: mapping[column] for column in self.table.c})

    def _commit(self, operation: str, statement: Any) -> Any:
        try:
            result = self.session.execute(statement)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            logger.debug("%s %s failed, rolled back", self.entity_name, operation)
            raise
        return result

    def add(self, record: E) -> None:
        self._commit("add", insert(self.table).values(**record.to_row()))
        logger.info(f"Added {self.entity_name} {record.id}")

    def get_by_id(self, record_id: UUID) -> E | None:
        statement = select(self.table).where(self.table.c.id == str(record_id))
        row = self.session.execute(statement).first()
        if row is None:
            return None
        return self._row_to_entity(row)

    def get_all(self) -> list[E]:
        columns = [self.table.c[key] for key in self.order_by]
        rows = self.session.execute(select(self.table).order_by(*columns)).all()
        return [self._row_to_entity(row) for row in rows]

    def update(self, record: E) -> None:
        values = record.to_row()
        record_id = values.pop("id")
        statement = update(self.table).where(self.table.c.id == record_id).values(**values)
        result = self._commit("update", statement)
        if result.rowcount == 0:
            raise RecordNotFoundError(self.entity_name, record_id)
        logger.info(f"Updated {self.entity_name} {record_id}")

    def delete(self, record_id: UUID) -> bool:
        statement = delete(self.table).where(self.table.c.id == str(record_id))
        result = self._commit("delete", statement)
        removed = result.rowcount > 0
        if removed:
            logger.info(f"Deleted {self.entity_name} {record_id}")
        else:
            logger.debug(f"Delete of missing {self.entity_name} {record_id} ignored")
        return removed

    def count(self) -> int:
        """Number of rows in the table."""
        return self.session.execute(select(func.count()).select_from(self.table)).scalar_one()

    def exists(self) -> bool:
        """Check whether the store holds any records."""
        return self.count() > 0

    def item_count(self) -> int:
        """Alias of count() for status reporting."""
        return self.count()

    def summary_text(self) -> str:
        """Human-readable summary of current data state."""
        count = self.count()
        if count == 0:
            return "No records"
        return f"{count} record" if count == 1 else f"{count} records"
