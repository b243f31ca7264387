#!/usr/bin/env python3
"""
Spend Tracking DataStore

Persistence for SpendRecord entities in the SpendRecords table.
"""

from ..core.database import spend_records_table
from ..core.datastore import TableStore
from .models import SpendRecord


class SpendRecordStore(TableStore[SpendRecord]):
    """
    DataStore for marketing spend records.

    get_all() returns records oldest first, ties broken by id.
    """

    table = spend_records_table
    entity_type = SpendRecord
    entity_name = "Spend record"
    order_by = ("date", "id")
