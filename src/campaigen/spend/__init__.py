"""
Spend Tracking Package

Recording and listing of marketing spend entries.
"""

from .datastore import SpendRecordStore
from .models import CreateSpendRecordDto, SpendRecord, SpendRecordDto
from .service import SpendTrackingService

__all__ = [
    "CreateSpendRecordDto",
    "SpendRecord",
    "SpendRecordDto",
    "SpendRecordStore",
    "SpendTrackingService",
]
