"""
Campaigen - Marketing Campaign Data

A command-line tool for recording marketing spend entries and influencer
profiles in a local relational store.

Domain Packages:
- core: Configuration, database schema, repository base, currency and dates
- spend: Spend records, their store and the spend tracking service
- influencer: Influencer profiles, their store and service
- cli: Command-line interface

Example Usage:
    from campaigen.core.database import open_database, session_scope
    from campaigen.spend import CreateSpendRecordDto, SpendRecordStore, SpendTrackingService

    engine = open_database("sqlite:///campaigen.db")
    with session_scope(engine) as session:
        service = SpendTrackingService(SpendRecordStore(session))
        service.create_spend_record(CreateSpendRecordDto(amount=Decimal("12.34")))
"""

__version__ = "0.1.0"

from .core.config import Environment, get_config
from .influencer import CreateInfluencerDto, Influencer, InfluencerDto, InfluencerService
from .spend import CreateSpendRecordDto, SpendRecord, SpendRecordDto, SpendTrackingService

__all__ = [
    # Configuration
    "Environment",
    "get_config",
    # Spend tracking
    "CreateSpendRecordDto",
    "SpendRecord",
    "SpendRecordDto",
    "SpendTrackingService",
    # Influencer management
    "CreateInfluencerDto",
    "Influencer",
    "InfluencerDto",
    "InfluencerService",
]
