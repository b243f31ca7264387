#!/usr/bin/env python3
"""
Influencer DataStore

Persistence for Influencer entities in the Influencers table.
"""

from ..core.database import influencers_table
from ..core.datastore import TableStore
from .models import Influencer


class InfluencerStore(TableStore[Influencer]):
    """DataStore for influencer profiles, listed by name."""

    table = influencers_table
    entity_type = Influencer
    entity_name = "Influencer"
    order_by = ("name", "id")
