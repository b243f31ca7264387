"""
Influencer Management Package

Recording and listing of influencer profiles.
"""

from .datastore import InfluencerStore
from .models import CreateInfluencerDto, Influencer, InfluencerDto
from .service import InfluencerService

__all__ = [
    "CreateInfluencerDto",
    "Influencer",
    "InfluencerDto",
    "InfluencerService",
    "InfluencerStore",
]
