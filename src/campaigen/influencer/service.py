#!/usr/bin/env python3
"""
Influencer Service

Maps between transfer objects and Influencer entities and owns id
assignment.
"""

import logging
import uuid
from uuid import UUID

from ..core.datastore import DataStore
from .models import CreateInfluencerDto, Influencer, InfluencerDto

logger = logging.getLogger(__name__)


def to_dto(influencer: Influencer) -> InfluencerDto:
    """Map a persisted entity to its transfer object."""
    return InfluencerDto(
        id=influencer.id,
        name=influencer.name,
        handle=influencer.handle,
        platform=influencer.platform,
        niche=influencer.niche,
    )


class InfluencerService:
    """Application service for influencer profiles."""

    def __init__(self, store: DataStore[Influencer]):
        self.store = store

    def create_influencer(self, dto: CreateInfluencerDto) -> InfluencerDto:
        """
        Create and persist a new influencer with a freshly generated id.

        Args:
            dto: Caller-supplied fields

        Returns:
            The stored influencer, including its generated id
        """
        influencer = Influencer(
            id=uuid.uuid4(),
            name=dto.name,
            handle=dto.handle,
            platform=dto.platform,
            niche=dto.niche,
        )
        self.store.add(influencer)
        logger.debug(f"Created influencer {influencer.id} ({influencer.name})")
        return to_dto(influencer)

    def get_influencer(self, influencer_id: UUID) -> InfluencerDto | None:
        """Fetch one influencer, or None if it does not exist."""
        influencer = self.store.get_by_id(influencer_id)
        if influencer is None:
            return None
        return to_dto(influencer)

    def list_influencers(self) -> list[InfluencerDto]:
        """All influencers in store order."""
        return [to_dto(influencer) for influencer in self.store.get_all()]

    def update_influencer(self, influencer_id: UUID, dto: CreateInfluencerDto) -> InfluencerDto:
        """
        Replace every field of an existing influencer.

        Raises:
            RecordNotFoundError: If no influencer has that id
        """
        influencer = Influencer(
            id=influencer_id,
            name=dto.name,
            handle=dto.handle,
            platform=dto.platform,
            niche=dto.niche,
        )
        self.store.update(influencer)
        return to_dto(influencer)

    def delete_influencer(self, influencer_id: UUID) -> bool:
        """Delete an influencer; returns False if it was already absent."""
        return self.store.delete(influencer_id)
