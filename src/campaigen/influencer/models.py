#!/usr/bin/env python3
"""
Influencer Management Data Models
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any
from uuid import UUID


@dataclass
class Influencer:
    """An influencer profile as stored in the Influencers table."""

    id: UUID
    name: str
    handle: str | None = None
    platform: str | None = None
    niche: str | None = None

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Influencer":
        """Create an Influencer from a database row mapping."""
        return cls(
            id=UUID(row["id"]),
            name=row["name"],
            handle=row["handle"],
            platform=row["platform"],
            niche=row["niche"],
        )

    def to_row(self) -> dict[str, Any]:
        """Column values keyed by column key."""
        return {
            "id": str(self.id),
            "name": self.name,
            "handle": self.handle,
            "platform": self.platform,
            "niche": self.niche,
        }


@dataclass
class CreateInfluencerDto:
    """Input for creating an influencer."""

    name: str
    handle: str | None = None  # e.g. "@jane"
    platform: str | None = None  # e.g. Instagram, TikTok
    niche: str | None = None


@dataclass
class InfluencerDto:
    """Influencer as returned by the service layer."""

    id: UUID
    name: str
    handle: str | None = None
    platform: str | None = None
    niche: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for display and JSON serialization."""
        return {
            "id": str(self.id),
            "name": self.name,
            "handle": self.handle,
            "platform": self.platform,
            "niche": self.niche,
        }
