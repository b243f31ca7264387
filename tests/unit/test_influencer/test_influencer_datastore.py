#!/usr/bin/env python3
"""
Unit tests for InfluencerStore.
"""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from campaigen.core.datastore import RecordNotFoundError
from campaigen.influencer import InfluencerStore
from tests.fixtures.synthetic_data import make_influencer


@pytest.mark.unit
@pytest.mark.influencer
class TestInfluencerStore:
    """Test InfluencerStore CRUD behaviour."""

    @pytest.fixture(autouse=True)
    def _store(self, session):
        self.store = InfluencerStore(session)

    def test_add_then_get_by_id(self):
        influencer = make_influencer(name="Jane", handle="@jane", platform="Insta", niche="Tech")

        self.store.add(influencer)

        assert self.store.get_by_id(influencer.id) == influencer

    def test_get_by_id_returns_none_when_absent(self):
        assert self.store.get_by_id(uuid.uuid4()) is None

    def test_get_all_orders_by_name(self):
        for name in ["Zed", "Amy", "Mo"]:
            self.store.add(make_influencer(name=name))

        assert [i.name for i in self.store.get_all()] == ["Amy", "Mo", "Zed"]

    def test_optional_fields_can_be_absent(self):
        influencer = make_influencer(handle=None, platform=None, niche=None)
        self.store.add(influencer)

        loaded = self.store.get_by_id(influencer.id)
        assert loaded.handle is None
        assert loaded.platform is None
        assert loaded.niche is None

    def test_duplicate_id_raises_integrity_error(self):
        influencer = make_influencer()
        self.store.add(influencer)

        with pytest.raises(IntegrityError):
            self.store.add(make_influencer(id=influencer.id, name="Other"))

        assert self.store.get_by_id(influencer.id).name == influencer.name

    def test_update_replaces_all_fields(self):
        influencer = make_influencer()
        self.store.add(influencer)

        replacement = make_influencer(id=influencer.id, name="Renamed", handle=None, platform="TikTok", niche=None)
        self.store.update(replacement)

        assert self.store.get_by_id(influencer.id) == replacement

    def test_update_missing_id_raises_not_found(self):
        with pytest.raises(RecordNotFoundError, match="Influencer not found"):
            self.store.update(make_influencer())

    def test_delete_is_idempotent(self):
        influencer = make_influencer()
        self.store.add(influencer)

        assert self.store.delete(influencer.id) is True
        assert self.store.delete(influencer.id) is False
        assert self.store.count() == 0
