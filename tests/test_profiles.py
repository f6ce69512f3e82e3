"""Tests for the profile store.

**Feature: wins-and-losses**
"""

from uuid import uuid4

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import FixedClock
from winsandlosses.engine import ProfileStore, open_journal
from winsandlosses.engine.profiles import ACTIVE_PROFILE_KEY, PROFILES_KEY
from winsandlosses.models import EntryType, JournalEntry
from winsandlosses.storage import MemoryStore, bucket_key


@pytest.fixture
def profiles(store) -> ProfileStore:
    return ProfileStore(store)


class TestProfileLifecycle:
    def test_empty(self, profiles: ProfileStore):
        assert profiles.list_profiles() == []
        assert profiles.active_profile_id() is None
        assert profiles.active_profile() is None

    def test_first_profile_becomes_active(self, profiles: ProfileStore):
        first = profiles.create_profile("Alex", emoji="🚀")
        second = profiles.create_profile("Sam")

        assert profiles.active_profile_id() == first.id
        assert [p.id for p in profiles.list_profiles()] == [first.id, second.id]

    def test_blank_name_rejected(self, profiles: ProfileStore):
        with pytest.raises(ValueError):
            profiles.create_profile("   ")

    def test_set_active(self, profiles: ProfileStore):
        profiles.create_profile("Alex")
        sam = profiles.create_profile("Sam")

        profiles.set_active(sam.id)
        assert profiles.active_profile() == sam

    def test_set_active_unknown_is_noop(self, profiles: ProfileStore):
        alex = profiles.create_profile("Alex")
        profiles.set_active(uuid4())
        assert profiles.active_profile_id() == alex.id

    def test_clear_active(self, profiles: ProfileStore):
        profiles.create_profile("Alex")
        profiles.set_active(None)
        assert profiles.active_profile_id() is None
        assert profiles.session().profile_id is None

    def test_delete_removes_bucket_and_selection(self, store, profiles: ProfileStore):
        alex = profiles.create_profile("Alex")
        store.set(bucket_key(alex.id), b"{}")

        profiles.delete_profile(alex.id)

        assert profiles.list_profiles() == []
        assert profiles.active_profile_id() is None
        assert store.get(bucket_key(alex.id)) is None

    def test_delete_unknown_is_noop(self, store, profiles: ProfileStore):
        profiles.create_profile("Alex")
        before = store.get(PROFILES_KEY)
        profiles.delete_profile(uuid4())
        assert store.get(PROFILES_KEY) == before


class TestFindProfile:
    def test_by_name_case_insensitive(self, profiles: ProfileStore):
        alex = profiles.create_profile("Alex")
        assert profiles.find_profile("alex") == alex

    def test_by_id_prefix(self, profiles: ProfileStore):
        alex = profiles.create_profile("Alex")
        assert profiles.find_profile(str(alex.id)[:8]) == alex

    def test_missing(self, profiles: ProfileStore):
        assert profiles.find_profile("nobody") is None
        assert profiles.find_profile("") is None


class TestPin:
    """PINs are plain-text equality checks."""

    def test_no_pin_always_passes(self, profiles: ProfileStore):
        alex = profiles.create_profile("Alex")
        assert profiles.verify_pin(alex.id, None)
        assert profiles.verify_pin(alex.id, "1234")

    def test_pin_checked(self, profiles: ProfileStore):
        alex = profiles.create_profile("Alex", pin="1234")
        assert profiles.verify_pin(alex.id, "1234")
        assert not profiles.verify_pin(alex.id, "0000")
        assert not profiles.verify_pin(alex.id, None)

    def test_unknown_profile_fails(self, profiles: ProfileStore):
        assert not profiles.verify_pin(uuid4(), "1234")

    @given(pin=st.text(alphabet="0123456789", min_size=4, max_size=8))
    @settings(max_examples=30)
    def test_pin_round_trip(self, pin: str):
        profiles = ProfileStore(MemoryStore())
        created = profiles.create_profile("Alex", pin=pin)
        assert ProfileStore(profiles.store).get_profile(created.id).pin == pin


class TestCorruptProfileData:
    def test_bad_profile_list(self, store, profiles: ProfileStore):
        store.set(PROFILES_KEY, b"not json")
        assert profiles.list_profiles() == []

    def test_bad_active_id(self, store, profiles: ProfileStore):
        store.set(ACTIVE_PROFILE_KEY, b"not-a-uuid")
        assert profiles.active_profile_id() is None


class TestOpenJournal:
    """open_journal binds the engine to the active profile's bucket."""

    def test_engine_follows_active_profile(self, store, profiles: ProfileStore):
        alex = profiles.create_profile("Alex")
        sam = profiles.create_profile("Sam")

        engine = open_journal(store, clock=FixedClock())
        entry = JournalEntry(type=EntryType.WIN, content="Alex's win")
        engine.add_entry(entry)
        assert engine.active_profile_id == alex.id

        profiles.set_active(sam.id)
        assert open_journal(store).entries == ()

        profiles.set_active(alex.id)
        assert open_journal(store).entries == (entry,)

    def test_no_profile(self, store):
        engine = open_journal(store, week_policy="rolling")
        assert engine.active_profile_id is None
        assert engine.week_policy.value == "rolling"
