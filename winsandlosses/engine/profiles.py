"""Local profile management.

Profiles live in the key-value store next to the entry buckets: the
profile list under ``profiles`` and the selected profile's id under
``activeProfileId``.
"""

import logging
from datetime import datetime
from typing import Callable, Optional
from uuid import UUID

from pydantic import TypeAdapter, ValidationError

from winsandlosses.engine.dates import WeekPolicy
from winsandlosses.engine.journal import JournalEngine
from winsandlosses.engine.session import SessionContext
from winsandlosses.models import Profile
from winsandlosses.storage import KeyValueStore, bucket_key

logger = logging.getLogger(__name__)

PROFILES_KEY = "profiles"
ACTIVE_PROFILE_KEY = "activeProfileId"

_profiles_adapter = TypeAdapter(list[Profile])


class ProfileStore:
    """Profiles and the active profile selection."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    def _save_profiles(self, profiles: list[Profile]) -> None:
        self.store.set(PROFILES_KEY, _profiles_adapter.dump_json(profiles))

    def list_profiles(self) -> list[Profile]:
        """All profiles in creation order. Unreadable data yields none."""
        blob = self.store.get(PROFILES_KEY)
        if blob is None:
            return []
        try:
            return _profiles_adapter.validate_json(blob)
        except ValidationError as e:
            logger.warning("Discarding unreadable profile list: %s", e)
            return []

    def get_profile(self, profile_id: UUID) -> Optional[Profile]:
        for profile in self.list_profiles():
            if profile.id == profile_id:
                return profile
        return None

    def find_profile(self, name_or_id: str) -> Optional[Profile]:
        """Find a profile by case-insensitive name or by id prefix."""
        needle = name_or_id.strip().lower()
        if not needle:
            return None
        profiles = self.list_profiles()
        for profile in profiles:
            if profile.name.lower() == needle:
                return profile
        matches = [p for p in profiles if str(p.id).startswith(needle)]
        return matches[0] if len(matches) == 1 else None

    def create_profile(self, name: str, emoji: str = "🙂", pin: Optional[str] = None) -> Profile:
        """Create a profile. The first profile created becomes active.

        Raises:
            ValueError: If the name is blank.
        """
        profile = Profile(name=name.strip(), emoji=emoji, pin=pin or None)
        profiles = self.list_profiles()
        profiles.append(profile)
        self._save_profiles(profiles)
        logger.info("Created profile %s (%s)", profile.name, profile.id)

        if self.active_profile_id() is None:
            self.set_active(profile.id)
        return profile

    def delete_profile(self, profile_id: UUID) -> None:
        """Delete a profile and its entry bucket. Unknown ids are ignored."""
        profiles = self.list_profiles()
        remaining = [p for p in profiles if p.id != profile_id]
        if len(remaining) == len(profiles):
            return

        self._save_profiles(remaining)
        self.store.remove(bucket_key(profile_id))
        if self.active_profile_id() == profile_id:
            self.store.remove(ACTIVE_PROFILE_KEY)
        logger.info("Deleted profile %s", profile_id)

    def active_profile_id(self) -> Optional[UUID]:
        blob = self.store.get(ACTIVE_PROFILE_KEY)
        if blob is None:
            return None
        try:
            return UUID(blob.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            logger.warning("Ignoring malformed active profile id %r", blob)
            return None

    def active_profile(self) -> Optional[Profile]:
        profile_id = self.active_profile_id()
        return self.get_profile(profile_id) if profile_id else None

    def set_active(self, profile_id: Optional[UUID]) -> None:
        """Select a profile, or clear the selection with None.

        Unknown ids are ignored.
        """
        if profile_id is None:
            self.store.remove(ACTIVE_PROFILE_KEY)
            return
        if self.get_profile(profile_id) is None:
            logger.debug("Ignoring switch to unknown profile %s", profile_id)
            return
        self.store.set(ACTIVE_PROFILE_KEY, str(profile_id).encode("utf-8"))

    def verify_pin(self, profile_id: UUID, pin: Optional[str]) -> bool:
        """Plaintext PIN check. Profiles without a PIN always pass."""
        profile = self.get_profile(profile_id)
        if profile is None:
            return False
        if profile.pin is None:
            return True
        return pin == profile.pin

    def session(self) -> SessionContext:
        return SessionContext(profile_id=self.active_profile_id())


def open_journal(
    store: KeyValueStore,
    clock: Optional[Callable[[], datetime]] = None,
    week_policy: WeekPolicy | str = WeekPolicy.CALENDAR,
) -> JournalEngine:
    """Build an engine bound to the store's active profile."""
    profiles = ProfileStore(store)
    return JournalEngine(
        store,
        context=profiles.session(),
        clock=clock,
        week_policy=week_policy,
    )
