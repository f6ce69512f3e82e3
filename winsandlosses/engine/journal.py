"""Journal engine: entry storage, time-window queries and analytics.

The engine owns the entries of the active profile only. Every write
persists the whole collection as one bucket blob; write and decode
failures are logged and never raised, so the in-memory collection always
reflects what the user did even when storage misbehaves.
"""

import logging
from collections import Counter
from datetime import date, datetime
from typing import Callable, Optional
from uuid import UUID

from winsandlosses.engine.dates import (
    WEEKDAY_LABELS,
    WeekPolicy,
    local_day,
    local_timestamp,
    longest_run,
    streak_ending,
    week_days,
    weekday_index,
)
from winsandlosses.engine.session import SessionContext
from winsandlosses.errors import BucketDecodeError, StoreError
from winsandlosses.models import Breakdown, DayActivity, EntryType, JournalEntry
from winsandlosses.storage import KeyValueStore, bucket_key, decode_bucket, encode_bucket

logger = logging.getLogger(__name__)

NO_BEST_DAY = "N/A"


class JournalEngine:
    """Entries and analytics for the currently selected profile."""

    def __init__(
        self,
        store: KeyValueStore,
        context: Optional[SessionContext] = None,
        clock: Optional[Callable[[], datetime]] = None,
        week_policy: WeekPolicy | str = WeekPolicy.CALENDAR,
    ):
        """Initialize the engine and load the context's bucket.

        Args:
            store: Key-value store holding the entry buckets.
            context: Session naming the active profile. None means no profile.
            clock: Returns the current local time. Defaults to datetime.now.
            week_policy: How "this week" is bounded.
        """
        self.store = store
        self.week_policy = WeekPolicy(week_policy)
        self._clock = clock or datetime.now
        self._context = SessionContext()
        self._entries: list[JournalEntry] = []
        self.set_active_profile(context.profile_id if context else None)

    @property
    def context(self) -> SessionContext:
        return self._context

    @property
    def active_profile_id(self) -> Optional[UUID]:
        return self._context.profile_id

    @property
    def entries(self) -> tuple[JournalEntry, ...]:
        """All entries in insertion order."""
        return tuple(self._entries)

    def now(self) -> datetime:
        return self._clock()

    def today(self) -> date:
        return local_day(self._clock())

    # ==================== Profile switching ====================

    def set_active_profile(self, profile_id: Optional[UUID]) -> None:
        """Swap the in-memory collection for another profile's bucket.

        Nothing is persisted. With no profile id the collection is empty
        and later writes stay in memory only.
        """
        self._context = SessionContext(profile_id=profile_id)
        self._entries = self._load()
        logger.debug(
            "Active profile set to %s (%d entries)", profile_id, len(self._entries)
        )

    def _load(self) -> list[JournalEntry]:
        """Read the active bucket, falling back to empty on any failure."""
        if self.active_profile_id is None:
            return []

        key = bucket_key(self.active_profile_id)
        try:
            blob = self.store.get(key)
        except StoreError:
            logger.exception("Failed to read bucket %s", key)
            return []

        if blob is None:
            return []

        try:
            return decode_bucket(blob)
        except BucketDecodeError as e:
            logger.warning("Discarding unreadable bucket %s: %s", key, e)
            return []

    def _save(self) -> None:
        """Persist the full collection. Failures are logged, not raised."""
        if self.active_profile_id is None:
            logger.debug("No active profile; %d entries kept in memory only", len(self._entries))
            return

        key = bucket_key(self.active_profile_id)
        try:
            blob = encode_bucket(self._entries)
        except ValueError:
            logger.exception("Failed to encode bucket %s", key)
            return

        try:
            self.store.set(key, blob)
        except StoreError:
            logger.exception("Failed to write bucket %s", key)

    # ==================== Entries ====================

    def add_entry(self, entry: JournalEntry) -> None:
        """Append an entry and persist the collection."""
        self._entries.append(entry)
        self._save()

    def delete_entry(self, entry_id: UUID) -> None:
        """Remove the entry with the given id. Unknown ids are ignored."""
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                del self._entries[index]
                self._save()
                return

    def total_entries(self) -> int:
        return len(self._entries)

    # ==================== Queries ====================

    def entries_for_type(self, entry_type: EntryType) -> list[JournalEntry]:
        """Entries of one type, in insertion order."""
        return [e for e in self._entries if e.type == entry_type]

    def entries_for_day(self, day: date | datetime) -> list[JournalEntry]:
        """Entries on the same local calendar day as ``day``."""
        target = local_day(day)
        return [e for e in self._entries if local_day(e.date) == target]

    def entries_today(self) -> list[JournalEntry]:
        return self.entries_for_day(self.today())

    def week_days(self) -> list[date]:
        """The seven days of the current week, oldest first."""
        return week_days(self.today(), self.week_policy)

    def entries_this_week(self) -> list[JournalEntry]:
        """Entries whose local day falls within ``week_days()``."""
        days = set(self.week_days())
        return [e for e in self._entries if local_day(e.date) in days]

    def weekly_activity(self) -> list[DayActivity]:
        """Per-day entries for each day of the current week."""
        return [
            DayActivity(day=day, entries=tuple(self.entries_for_day(day)))
            for day in self.week_days()
        ]

    def weekly_type_counts(self) -> dict[EntryType, int]:
        counts = Counter(e.type for e in self.entries_this_week())
        return {entry_type: counts[entry_type] for entry_type in EntryType}

    def filtered_entries(self, entry_type: Optional[EntryType] = None) -> list[JournalEntry]:
        """Entries of a type (or all), newest first."""
        entries = self._entries if entry_type is None else self.entries_for_type(entry_type)
        return sorted(entries, key=lambda e: local_timestamp(e.date), reverse=True)

    def recent_entries(self, limit: int = 3) -> list[JournalEntry]:
        """The ``limit`` newest entries."""
        return self.filtered_entries()[:max(limit, 0)]

    # ==================== Analytics ====================

    def _entry_days(self) -> set[date]:
        return {local_day(e.date) for e in self._entries}

    def current_streak(self) -> int:
        """Consecutive days, ending today, that have at least one entry."""
        return streak_ending(self._entry_days(), self.today())

    def longest_streak(self) -> int:
        """Longest run of consecutive entry days in the whole history."""
        return longest_run(self._entry_days())

    def entry_breakdown(self) -> dict[EntryType, Breakdown]:
        """Count and share of each entry type."""
        total = len(self._entries)
        counts = Counter(e.type for e in self._entries)
        return {
            entry_type: Breakdown(
                count=counts[entry_type],
                percentage=counts[entry_type] / total if total else 0.0,
            )
            for entry_type in EntryType
        }

    def best_weekday(self) -> str:
        """Weekday label with the most entries, or ``N/A`` without entries.

        Ties go to the earliest weekday, Sunday first.
        """
        counts = Counter(weekday_index(local_day(e.date)) for e in self._entries)
        if not counts:
            return NO_BEST_DAY
        best = max(sorted(counts), key=lambda index: counts[index])
        return WEEKDAY_LABELS[best - 1]
