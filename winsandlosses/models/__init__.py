"""Data models for Wins & Losses."""

from winsandlosses.models.entry import EntryType, JournalEntry
from winsandlosses.models.display import ENTRY_TYPE_DISPLAY, EntryTypeDisplay, display_for
from winsandlosses.models.profile import Profile
from winsandlosses.models.analytics import Breakdown, DayActivity

__all__ = [
    "EntryType",
    "JournalEntry",
    "ENTRY_TYPE_DISPLAY",
    "EntryTypeDisplay",
    "display_for",
    "Profile",
    "Breakdown",
    "DayActivity",
]
