"""Journal engine, calendar helpers and profile management."""

from winsandlosses.engine.dates import WeekPolicy
from winsandlosses.engine.session import SessionContext
from winsandlosses.engine.journal import JournalEngine
from winsandlosses.engine.profiles import ProfileStore, open_journal

__all__ = [
    "WeekPolicy",
    "SessionContext",
    "JournalEngine",
    "ProfileStore",
    "open_journal",
]
