"""Tests for the data models.

**Feature: wins-and-losses**
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from winsandlosses.models import (
    ENTRY_TYPE_DISPLAY,
    EntryType,
    JournalEntry,
    Profile,
    display_for,
)


class TestEntryType:
    """EntryType values and parsing."""

    def test_exactly_three_variants(self):
        assert [t.value for t in EntryType] == ["Wins", "Losses", "OFGs"]

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("win", EntryType.WIN),
            ("WIN", EntryType.WIN),
            ("Wins", EntryType.WIN),
            (" loss ", EntryType.LOSS),
            ("losses", EntryType.LOSS),
            ("ofg", EntryType.OFG),
            ("OFGs", EntryType.OFG),
        ],
    )
    def test_parse(self, raw: str, expected: EntryType):
        assert EntryType.parse(raw) is expected

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            EntryType.parse("draw")


class TestDisplayMetadata:
    """Display metadata is a lookup table, one row per type."""

    def test_every_type_has_display(self):
        assert set(ENTRY_TYPE_DISPLAY) == set(EntryType)

    def test_win_display(self):
        display = display_for(EntryType.WIN)
        assert display.icon == "trophy.fill"
        assert display.color == "green"
        assert display.subtitle == "Things that went well"

    def test_table_is_read_only(self):
        with pytest.raises(TypeError):
            ENTRY_TYPE_DISPLAY[EntryType.WIN] = display_for(EntryType.LOSS)


class TestJournalEntry:
    """Entries are immutable and get fresh ids."""

    def test_defaults(self):
        before = datetime.now()
        entry = JournalEntry(type=EntryType.WIN, content="Ran 5k")
        after = datetime.now()

        assert before <= entry.date <= after
        assert entry.content == "Ran 5k"

    def test_ids_are_unique(self):
        ids = {JournalEntry(type=EntryType.OFG, content="x").id for _ in range(100)}
        assert len(ids) == 100

    def test_frozen(self):
        entry = JournalEntry(type=EntryType.LOSS, content="Missed the bus")
        with pytest.raises(ValidationError):
            entry.content = "Caught the bus"

    def test_content_not_validated(self):
        entry = JournalEntry(type=EntryType.WIN, content="")
        assert entry.content == ""


class TestProfile:
    def test_defaults(self):
        profile = Profile(name="Alex")
        assert profile.emoji == "🙂"
        assert profile.pin is None

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            Profile(name="")
