"""Result models returned by journal analytics queries."""

from datetime import date as date_type

from pydantic import BaseModel, Field

from winsandlosses.models.entry import JournalEntry


class Breakdown(BaseModel):
    """Count of one entry type and its share of all entries."""

    count: int = Field(..., ge=0, description="Entries of this type")
    percentage: float = Field(..., ge=0, le=1, description="Fraction of all entries")

    model_config = {"frozen": True}


class DayActivity(BaseModel):
    """Entries logged on one calendar day."""

    day: date_type = Field(..., description="Calendar day")
    entries: tuple[JournalEntry, ...] = Field(default=(), description="Entries on that day")

    model_config = {"frozen": True}

    @property
    def count(self) -> int:
        return len(self.entries)
