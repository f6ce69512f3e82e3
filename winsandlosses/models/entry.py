"""JournalEntry and EntryType data models."""

from datetime import datetime
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class EntryType(str, Enum):
    """Tag attached to every journal entry."""

    WIN = "Wins"
    LOSS = "Losses"
    OFG = "OFGs"

    @classmethod
    def parse(cls, value: str) -> "EntryType":
        """Parse a short name (win, loss, ofg) or a stored value (Wins, ...).

        Raises:
            ValueError: If the value names no entry type.
        """
        normalized = value.strip().lower()
        for entry_type in cls:
            if normalized in (entry_type.name.lower(), entry_type.value.lower()):
                return entry_type
        raise ValueError(f"Unknown entry type: {value}")


class JournalEntry(BaseModel):
    """A single journaled note tagged as a win, loss or OFG."""

    id: UUID = Field(default_factory=uuid4, description="Unique entry id")
    type: EntryType = Field(..., description="Entry tag")
    content: str = Field(..., description="Entry text")
    date: datetime = Field(default_factory=datetime.now, description="Creation timestamp")

    model_config = {"frozen": True}
