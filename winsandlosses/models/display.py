"""Display metadata for entry types.

Kept apart from EntryType so the data model carries no presentation data.
"""

from types import MappingProxyType

from pydantic import BaseModel, Field

from winsandlosses.models.entry import EntryType


class EntryTypeDisplay(BaseModel):
    """Icon, color and subtitle shown for an entry type."""

    icon: str = Field(..., description="Icon identifier")
    color: str = Field(..., description="Color name")
    subtitle: str = Field(..., description="Short description of the tag")

    model_config = {"frozen": True}


ENTRY_TYPE_DISPLAY = MappingProxyType({
    EntryType.WIN: EntryTypeDisplay(
        icon="trophy.fill",
        color="green",
        subtitle="Things that went well",
    ),
    EntryType.LOSS: EntryTypeDisplay(
        icon="cloud.rain.fill",
        color="orange",
        subtitle="Things out of control",
    ),
    EntryType.OFG: EntryTypeDisplay(
        icon="light.beacon.max.fill",
        color="blue",
        subtitle="Opportunities for growth",
    ),
})


def display_for(entry_type: EntryType) -> EntryTypeDisplay:
    """Look up display metadata for an entry type."""
    return ENTRY_TYPE_DISPLAY[entry_type]
