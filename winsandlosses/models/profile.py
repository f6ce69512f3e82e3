"""Profile data model."""

from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, Field


class Profile(BaseModel):
    """A named local identity owning one entry bucket.

    The PIN is compared as plain text and only gates the demo lock screen.
    """

    id: UUID = Field(default_factory=uuid4, description="Profile id")
    name: str = Field(..., min_length=1, description="Display name")
    emoji: str = Field(default="🙂", description="Avatar emoji")
    pin: Optional[str] = Field(default=None, description="Optional plaintext PIN")

    model_config = {"frozen": True}
