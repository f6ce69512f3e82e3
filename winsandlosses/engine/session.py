"""Explicit session context handed to the journal engine."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class SessionContext(BaseModel):
    """Which profile the engine is operating on.

    A context without a profile id means entries are kept in memory only.
    """

    profile_id: Optional[UUID] = Field(default=None, description="Active profile id")

    model_config = {"frozen": True}
