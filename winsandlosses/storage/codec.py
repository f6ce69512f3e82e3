"""Serialization of entry buckets.

A bucket is the single blob holding one profile's entries. The current
format is versioned JSON::

    {"schema_version": 1, "entries": [{"id": ..., "type": "Wins", ...}]}

The unversioned format written by the original mobile app (a bare array
whose dates are seconds since 2001-01-01 UTC) is read as version 0 and
migrated on load.
"""

import json
from datetime import datetime, timezone
from typing import Iterable, Literal
from uuid import UUID

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from winsandlosses.errors import BucketDecodeError
from winsandlosses.models import JournalEntry

SCHEMA_VERSION = 1
BUCKET_KEY_PREFIX = "journalEntries_"

# Seconds between the Unix epoch and 2001-01-01T00:00:00Z
APPLE_REFERENCE_EPOCH = 978307200

_legacy_adapter = TypeAdapter(list[JournalEntry])


class JournalBucket(BaseModel):
    """Versioned envelope for a profile's entries."""

    schema_version: Literal[1] = Field(default=SCHEMA_VERSION, description="Blob format version")
    entries: list[JournalEntry] = Field(default_factory=list, description="Entries in insertion order")


def bucket_key(profile_id: UUID | str) -> str:
    """Store key of the bucket that belongs to a profile."""
    return f"{BUCKET_KEY_PREFIX}{profile_id}"


def encode_bucket(entries: Iterable[JournalEntry]) -> bytes:
    """Encode entries as a versioned bucket blob.

    Raises:
        ValueError: If the entries cannot be serialized.
    """
    bucket = JournalBucket(entries=list(entries))
    return bucket.model_dump_json().encode("utf-8")


def decode_bucket(blob: bytes) -> list[JournalEntry]:
    """Decode a bucket blob of any supported version.

    Raises:
        BucketDecodeError: If the blob is not a readable bucket.
    """
    try:
        data = json.loads(blob)
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise BucketDecodeError(f"Bucket is not valid JSON: {e}") from e

    try:
        if isinstance(data, list):
            return _legacy_adapter.validate_python([_migrate_legacy_item(item) for item in data])
        if isinstance(data, dict):
            version = data.get("schema_version")
            if version != SCHEMA_VERSION:
                raise BucketDecodeError(f"Unsupported bucket schema version: {version!r}")
            return JournalBucket.model_validate(data).entries
    except ValidationError as e:
        raise BucketDecodeError(f"Bucket failed validation: {e}") from e

    raise BucketDecodeError(f"Unexpected bucket payload: {type(data).__name__}")


def _migrate_legacy_item(item: object) -> object:
    """Convert an Apple reference-date timestamp to a local datetime.

    Raises:
        BucketDecodeError: If the timestamp is NaN or out of range.
    """
    if not isinstance(item, dict):
        return item
    raw_date = item.get("date")
    if isinstance(raw_date, (int, float)) and not isinstance(raw_date, bool):
        try:
            utc = datetime.fromtimestamp(APPLE_REFERENCE_EPOCH + raw_date, tz=timezone.utc)
            local = utc.astimezone().replace(tzinfo=None)
        except (OverflowError, OSError, ValueError) as e:
            raise BucketDecodeError(f"Legacy entry date out of range: {raw_date!r}") from e
        item = {**item, "date": local}
    return item
