"""Key-value storage backends and the entry bucket codec."""

from winsandlosses.storage.base import KeyValueStore
from winsandlosses.storage.memory import MemoryStore
from winsandlosses.storage.sqlite import SQLiteStore
from winsandlosses.storage.codec import (
    SCHEMA_VERSION,
    JournalBucket,
    bucket_key,
    decode_bucket,
    encode_bucket,
)

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "SQLiteStore",
    "SCHEMA_VERSION",
    "JournalBucket",
    "bucket_key",
    "decode_bucket",
    "encode_bucket",
]
