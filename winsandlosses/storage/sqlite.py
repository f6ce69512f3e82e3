"""SQLite key-value store for Wins & Losses."""

import sqlite3
from pathlib import Path
from typing import Optional

from winsandlosses.errors import StoreError
from winsandlosses.storage.base import KeyValueStore


class SQLiteStore(KeyValueStore):
    """SQLite-based key-value store.

    Every key maps to one row of the ``kv`` table; values are stored
    as BLOBs and always overwritten whole.
    """

    def __init__(self, db_path: Path):
        """Initialize the store.

        Args:
            db_path: Path to the SQLite database file.
        """
        self.db_path = Path(db_path)
        self._ensure_db_dir()
        self._init_schema()

    def _ensure_db_dir(self) -> None:
        """Ensure the database directory exists."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

    def _get_connection(self) -> sqlite3.Connection:
        """Get a database connection."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _init_schema(self) -> None:
        """Initialize database schema on first run."""
        conn = self._get_connection()
        try:
            cursor = conn.cursor()
            cursor.execute("""
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value BLOB NOT NULL
                )
            """)
            conn.commit()
        finally:
            conn.close()

    def get(self, key: str) -> Optional[bytes]:
        try:
            conn = self._get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute("SELECT value FROM kv WHERE key = ?", (key,))
                row = cursor.fetchone()
                return bytes(row["value"]) if row else None
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to read '{key}': {e}") from e

    def set(self, key: str, value: bytes) -> None:
        try:
            conn = self._get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute(
                    "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
                    (key, sqlite3.Binary(value)),
                )
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to write '{key}': {e}") from e

    def remove(self, key: str) -> None:
        try:
            conn = self._get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute("DELETE FROM kv WHERE key = ?", (key,))
                conn.commit()
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to remove '{key}': {e}") from e

    def keys(self) -> list[str]:
        try:
            conn = self._get_connection()
            try:
                cursor = conn.cursor()
                cursor.execute("SELECT key FROM kv ORDER BY key")
                return [row["key"] for row in cursor.fetchall()]
            finally:
                conn.close()
        except sqlite3.Error as e:
            raise StoreError(f"Failed to list keys: {e}") from e
