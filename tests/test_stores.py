"""Property-based tests for the key-value stores.

**Feature: wins-and-losses**
"""

import tempfile
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from winsandlosses.storage import MemoryStore, SQLiteStore


@pytest.fixture(params=["memory", "sqlite"])
def kv_store(request, tmp_path):
    if request.param == "memory":
        return MemoryStore()
    return SQLiteStore(tmp_path / "kv" / "test.db")


class TestStoreContract:
    """Both stores honour get/set/remove with whole-value overwrite."""

    def test_missing_key(self, kv_store):
        assert kv_store.get("absent") is None

    def test_set_get(self, kv_store):
        kv_store.set("k", b"value")
        assert kv_store.get("k") == b"value"

    def test_overwrite(self, kv_store):
        kv_store.set("k", b"first")
        kv_store.set("k", b"second")
        assert kv_store.get("k") == b"second"

    def test_remove(self, kv_store):
        kv_store.set("k", b"value")
        kv_store.remove("k")
        assert kv_store.get("k") is None

    def test_remove_absent_is_noop(self, kv_store):
        kv_store.remove("absent")
        assert kv_store.keys() == []

    def test_keys_sorted(self, kv_store):
        kv_store.set("b", b"2")
        kv_store.set("a", b"1")
        assert kv_store.keys() == ["a", "b"]


class TestSQLiteStore:
    """
    *For any* blob written to a SQLite store, a fresh store on the same
    file reads it back unchanged.
    """

    def test_fresh_database_accepts_writes(self, tmp_path):
        db_path = tmp_path / "nested" / "test.db"
        store = SQLiteStore(db_path)

        store.set("journalEntries_x", b"blob")

        assert db_path.exists()
        assert store.get("journalEntries_x") == b"blob"
        assert store.keys() == ["journalEntries_x"]

    @given(
        key=st.text(
            alphabet=st.characters(blacklist_categories=("Cs", "Cc")),
            min_size=1,
            max_size=40,
        ),
        value=st.binary(max_size=512),
    )
    @settings(max_examples=50)
    def test_persists_across_instances(self, key: str, value: bytes):
        with tempfile.TemporaryDirectory() as tmpdir:
            db_path = Path(tmpdir) / "test.db"
            SQLiteStore(db_path).set(key, value)

            assert SQLiteStore(db_path).get(key) == value
