"""Base key-value store interface for Wins & Losses."""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Abstract base class for blob-valued key-value stores.

    All store implementations (in-memory, SQLite, etc.) must inherit
    from this class and implement all abstract methods. Writes always
    replace the whole value stored under a key.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[bytes]:
        """Read the blob stored under a key.

        Args:
            key: Store key.

        Returns:
            The stored blob, or None if the key is absent.

        Raises:
            StoreError: If the underlying storage fails.
        """
        pass

    @abstractmethod
    def set(self, key: str, value: bytes) -> None:
        """Store a blob under a key, replacing any previous value.

        Args:
            key: Store key.
            value: Blob to store.

        Raises:
            StoreError: If the underlying storage fails.
        """
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete a key. Removing an absent key is a no-op.

        Args:
            key: Store key.

        Raises:
            StoreError: If the underlying storage fails.
        """
        pass

    @abstractmethod
    def keys(self) -> list[str]:
        """List all stored keys.

        Returns:
            Sorted list of keys.
        """
        pass
