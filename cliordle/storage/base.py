"""
Key-Value Store Interface

The persistence boundary: atomic get/put of opaque byte values under a
(bucket, key) pair.
"""

from abc import ABC, abstractmethod
from typing import Optional


class KeyValueStore(ABC):
    """Abstract key-value store; implementations raise StorageError on failure."""

    @abstractmethod
    def get(self, bucket: str, key: str) -> Optional[bytes]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    def put(self, bucket: str, key: str, value: bytes) -> None:
        """Store the value in a single all-or-nothing write."""

    def close(self) -> None:
        """Release the underlying handle."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
