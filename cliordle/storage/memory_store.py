"""
In-Memory Store

Dict-backed store for tests and throwaway sessions.
"""

from typing import Dict, Optional, Tuple

from .base import KeyValueStore


class MemoryStore(KeyValueStore):

    def __init__(self):
        self.data: Dict[Tuple[str, str], bytes] = {}

    def get(self, bucket: str, key: str) -> Optional[bytes]:
        return self.data.get((bucket, key))

    def put(self, bucket: str, key: str, value: bytes) -> None:
        self.data[(bucket, key)] = bytes(value)
