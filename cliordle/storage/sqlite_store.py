"""
SQLite Store

Local file-backed key-value store. Every bucket/key pair is one row of a
single table; each write runs in its own transaction.
"""

import sqlite3
from typing import Optional

from ..exceptions import StorageError
from .base import KeyValueStore

_SCHEMA = '''
    CREATE TABLE IF NOT EXISTS kv_store (
        bucket TEXT NOT NULL,
        key TEXT NOT NULL,
        value BLOB NOT NULL,
        PRIMARY KEY (bucket, key)
    )
'''


class SqliteStore(KeyValueStore):

    def __init__(self, db_path: str):
        """
        Open (creating if needed) the database file.

        Args:
            db_path: Path of the SQLite file, or ":memory:"

        Raises:
            StorageError: If the database cannot be opened or initialized
        """
        self.db_path = db_path
        try:
            self.conn = sqlite3.connect(db_path)
            with self.conn:
                self.conn.execute(_SCHEMA)
        except sqlite3.Error as e:
            raise StorageError(f"could not open db {db_path}: {e}") from e

    def get(self, bucket: str, key: str) -> Optional[bytes]:
        try:
            row = self.conn.execute(
                'SELECT value FROM kv_store WHERE bucket = ? AND key = ?', (bucket, key)
            ).fetchone()
        except sqlite3.Error as e:
            raise StorageError(f"could not read {bucket}/{key}: {e}") from e
        return bytes(row[0]) if row else None

    def put(self, bucket: str, key: str, value: bytes) -> None:
        try:
            # The connection context manager commits, or rolls back on error
            with self.conn:
                self.conn.execute(
                    'INSERT OR REPLACE INTO kv_store (bucket, key, value) VALUES (?, ?, ?)',
                    (bucket, key, sqlite3.Binary(value))
                )
        except sqlite3.Error as e:
            raise StorageError(f"could not set {bucket}/{key}: {e}") from e

    def close(self) -> None:
        self.conn.close()
