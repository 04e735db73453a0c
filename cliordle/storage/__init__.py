"""
Storage Package

Key-value store backends behind a single interface, plus a factory that
picks one from configuration.
"""

from ..exceptions import StorageError
from .base import KeyValueStore
from .memory_store import MemoryStore
from .sqlite_store import SqliteStore

__all__ = ['KeyValueStore', 'MemoryStore', 'SqliteStore', 'create_store']


def create_store(config_class) -> KeyValueStore:
    """
    Build the store selected by ``config_class.STORAGE_BACKEND``.

    Args:
        config_class: Configuration class (see ``cliordle.config.app_config``)

    Raises:
        StorageError: If the backend is unknown, misconfigured or cannot be opened
    """
    backend = (config_class.STORAGE_BACKEND or '').lower()

    if backend == 'sqlite':
        return SqliteStore(config_class.DB_PATH)

    if backend == 'mongo':
        if not config_class.MONGO_URI:
            raise StorageError("MONGO_URI must be set to use the mongo storage backend")
        from .mongo_store import MongoStore
        return MongoStore.from_uri(config_class.MONGO_URI, config_class.MONGO_DB)

    if backend == 'memory':
        return MemoryStore()

    raise StorageError(f"Unknown storage backend '{backend}'. Must be sqlite, mongo or memory")
