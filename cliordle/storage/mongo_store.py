"""
MongoDB Store

Key-value store on a MongoDB database: one collection per bucket, one
document per key. ``replace_one`` with upsert is atomic for a single
document, which is all the player profile needs.
"""

from typing import Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

from ..exceptions import SerializationError, StorageError
from .base import KeyValueStore


class MongoStore(KeyValueStore):

    def __init__(self, database, client: Optional[MongoClient] = None):
        """
        Args:
            database: A pymongo Database (anything indexable by collection name)
            client: Owning client, closed by ``close``
        """
        self.db = database
        self.client = client

    @classmethod
    def from_uri(cls, mongo_uri: str, db_name: str) -> "MongoStore":
        """
        Connect to MongoDB and verify the connection with a ping.

        Raises:
            StorageError: If the server cannot be reached
        """
        try:
            client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            client.admin.command('ping')
        except PyMongoError as e:
            raise StorageError(f"could not connect to MongoDB: {e}") from e
        return cls(client[db_name], client=client)

    def get(self, bucket: str, key: str) -> Optional[bytes]:
        try:
            doc = self.db[bucket].find_one({"_id": key})
        except PyMongoError as e:
            raise StorageError(f"could not read {bucket}/{key}: {e}") from e
        if doc is None:
            return None
        value = doc.get("value")
        if not isinstance(value, (bytes, bytearray)):
            raise SerializationError(f"document {bucket}/{key} has no binary 'value' field")
        return bytes(value)

    def put(self, bucket: str, key: str, value: bytes) -> None:
        try:
            self.db[bucket].replace_one(
                {"_id": key},
                {"_id": key, "value": bytes(value)},
                upsert=True
            )
        except PyMongoError as e:
            raise StorageError(f"could not set {bucket}/{key}: {e}") from e

    def close(self) -> None:
        if self.client:
            self.client.close()
