"""
Persistent Key-Value Storage

Opaque string storage used for stats, settings and daily records.
Backends: in-memory, a JSON file on disk, or a MongoDB collection.
"""

import json
import logging
import os
from typing import Dict, Optional

from pymongo.errors import PyMongoError
from pymongo.mongo_client import MongoClient
from pymongo.server_api import ServerApi

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when a backend cannot read or write a value."""


class KeyValueStore:
    """Interface for string storage keyed by fixed string keys."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Process-local store; contents vanish with the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self.data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk.

    The file is re-read on every get and rewritten on every set.
    """

    def __init__(self, path: str):
        self.path = path

    def _read_all(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise StorageError(f"Failed to read store file {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise StorageError(f"Store file {self.path} does not contain a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except StorageError as e:
            logger.warning("Overwriting unreadable store file: %s", e)
            data = {}
        data[key] = value

        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, ensure_ascii=False, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise StorageError(f"Failed to write store file {self.path}: {e}") from e


class MongoStore(KeyValueStore):
    """
    Store backed by a MongoDB collection of {_id: key, value: string} documents.

    Args:
        mongo_uri: MongoDB connection string
        db_name: Database name
        collection_name: Collection holding the key-value documents
        collection: Pre-built collection object; skips connecting when given
    """

    def __init__(self, mongo_uri: Optional[str] = None, db_name: str = 'wordgame',
                 collection_name: str = 'kv_store', collection=None):
        self.client = None
        if collection is None:
            if not mongo_uri:
                raise ValueError("MONGO_URI is required for the mongo store backend")
            self.client = MongoClient(mongo_uri, server_api=ServerApi('1'))
            collection = self.client[db_name][collection_name]
        self.collection = collection

    def get(self, key: str) -> Optional[str]:
        try:
            document = self.collection.find_one({'_id': key})
        except PyMongoError as e:
            raise StorageError(f"Failed to read key {key!r}: {e}") from e
        if not document:
            return None
        value = document.get('value')
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            self.collection.replace_one({'_id': key}, {'_id': key, 'value': value}, upsert=True)
        except PyMongoError as e:
            raise StorageError(f"Failed to write key {key!r}: {e}") from e

    def close_connection(self):
        """Close the MongoDB connection."""
        if self.client:
            self.client.close()


def create_store(config) -> KeyValueStore:
    """Build the store selected by config.STORE_BACKEND."""
    backend = getattr(config, 'STORE_BACKEND', 'json')
    if backend == 'memory':
        return MemoryStore()
    if backend == 'json':
        return JsonFileStore(config.STORE_PATH)
    if backend == 'mongo':
        return MongoStore(config.MONGO_URI, config.MONGO_DB, config.MONGO_COLLECTION)
    raise ValueError(f"Unknown store backend: {backend}")
