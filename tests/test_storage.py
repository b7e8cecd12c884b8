"""
Testing the key-value store backends.
"""

import pytest
from pymongo.errors import PyMongoError

from wordgame.config import TestingConfig
from wordgame.services.storage import (
    JsonFileStore, MemoryStore, MongoStore, StorageError, create_store
)


class FakeCollection:
    """Just enough of a pymongo collection for MongoStore."""

    def __init__(self, fail=False):
        self.documents = {}
        self.fail = fail

    def find_one(self, query):
        if self.fail:
            raise PyMongoError("connection refused")
        return self.documents.get(query['_id'])

    def replace_one(self, query, document, upsert=False):
        if self.fail:
            raise PyMongoError("connection refused")
        self.documents[query['_id']] = document


def test_memory_store_get_set():
    store = MemoryStore()
    assert store.get("missing") is None
    store.set("key", "value")
    assert store.get("key") == "value"


def test_json_file_store_round_trip(tmp_path):
    path = tmp_path / "store.json"
    store = JsonFileStore(str(path))
    assert store.get("key") is None

    store.set("key", '{"a": 1}')
    store.set("other", "x")

    reopened = JsonFileStore(str(path))
    assert reopened.get("key") == '{"a": 1}'
    assert reopened.get("other") == "x"


def test_json_file_store_corrupt_file(tmp_path):
    path = tmp_path / "store.json"
    path.write_text("{not json", encoding="utf-8")
    store = JsonFileStore(str(path))

    with pytest.raises(StorageError):
        store.get("key")

    store.set("key", "fresh")
    assert store.get("key") == "fresh"


def test_json_file_store_write_failure(tmp_path):
    store = JsonFileStore(str(tmp_path / "missing_dir" / "store.json"))
    with pytest.raises(StorageError):
        store.set("key", "value")


def test_mongo_store_uses_collection():
    collection = FakeCollection()
    store = MongoStore(collection=collection)
    assert store.get("key") is None

    store.set("key", "value")
    store.set("key", "newer")
    assert store.get("key") == "newer"
    assert collection.documents["key"] == {'_id': "key", 'value': "newer"}


def test_mongo_store_wraps_driver_errors():
    store = MongoStore(collection=FakeCollection(fail=True))
    with pytest.raises(StorageError):
        store.get("key")
    with pytest.raises(StorageError):
        store.set("key", "value")


def test_mongo_store_requires_uri():
    with pytest.raises(ValueError):
        MongoStore(mongo_uri=None)


def test_create_store_selects_backend(tmp_path):
    assert isinstance(create_store(TestingConfig), MemoryStore)

    class JsonConfig(TestingConfig):
        STORE_BACKEND = 'json'
        STORE_PATH = str(tmp_path / "store.json")

    assert isinstance(create_store(JsonConfig), JsonFileStore)

    class BadConfig(TestingConfig):
        STORE_BACKEND = 'redis'

    with pytest.raises(ValueError):
        create_store(BadConfig)
