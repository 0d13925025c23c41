import asyncio
import uuid

import mongomock
import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from config import Settings


class FakeCollection:
    """Async facade over a mongomock collection (only what the seeders call)."""

    def __init__(self, collection, index_error=None):
        self._collection = collection
        self._index_error = index_error

    async def insert_one(self, document):
        await asyncio.sleep(0)  # let sibling inserts interleave like real I/O
        return self._collection.insert_one(document)

    async def create_index(self, keys, **kwargs):
        if self._index_error is not None:
            raise self._index_error
        return self._collection.create_index(keys, **kwargs)


class FakeDatabase:
    def __init__(self, database, index_error=None):
        self._database = database
        self._index_error = index_error
        self.name = database.name

    def __getitem__(self, name):
        return FakeCollection(self._database[name], self._index_error)


class FakeAdmin:
    def __init__(self, client):
        self._client = client

    async def command(self, name):
        if self._client.unreachable:
            raise ServerSelectionTimeoutError("fake: no servers available")
        return {"ok": 1.0}


class FakeMongoClient:
    def __init__(self, backend, uri, unreachable=False, index_error=None, **kwargs):
        self._backend = backend
        self.uri = uri
        self.kwargs = kwargs
        self.unreachable = unreachable
        self.index_error = index_error
        self.closed = False
        self.admin = FakeAdmin(self)

    def __getitem__(self, name):
        return FakeDatabase(self._backend[name], self.index_error)

    def get_default_database(self, default=None):
        return self[default]

    async def close(self):
        self.closed = True


@pytest.fixture
def mongo():
    return mongomock.MongoClient()


@pytest.fixture
def settings():
    return Settings(mongodb_uri="mongodb://fake:27017", database_name=f"seed_{uuid.uuid4().hex[:8]}")


@pytest.fixture
def db(mongo, settings):
    """Synchronous view of the seeded database for assertions."""
    return mongo[settings.database_name]


@pytest.fixture
def async_db(mongo, settings):
    return FakeDatabase(mongo[settings.database_name])


@pytest.fixture
def client_factory(mongo):
    created = []

    def factory(uri, **kwargs):
        client = FakeMongoClient(mongo, uri, **kwargs)
        created.append(client)
        return client

    factory.created = created
    return factory


@pytest.fixture
def unreachable_factory(mongo):
    created = []

    def factory(uri, **kwargs):
        client = FakeMongoClient(mongo, uri, unreachable=True, **kwargs)
        created.append(client)
        return client

    factory.created = created
    return factory


@pytest.fixture
def index_denied_factory(mongo):
    created = []

    def factory(uri, **kwargs):
        error = OperationFailure("not authorized to create index", code=13)
        client = FakeMongoClient(mongo, uri, index_error=error, **kwargs)
        created.append(client)
        return client

    factory.created = created
    return factory
