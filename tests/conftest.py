"""
Test configuration and fixtures for pytest.

The MongoDB store is replaced by an in-memory collection implementing the
subset of the motor API used by the repositories.
"""
import copy
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

from app.config import Settings
from app.database import Database
from app.main import create_app


class FakeCursor:
    """Cursor returned by FakeCollection.find."""

    def __init__(self, documents, error=None):
        self._documents = documents
        self._error = error

    async def to_list(self, length=None):
        if self._error:
            raise self._error
        if length is None:
            return self._documents
        return self._documents[:length]


class FakeCollection:
    """In-memory stand-in for AsyncIOMotorCollection. Keeps insertion order."""

    def __init__(self, name="employees"):
        self.name = name
        self.documents = []
        self.calls = []

    @staticmethod
    def _matches(document, filter_query):
        return all(document.get(key) == value for key, value in (filter_query or {}).items())

    def _find_index(self, filter_query):
        for index, document in enumerate(self.documents):
            if self._matches(document, filter_query):
                return index
        return None

    async def insert_one(self, document):
        self.calls.append("insert_one")
        document.setdefault("_id", ObjectId())
        self.documents.append(copy.deepcopy(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, filter_query=None):
        self.calls.append("find")
        matches = [copy.deepcopy(d) for d in self.documents if self._matches(d, filter_query)]
        return FakeCursor(matches)

    async def find_one(self, filter_query=None):
        self.calls.append("find_one")
        index = self._find_index(filter_query)
        return None if index is None else copy.deepcopy(self.documents[index])

    async def find_one_and_update(self, filter_query, update, return_document=ReturnDocument.BEFORE):
        self.calls.append("find_one_and_update")
        index = self._find_index(filter_query)
        if index is None:
            return None
        before = copy.deepcopy(self.documents[index])
        self.documents[index].update(copy.deepcopy(update.get("$set", {})))
        after = copy.deepcopy(self.documents[index])
        return after if return_document == ReturnDocument.AFTER else before

    async def find_one_and_delete(self, filter_query):
        self.calls.append("find_one_and_delete")
        index = self._find_index(filter_query)
        if index is None:
            return None
        return self.documents.pop(index)


class FailingCollection:
    """Collection whose every operation raises the given driver error."""

    def __init__(self, error, name="employees"):
        self.name = name
        self.error = error

    async def insert_one(self, document):
        raise self.error

    def find(self, filter_query=None):
        return FakeCursor([], error=self.error)

    async def find_one(self, filter_query=None):
        raise self.error

    async def find_one_and_update(self, filter_query, update, return_document=None):
        raise self.error

    async def find_one_and_delete(self, filter_query):
        raise self.error


class FakeDatabase:
    """Dict-like database handle creating collections on first access."""

    def __init__(self, collection_factory=FakeCollection):
        self.name = "employee_records_test"
        self._factory = collection_factory
        self._collections = {}

    def __getitem__(self, name):
        if name not in self._collections:
            self._collections[name] = self._factory(name)
        return self._collections[name]


@pytest.fixture
def employee_payload():
    return {"name": "Jane Doe", "location": "NYC", "position": "Engineer", "salary": 90000}


@pytest.fixture
def settings(tmp_path):
    """Settings without a database URI and with bundle dirs under tmp_path."""
    return Settings(
        MONGO_URI=None,
        STATIC_DIRS=[str(tmp_path / "client" / "build"), str(tmp_path / "dist" / "FrontEnd")],
        LOG_LEVEL="WARNING",
    )


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def employees_collection(fake_db):
    return fake_db["employees"]


@pytest.fixture
def client(settings, fake_db):
    """API client backed by the in-memory store."""
    app = create_app(settings=settings, database=Database.from_handle(fake_db))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def offline_client(settings, fake_db):
    """API client whose store is never connected.

    The fake handle is attached so tests can assert it is never touched.
    """
    database = Database()
    database.db = fake_db
    app = create_app(settings=settings, database=database)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def failing_client(settings):
    """Factory for API clients whose store raises the given driver error."""
    def factory(error):
        database = Database.from_handle(FakeDatabase(lambda name: FailingCollection(error, name)))
        return TestClient(create_app(settings=settings, database=database))
    return factory
