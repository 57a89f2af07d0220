"""
Shared fixtures for the API tests.

``FakeDatabase`` stands in for a motor database.  Its collections keep
documents in a list and expose the subset of the motor collection API
the store handle uses: awaitable ``insert_one`` and ``delete_many``
and a ``find`` that returns a cursor with an awaitable ``to_list``.
Results are real ``pymongo.results`` objects and identifiers are real
``ObjectId`` values.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.results import DeleteResult, InsertOneResult

from library_workers_api.app.core.db import StoreHandle
from library_workers_api.app.main import create_app


def _matches(document: Mapping[str, Any], filter: Mapping[str, Any]) -> bool:
    return all(document.get(key) == value for key, value in filter.items())


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]) -> None:
        self._documents = documents
        self.closed = False

    async def to_list(self, length: Optional[int] = None) -> List[Dict[str, Any]]:
        documents = [dict(doc) for doc in self._documents]
        return documents if length is None else documents[:length]

    async def close(self) -> None:
        self.closed = True


class FakeCollection:
    def __init__(self, name: str) -> None:
        self.name = name
        self.documents: List[Dict[str, Any]] = []

    async def insert_one(self, document: Mapping[str, Any]) -> InsertOneResult:
        stored = dict(document)
        stored.setdefault("_id", ObjectId())
        self.documents.append(stored)
        return InsertOneResult(stored["_id"], acknowledged=True)

    def find(self, filter: Optional[Mapping[str, Any]] = None) -> FakeCursor:
        filter = filter or {}
        return FakeCursor([doc for doc in self.documents if _matches(doc, filter)])

    async def delete_many(self, filter: Mapping[str, Any]) -> DeleteResult:
        kept = [doc for doc in self.documents if not _matches(doc, filter)]
        removed = len(self.documents) - len(kept)
        self.documents = kept
        return DeleteResult({"n": removed, "ok": 1.0}, acknowledged=True)


class FakeDatabase:
    def __init__(self) -> None:
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]

    async def command(self, name: str) -> Dict[str, Any]:
        return {"ok": 1.0}


@pytest.fixture
def database() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def store(database: FakeDatabase) -> StoreHandle:
    return StoreHandle(database=database)


@pytest.fixture
def books(database: FakeDatabase) -> FakeCollection:
    return database["AssignBook"]


@pytest.fixture
def workers(database: FakeDatabase) -> FakeCollection:
    return database["Workers"]


@pytest.fixture
def client(store: StoreHandle):
    app = create_app(store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def detailed_worker() -> Dict[str, Any]:
    return {
        "name": "Jo",
        "workName": "plumbing",
        "imgUrl": "x",
        "coordinatesOfWorker": {"latitude": 1.0, "longitude": 2.0},
        "costPerHour": 50,
    }
