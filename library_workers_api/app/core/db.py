"""
MongoDB integration.

This module owns the process-wide store handle.  ``connect_store``
creates a motor client, verifies that the server answers a ``ping``
and returns an immutable ``StoreHandle``; the application lifespan
calls it once at startup and closes the handle at shutdown.  Route
handlers obtain the handle through the ``get_store`` dependency and
pass it explicitly to the service layer.

Every collection call goes through ``StoreCollection``, which bounds
the call with a deadline and turns driver failures (including deadline
expiry) into ``StoreError``.  There are no retries: a failed call is
reported once and the caller decides how to surface it.
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Dict, List, Mapping, Optional

from bson.errors import InvalidDocument
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from .config import Settings, settings
from .errors import StoreError, StoreUnavailableError

logger = logging.getLogger(__name__)


class StoreCollection:
    """Deadline-bounded access to a single MongoDB collection."""

    def __init__(self, collection: Any, name: Optional[str] = None) -> None:
        self._collection = collection
        self.name = name or getattr(collection, "name", "<collection>")

    async def insert_one(self, document: Mapping[str, Any], *, deadline: float) -> Any:
        """Insert one document and return the identifier assigned by the store."""
        result = await self._bounded("insert_one", self._collection.insert_one(document), deadline)
        return result.inserted_id

    async def find(self, filter: Mapping[str, Any], *, deadline: float) -> List[Dict[str, Any]]:
        """Return every document matching ``filter`` in natural order."""

        async def materialize() -> List[Dict[str, Any]]:
            cursor = self._collection.find(filter)
            try:
                return await cursor.to_list(length=None)
            finally:
                await cursor.close()

        return await self._bounded("find", materialize(), deadline)

    async def delete_many(self, filter: Mapping[str, Any], *, deadline: float) -> int:
        """Delete every document matching ``filter`` and return how many were removed."""
        result = await self._bounded("delete_many", self._collection.delete_many(filter), deadline)
        return result.deleted_count

    async def _bounded(self, action: str, awaitable: Awaitable[Any], deadline: float) -> Any:
        try:
            return await asyncio.wait_for(awaitable, timeout=deadline)
        except asyncio.TimeoutError as exc:
            logger.exception("%s on %s exceeded the %.1fs deadline", action, self.name, deadline)
            raise StoreError() from exc
        except PyMongoError as exc:
            logger.exception("%s on %s failed", action, self.name)
            raise StoreError() from exc
        except (InvalidDocument, OverflowError) as exc:
            logger.exception("%s on %s could not encode the document", action, self.name)
            raise StoreError() from exc


@dataclass(frozen=True)
class StoreHandle:
    """Live connection to the document database.

    Constructed once at startup and never reassigned.  ``client`` is
    optional so tests can build a handle around a stand-in database.
    """

    database: Any
    client: Any = None
    books_collection: str = "AssignBook"
    workers_collection: str = "Workers"
    users_collection: str = "Users"

    def collection(self, name: str) -> StoreCollection:
        return StoreCollection(self.database[name], name)

    @property
    def books(self) -> StoreCollection:
        return self.collection(self.books_collection)

    @property
    def workers(self) -> StoreCollection:
        return self.collection(self.workers_collection)

    @property
    def users(self) -> StoreCollection:
        return self.collection(self.users_collection)

    async def ping(self, timeout: float) -> None:
        await asyncio.wait_for(self.database.command("ping"), timeout=timeout)

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


async def connect_store(config: Settings = settings) -> StoreHandle:
    """Connect to MongoDB and return a verified ``StoreHandle``.

    Raises ``StoreUnavailableError`` when ``MONGODB_URI`` is missing or
    the server does not answer within ``connect_timeout_seconds``.
    Callers treat this as fatal.
    """
    if not config.mongodb_uri:
        raise StoreUnavailableError("MONGODB_URI is not set")

    timeout_ms = int(config.connect_timeout_seconds * 1000)
    try:
        client = AsyncIOMotorClient(config.mongodb_uri, serverSelectionTimeoutMS=timeout_ms)
    except PyMongoError as exc:
        raise StoreUnavailableError(f"Invalid MongoDB configuration: {exc}") from exc

    store = StoreHandle(
        database=client[config.database_name],
        client=client,
        books_collection=config.books_collection,
        workers_collection=config.workers_collection,
        users_collection=config.users_collection,
    )
    try:
        await store.ping(config.connect_timeout_seconds)
    except (PyMongoError, asyncio.TimeoutError) as exc:
        store.close()
        raise StoreUnavailableError(f"Could not connect to MongoDB: {exc}") from exc

    logger.info("Connected to MongoDB (database %s)", config.database_name)
    return store


def get_store(request: Request) -> StoreHandle:
    """FastAPI dependency returning the handle created at startup."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        logger.error("Request received before the store was initialised")
        raise StoreError("Store is not available")
    return store


def serialize_document(document: Mapping[str, Any]) -> Dict[str, Any]:
    """Return a JSON-friendly copy of a stored document.

    The store assigns ``_id`` as an ``ObjectId``; it is rendered as its
    hexadecimal string.
    """
    data = dict(document)
    if "_id" in data:
        data["_id"] = str(data["_id"])
    return data
