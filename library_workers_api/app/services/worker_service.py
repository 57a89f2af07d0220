"""
Business logic for service workers.

Both worker shapes are stored in the same collection, so listing all
workers returns short and detailed documents side by side.  The
category lookup filters on ``workName``, which only detailed workers
carry.

Listing all workers treats an empty collection as a normal, empty
result, while the category lookup returns an empty list that the
endpoint reports as 404.  Clients rely on that difference.
"""

import logging
from typing import Any, Dict, List

from ..core.config import settings
from ..core.db import StoreHandle, serialize_document
from ..core.errors import StoreError
from ..schemas.worker import WorkerCreate, WorkerDetailedCreate

logger = logging.getLogger(__name__)


class WorkerService:
    """Operations on the workers collection."""

    @classmethod
    async def list_workers(cls, store: StoreHandle) -> List[Dict[str, Any]]:
        """Return every worker document, short and detailed alike."""
        try:
            documents = await store.workers.find({}, deadline=settings.scan_timeout_seconds)
        except StoreError as exc:
            raise StoreError("Could not fetch workers") from exc
        return [serialize_document(doc) for doc in documents]

    @classmethod
    async def add_worker(cls, store: StoreHandle, data: WorkerCreate) -> str:
        """Insert a worker in its short form."""
        try:
            inserted_id = await store.workers.insert_one(
                data.to_document(), deadline=settings.write_timeout_seconds
            )
        except StoreError as exc:
            raise StoreError("Could not insert worker") from exc
        logger.info("Created worker %s", inserted_id)
        return str(inserted_id)

    @classmethod
    async def list_workers_by_work_name(cls, store: StoreHandle, work_name: str) -> List[Dict[str, Any]]:
        """Return the workers whose ``workName`` equals ``work_name``."""
        try:
            documents = await store.workers.find(
                {"workName": work_name}, deadline=settings.query_timeout_seconds
            )
        except StoreError as exc:
            raise StoreError("Error fetching workers") from exc
        return [serialize_document(doc) for doc in documents]

    @classmethod
    async def add_worker_to_list(cls, store: StoreHandle, data: WorkerDetailedCreate) -> str:
        """Insert a detailed worker and return its identifier."""
        try:
            inserted_id = await store.workers.insert_one(
                data.to_document(), deadline=settings.write_timeout_seconds
            )
        except StoreError as exc:
            raise StoreError("Could not insert worker") from exc
        logger.info("Added worker %s to the %s list", inserted_id, data.work_name)
        return str(inserted_id)
