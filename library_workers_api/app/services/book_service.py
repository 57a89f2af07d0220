"""
Business logic for books.

Books live in a single collection.  Creation inserts one document,
listing scans the whole collection and deletion removes every document
whose ``isbn`` matches, returning the number removed.  A count of zero
is a normal result here; the endpoint turns it into a 404.
"""

import logging
from typing import Any, Dict, List

from ..core.config import settings
from ..core.db import StoreHandle, serialize_document
from ..core.errors import StoreError
from ..schemas.book import BookCreate

logger = logging.getLogger(__name__)


class BookService:
    """Create, list and delete book documents."""

    @classmethod
    async def create_book(cls, store: StoreHandle, data: BookCreate) -> str:
        """Insert a book and return the identifier assigned by the store."""
        try:
            inserted_id = await store.books.insert_one(
                data.to_document(), deadline=settings.write_timeout_seconds
            )
        except StoreError as exc:
            raise StoreError("Could not insert book") from exc
        logger.info("Created book %s (isbn %s)", inserted_id, data.isbn)
        return str(inserted_id)

    @classmethod
    async def list_books(cls, store: StoreHandle) -> List[Dict[str, Any]]:
        """Return every book in the store's natural order.

        An empty collection yields an empty list.
        """
        try:
            documents = await store.books.find({}, deadline=settings.scan_timeout_seconds)
        except StoreError as exc:
            raise StoreError("Could not fetch books") from exc
        return [serialize_document(doc) for doc in documents]

    @classmethod
    async def delete_books(cls, store: StoreHandle, isbn: str) -> int:
        """Delete all books with the given ISBN and return how many were removed."""
        try:
            deleted = await store.books.delete_many(
                {"isbn": isbn}, deadline=settings.write_timeout_seconds
            )
        except StoreError as exc:
            raise StoreError("Could not delete book") from exc
        if deleted:
            logger.info("Deleted %d book(s) with isbn %s", deleted, isbn)
        return deleted
