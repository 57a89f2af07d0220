"""
Book endpoints for API v1.

Create, list and delete books.  There is no update route; a book is
changed by deleting it and creating it again.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from library_workers_api.app.core.db import StoreHandle, get_store
from library_workers_api.app.core.errors import NotFoundError
from library_workers_api.app.schemas.book import BookCreate
from library_workers_api.app.schemas.common import MessageResponse
from library_workers_api.app.services.book_service import BookService

router = APIRouter()


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_book(
    book: BookCreate,
    store: StoreHandle = Depends(get_store),
) -> MessageResponse:
    """Create a new book."""
    await BookService.create_book(store, book)
    return MessageResponse(message="Book created successfully!")


@router.get("", response_model=List[Dict[str, Any]])
async def list_books(store: StoreHandle = Depends(get_store)) -> List[Dict[str, Any]]:
    """Return all books.

    An empty collection returns an empty array with status 200.
    """
    return await BookService.list_books(store)


@router.delete("/{isbn}", response_model=MessageResponse)
async def delete_book(isbn: str, store: StoreHandle = Depends(get_store)) -> MessageResponse:
    """Delete every book with the given ISBN.

    Returns HTTP 404 if no book matched.
    """
    deleted = await BookService.delete_books(store, isbn)
    if not deleted:
        raise NotFoundError("No book found with that ISBN")
    return MessageResponse(message="Book deleted successfully")
