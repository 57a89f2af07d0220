from unittest.mock import AsyncMock, Mock

import pytest
from pymongo.errors import WriteConcernError

from library_workers_api.app.core.db import StoreHandle
from library_workers_api.app.core.errors import StoreError
from library_workers_api.app.schemas.book import BookCreate
from library_workers_api.app.schemas.worker import WorkerCreate, WorkerDetailedCreate
from library_workers_api.app.services.book_service import BookService
from library_workers_api.app.services.worker_service import WorkerService


@pytest.mark.asyncio
async def test_create_book_returns_string_id(store, books):
    book_id = await BookService.create_book(store, BookCreate(isbn="1", title="T", author="A"))
    assert book_id == str(books.documents[0]["_id"])


@pytest.mark.asyncio
async def test_delete_books_counts_matches(store):
    for _ in range(2):
        await BookService.create_book(store, BookCreate(isbn="dup", title="T", author="A"))

    assert await BookService.delete_books(store, "dup") == 2
    assert await BookService.delete_books(store, "dup") == 0
    assert await BookService.list_books(store) == []


@pytest.mark.asyncio
async def test_filter_returns_only_matching_category(store, detailed_worker):
    await WorkerService.add_worker_to_list(store, WorkerDetailedCreate.model_validate(detailed_worker))
    await WorkerService.add_worker(store, WorkerCreate(img_url="y", name_of_worker="Ann"))

    matches = await WorkerService.list_workers_by_work_name(store, "plumbing")
    assert [doc["name"] for doc in matches] == ["Jo"]
    assert isinstance(matches[0]["_id"], str)
    assert await WorkerService.list_workers_by_work_name(store, "gardening") == []
    assert len(await WorkerService.list_workers(store)) == 2


@pytest.mark.asyncio
async def test_store_error_carries_operation_message():
    collection = Mock()
    collection.insert_one = AsyncMock(side_effect=WriteConcernError("waiting for replication timed out"))
    store = StoreHandle(database={"Workers": collection})

    with pytest.raises(StoreError) as excinfo:
        await WorkerService.add_worker(store, WorkerCreate(img_url="y", name_of_worker="Ann"))
    assert excinfo.value.message == "Could not insert worker"
    assert excinfo.value.status_code == 500
