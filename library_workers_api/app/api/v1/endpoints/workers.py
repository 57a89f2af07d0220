"""
Worker endpoints for API v1.

``GET /workers`` lists every worker and succeeds with an empty array
when there are none.  ``GET /workers/{work_name}`` filters by work
category and answers 404 when nothing matches.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from library_workers_api.app.core.db import StoreHandle, get_store
from library_workers_api.app.core.errors import NotFoundError
from library_workers_api.app.schemas.common import CreatedResponse, MessageResponse
from library_workers_api.app.schemas.worker import WorkerCreate, WorkerDetailedCreate
from library_workers_api.app.services.worker_service import WorkerService

router = APIRouter()


@router.get("/workers", response_model=List[Dict[str, Any]])
async def list_workers(store: StoreHandle = Depends(get_store)) -> List[Dict[str, Any]]:
    """Return all workers."""
    return await WorkerService.list_workers(store)


@router.post("/addWorker", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def add_worker(
    worker: WorkerCreate,
    store: StoreHandle = Depends(get_store),
) -> MessageResponse:
    """Add a worker in its short form (picture and name)."""
    await WorkerService.add_worker(store, worker)
    return MessageResponse(message="Worker created successfully!")


@router.get("/workers/{work_name}", response_model=List[Dict[str, Any]])
async def list_workers_by_work_name(
    work_name: str,
    store: StoreHandle = Depends(get_store),
) -> List[Dict[str, Any]]:
    """Return the workers offering the given kind of work.

    Returns HTTP 404 if no worker matches.
    """
    workers = await WorkerService.list_workers_by_work_name(store, work_name)
    if not workers:
        raise NotFoundError("No workers found")
    return workers


@router.post("/addWorkerToList", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def add_worker_to_list(
    worker: WorkerDetailedCreate,
    store: StoreHandle = Depends(get_store),
) -> CreatedResponse:
    """Add a worker with category, location and hourly rate."""
    worker_id = await WorkerService.add_worker_to_list(store, worker)
    return CreatedResponse(message="Worker added successfully!", id=worker_id)
