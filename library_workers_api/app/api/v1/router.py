"""
Top-level router for version 1 of the API.

The worker routes keep the paths existing clients call
(``/workers``, ``/addWorker``, ``/addWorkerToList``), so the worker
router is included without a prefix and declares full paths itself.
"""

from fastapi import APIRouter

from .endpoints import books, workers

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(workers.router, tags=["workers"])
