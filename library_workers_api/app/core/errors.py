"""
Error types and FastAPI exception handlers.

Services raise subclasses of ``LibraryAPIError``; each carries the HTTP
status it maps to and a short message that is safe to show to clients.
Driver internals never reach the response body: they are logged where
the failure happens and replaced by a fixed message.

Request bodies that cannot be decoded into the target schema (invalid
JSON, a missing field, a field of the wrong type) are reported as
``400 Invalid input`` instead of FastAPI's default 422 response.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class LibraryAPIError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ClientInputError(LibraryAPIError):
    """The request payload is malformed or could not be decoded."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class NotFoundError(LibraryAPIError):
    """A key or filter matched no documents."""

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class StoreError(LibraryAPIError):
    """A store call failed, timed out or could not be completed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Store operation failed"


class StoreUnavailableError(StoreError):
    """The store could not be reached while the application was starting."""

    default_message = "Could not connect to MongoDB"


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("Rejected payload on %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=ClientInputError.status_code,
        content={"detail": ClientInputError.default_message},
    )


async def library_error_handler(request: Request, exc: LibraryAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def register_error_handlers(app: FastAPI) -> None:
    """Attach the exception handlers used by every router."""
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(LibraryAPIError, library_error_handler)
