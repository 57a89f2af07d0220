"""
Main entrypoint for the Library Workers API.

``create_app`` builds and configures the FastAPI application; a module
level ``app`` instance is created at import time so it can be served
directly::

    uvicorn library_workers_api.app.main:app

The MongoDB store handle is created in the application lifespan.  If
the store cannot be reached the lifespan raises and the server does not
start.  A handle passed to ``create_app`` is used as-is and left open
at shutdown; its owner is responsible for closing it.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import StoreHandle, connect_store
from .core.errors import register_error_handlers
from .core.logging_config import setup_logging

logger = logging.getLogger(__name__)


def create_app(store: Optional[StoreHandle] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[StoreHandle]
        An already connected store handle.  When omitted, the lifespan
        connects using ``settings.mongodb_uri`` at startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that connection attempts below are recorded.
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if store is not None:
            yield
            return
        app.state.store = await connect_store(settings)
        try:
            yield
        finally:
            app.state.store.close()
            app.state.store = None
            logger.info("MongoDB connection closed")

    app = FastAPI(title=settings.project_name, version=settings.api_version, lifespan=lifespan)
    app.state.store = store

    register_error_handlers(app)
    app.include_router(v1_router, prefix=settings.api_prefix)

    return app


# Created at import time so that uvicorn can discover it without calling
# create_app manually.  No connection is made until the app starts.
app = create_app()
