"""Entry point for the Library Workers API.

Starts uvicorn with the host and port from the application settings.
Configuration such as ``MONGODB_URI`` is read from the environment or
from a ``.env`` file in the working directory.  If MongoDB cannot be
reached at startup the application lifespan fails and the process
exits with a non-zero status.

Usage:
    python run.py
"""
import asyncio
import logging
import sys

from uvicorn import Config, Server

from library_workers_api.app.core.config import settings
from library_workers_api.app.main import app

logger = logging.getLogger(__name__)


async def main() -> bool:
    """Serve the API until interrupted.

    Returns ``False`` when the server never finished starting up.
    """
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()
    return server.started


if __name__ == "__main__":
    try:
        started = asyncio.run(main())
    except KeyboardInterrupt:
        started = True
    if not started:
        logger.error("Startup failed; see the log above for the cause")
        sys.exit(1)
