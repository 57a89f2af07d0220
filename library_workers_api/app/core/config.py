"""
Configuration management.

The ``Settings`` dataclass reads configuration from environment
variables.  A ``.env`` file in the working directory, if present, is
loaded first via ``python-dotenv`` so local deployments can keep the
MongoDB connection string out of the shell environment.  Defaults are
provided for every field except ``mongodb_uri``, which must be set
before the application starts serving requests.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is None or value.strip() == "":
        return default
    try:
        return float(value)
    except ValueError:
        return default


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Library Workers API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Routes are served at the root by default (``/books``, ``/workers``).
    # Set API_PREFIX (e.g. ``/api/v1``) to mount them elsewhere.
    api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Connection string for MongoDB.  Required; startup fails without it.
    mongodb_uri: str = os.getenv("MONGODB_URI", "")
    database_name: str = os.getenv("MONGODB_DATABASE", "Library")
    books_collection: str = os.getenv("BOOKS_COLLECTION", "AssignBook")
    workers_collection: str = os.getenv("WORKERS_COLLECTION", "Workers")
    users_collection: str = os.getenv("USERS_COLLECTION", "Users")

    # Deadlines for individual store calls, in seconds.  Full collection
    # scans get a longer budget because their result size is unbounded.
    write_timeout_seconds: float = _env_float("STORE_WRITE_TIMEOUT", 5.0)
    scan_timeout_seconds: float = _env_float("STORE_SCAN_TIMEOUT", 10.0)
    query_timeout_seconds: float = _env_float("STORE_QUERY_TIMEOUT", 5.0)
    connect_timeout_seconds: float = _env_float("STORE_CONNECT_TIMEOUT", 10.0)

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
