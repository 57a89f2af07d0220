"""
Application package initializer.

The application is split into ``core`` (configuration, logging, errors
and the MongoDB store handle), ``schemas`` (request and response
models), ``services`` (one bounded store call per operation) and
``api`` (versioned routers translating service results into HTTP
responses).
"""

from .main import app, create_app  # noqa: F401
