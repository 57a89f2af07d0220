"""
Top-level package for the Library Workers API.

All functionality lives in submodules under ``app``; import the ASGI
application as ``library_workers_api.app.main:app``.
"""

__all__ = []
