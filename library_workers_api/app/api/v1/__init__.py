"""
Version 1 of the API.

Bundles the book and worker endpoints.  Breaking changes belong in a
new version subpackage.
"""
