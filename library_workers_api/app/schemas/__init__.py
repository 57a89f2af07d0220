"""
Pydantic schema definitions for API payloads.

Each entity (books, workers, users) defines its own models for
request bodies.  Field aliases carry the camelCase names used on the
wire and in stored documents; Python code uses the snake_case
attribute names.
"""
