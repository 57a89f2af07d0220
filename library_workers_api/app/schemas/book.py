"""
Pydantic models for book records.

A book is identified by its ``isbn``.  The ISBN is treated as the
business key for deletion but uniqueness is not enforced when a book
is created: two documents with the same ISBN may coexist and are both
removed by a delete.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, StrictStr


class BookCreate(BaseModel):
    """Schema for creating a book."""

    isbn: StrictStr = Field(..., examples=["978-0131103627"])
    title: StrictStr = Field(..., examples=["The C Programming Language"])
    author: StrictStr = Field(..., examples=["Brian W. Kernighan"])

    def to_document(self) -> Dict[str, Any]:
        return {"isbn": self.isbn, "title": self.title, "author": self.author}
