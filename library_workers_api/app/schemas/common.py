"""Response bodies shared by the book and worker endpoints."""

from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    message: str = Field(..., examples=["Book created successfully!"])


class CreatedResponse(MessageResponse):
    """Confirmation that carries the identifier assigned by the store."""

    id: str = Field(..., examples=["66f1c2b3a4d5e6f708192a3b"])
