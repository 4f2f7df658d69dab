"""
Pydantic models for book data.

A book references its author through ``author_id``.  The reference is
not checked against the author collection: a book may point at an
author that does not exist (or no longer exists).
"""

from typing import Optional

from pydantic import BaseModel, Field


class BookBase(BaseModel):
    name: str = Field(..., examples=["The Way of Shadows"])
    author_id: int = Field(..., examples=[3])


class BookCreate(BookBase):
    """Schema for creating a book."""
    pass


class BookUpdate(BaseModel):
    """Schema for updating a book.

    All fields are optional; only fields set to a value (not ``None``)
    are written to the store.
    """

    name: Optional[str] = None
    author_id: Optional[int] = None


class BookRead(BookBase):
    """Schema for reading a book."""

    id: int

    model_config = {
        "from_attributes": True,
    }
