"""
Pydantic models for author data.

``AuthorCreate`` carries the fields of the ``addAuthor`` mutation,
``AuthorUpdate`` the optional fields of ``updateAuthor`` and
``AuthorRead`` is what the services hand back to the GraphQL layer.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AuthorCreate(BaseModel):
    """Schema for creating an author."""

    name: str = Field(..., examples=["Brent Weeks"])


class AuthorUpdate(BaseModel):
    """Schema for updating an author.

    Only fields that were set to a value are written to the store;
    ``None`` leaves the current value in place.
    """

    name: Optional[str] = None


class AuthorRead(BaseModel):
    """Schema for reading an author."""

    id: int
    name: str

    model_config = {
        "from_attributes": True,
    }
