"""
Pydantic schemas for bookmark endpoints.

Request bodies are checked by `validation.validate_new_bookmark` rather than
by a request model, so that failures keep their plain-text 400 messages.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class BookmarkCreate(BaseModel):
    title: str = Field(..., min_length=1)
    url: str = Field(..., min_length=1)
    rating: int = Field(..., ge=1, le=5)
    description: str | None = None


class Bookmark(BaseModel):
    id: int
    title: str
    url: str
    description: str | None = None
    rating: int
