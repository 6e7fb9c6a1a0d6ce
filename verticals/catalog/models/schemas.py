"""Pydantic schemas for the catalog API.

Request models leave every field optional so that presence checks run
through the catalog rules (400 with the missing field list) instead of
failing schema validation. Type errors (e.g. a non-numeric year) still
fail schema validation.
"""

from typing import Optional

from pydantic import BaseModel, Field

from core.models.base import Record


# ---------------------------------------------------------------------------
# Stored record
# ---------------------------------------------------------------------------

class Book(Record):
    """A book in the catalog."""

    title: str
    author: str
    year: int
    genre: str


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------

class BookCreate(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None


class BookUpdate(BaseModel):
    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None
    genre: Optional[str] = None


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------

class ErrorResponse(BaseModel):
    error: str
    missing: Optional[list[str]] = Field(None, description="Fields that failed the presence check")
