"""Catalog API router — book CRUD.

Demonstrates the standard router pattern:
- Store injection via FastAPI Depends (no module-level state)
- Presence validation through pure rule functions
- Domain errors raised here, serialised by the app's error handlers
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Response, status

from core.errors import RecordNotFoundError, RecordValidationError
from verticals.catalog.models.schemas import (
    Book,
    BookCreate,
    BookUpdate,
    ErrorResponse,
)
from verticals.catalog.repository import BookStore, get_book_store
from verticals.catalog.rules import missing_fields, validate_new_book

logger = logging.getLogger(__name__)

router = APIRouter()

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "Book not found"}}


# ============================================================================
# Book Endpoints
# ============================================================================

@router.get("", response_model=list[Book])
async def list_books(store: BookStore = Depends(get_book_store)):
    """List every book in the catalog."""
    return store.find_all()


@router.get("/{book_id}", response_model=Book, responses=_NOT_FOUND)
async def get_book(book_id: str, store: BookStore = Depends(get_book_store)):
    """Get a single book by id."""
    book = store.find_by_id(book_id)
    if book is None:
        raise RecordNotFoundError(id=book_id)
    return book


@router.post(
    "",
    response_model=Book,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse, "description": "Missing required fields"}},
)
async def create_book(request: BookCreate, store: BookStore = Depends(get_book_store)):
    """Add a new book. Title, author, year and genre are all required."""
    data = request.model_dump()
    result = validate_new_book(data)
    if not result.all_passed:
        raise RecordValidationError(missing_fields(result))

    book = store.create(data)
    logger.info("Created book id=%s title=%r", book.id, book.title)
    return book


@router.put("/{book_id}", response_model=Book, responses=_NOT_FOUND)
async def update_book(
    book_id: str,
    request: Optional[BookUpdate] = None,
    store: BookStore = Depends(get_book_store),
):
    """Replace the supplied fields of a book. Null fields are ignored."""
    updates = request.model_dump(exclude_unset=True, exclude_none=True) if request else {}
    book = store.update(book_id, updates)
    if book is None:
        raise RecordNotFoundError(id=book_id)
    return book


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
async def delete_book(book_id: str, store: BookStore = Depends(get_book_store)):
    """Remove a book from the catalog."""
    if not store.delete(book_id):
        raise RecordNotFoundError(id=book_id)
    logger.info("Deleted book id=%s", book_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
