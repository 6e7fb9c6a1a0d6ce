"""Catalog repository: the in-memory book store.

Extends InMemoryRepository with catalog seeding and exposes the FastAPI
dependency that hands the application's store to routes.
"""

import logging
from typing import Iterable

from fastapi import Request

from patterns.repository import InMemoryRepository
from verticals.catalog.models.schemas import Book
from verticals.catalog.seed import SAMPLE_BOOKS

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Book store
# ---------------------------------------------------------------------------

class BookStore(InMemoryRepository[Book]):
    """Authoritative collection of books for one application."""

    model = Book

    def seed(self, rows: Iterable[dict] = SAMPLE_BOOKS) -> list[Book]:
        """Load the sample catalog."""
        books = self.bulk_create(rows)
        logger.info("Seeded %d books", len(books))
        return books


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------

def get_book_store(request: Request) -> BookStore:
    """Return the store owned by the running application.

    Usage in routes::

        @router.get("/")
        async def list_books(store: BookStore = Depends(get_book_store)):
            return store.find_all()
    """
    return request.app.state.book_store
