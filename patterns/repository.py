"""In-memory repository pattern.

Provides a generic repository that owns a mapping of id -> record and the
CRUD operations over it. Verticals subclass this and set `model`; the
instance is built once per application and handed to routes through
FastAPI dependency injection, so tests get isolation by building their own.

Ids come from a monotonically increasing counter and are never reused,
even after deletions.

Example: BookStore extending InMemoryRepository.
"""

import logging
from typing import Any, Generic, Iterable, TypeVar

from core.models.base import Record, utcnow

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Type variable for record classes
# ---------------------------------------------------------------------------

RecordT = TypeVar("RecordT", bound=Record)

# Keys a caller can never overwrite through update()
_PROTECTED_KEYS = frozenset({"id", "created_at", "updated_at"})


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class InMemoryRepository(Generic[RecordT]):
    """Generic in-memory repository with CRUD + test reset.

    Subclass and set `model` to your Record subclass::

        class BookStore(InMemoryRepository[Book]):
            model = Book

            def by_author(self, author: str) -> list[Book]:
                return [b for b in self.find_all() if b.author == author]
    """

    model: type[RecordT]

    def __init__(self):
        self._records: dict[str, RecordT] = {}
        self._last_id = 0

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._records

    def _next_id(self) -> str:
        self._last_id += 1
        return str(self._last_id)

    # -- List --

    def find_all(self) -> list[RecordT]:
        """Every record in insertion order. Always a list, possibly empty."""
        return list(self._records.values())

    def count(self) -> int:
        return len(self._records)

    # -- Get by ID --

    def find_by_id(self, item_id: str) -> RecordT | None:
        """Return the record or None. Not-found is not an error here."""
        return self._records.get(item_id)

    # -- Create --

    def create(self, data: dict[str, Any]) -> RecordT:
        """Store a new record with a fresh id and matching timestamps."""
        fields = {k: v for k, v in data.items() if k not in _PROTECTED_KEYS}
        now = utcnow()
        item = self.model(id=self._next_id(), created_at=now, updated_at=now, **fields)
        self._records[item.id] = item
        logger.debug("Created %s id=%s", self.model.__name__, item.id)
        return item

    def bulk_create(self, rows: Iterable[dict[str, Any]]) -> list[RecordT]:
        return [self.create(row) for row in rows]

    # -- Update --

    def update(self, item_id: str, data: dict[str, Any]) -> RecordT | None:
        """Merge `data` over an existing record. Returns None if not found."""
        item = self._records.get(item_id)
        if item is None:
            return None

        changes = {k: v for k, v in data.items() if k not in _PROTECTED_KEYS}
        # Wall clock can step backwards; updated_at must not precede created_at
        changes["updated_at"] = max(utcnow(), item.created_at)

        updated = item.model_copy(update=changes)
        self._records[item_id] = updated
        logger.debug("Updated %s id=%s fields=%s", self.model.__name__, item_id, sorted(changes))
        return updated

    # -- Delete --

    def delete(self, item_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        if self._records.pop(item_id, None) is None:
            return False
        logger.debug("Deleted %s id=%s", self.model.__name__, item_id)
        return True

    # -- Test support --

    def reset(self) -> None:
        """Empty the collection and rewind the id counter."""
        self._records.clear()
        self._last_id = 0
