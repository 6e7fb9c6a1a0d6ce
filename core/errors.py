"""Domain error taxonomy.

Every error the catalog raises on purpose derives from CatalogError and
knows its own HTTP status and response body. Anything else that escapes a
route is treated as unexpected and reported as a generic 500 by the request
middleware.
"""

from typing import Any


class CatalogError(Exception):
    """Base for expected, request-terminal errors."""

    http_status: int = 500

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message, **self.details}


class RecordNotFoundError(CatalogError):
    """No record matches the requested id."""

    http_status = 404

    def __init__(self, message: str = "Book not found", **details: Any):
        super().__init__(message, **details)


class RecordValidationError(CatalogError):
    """A create payload is missing required fields."""

    http_status = 400

    def __init__(self, missing: list[str], message: str = "Missing required fields"):
        super().__init__(message, missing=list(missing))
        self.missing = list(missing)
