"""Catalog business rules — pure functions.

Builds on the rules engine pattern with the presence checks a new book
must pass before it reaches the store.
"""

from typing import Any, Mapping

from patterns.rules_engine import (
    RuleResult,
    RuleSetResult,
    check_required_fields,
    evaluate_rules,
)

REQUIRED_BOOK_FIELDS = ("title", "author", "year", "genre")


def validate_new_book(payload: Mapping[str, Any]) -> RuleSetResult:
    """All four content fields must be present and truthy."""
    return evaluate_rules(
        check_required_fields(payload, REQUIRED_BOOK_FIELDS),
    )


def missing_fields(result: RuleSetResult) -> list[str]:
    """Flatten the missing field lists of every failed rule."""
    missing: list[str] = []
    for failed in result.failed:
        missing.extend(failed.details.get("missing", []))
    return missing


__all__ = [
    "REQUIRED_BOOK_FIELDS",
    "RuleResult",
    "RuleSetResult",
    "missing_fields",
    "validate_new_book",
]
