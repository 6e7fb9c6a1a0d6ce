"""Dataclass-based domain configuration pattern.

Each vertical defines its settings and feature flags as a frozen
dataclass. This gives you:
- Type safety (IDE autocompletion, mypy checking)
- Default values (sensible out-of-the-box)
- Immutability (frozen=True prevents accidental mutation)
- Easy overrides (from env vars or explicit construction in tests)

Example domain: the book catalog service.
"""

import os
from dataclasses import dataclass


def _as_bool(val: str | None, default: bool = False) -> bool:
    if val is None:
        return default
    return val.strip().lower() in ("1", "true", "yes", "on")


# ---------------------------------------------------------------------------
# Top-level domain config
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CatalogConfig:
    """Configuration for the book catalog.

    Usage::

        config = CatalogConfig.from_env()
        app.include_router(router, prefix=config.api_prefix)
    """

    service_name: str = "book-catalog"
    version: str = "0.1.0"
    api_prefix: str = "/api/books"

    # Feature flags
    seed_on_startup: bool = True

    @classmethod
    def default(cls) -> "CatalogConfig":
        """Create config with all defaults."""
        return cls()

    @classmethod
    def from_env(cls, prefix: str = "CATALOG_") -> "CatalogConfig":
        """Create config from environment variables.

        Example: CATALOG_SEED_ON_STARTUP=true CATALOG_API_PREFIX=/v1/books
        """
        overrides = {}

        api_prefix = os.getenv(f"{prefix}API_PREFIX", "").strip("/")
        if api_prefix:
            overrides["api_prefix"] = "/" + api_prefix

        seed = os.getenv(f"{prefix}SEED_ON_STARTUP")
        if seed is not None:
            overrides["seed_on_startup"] = _as_bool(seed)

        return cls(**overrides)
