"""Book catalog API — FastAPI entry point.

Registers middleware, error handlers, routers and lifecycle hooks. The
book store is built once per application here and reached by routes only
through the get_book_store dependency.

Run with: uvicorn api.main:app --reload  (or: book-catalog)
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.errors import register_error_handlers
from api.middleware import RequestContextMiddleware
from core.observability.otel_setup import setup_logging, setup_otel
from patterns.domain_config import CatalogConfig
from verticals.catalog.repository import BookStore, get_book_store
from verticals.catalog.router import router as catalog_router

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Settings
# ---------------------------------------------------------------------------

CORS_ORIGINS = os.getenv(
    "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
).split(",")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("LOG_FORMAT", "json")
OTEL_ENABLED = os.getenv("OTEL_ENABLED", "false").lower() == "true"
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))


# ---------------------------------------------------------------------------
# Lifespan
# ---------------------------------------------------------------------------

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup/shutdown hooks."""
    setup_logging(LOG_LEVEL, LOG_FORMAT)
    config: CatalogConfig = app.state.config
    logger.info(
        "%s %s started with %d books",
        config.service_name, config.version, len(app.state.book_store),
    )
    yield
    logger.info("%s shutting down", config.service_name)


# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------

def create_app(
    store: Optional[BookStore] = None,
    config: Optional[CatalogConfig] = None,
) -> FastAPI:
    """Build the application around one book store.

    An injected store is used as-is; otherwise a new one is built and seeded
    when config.seed_on_startup is set.
    """
    config = config or CatalogConfig.from_env()

    if store is None:
        store = BookStore()
        if config.seed_on_startup:
            store.seed()

    app = FastAPI(
        title="Book Catalog",
        description="In-memory CRUD book catalog",
        version=config.version,
        lifespan=lifespan,
    )
    app.state.config = config
    app.state.book_store = store
    app.state.tracer = setup_otel(config.service_name) if OTEL_ENABLED else None

    # Request id, access log, 500 catch-all
    app.add_middleware(RequestContextMiddleware)

    # CORS wraps everything, including generic 500s
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    # -----------------------------------------------------------------------
    # Routers
    # -----------------------------------------------------------------------

    app.include_router(catalog_router, prefix=config.api_prefix, tags=["Books"])

    # -----------------------------------------------------------------------
    # Health & root
    # -----------------------------------------------------------------------

    @app.get("/health")
    async def health(store: BookStore = Depends(get_book_store)):
        return {"status": "healthy", "version": config.version, "books": store.count()}

    @app.get("/")
    async def root():
        return {
            "name": config.service_name,
            "version": config.version,
            "docs": "/docs",
            "books": config.api_prefix,
        }

    return app


app = create_app()


def serve() -> None:
    """Run the API under uvicorn on HOST:PORT."""
    import uvicorn

    setup_logging(LOG_LEVEL, LOG_FORMAT)
    logger.info("Server running on http://localhost:%d", PORT)
    logger.info("API available at http://localhost:%d%s", PORT, app.state.config.api_prefix)
    logger.info("Health check at http://localhost:%d/health", PORT)
    uvicorn.run(app, host=HOST, port=PORT)


if __name__ == "__main__":
    serve()
