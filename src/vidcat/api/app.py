"""FastAPI application factory.

API layer:
- Validates query parameters, rejecting bad input with 400
- Owns the published QueryEngine on app.state
- Returns payloads for the dashboard
- Forbidden: filtering or sorting logic (lives in vidcat.catalog)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from vidcat.catalog import QueryEngine, VideoIndex, load_index
from vidcat.config import Settings, load_settings

logger = logging.getLogger(__name__)


def get_query_engine(request: Request) -> QueryEngine:
    """Dependency to get the currently published query engine."""
    return request.app.state.query_engine


def get_settings(request: Request) -> Settings:
    """Dependency to get application settings."""
    return request.app.state.settings


def publish_catalog(app: FastAPI, index: VideoIndex) -> None:
    """Publish a fully built index to request handlers.

    The engine is swapped in with a single assignment; in-flight requests
    keep the engine they already resolved.
    """
    app.state.query_engine = QueryEngine(index)


def create_app(settings: Settings | None = None, index: VideoIndex | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings. Defaults to load_settings().
        index: Optional prebuilt index. When omitted, the snapshot at
            settings.snapshot_path is loaded during startup.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = load_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if index is None:
            logger.info(f"Loading video snapshot from {settings.snapshot_path}")
            loaded = await run_in_threadpool(load_index, settings.snapshot_path)
            publish_catalog(app, loaded)
        yield

    app = FastAPI(
        title="vidcat API",
        description="Paginated, filterable video catalog",
        version="0.1.0",
        docs_url="/document",
        lifespan=lifespan,
    )
    app.state.settings = settings
    publish_catalog(app, index if index is not None else VideoIndex.empty())

    # Add CORS middleware for dashboard access
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Report invalid query parameters as 400 with an error list."""
        return JSONResponse(status_code=400, content={"errors": jsonable_encoder(exc.errors())})

    # Include routes
    from vidcat.api.routes import tags, videos

    app.include_router(videos.router)
    app.include_router(tags.router)

    @app.get("/")
    def welcome():
        """Welcome message."""
        return {"message": "Welcome to the vidcat API"}

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
