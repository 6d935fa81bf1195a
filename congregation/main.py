"""Congregation API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CongregationError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - One DatabasePool per process, created in the lifespan and stored on app.state
    - Interactive API docs and the OpenAPI schema are not served

Design Decisions:
    - Lifespan over @app.on_event for startup/shutdown
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from congregation.api.error_handlers import register_error_handlers
from congregation.api.request_logging import register_request_logging
from congregation.api.routes import church_members, health, users
from congregation.config import get_settings
from congregation.infrastructure.database import DatabasePool
from congregation.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database = DatabasePool.from_url(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_recycle=settings.database_pool_recycle,
        pool_timeout=settings.database_pool_timeout,
        query_timeout_seconds=settings.query_timeout_seconds,
    )
    if settings.database_create_schema:
        await database.create_schema()
    app.state.database = database
    logger.info("Congregation API started")
    yield
    logger.info("Congregation API shutting down")
    await database.dispose()
    app.state.database = None


app = FastAPI(
    title="Congregation API",
    version="1.0.0",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
register_request_logging(app)
register_error_handlers(app)

app.include_router(health.router)
app.include_router(users.router)
app.include_router(church_members.router)
