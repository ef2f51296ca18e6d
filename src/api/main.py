"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from psycopg_pool import AsyncConnectionPool

from src.adapters.repository.postgres import check_connection
from src.api.dependencies import get_pool
from src.api.errors import register_error_handlers
from src.api.models import HealthResponse
from src.api.routes import router as inscriptions_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "inscriptions",
        "description": "Create, list, read, update and delete inscriptions",
    },
]


async def verify_database(pool: AsyncConnectionPool, timeout: float | None = None) -> None:
    """Check database connectivity once the application is serving."""
    await check_connection(pool, timeout=timeout)
    logger.info("Connected to database")


def _report_verification_failure(task: asyncio.Task) -> None:
    """
    Hand a failed connectivity check to the event loop's exception handler.

    The server entry point installs a handler there that stops the process
    with a non-zero status.
    """
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        task.get_loop().call_exception_handler(
            {"message": "Database connectivity check failed", "exception": exc, "task": task}
        )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Opens the database connection pool on startup
    - Schedules the connectivity check without delaying startup
    - Closes the connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    # Bounded connections, unbounded waiting queue
    pool = AsyncConnectionPool(
        conninfo=settings.conninfo,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
        max_waiting=0,
        open=False,
    )
    await pool.open()

    # Store pool in app state for dependency injection
    app.state.pool = pool

    verification = asyncio.create_task(verify_database(pool, timeout=settings.db_connect_timeout))
    verification.add_done_callback(_report_verification_failure)

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if not verification.done():
        verification.cancel()
    await pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title="inscriptions-api",
    description="Inscriptions API - CRUD service for registration records",
    version="1.0.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(inscriptions_router)


@app.get("/health", response_model=HealthResponse)
async def health_check(pool: AsyncConnectionPool = Depends(get_pool)) -> HealthResponse:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    A failing database surfaces as the generic 500 error.
    """
    await check_connection(pool, timeout=get_settings().db_connect_timeout)
    return HealthResponse(status="healthy")
