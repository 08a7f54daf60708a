"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from users_backend.api.errors import register_error_handlers
from users_backend.api.routers import health_router, users_router
from users_backend.database import DatabaseService
from users_backend.logging_config import setup_logging
from users_backend.settings import BackendSettings, get_settings

logger = logging.getLogger(__name__)


def create_api(
    database: DatabaseService | None = None,
    *,
    settings: BackendSettings | None = None,
) -> FastAPI:
    """Instantiate and configure the FastAPI application.

    When ``database`` is omitted the lifespan opens one from the settings and
    disposes it on shutdown; a passed-in database stays owned by the caller.
    """
    config = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(config.log_level)
        db = database or DatabaseService(config.database_url, settings=config)
        if config.create_schema:
            db.create_schema()
        app.state.database = db
        logger.info("Users API started")
        try:
            yield
        finally:
            logger.info("Users API shutting down")
            if database is None:
                db.dispose()

    app = FastAPI(title="Users API", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(health_router)
    app.include_router(users_router)
    return app
