"""
owner_registry.api.app

FastAPI app factory for the Owner Registry service.

Responsibilities:
- Build the FastAPI application and register routers/middleware/handlers.
- Initialize and dispose shared infrastructure (DB engine/session factory).
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from owner_registry import __version__
from owner_registry.api.errors import register_exception_handlers
from owner_registry.api.routers.health import router as health_router
from owner_registry.api.routers.owners import router as owners_router
from owner_registry.db.init_db import init_db
from owner_registry.db.session import create_engine, create_sessionmaker
from owner_registry.observability.logging import configure_logging, get_logger
from owner_registry.observability.middleware import RequestContextMiddleware
from owner_registry.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings) -> FastAPI:
    configure_logging(
        service_name=settings.service_name,
        level=settings.log_level,
        sql_echo=settings.sql_echo,
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod runs Alembic migrations instead.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Owner Registry",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(RequestContextMiddleware)
    register_exception_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(owners_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Composition only: routers, handlers and middleware are registered here; business
# rules stay in `services.owner_service`.
