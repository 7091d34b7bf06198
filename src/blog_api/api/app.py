"""
blog_api.api.app

FastAPI app factory for the Blog API service.

Responsibilities:
- Build the FastAPI application and register routers, middleware, error handlers.
- Build shared infrastructure once (DB engine/session factory, credential service).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from blog_api import __version__
from blog_api.api.error_handlers import register_error_handlers
from blog_api.api.routers.auth import router as auth_router
from blog_api.api.routers.categories import router as categories_router
from blog_api.api.routers.comments import router as comments_router
from blog_api.api.routers.health import router as health_router
from blog_api.api.routers.posts import router as posts_router
from blog_api.auth.credentials import Clock, CredentialService, utcnow
from blog_api.db.session import create_engine, create_sessionmaker, init_db
from blog_api.observability.logging import configure_logging, get_logger
from blog_api.observability.middleware import RequestContextMiddleware
from blog_api.settings import Settings

log = get_logger(__name__)


def create_app(*, settings: Settings, clock: Clock = utcnow) -> FastAPI:
    configure_logging(service_name=settings.service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        engine = create_engine(settings)
        app.state.engine = engine
        app.state.sessionmaker = create_sessionmaker(engine)
        if settings.env in ("dev", "test"):
            # Prod is expected to provision the schema out of band.
            await init_db(engine)
        try:
            yield
        finally:
            await engine.dispose()
            log.info("shutdown")

    app = FastAPI(
        title="Blog API",
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    # Settings are read once; the credential service is stateless and shared.
    app.state.settings = settings
    app.state.credentials = CredentialService.from_settings(settings, clock=clock)

    app.add_middleware(RequestContextMiddleware)
    register_error_handlers(app)
    app.include_router(health_router, tags=["health"])
    app.include_router(auth_router)
    app.include_router(categories_router)
    app.include_router(comments_router)
    app.include_router(posts_router)

    return app


# --- Module Notes -----------------------------------------------------------
# Business logic stays in services; this module only wires things together.
