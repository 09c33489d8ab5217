"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import asyncio
import contextlib
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from modules.auth.routes import router as auth_router
from modules.estimates.routes import router as estimates_router
from modules.places.routes import router as places_router
from modules.rides.routes import router as rides_router
from modules.storage.interfaces import ISessionStore

from .dependencies import get_container
from .errors import register_exception_handlers
from .routes import health

logger = logging.getLogger(__name__)


async def prune_sessions_periodically(store: ISessionStore, interval_seconds: float) -> None:
    """Remove expired sessions every interval until cancelled."""
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            removed = await store.prune_expired()
        except Exception:
            logger.exception("Session pruning failed")
            continue
        if removed:
            logger.info("Pruned %d expired session(s)", removed)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Opens the storage backend and runs the session pruner while the
    application is up.
    """
    # Startup
    settings = get_settings()
    storage = get_container().storage
    logger.info(
        "Starting %s on %s:%s (storage=%s)",
        settings.app_name,
        settings.host,
        settings.port,
        settings.storage_backend,
    )
    pruner = asyncio.create_task(
        prune_sessions_periodically(
            storage.session_store,
            settings.session_prune_interval_seconds,
        )
    )
    yield
    # Shutdown
    pruner.cancel()
    with contextlib.suppress(asyncio.CancelledError):
        await pruner
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.app_name,
        description="Compare ride-hailing fares, book rides and keep saved places",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api", tags=["auth"])
    app.include_router(places_router, prefix="/api/places", tags=["places"])
    app.include_router(rides_router, prefix="/api/rides", tags=["rides"])
    app.include_router(estimates_router, prefix="/api/ride-estimates", tags=["estimates"])

    return app


# Application instance for uvicorn
app = create_app()
