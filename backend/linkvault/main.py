"""LinkVault API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map LinkVaultError → structured JSON responses
    - CORS configured from settings
    - Store client constructed and connected in the lifespan, disposed on shutdown;
      a failed connection aborts startup

Design Decisions:
    - Lifespan over @app.on_event: single place for startup and teardown
    - Store client kept on app.state and injected via the get_db dependency
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from linkvault.api.error_handlers import register_error_handlers
from linkvault.api.routes import health, links
from linkvault.config import Settings, get_settings
from linkvault.infrastructure.database import DatabaseSessionManager
from linkvault.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    try:
        await manager.connect()
    except Exception:
        await manager.close()
        raise
    app.state.db_manager = manager
    logger.info("LinkVault API started")
    yield
    logger.info("LinkVault API shutting down")
    app.state.db_manager = None
    await manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="LinkVault API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
        allow_credentials=settings.cors_allow_credentials,
    )

    app.include_router(health.router)
    app.include_router(links.router)

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
