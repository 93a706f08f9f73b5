from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flightmon.config import APP_NAME, APP_VERSION, Settings, settings as default_settings
from flightmon.observability.logging import configure_logging
from flightmon.db.store import TelemetryStore
from flightmon.api.routes_health import router as health_router
from flightmon.api.routes_telemetry import router as telemetry_router
from flightmon.services.telemetry_service import TelemetryService

configure_logging()
logger = logging.getLogger("flightmon")


def create_app(settings: Optional[Settings] = None, store: Optional[TelemetryStore] = None) -> FastAPI:
    """Build the API around one explicitly constructed store handle.

    Tests pass their own store (usually in-memory SQLite); otherwise one is
    built from ``settings.database_url``.
    """
    settings = settings or default_settings
    store = store or TelemetryStore.from_url(settings.database_url)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup and shutdown events."""
        logger.info("Starting %s", APP_NAME)
        logger.info("   Environment: %s", settings.environment)
        store.init_schema(
            max_retries=settings.db_connect_retries,
            retry_delay=settings.db_retry_delay_s,
        )

        yield

        logger.info("Shutting down...")
        store.close()

    app = FastAPI(title=APP_NAME, version=APP_VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.store = store
    app.state.telemetry_service = TelemetryService(store)

    @app.get("/")
    def root():
        return {
            "name": APP_NAME,
            "status": "ok",
            "docs": "/docs",
            "health": "/health",
        }

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Routers
    app.include_router(health_router)
    app.include_router(telemetry_router)

    return app


app = create_app()
