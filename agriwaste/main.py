"""
Agri-Waste Match - FastAPI Application Entry Point

Matches farmers reporting agricultural waste (straw, spent mushroom
substrate, tea residue) with the nearest registered reuse organization.

DESIGN PRINCIPLES:
- One document store handle per process, injected into the app and
  connected/closed by the application lifecycle
- Every route performs a single store operation
- Nearest-organization ranking belongs to the store's spatial index
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from agriwaste.config.store import DocumentStore, create_store
from agriwaste.core.errors import register_exception_handlers
from agriwaste.core.settings import Settings, settings as default_settings
from agriwaste.routes import health, match, organizations, reports

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(settings: Optional[Settings] = None, store: Optional[DocumentStore] = None) -> FastAPI:
    """
    Application factory.

    Args:
        settings: Settings to use (defaults to the environment-loaded instance)
        store: Pre-built document store. When omitted, one is built from
               settings at startup (MongoDB, or in-memory with USE_MOCK_DB).
    """
    settings = settings or default_settings
    configure_logging(settings)

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Agricultural waste reporting and nearest reuse-organization matching",
        debug=settings.DEBUG,
    )
    app.state.settings = settings
    app.state.store = store

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.on_event("startup")
    def startup_event():
        """
        Build (if not injected) and connect the document store.
        """
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        if app.state.store is None:
            app.state.store = create_store(settings)
        app.state.store.connect()

    @app.on_event("shutdown")
    def shutdown_event():
        """
        Close the document store connection.
        """
        logger.info(f"Shutting down {settings.APP_NAME}")
        if app.state.store is not None:
            app.state.store.close()

    app.include_router(health.router)
    app.include_router(reports.router)
    app.include_router(organizations.router)
    app.include_router(match.router)

    @app.get("/")
    async def root():
        """
        Root endpoint - API information.
        """
        return {
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "status": "running",
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()
