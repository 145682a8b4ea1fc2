"""
HAVEN FastAPI Application Entry Point

Main application initialization with:
- Lifespan management (startup/shutdown)
- CORS configuration
- Error handling middleware
- Router registration
- Classifier service mount

This is the production entry point for the HAVEN backend.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI

from haven import __version__
from haven.api.classifier import create_classifier_app
from haven.api.middleware.cors import AppCORSMiddleware
from haven.api.middleware.error_handler import ErrorHandlerMiddleware
from haven.api.v1.router import api_router
from haven.config import get_settings
from haven.config.logging_config import configure_logging, get_logger
from haven.infrastructure.database import get_db_manager
from haven.infrastructure.metrics import metrics_router, update_system_info
from haven.infrastructure.remote import create_remote_classifier

# Initialize settings and logging
settings = get_settings()
configure_logging(settings)
logger = get_logger(__name__)

CLASSIFIER_PREFIX = "/classifier"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Opens the episode store and creates the remote classifier.
    """
    logger.info(
        "Starting HAVEN application",
        env=settings.env,
        version=__version__,
        classifier_mode=settings.classifier.mode,
    )
    update_system_info(settings.env, __version__)

    app.state.remote_classifier = None
    try:
        db = get_db_manager()
        await db.initialize()

        app.state.remote_classifier = create_remote_classifier(settings)

        yield

    finally:
        logger.info("Shutting down HAVEN application")

        if app.state.remote_classifier is not None:
            await app.state.remote_classifier.close()

        await get_db_manager().close()

        logger.info("HAVEN application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="HAVEN API",
        description="Anxiety self-help backend: panic-button triage, episodes and insights",
        version=__version__,
        docs_url="/docs" if not settings.is_production() else None,
        redoc_url="/redoc" if not settings.is_production() else None,
        lifespan=lifespan,
    )

    app.add_middleware(
        AppCORSMiddleware,
        exempt_prefix=CLASSIFIER_PREFIX,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_middleware(ErrorHandlerMiddleware)

    app.include_router(
        api_router,
        prefix=f"/api/{settings.api_version}",
    )
    app.include_router(metrics_router)

    app.mount(CLASSIFIER_PREFIX, create_classifier_app())

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "name": "HAVEN API",
            "version": __version__,
            "status": "operational",
        }

    return app


# Create application instance
app = create_application()


def run() -> None:
    """Serve the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "haven.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.env == "development",
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
