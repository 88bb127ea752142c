"""
FastAPI application setup with dependency injection.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from datetime import datetime, timezone
from contextlib import asynccontextmanager

from lingopop.config import get_settings
from lingopop.core.dependencies import service_container
from lingopop.core.error_handlers import error_handler, setup_error_handlers
from lingopop.core.logging import configure_logging
from lingopop.core.metrics import get_metrics_snapshot
from lingopop.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(settings.log_level.value, json_format=settings.log_json)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan: load the app state and build the backend client on
    startup, release them on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")

    try:
        await service_container.initialize_services()
        app.state.service_container = service_container
        logger.info("Application startup complete")

        yield

    except Exception as e:
        logger.error(f"Application startup failed: {e}", exc_info=True)
        raise

    finally:
        logger.info("Shutting down application")
        await service_container.cleanup_services()
        logger.info("Application shutdown complete")


def create_app() -> FastAPI:
    """
    Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        **settings.get_cors_config()
    )
    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    from lingopop.api import (
        lookup_router,
        scan_router,
        learning_router,
        speech_router,
        config_router,
    )
    app.include_router(lookup_router)
    app.include_router(scan_router)
    app.include_router(learning_router)
    app.include_router(speech_router)
    app.include_router(config_router)

    return app


# Create application instance
app = create_app()


@app.get("/")
async def root():
    """Root endpoint for basic health check."""
    return {
        "message": f"Welcome to {settings.app_name}",
        "version": settings.app_version,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    """Reports whether the generative backend is configured and recent error counts."""
    gemini_configured = bool(settings.gemini.api_key)
    return {
        "status": "healthy" if gemini_configured else "degraded",
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "details": {
            "gemini": {"status": "configured" if gemini_configured else "missing_api_key"},
            "config_store": {"path": str(settings.get_config_path())},
        },
        "error_statistics": error_handler.get_error_statistics(),
    }


@app.get("/metrics")
async def metrics():
    """Latency of backend operations in this process."""
    return {"status": "ok", "data": get_metrics_snapshot(), "error": None}
