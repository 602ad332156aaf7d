"""
FastAPI application setup for the Treasure Map service.
"""

from fastapi import FastAPI
import logging
from contextlib import asynccontextmanager

from treasure_map.config import get_settings
from treasure_map.api import health_router, treasure_router
from treasure_map.core.dependencies import service_container
from treasure_map.core.error_handlers import setup_error_handlers
from treasure_map.core.logging import configure_logging
from treasure_map.middleware import RequestContextMiddleware

settings = get_settings()

configure_logging(settings.log_level.value, settings.log_format)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan management.
    Builds the treasure screen on startup and drops it on shutdown.
    """
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    service_container.initialize_services()
    app.state.service_container = service_container
    logger.info("Application startup complete")
    try:
        yield
    finally:
        logger.info("Shutting down application")
        service_container.cleanup_services()
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
        debug=settings.debug and not settings.is_production(),
        lifespan=lifespan
    )

    app.add_middleware(RequestContextMiddleware)

    setup_error_handlers(app)

    app.include_router(health_router)
    app.include_router(treasure_router)

    @app.get("/")
    async def root():
        return {
            "message": f"{settings.app_name} is running",
            "version": settings.app_version,
            "status": "running",
        }

    return app


app = create_app()
