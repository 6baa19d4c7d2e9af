"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status

from src.api.container import ServiceContainer, build_container
from src.api.errors import register_exception_handlers
from src.api.routes import router as api_router
from src.config.settings import get_settings
from src.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "registrations",
        "description": "Event sign-up and confirmation email",
    },
    {
        "name": "admin",
        "description": "Registration review - list registrations and change their status",
    },
]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Builds the service container on startup unless one was injected
    - Closes the container's resources on shutdown if it was built here
    """
    owned = app.state.container is None

    if owned:
        settings = get_settings()
        configure_logging(settings.log_level)
        logger.info("Starting application...")
        app.state.container = build_container(settings)

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if owned:
        app.state.container.close()
        app.state.container = None


def create_app(container: ServiceContainer | None = None) -> FastAPI:
    """
    Build the application.

    Args:
        container: Pre-built capabilities; when None they are created from
            Settings at startup
    """
    application = FastAPI(
        title="event-registration",
        description="Event registration API - sign-ups, admin review and confirmation emails",
        version="0.1.0",
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    application.state.container = container

    register_exception_handlers(application)
    application.include_router(api_router, prefix="/api")

    @application.get("/health")
    def health_check(request: Request) -> dict[str, str]:
        """
        Health check endpoint with Registry validation.

        Returns 200 OK if application and Registry are healthy.
        Returns 503 if the Registry cannot be reached.
        """
        try:
            request.app.state.container.repository.ping()
        except PersistenceError:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Registry unavailable",
            ) from None
        return {"status": "healthy"}

    return application


app = create_app()
