"""
Main Application - Main Layer

This module builds the FastAPI application for the camp registration
API: it loads the settings, wires the container and mounts the
``/health`` router.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.main.config import AppSettings, get_settings
from src.main.container import app_lifespan, init_container
from src.presentation.controllers import system_router
from src.shared import configure_logging, get_logger, update_logging_from_settings

# Bootstrap logging from the environment so settings errors are visible
configure_logging()
update_logging_from_settings(get_settings())

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {
        "name": "System",
        "description": "Dependency health for load balancers and orchestrators",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Record the start time and hold the container resources open."""
    app.state.started_at = datetime.now(timezone.utc)
    logger.info("app.startup", title=app.title, version=app.version)

    async with app_lifespan() as container:
        app.state.container = container
        yield

    logger.info("app.shutdown")


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build the app with; loaded from the
            environment when omitted.

    Returns:
        FastAPI: The configured FastAPI application
    """
    settings = settings or get_settings()
    init_container(settings)

    app = FastAPI(
        title=settings.ge.title,
        description=settings.ge.description,
        version=settings.ge.version,
        debug=settings.ge.debug,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    # /health stays unauthenticated for load balancers and orchestrators
    app.include_router(system_router)

    return app


app = create_app()
