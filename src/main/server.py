"""
Server Entry Point - Main Layer

This module runs the FastAPI application with uvicorn using the
host, port and reload flags from the application settings.
"""

import uvicorn

from src.main.config import get_settings
from src.shared import configure_logging, get_logger, update_logging_from_settings

logger = get_logger(__name__)


def main() -> None:
    """Start the HTTP server."""
    configure_logging()
    settings = get_settings()
    update_logging_from_settings(settings)

    logger.info(
        "server.starting",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        environment=settings.environment.value,
    )

    uvicorn.run(
        "src.main.app:app",
        host=settings.ge.host,
        port=settings.ge.port,
        reload=settings.ge.reload,
        log_config=None,
    )
