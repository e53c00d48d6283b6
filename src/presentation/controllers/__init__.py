"""
Controllers Package - Presentation Layer

This package contains FastAPI controllers (routers) that handle
HTTP requests and responses. Controllers are responsible for
error handling and mapping between API DTOs and application layer
use cases.
"""

from .system_controller import router as system_router

__all__ = ["system_router"]
