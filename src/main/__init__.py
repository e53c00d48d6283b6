"""
Main module - Composition Root

Loads the settings, builds the dependency container that assembles the
health probes and exposes the FastAPI application and server entry point.
"""

from .config import AppSettings, get_settings
from .container import AppContainer, get_container, init_container

__all__ = [
    "AppSettings",
    "AppContainer",
    "get_container",
    "get_settings",
    "init_container",
]
