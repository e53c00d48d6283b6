"""
Presentation Layer Package

HTTP surface of the service: FastAPI routers that translate use-case
results into responses and status codes.
"""

from src.presentation import controllers

__all__ = ["controllers"]
