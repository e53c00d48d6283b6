"""
Application Layer Package

This package contains the application-specific rules and use cases.
It orchestrates the flow of data from the domain health report to the
DTOs served by the presentation layer.
"""

# Re-export submodules
from src.application import dtos, use_cases

__all__ = ["dtos", "use_cases"]
