"""
Infrastructure Layer Package

This package contains implementations of interfaces defined in the
domain layer, dealing with external concerns such as the relational
store, payment providers, configuration and the process runtime.
"""

from src.infrastructure import config, database, gateways, runtime, services

__all__ = ["config", "database", "gateways", "runtime", "services"]
