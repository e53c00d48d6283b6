"""
Database package - Infrastructure Layer

This package contains database-related implementations for the camp
registration service. It provides the concrete relational store client
the application talks to.
"""

from src.infrastructure.database.sql_database import SqlDatabase

__all__ = ["SqlDatabase"]
