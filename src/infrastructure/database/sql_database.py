"""
SQL Database - Infrastructure Layer

This module provides the relational store client used by the service.
Only connectivity concerns live here; the health check needs a single
round-trip ping.
"""

from typing import Any, Dict

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError

from src.domain.entities.errors import StorageUnavailableError


class SqlDatabase:
    """Relational database client backed by a SQLAlchemy engine."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        connect_timeout: int = 3,
    ):
        """
        Initialize the database client.

        The engine connects lazily, so building the client never touches
        the network.

        Args:
            database_url: SQLAlchemy connection URL
            pool_size: Number of pooled connections (server databases only)
            connect_timeout: Driver connect timeout in seconds
        """
        url = make_url(database_url)
        self.backend = url.get_backend_name()

        engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}
        if self.backend == "postgresql":
            engine_kwargs["pool_size"] = pool_size
            engine_kwargs["connect_args"] = {"connect_timeout": connect_timeout}

        self.engine: Engine = create_engine(url, **engine_kwargs)

    def ping(self) -> None:
        """
        Run ``SELECT 1`` on a pooled connection.

        Raises:
            StorageUnavailableError: If the connection or query fails
        """
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as exc:
            raise StorageUnavailableError(
                "Database ping failed", {"backend": self.backend, "error": str(exc)}
            ) from exc

    def close(self) -> None:
        """Dispose of the pooled connections."""
        self.engine.dispose()
