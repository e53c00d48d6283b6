"""Domain service abstraction for health checks."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import HealthReport


class IHealthCheckService(Protocol):
    """Interface for retrieving the aggregated health report."""

    async def evaluate(self) -> HealthReport:
        """Run every dependency check and assemble the report.

        Implementations never raise; failures are represented in the
        returned report.
        """
        ...
