"""
Health domain entities.

This module defines the value objects produced by the health-check
aggregation: the tri-state status, the per-dependency check result and
the report returned by every invocation of the health endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

DATABASE_CHECK = "database"
PAYMENTS_CHECK = "payments"
EMAIL_CHECK = "email"
SYSTEM_CHECK = "system"

CHECK_NAMES = (DATABASE_CHECK, PAYMENTS_CHECK, EMAIL_CHECK, SYSTEM_CHECK)


class HealthStatus(str, Enum):
    """Tri-state availability, ordered by severity."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
    UNHEALTHY = "unhealthy"

    @property
    def severity(self) -> int:
        return _SEVERITY[self]


_SEVERITY = {
    HealthStatus.HEALTHY: 0,
    HealthStatus.DEGRADED: 1,
    HealthStatus.UNHEALTHY: 2,
}


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of a single dependency check."""

    status: HealthStatus
    response_time_ms: int = 0
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if self.response_time_ms < 0:
            raise ValueError("response_time_ms must be non-negative")


@dataclass(frozen=True, slots=True)
class SystemCheckResult(CheckResult):
    """Check result enriched with local process resource information."""

    memory_usage_percent: Optional[int] = None
    uptime: str = "unknown"


@dataclass(frozen=True, slots=True)
class HealthReport:
    """Aggregated health for the application."""

    status: HealthStatus
    checks: Mapping[str, CheckResult]
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self) -> None:
        missing = [name for name in CHECK_NAMES if name not in self.checks]
        unexpected = [name for name in self.checks if name not in CHECK_NAMES]
        if missing or unexpected:
            raise ValueError(
                f"Health report checks mismatch (missing={missing}, "
                f"unexpected={unexpected})"
            )

        worst = max(
            (check.status for check in self.checks.values()),
            key=lambda status: status.severity,
        )
        if worst is not self.status:
            raise ValueError(
                f"Overall status {self.status.value} does not match "
                f"checks ({worst.value})"
            )

        ordered = {name: self.checks[name] for name in CHECK_NAMES}
        object.__setattr__(self, "checks", MappingProxyType(ordered))
