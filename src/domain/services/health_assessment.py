"""Domain service helpers for reducing and assembling health reports."""

from datetime import datetime, timezone
from typing import Dict, Iterable, Mapping, Optional

from src.domain.entities.health import (
    CHECK_NAMES,
    SYSTEM_CHECK,
    CheckResult,
    HealthReport,
    HealthStatus,
    SystemCheckResult,
)

FALLBACK_ERROR = "health check failed"


def reduce_status(statuses: Iterable[HealthStatus]) -> HealthStatus:
    """Collapse individual statuses into the overall one.

    Unhealthy wins over Degraded, which wins over Healthy. Only set
    membership matters, so any permutation of the input gives the same
    result. An empty input is Healthy.
    """
    seen = set(statuses)
    if HealthStatus.UNHEALTHY in seen:
        return HealthStatus.UNHEALTHY
    if HealthStatus.DEGRADED in seen:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


def assemble_report(
    checks: Mapping[str, CheckResult],
    now: Optional[datetime] = None,
) -> HealthReport:
    """Package the four named check results into a timestamped report."""
    missing = [name for name in CHECK_NAMES if name not in checks]
    if missing:
        raise ValueError(f"Missing health checks: {', '.join(missing)}")

    ordered = {name: checks[name] for name in CHECK_NAMES}
    return HealthReport(
        status=reduce_status(check.status for check in ordered.values()),
        checks=ordered,
        timestamp=now or datetime.now(timezone.utc),
    )


def fallback_report(
    error: str = FALLBACK_ERROR, now: Optional[datetime] = None
) -> HealthReport:
    """All-unhealthy report used when the checks themselves cannot run."""
    checks: Dict[str, CheckResult] = {
        name: CheckResult(status=HealthStatus.UNHEALTHY, error=error)
        for name in CHECK_NAMES
    }
    checks[SYSTEM_CHECK] = SystemCheckResult(
        status=HealthStatus.UNHEALTHY,
        error=error,
        memory_usage_percent=None,
        uptime="unknown",
    )
    return HealthReport(
        status=HealthStatus.UNHEALTHY,
        checks=checks,
        timestamp=now or datetime.now(timezone.utc),
    )
