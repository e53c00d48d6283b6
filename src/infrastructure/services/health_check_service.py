"""Infrastructure implementation for system health checks."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Dict

from src.domain.entities.health import (
    DATABASE_CHECK,
    EMAIL_CHECK,
    PAYMENTS_CHECK,
    SYSTEM_CHECK,
    CheckResult,
    HealthReport,
    HealthStatus,
    SystemCheckResult,
)
from src.domain.ports.health_check import IHealthCheckService
from src.domain.services.health_assessment import (
    assemble_report,
    fallback_report,
)
from src.infrastructure.services.health_probes import (
    EmailConfigurationProbe,
    PaymentsProbe,
    ResourceProbe,
    StorageProbe,
)
from src.shared import get_logger

logger = get_logger(__name__)


class HealthCheckService(IHealthCheckService):
    """Run every dependency probe concurrently and aggregate the outcome."""

    def __init__(
        self,
        storage_probe: StorageProbe,
        payments_probe: PaymentsProbe,
        email_probe: EmailConfigurationProbe,
        resource_probe: ResourceProbe,
    ) -> None:
        self._storage_probe = storage_probe
        self._payments_probe = payments_probe
        self._email_probe = email_probe
        self._resource_probe = resource_probe

    async def evaluate(self) -> HealthReport:
        """Collect, reduce and assemble; never raises."""
        try:
            report = await self._collect()
        except Exception as exc:
            logger.error("health.evaluate.failed", error=str(exc), exc_info=exc)
            return fallback_report()

        logger.debug(
            "health.check.completed",
            status=report.status.value,
            checks={name: check.status.value for name, check in report.checks.items()},
        )
        return report

    async def _collect(self) -> HealthReport:
        start = perf_counter()
        tasks = {
            DATABASE_CHECK: asyncio.create_task(self._storage_probe.check()),
            PAYMENTS_CHECK: asyncio.create_task(self._payments_probe.check()),
            EMAIL_CHECK: asyncio.create_task(self._email_probe.check()),
            SYSTEM_CHECK: asyncio.create_task(self._check_system()),
        }

        outcomes = await asyncio.gather(*tasks.values(), return_exceptions=True)
        elapsed_ms = max(0, int(round((perf_counter() - start) * 1000)))

        checks: Dict[str, CheckResult] = {}
        for name, outcome in zip(tasks, outcomes):
            if isinstance(outcome, CheckResult):
                checks[name] = outcome
                continue
            logger.error(
                "health.probe.crashed",
                check=name,
                error=repr(outcome),
            )
            checks[name] = self._crashed_result(name, outcome, elapsed_ms)

        return assemble_report(checks)

    async def _check_system(self) -> SystemCheckResult:
        return self._resource_probe.check()

    def _crashed_result(
        self, name: str, outcome: object, elapsed_ms: int
    ) -> CheckResult:
        if isinstance(outcome, BaseException):
            message = str(outcome) or type(outcome).__name__
        else:
            message = f"unexpected probe result: {type(outcome).__name__}"

        if name == SYSTEM_CHECK:
            return SystemCheckResult(
                status=HealthStatus.UNHEALTHY,
                response_time_ms=elapsed_ms,
                error=message,
            )
        return CheckResult(
            status=HealthStatus.UNHEALTHY,
            response_time_ms=elapsed_ms,
            error=message,
        )
