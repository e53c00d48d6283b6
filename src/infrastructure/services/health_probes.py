"""Concrete health probes for the service dependencies.

Every probe resolves to a ``CheckResult`` and never raises: collaborator
errors are logged and translated into unhealthy or degraded results.
"""

from __future__ import annotations

import asyncio
import math
from time import perf_counter
from typing import List, Sequence

from src.domain.entities.errors import (
    DomainError,
    ProviderCredentialsInvalidError,
    ProviderNotConfiguredError,
)
from src.domain.entities.health import (
    CheckResult,
    HealthStatus,
    SystemCheckResult,
)
from src.domain.gateways.payment_gateway import (
    IPaymentProviderGateway,
    PaymentCredentials,
)
from src.domain.ports.config_reader import IConfigReader
from src.domain.ports.process_runtime import IProcessRuntime, RuntimeSample
from src.domain.ports.storage import IStoragePinger
from src.infrastructure.services.deadline import run_with_deadline
from src.shared import get_logger

logger = get_logger(__name__)

DATABASE_TIMEOUT_MS = 3000
PAYMENT_TIMEOUT_MS = 2000

MEMORY_DEGRADED_PERCENT = 90
MEMORY_UNHEALTHY_PERCENT = 95

STORAGE_FAILURE = "storage connectivity failed"


def _elapsed_ms(start: float) -> int:
    return max(0, int(round((perf_counter() - start) * 1000)))


class StorageProbe:
    """Round-trips a trivial query against the relational store."""

    name = "database"

    def __init__(
        self, storage: IStoragePinger, *, timeout_ms: int = DATABASE_TIMEOUT_MS
    ) -> None:
        self._storage = storage
        self._timeout_ms = timeout_ms

    async def check(self) -> CheckResult:
        start = perf_counter()
        try:
            outcome = await run_with_deadline(
                asyncio.to_thread(self._storage.ping),
                timeout_ms=self._timeout_ms,
                name=self.name,
            )
        except Exception as exc:
            logger.warning("health.database.failed", error=str(exc))
            return CheckResult(
                status=HealthStatus.UNHEALTHY,
                response_time_ms=_elapsed_ms(start),
                error=STORAGE_FAILURE,
            )

        if isinstance(outcome, CheckResult):
            # deadline expired
            logger.warning("health.database.timeout", error=outcome.error)
            return CheckResult(
                status=HealthStatus.UNHEALTHY,
                response_time_ms=outcome.response_time_ms,
                error=STORAGE_FAILURE,
            )

        return CheckResult(
            status=HealthStatus.HEALTHY, response_time_ms=_elapsed_ms(start)
        )


class PaymentProviderProbe:
    """Pings one payment provider with credentials read from configuration."""

    def __init__(
        self,
        gateway: IPaymentProviderGateway,
        config_reader: IConfigReader,
        *,
        timeout_ms: int = PAYMENT_TIMEOUT_MS,
    ) -> None:
        self._gateway = gateway
        self._config_reader = config_reader
        self._timeout_ms = timeout_ms

    @property
    def name(self) -> str:
        return self._gateway.name

    def _resolve_credentials(self) -> PaymentCredentials:
        values = {}
        for key in self._gateway.credential_keys:
            lookup = self._config_reader.get(key)
            if not lookup.present:
                raise ProviderNotConfiguredError(self.name, {"key": key})
            if lookup.is_blank:
                raise ProviderCredentialsInvalidError(self.name, {"key": key})
            values[key] = str(lookup.value)
        for key in self._gateway.optional_credential_keys:
            lookup = self._config_reader.get(key)
            if lookup.present and not lookup.is_blank:
                values[key] = str(lookup.value)
        return PaymentCredentials(values=values)

    async def check(self) -> CheckResult:
        start = perf_counter()
        try:
            credentials = self._resolve_credentials()
            outcome = await run_with_deadline(
                self._gateway.ping(credentials),
                timeout_ms=self._timeout_ms,
                name=self.name,
            )
        except Exception as exc:
            message = exc.message if isinstance(exc, DomainError) else str(exc)
            return CheckResult(
                status=HealthStatus.UNHEALTHY,
                response_time_ms=_elapsed_ms(start),
                error=message or f"{self.name} check failed",
            )

        if isinstance(outcome, CheckResult):
            return outcome

        return CheckResult(
            status=HealthStatus.HEALTHY, response_time_ms=_elapsed_ms(start)
        )


class PaymentsProbe:
    """Combines the provider probes; a payment outage only degrades."""

    name = "payments"

    def __init__(self, providers: Sequence[PaymentProviderProbe]) -> None:
        self._providers = list(providers)

    async def check(self) -> CheckResult:
        start = perf_counter()
        outcomes = await asyncio.gather(
            *(provider.check() for provider in self._providers),
            return_exceptions=True,
        )

        failed: List[str] = []
        for provider, outcome in zip(self._providers, outcomes):
            if isinstance(outcome, CheckResult) and (
                outcome.status is HealthStatus.HEALTHY
            ):
                continue
            error = outcome.error if isinstance(outcome, CheckResult) else outcome
            logger.warning(
                "health.payments.provider_failed",
                provider=provider.name,
                error=str(error),
            )
            failed.append(provider.name)

        if failed:
            return CheckResult(
                status=HealthStatus.DEGRADED,
                response_time_ms=_elapsed_ms(start),
                error="some payment services unavailable",
            )

        return CheckResult(
            status=HealthStatus.HEALTHY, response_time_ms=_elapsed_ms(start)
        )


class EmailConfigurationProbe:
    """Checks that outbound email is configured. No network involved."""

    name = "email"

    def __init__(self, config_reader: IConfigReader, key: str = "email.host") -> None:
        self._config_reader = config_reader
        self._key = key

    async def check(self) -> CheckResult:
        start = perf_counter()
        try:
            lookup = self._config_reader.get(self._key)
        except Exception as exc:
            logger.warning("health.email.failed", error=str(exc))
            return CheckResult(
                status=HealthStatus.UNHEALTHY,
                response_time_ms=_elapsed_ms(start),
                error="email service check failed",
            )

        if not lookup.present or lookup.is_blank:
            return CheckResult(
                status=HealthStatus.DEGRADED,
                response_time_ms=_elapsed_ms(start),
                error="email service not configured",
            )

        return CheckResult(
            status=HealthStatus.HEALTHY, response_time_ms=_elapsed_ms(start)
        )


def memory_usage_percent(sample: RuntimeSample) -> int:
    if sample.total_bytes <= 0:
        return 0
    # half-up, so 90.5% reads as 91%
    percent = math.floor(sample.used_bytes * 100 / sample.total_bytes + 0.5)
    return min(100, max(0, percent))


def classify_memory(percent: int) -> HealthStatus:
    if percent > MEMORY_UNHEALTHY_PERCENT:
        return HealthStatus.UNHEALTHY
    if percent > MEMORY_DEGRADED_PERCENT:
        return HealthStatus.DEGRADED
    return HealthStatus.HEALTHY


def format_uptime(seconds: float) -> str:
    """Render an uptime as ``"2d 3h 14m"``, dropping leading zero units."""
    total = max(0, int(seconds))
    days, remainder = divmod(total, 86400)
    hours, remainder = divmod(remainder, 3600)
    minutes = remainder // 60

    if days > 0:
        return f"{days}d {hours}h {minutes}m"
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"


class ResourceProbe:
    """Classifies local memory pressure. Synchronous, needs no deadline."""

    name = "system"

    def __init__(self, runtime: IProcessRuntime) -> None:
        self._runtime = runtime

    def check(self) -> SystemCheckResult:
        start = perf_counter()
        sample = self._runtime.sample()
        percent = memory_usage_percent(sample)
        status = classify_memory(percent)

        return SystemCheckResult(
            status=status,
            response_time_ms=_elapsed_ms(start),
            error=(
                None
                if status is HealthStatus.HEALTHY
                else f"memory usage at {percent}%"
            ),
            memory_usage_percent=percent,
            uptime=format_uptime(sample.uptime_seconds),
        )
