"""Test doubles for the health-check collaborators."""

from __future__ import annotations

import asyncio
import time
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from src.domain.entities.health import (
    CHECK_NAMES,
    CheckResult,
    HealthReport,
    HealthStatus,
    SystemCheckResult,
)
from src.domain.gateways.payment_gateway import (
    IPaymentProviderGateway,
    PaymentCredentials,
)
from src.domain.ports.config_reader import ConfigLookup
from src.domain.ports.process_runtime import RuntimeSample
from src.domain.services.health_assessment import assemble_report
from src.infrastructure.services.health_check_service import HealthCheckService
from src.infrastructure.services.health_probes import (
    EmailConfigurationProbe,
    PaymentProviderProbe,
    PaymentsProbe,
    ResourceProbe,
    StorageProbe,
)

CONFIGURED = {
    "stripe.secret_key": "sk_test_123",
    "paypal.client_id": "paypal-client",
    "paypal.client_secret": "paypal-secret",
    "email.host": "smtp.example.com",
}


class FakeConfigReader:
    def __init__(self, values: Optional[Dict[str, Any]] = None) -> None:
        self.values = dict(CONFIGURED if values is None else values)

    def get(self, key: str) -> ConfigLookup:
        if key not in self.values:
            return ConfigLookup.absent(key)
        return ConfigLookup.of(key, self.values[key])


class FakeStorage:
    def __init__(self, error: Optional[Exception] = None, delay: float = 0.0) -> None:
        self.error = error
        self.delay = delay
        self.calls = 0

    def ping(self) -> None:
        self.calls += 1
        if self.delay:
            time.sleep(self.delay)
        if self.error is not None:
            raise self.error


class FakeGateway(IPaymentProviderGateway):
    def __init__(
        self,
        name: str,
        credential_keys: tuple[str, ...],
        error: Optional[Exception] = None,
        hang: bool = False,
    ) -> None:
        self.name = name
        self.credential_keys = credential_keys
        self.error = error
        self.hang = hang
        self.received: List[PaymentCredentials] = []

    async def ping(self, credentials: PaymentCredentials) -> None:
        self.received.append(credentials)
        if self.hang:
            await asyncio.Event().wait()
        if self.error is not None:
            raise self.error


class FakeRuntime:
    def __init__(
        self,
        used_bytes: int = 40,
        total_bytes: int = 100,
        uptime_seconds: float = 3 * 3600 + 12 * 60,
    ) -> None:
        self.used_bytes = used_bytes
        self.total_bytes = total_bytes
        self.uptime_seconds = uptime_seconds

    def sample(self) -> RuntimeSample:
        return RuntimeSample(
            used_bytes=self.used_bytes,
            total_bytes=self.total_bytes,
            uptime_seconds=self.uptime_seconds,
        )


def make_stripe(**kwargs: Any) -> FakeGateway:
    return FakeGateway("Stripe", ("stripe.secret_key",), **kwargs)


def make_paypal(**kwargs: Any) -> FakeGateway:
    return FakeGateway("PayPal", ("paypal.client_id",), **kwargs)


def build_service(
    *,
    storage: Optional[FakeStorage] = None,
    stripe: Optional[FakeGateway] = None,
    paypal: Optional[FakeGateway] = None,
    config: Optional[FakeConfigReader] = None,
    runtime: Optional[FakeRuntime] = None,
    database_timeout_ms: int = 3000,
    payment_timeout_ms: int = 2000,
) -> HealthCheckService:
    config = config or FakeConfigReader()
    providers = [
        PaymentProviderProbe(
            stripe or make_stripe(), config, timeout_ms=payment_timeout_ms
        ),
        PaymentProviderProbe(
            paypal or make_paypal(), config, timeout_ms=payment_timeout_ms
        ),
    ]
    return HealthCheckService(
        storage_probe=StorageProbe(
            storage or FakeStorage(), timeout_ms=database_timeout_ms
        ),
        payments_probe=PaymentsProbe(providers),
        email_probe=EmailConfigurationProbe(config),
        resource_probe=ResourceProbe(runtime or FakeRuntime()),
    )



def make_report(**statuses: HealthStatus) -> HealthReport:
    """Build a consistent report; unnamed checks are healthy."""
    checks = {
        name: CheckResult(
            status=statuses.get(name, HealthStatus.HEALTHY),
            response_time_ms=5,
            error=None if name not in statuses else f"{name} failing",
        )
        for name in CHECK_NAMES
    }
    checks["system"] = SystemCheckResult(
        status=statuses.get("system", HealthStatus.HEALTHY),
        response_time_ms=0,
        memory_usage_percent=41,
        uptime="3h 12m",
    )
    return assemble_report(
        checks, now=datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)
    )


class StubHealthService:
    def __init__(self, report: HealthReport) -> None:
        self.report = report
        self.calls = 0

    async def evaluate(self) -> HealthReport:
        self.calls += 1
        return self.report
