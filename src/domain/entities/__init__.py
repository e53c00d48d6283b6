"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .errors import (
    DomainError,
    HealthProbeError,
    PaymentProviderError,
    ProviderCredentialsInvalidError,
    ProviderNotConfiguredError,
    StorageUnavailableError,
)
from .health import (
    CHECK_NAMES,
    CheckResult,
    HealthReport,
    HealthStatus,
    SystemCheckResult,
)

__all__ = [
    "CHECK_NAMES",
    "CheckResult",
    "HealthReport",
    "HealthStatus",
    "SystemCheckResult",
    "DomainError",
    "HealthProbeError",
    "StorageUnavailableError",
    "PaymentProviderError",
    "ProviderNotConfiguredError",
    "ProviderCredentialsInvalidError",
]
