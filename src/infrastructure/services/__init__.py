"""Infrastructure services package."""

from .deadline import run_with_deadline
from .health_check_service import HealthCheckService
from .health_probes import (
    EmailConfigurationProbe,
    PaymentProviderProbe,
    PaymentsProbe,
    ResourceProbe,
    StorageProbe,
)

__all__ = [
    "EmailConfigurationProbe",
    "HealthCheckService",
    "PaymentProviderProbe",
    "PaymentsProbe",
    "ResourceProbe",
    "StorageProbe",
    "run_with_deadline",
]
