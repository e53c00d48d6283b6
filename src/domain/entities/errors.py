"""
Domain Errors

This module defines custom error classes for domain-specific exceptions.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class HealthProbeError(DomainError):
    """Raised by a collaborator when a dependency probe fails."""


class StorageUnavailableError(HealthProbeError):
    """Raised when the relational store cannot answer a ping."""


class PaymentProviderError(HealthProbeError):
    """Raised when a payment provider ping fails."""

    def __init__(
        self,
        provider: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.provider = provider
        super().__init__(message, details)


class ProviderNotConfiguredError(PaymentProviderError):
    """Raised when a payment provider has no credentials configured."""

    def __init__(self, provider: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(provider, f"{provider} not configured", details)


class ProviderCredentialsInvalidError(PaymentProviderError):
    """Raised when configured provider credentials are blank or malformed."""

    def __init__(self, provider: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(provider, f"{provider} credentials invalid", details)
