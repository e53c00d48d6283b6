"""
Domain Gateway - Payment Providers

This module defines the gateway interface used to check that an external
payment provider is reachable with the configured credentials.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class PaymentCredentials:
    """Credentials handed to a provider ping.

    Values are never copied into health reports or log events.
    """

    values: Dict[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        return self.values.get(key, "")


class IPaymentProviderGateway(ABC):
    """Interface for a payment provider reachability check."""

    #: Human readable provider name, used in log events and error messages.
    name: str

    #: Configuration keys (dotted) the provider needs for a ping.
    credential_keys: tuple[str, ...]

    #: Keys passed along when configured, but not required for a ping.
    optional_credential_keys: tuple[str, ...] = ()

    @abstractmethod
    async def ping(self, credentials: PaymentCredentials) -> None:
        """
        Contact the provider's account/auth endpoint once.

        Args:
            credentials: Credentials resolved from configuration

        Raises:
            PaymentProviderError: When the provider is unreachable or
                answers with an unexpected status
        """
        pass
