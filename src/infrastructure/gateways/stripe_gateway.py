"""
Infrastructure Gateway - Stripe Implementation

This module implements the Stripe reachability check by reading the
account bound to the configured secret key.
"""

import httpx
import structlog

from src.domain.entities.errors import PaymentProviderError
from src.domain.gateways.payment_gateway import (
    IPaymentProviderGateway,
    PaymentCredentials,
)

logger = structlog.get_logger(__name__)

STRIPE_API_URL = "https://api.stripe.com"
SECRET_KEY = "stripe.secret_key"


class StripeGateway(IPaymentProviderGateway):
    """Stripe account ping using the HTTP API."""

    name = "Stripe"
    credential_keys = (SECRET_KEY,)

    def __init__(self, base_url: str = STRIPE_API_URL, timeout: float = 5.0):
        """
        Initialize Stripe gateway.

        Args:
            base_url: Base URL of the Stripe API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def ping(self, credentials: PaymentCredentials) -> None:
        url = f"{self.base_url}/v1/account"
        headers = {"Authorization": f"Bearer {credentials.get(SECRET_KEY)}"}

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers=headers)
        except httpx.RequestError as e:
            logger.warning("stripe.ping.request_error", error=str(e), url=url)
            raise PaymentProviderError(
                self.name, f"Stripe request failed: {str(e)}"
            ) from e

        if not response.is_success:
            logger.warning(
                "stripe.ping.unexpected_status",
                status_code=response.status_code,
                url=url,
            )
            raise PaymentProviderError(
                self.name,
                f"Stripe API returned {response.status_code}",
                {"status_code": response.status_code},
            )
