"""
Infrastructure Gateway - PayPal Implementation

This module implements the PayPal reachability check against the OAuth2
token endpoint. A 401 still proves the API answered, so only transport
errors and other error statuses count as failures.
"""

from typing import Optional

import httpx
import structlog

from src.domain.entities.errors import PaymentProviderError
from src.domain.gateways.payment_gateway import (
    IPaymentProviderGateway,
    PaymentCredentials,
)

logger = structlog.get_logger(__name__)

PAYPAL_BASE_URLS = {
    "sandbox": "https://api-m.sandbox.paypal.com",
    "live": "https://api-m.paypal.com",
}
CLIENT_ID = "paypal.client_id"
CLIENT_SECRET = "paypal.client_secret"


def resolve_paypal_base_url(mode: str, override: Optional[str] = None) -> str:
    """Pick the API host for ``mode`` unless an explicit URL is configured."""
    if override:
        return override
    return PAYPAL_BASE_URLS.get(mode.lower(), PAYPAL_BASE_URLS["sandbox"])


class PayPalGateway(IPaymentProviderGateway):
    """PayPal OAuth2 token endpoint ping."""

    name = "PayPal"
    credential_keys = (CLIENT_ID,)
    optional_credential_keys = (CLIENT_SECRET,)

    def __init__(self, base_url: str, timeout: float = 5.0):
        """
        Initialize PayPal gateway.

        Args:
            base_url: Base URL of the PayPal REST API
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    async def ping(self, credentials: PaymentCredentials) -> None:
        url = f"{self.base_url}/v1/oauth2/token"
        auth = (credentials.get(CLIENT_ID), credentials.get(CLIENT_SECRET))

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    url,
                    data={"grant_type": "client_credentials"},
                    headers={"Accept": "application/json"},
                    auth=auth,
                )
        except httpx.RequestError as e:
            logger.warning("paypal.ping.request_error", error=str(e), url=url)
            raise PaymentProviderError(
                self.name, f"PayPal request failed: {str(e)}"
            ) from e

        if not response.is_success and response.status_code != 401:
            logger.warning(
                "paypal.ping.unexpected_status",
                status_code=response.status_code,
                url=url,
            )
            raise PaymentProviderError(
                self.name,
                f"PayPal API returned {response.status_code}",
                {"status_code": response.status_code},
            )
