from __future__ import annotations

import httpx
import pytest

from src.domain.entities.errors import PaymentProviderError
from src.domain.gateways.payment_gateway import PaymentCredentials
from src.infrastructure.gateways.paypal_gateway import (
    PAYPAL_BASE_URLS,
    PayPalGateway,
    resolve_paypal_base_url,
)
from src.infrastructure.gateways.stripe_gateway import StripeGateway


class _StubAsyncClient:
    def __init__(self, status_code: int = 200, error: Exception | None = None):
        self._status_code = status_code
        self._error = error
        self.calls: list[dict] = []

    async def __aenter__(self) -> "_StubAsyncClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        return None

    def _respond(self, method: str, url: str, **kwargs) -> httpx.Response:
        self.calls.append({"method": method, "url": url, **kwargs})
        if self._error is not None:
            raise self._error
        return httpx.Response(self._status_code, request=httpx.Request(method, url))

    async def get(self, url: str, **kwargs) -> httpx.Response:
        return self._respond("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> httpx.Response:
        return self._respond("POST", url, **kwargs)


def _install(monkeypatch, client: _StubAsyncClient) -> None:
    monkeypatch.setattr("httpx.AsyncClient", lambda timeout: client)


STRIPE_CREDENTIALS = PaymentCredentials({"stripe.secret_key": "sk_test_123"})
PAYPAL_CREDENTIALS = PaymentCredentials(
    {"paypal.client_id": "client", "paypal.client_secret": "secret"}
)


@pytest.mark.asyncio
async def test_stripe_ping_success(monkeypatch) -> None:
    client = _StubAsyncClient(200)
    _install(monkeypatch, client)

    await StripeGateway("https://stripe.test/").ping(STRIPE_CREDENTIALS)

    call = client.calls[0]
    assert call["url"] == "https://stripe.test/v1/account"
    assert call["headers"]["Authorization"] == "Bearer sk_test_123"


@pytest.mark.parametrize("status_code", [401, 500, 503])
@pytest.mark.asyncio
async def test_stripe_ping_rejects_error_status(monkeypatch, status_code: int) -> None:
    _install(monkeypatch, _StubAsyncClient(status_code))

    with pytest.raises(PaymentProviderError) as exc:
        await StripeGateway().ping(STRIPE_CREDENTIALS)

    assert exc.value.provider == "Stripe"
    assert str(status_code) in exc.value.message


@pytest.mark.asyncio
async def test_stripe_ping_wraps_transport_errors(monkeypatch) -> None:
    error = httpx.ConnectError("connection refused")
    _install(monkeypatch, _StubAsyncClient(error=error))

    with pytest.raises(PaymentProviderError, match="connection refused"):
        await StripeGateway().ping(STRIPE_CREDENTIALS)


@pytest.mark.parametrize("status_code", [200, 401])
@pytest.mark.asyncio
async def test_paypal_ping_accepts_success_and_unauthorized(
    monkeypatch, status_code: int
) -> None:
    client = _StubAsyncClient(status_code)
    _install(monkeypatch, client)

    await PayPalGateway("https://paypal.test").ping(PAYPAL_CREDENTIALS)

    call = client.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "https://paypal.test/v1/oauth2/token"
    assert call["data"] == {"grant_type": "client_credentials"}
    assert call["auth"] == ("client", "secret")


@pytest.mark.asyncio
async def test_paypal_ping_without_secret_sends_empty_password(monkeypatch) -> None:
    client = _StubAsyncClient(401)
    _install(monkeypatch, client)

    await PayPalGateway("https://paypal.test").ping(
        PaymentCredentials({"paypal.client_id": "client"})
    )

    assert client.calls[0]["auth"] == ("client", "")


@pytest.mark.parametrize("status_code", [403, 500])
@pytest.mark.asyncio
async def test_paypal_ping_rejects_other_errors(monkeypatch, status_code: int) -> None:
    _install(monkeypatch, _StubAsyncClient(status_code))

    with pytest.raises(PaymentProviderError) as exc:
        await PayPalGateway("https://paypal.test").ping(PAYPAL_CREDENTIALS)

    assert exc.value.provider == "PayPal"


@pytest.mark.asyncio
async def test_paypal_ping_wraps_transport_errors(monkeypatch) -> None:
    _install(monkeypatch, _StubAsyncClient(error=httpx.ReadTimeout("slow")))

    with pytest.raises(PaymentProviderError, match="PayPal request failed"):
        await PayPalGateway("https://paypal.test").ping(PAYPAL_CREDENTIALS)


@pytest.mark.parametrize(
    ("mode", "override", "expected"),
    [
        ("sandbox", None, PAYPAL_BASE_URLS["sandbox"]),
        ("live", None, PAYPAL_BASE_URLS["live"]),
        ("LIVE", None, PAYPAL_BASE_URLS["live"]),
        ("unknown", None, PAYPAL_BASE_URLS["sandbox"]),
        ("live", "http://paypal.local", "http://paypal.local"),
    ],
)
def test_resolve_paypal_base_url(mode, override, expected) -> None:
    assert resolve_paypal_base_url(mode, override) == expected
