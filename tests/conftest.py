"""Shared test fixtures."""

import httpx
import pytest
import pytest_asyncio

from gateway.config import Settings
from gateway.main import create_app
from gateway.providers.flipopay import FlipopayProvider
from gateway.upstream import get_provider


class FakeUpstream:
    """httpx.MockTransport handler that records requests and replays a canned response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(200, json={"txnId": "X"})
        self.error: Exception | None = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def payout_payload():
    """A payout body that satisfies every constraint."""
    return {
        "amount": 1500,
        "customerName": "Priya Sharma",
        "customerPhoneNumber": "9876543210",
        "customerEmail": "priya.sharma@acmepay.in",
        "transactionType": "IMPS",
        "destinationBank": "HDFC Bank",
        "accountNumber": "50100234567890",
        "beneficiaryLocation": "Mumbai",
        "ifsc": "HDFC0000123",
        "merchantID": "MER1001",
        "affiliateID": "AFF2002",
        "reference": "PAYOUT20240601A",
    }


@pytest.fixture
def secret_key():
    return "test-secret"


@pytest.fixture
def upstream():
    return FakeUpstream()


@pytest_asyncio.fixture
async def client(upstream: FakeUpstream, secret_key: str):
    """HTTP client bound to a gateway app whose processor is faked."""
    app = create_app(Settings(flipopay_secret_key=secret_key))
    upstream_client = httpx.AsyncClient(transport=httpx.MockTransport(upstream))
    provider = FlipopayProvider(upstream_client, secret_key=secret_key)
    app.dependency_overrides[get_provider] = lambda: provider

    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as http:
        yield http

    await upstream_client.aclose()
