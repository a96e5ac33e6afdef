"""Shared upstream HTTP client and provider wiring."""

import httpx
from fastapi import Request

from gateway.config import Settings
from gateway.providers.base import PayoutProvider
from gateway.providers.flipopay import FlipopayProvider


def create_http_client() -> httpx.AsyncClient:
    """One client per process so connections to the processor are reused."""
    return httpx.AsyncClient(follow_redirects=True)


def build_provider(client: httpx.AsyncClient, config: Settings) -> PayoutProvider:
    return FlipopayProvider(
        client=client,
        secret_key=config.flipopay_secret_key,
        payout_url=config.flipopay_payout_url,
    )


def get_provider(request: Request) -> PayoutProvider:
    return request.app.state.provider
