"""
Flipopay payout API client.

Posts the validated payout body to the Flipopay initiate endpoint with the
merchant's shared secret in the X-Secret-Key header. The upstream response
body is relayed to the caller verbatim, so it is decoded as JSON when
possible and kept as text otherwise.
"""

import logging
from typing import Any, Optional

import httpx

from gateway.config import FLIPOPAY_PAYOUT_URL
from gateway.providers.base import PayoutProvider, ProviderResponse, UpstreamError

logger = logging.getLogger("payout_gateway.forwarder")

SECRET_HEADER = "X-Secret-Key"


def decode_body(response: httpx.Response) -> Any:
    """Return the response body as JSON, falling back to text; None if empty."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


class FlipopayProvider(PayoutProvider):
    """Forwards payouts to Flipopay over a shared httpx.AsyncClient."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        secret_key: Optional[str],
        payout_url: str = FLIPOPAY_PAYOUT_URL,
    ):
        self._client = client
        self._secret_key = secret_key
        self._payout_url = payout_url

    @property
    def name(self) -> str:
        return "flipopay"

    def _headers(self) -> dict[str, str]:
        if self._secret_key is None:
            return {}
        return {SECRET_HEADER: self._secret_key}

    async def initiate_payout(self, payload: dict[str, Any]) -> ProviderResponse:
        try:
            response = await self._client.post(
                self._payout_url,
                json=payload,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            raise UpstreamError(f"{type(e).__name__}: {e}") from e

        body = decode_body(response)
        if not response.is_success:
            raise UpstreamError(
                f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        logger.debug(
            "Payout accepted by %s (status %d, reference=%s)",
            self.name,
            response.status_code,
            payload.get("reference"),
        )
        return ProviderResponse(status_code=response.status_code, body=body)
