"""
Abstract upstream payout provider interface.

The gateway forwards a validated payout to exactly one processor per
request. Providers wrap that processor's HTTP API; tests swap the
transport underneath rather than the provider itself.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class ProviderResponse:
    """Successful (2xx) response from the upstream processor."""

    status_code: int
    body: Any


class UpstreamError(Exception):
    """
    The upstream call did not succeed.

    status_code and body are set when the processor answered with a
    non-2xx response; both are None for transport failures (DNS, refused
    connection, TLS, timeouts).
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class PayoutProvider(ABC):
    """Abstract base class for payout processors."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider identifier (e.g. 'flipopay')."""
        ...

    @abstractmethod
    async def initiate_payout(self, payload: dict[str, Any]) -> ProviderResponse:
        """
        Submit a validated payout to the processor.

        A single round-trip: no retries, no idempotency key.

        Raises:
            UpstreamError: On non-2xx response or transport failure.
        """
        ...
