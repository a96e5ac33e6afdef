from gateway.models.enums import TransactionType
from gateway.models.payout import PayoutRequest

__all__ = [
    "PayoutRequest",
    "TransactionType",
]
