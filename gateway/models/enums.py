"""Enumerations for the payout gateway domain model."""

from enum import Enum


class TransactionType(str, Enum):
    """Funds-transfer rails accepted by the upstream processor."""

    NEFT = "NEFT"
    IMPS = "IMPS"
    RTGS = "RTGS"
    UPI = "UPI"
