"""Pydantic model for an outbound payout request."""

from typing import Any

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, Field, field_serializer, field_validator
from pydantic_core import PydanticCustomError

from gateway.models.enums import TransactionType

# Largest integer a JSON consumer can represent exactly as a double.
MAX_SAFE_INTEGER = 2**53 - 1


class PayoutRequest(BaseModel):
    """
    A single payout instruction as accepted from the caller.

    Lives only for the duration of one request: validated once, then
    forwarded to the upstream processor as-is. Field names follow the
    upstream wire format, hence the camelCase.
    """

    amount: float = Field(gt=0, allow_inf_nan=False)
    customerName: str = Field(min_length=1)
    customerPhoneNumber: str = Field(min_length=1, pattern=r"^[0-9]{10}$")
    customerEmail: str = Field(min_length=1)
    transactionType: TransactionType
    destinationBank: str = Field(min_length=1)
    accountNumber: str = Field(min_length=1, pattern=r"^[0-9]+$")
    beneficiaryLocation: str = Field(min_length=1)
    ifsc: str = Field(min_length=1)
    merchantID: str = Field(min_length=1)
    affiliateID: str = Field(min_length=1)
    reference: str = Field(min_length=1, pattern=r"^[a-zA-Z0-9]+$")

    model_config = {"extra": "forbid"}

    @field_validator("amount", mode="before")
    @classmethod
    def reject_boolean_amount(cls, value: Any) -> Any:
        # bool is an int subclass and would otherwise coerce to 1.0 / 0.0
        if isinstance(value, bool):
            raise PydanticCustomError("float_type", "Input should be a valid number")
        return value

    @field_validator("amount")
    @classmethod
    def reject_unsafe_amount(cls, value: float) -> float:
        if abs(value) > MAX_SAFE_INTEGER:
            raise PydanticCustomError("unsafe_number", "Input should be a safe number")
        return value

    @field_validator("customerEmail")
    @classmethod
    def check_email_syntax(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as e:
            raise PydanticCustomError("email_syntax", "value is not a valid email address") from e
        # Forwarded exactly as received, not the normalized form.
        return value

    @field_serializer("amount")
    def serialize_amount(self, amount: float) -> int | float:
        return int(amount) if amount.is_integer() else amount
