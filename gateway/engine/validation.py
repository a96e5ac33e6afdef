"""
Payout request validation with caller-facing error messages.

Every field of the request is checked (no short-circuit), and each
offending field yields exactly one human-readable message. The message
wording is part of the public API: callers match on these strings, so
they are kept in a single catalogue below rather than derived from
pydantic's own error text.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError

from gateway.models.enums import TransactionType
from gateway.models.payout import PayoutRequest

NOT_AN_OBJECT = "value must be of type object"

# pydantic error type -> message category
_ERROR_CATEGORIES = {
    "missing": "required",
    "string_type": "base",
    "float_type": "base",
    "float_parsing": "base",
    "finite_number": "base",
    "string_too_short": "empty",
    "greater_than": "positive",
    "string_pattern_mismatch": "pattern",
    "enum": "only",
    "email_syntax": "email",
    "unsafe_number": "unsafe",
    "extra_forbidden": "unknown",
}

_DEFAULT_MESSAGES = {
    "required": "{field} is required",
    "base": "{field} must be a string",
    "empty": "{field} is not allowed to be empty",
    "unsafe": "{field} must be a safe number",
    "unknown": "{field} is not allowed",
}

_FIELD_MESSAGES = {
    "amount": {
        "base": "amount must be a number",
        "positive": "amount must be a positive value",
    },
    "customerPhoneNumber": {
        "pattern": "customerPhoneNumber must be a 10-digit number",
    },
    "customerEmail": {
        "email": "customerEmail must be a valid email",
    },
    "transactionType": {
        "only": "transactionType must be one of [{}]".format(
            ", ".join(t.value for t in TransactionType)
        ),
    },
    "accountNumber": {
        "pattern": "accountNumber must be a numeric value",
    },
    "reference": {
        "pattern": "reference must be alphanumeric",
    },
}


@dataclass
class ValidationResult:
    """Outcome of validating a raw payout body."""

    valid: bool
    value: Optional[dict[str, Any]] = None
    errors: list[str] = field(default_factory=list)


def _message_for(field_name: str, error_type: str) -> str:
    category = _ERROR_CATEGORIES.get(error_type)
    template = _FIELD_MESSAGES.get(field_name, {}).get(category) or _DEFAULT_MESSAGES.get(category)
    if template is None:
        return f"{field_name} is invalid"
    return template.format(field=field_name)


def translate_errors(exc: ValidationError) -> list[str]:
    """
    Turn a pydantic ValidationError into catalogue messages.

    Errors arrive in field-declaration order; only the first error per
    field is kept so that each field contributes at most one message.
    """
    messages = []
    seen = set()
    for error in exc.errors():
        field_name = str(error["loc"][0]) if error["loc"] else "value"
        if field_name in seen:
            continue
        seen.add(field_name)
        messages.append(_message_for(field_name, error["type"]))
    return messages


def validate_payout(raw: Any) -> ValidationResult:
    """
    Validate an inbound payout body against the PayoutRequest schema.

    Args:
        raw: The decoded request body (any JSON value).

    Returns:
        ValidationResult with the normalized request on success, or the
        ordered list of messages on failure. Unknown keys are rejected.
    """
    if not isinstance(raw, dict):
        return ValidationResult(valid=False, errors=[NOT_AN_OBJECT])

    try:
        request = PayoutRequest.model_validate(raw)
    except ValidationError as e:
        return ValidationResult(valid=False, errors=translate_errors(e))

    return ValidationResult(valid=True, value=request.model_dump(mode="json"))
