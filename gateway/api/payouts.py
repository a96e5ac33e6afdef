"""
Payout initiation endpoint.

POST /v1/payouts/initiate — Validate a payout and forward it to the processor.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from gateway.api.body import InvalidJSONBody, read_json_body
from gateway.engine.validation import validate_payout
from gateway.providers.base import PayoutProvider, UpstreamError
from gateway.upstream import get_provider

logger = logging.getLogger("payout_gateway.forwarder")

router = APIRouter(prefix="/v1/payouts", tags=["payouts"])

INVALID_JSON = "body must be valid JSON"
GENERIC_UPSTREAM_ERROR = "An error occurred while initiating the payout."


def _validation_error(details: list[str]) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"status": False, "error": "Validation error", "details": details},
    )


@router.post("/initiate")
async def initiate_payout(request: Request, provider: PayoutProvider = Depends(get_provider)):
    """
    Validate the body and relay it to the upstream payout API.

    Invalid bodies never reach the processor. Upstream failures are
    passed through with the processor's status and body when it answered,
    and as a generic 500 when it could not be reached.
    """
    try:
        raw = await read_json_body(request)
    except InvalidJSONBody:
        return _validation_error([INVALID_JSON])

    result = validate_payout(raw)
    if not result.valid:
        return _validation_error(result.errors)

    try:
        upstream = await provider.initiate_payout(result.value)
    except UpstreamError as e:
        logger.error(
            "Error calling payout API: %s (provider=%s reference=%s)",
            e,
            provider.name,
            result.value["reference"],
        )
        error = e.body if e.body not in (None, "") else GENERIC_UPSTREAM_ERROR
        return JSONResponse(
            status_code=e.status_code or 500,
            content={"status": False, "error": error},
        )

    return {"status": True, "data": upstream.body}
