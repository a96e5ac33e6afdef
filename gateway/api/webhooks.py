"""
Processor callback endpoint.

POST /webhook/flipopay — Acknowledge an asynchronous payout status callback.
Callbacks are not persisted or signature-checked; the only requirement is
a non-empty crn.
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from gateway.api.body import InvalidJSONBody, read_json_body

logger = logging.getLogger("payout_gateway.webhooks")

router = APIRouter(prefix="/webhook", tags=["webhooks"])


def extract_crn(payload: Any) -> Any:
    if not isinstance(payload, dict):
        return None
    return payload.get("crn")


@router.post("/flipopay")
async def receive_flipopay_webhook(request: Request):
    try:
        payload = await read_json_body(request)
    except InvalidJSONBody as e:
        logger.warning("Invalid webhook payload: %s", e)
        return JSONResponse(status_code=400, content={"message": "Bad Request: Invalid JSON"})

    try:
        logger.info("Webhook data received: %s", payload)
        crn = extract_crn(payload)
        if not crn:
            logger.warning("Invalid webhook payload: missing crn")
            return JSONResponse(status_code=400, content={"message": "Bad Request: Missing crn"})
        logger.info("Webhook acknowledged for crn=%s", crn)
        return {"message": "Webhook processed successfully"}
    except Exception:
        logger.exception("Error processing webhook")
        return JSONResponse(status_code=500, content={"message": "Internal Server Error"})
