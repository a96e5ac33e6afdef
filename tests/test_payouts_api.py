"""End-to-end tests for POST /api/v1/payouts/initiate against a faked processor."""

import json
import logging

import httpx
import pytest

from gateway.config import FLIPOPAY_PAYOUT_URL

INITIATE = "/api/v1/payouts/initiate"


@pytest.mark.asyncio
async def test_successful_payout_is_relayed(client, upstream, payout_payload):
    response = await client.post(INITIATE, json=payout_payload)

    assert response.status_code == 200
    assert response.json() == {"status": True, "data": {"txnId": "X"}}


@pytest.mark.asyncio
async def test_forwarded_request_carries_secret_and_body(client, upstream, payout_payload, secret_key):
    await client.post(INITIATE, json=payout_payload)

    assert len(upstream.requests) == 1
    sent = upstream.requests[0]
    assert sent.method == "POST"
    assert str(sent.url) == FLIPOPAY_PAYOUT_URL
    assert sent.headers["X-Secret-Key"] == secret_key
    assert json.loads(sent.content) == payout_payload


@pytest.mark.asyncio
async def test_upstream_error_status_and_body_are_relayed(client, upstream, payout_payload):
    upstream.response = httpx.Response(503, json={"message": "Service Unavailable"})

    response = await client.post(INITIATE, json=payout_payload)

    assert response.status_code == 503
    assert response.json() == {"status": False, "error": {"message": "Service Unavailable"}}


@pytest.mark.asyncio
async def test_upstream_error_without_body_uses_generic_message(client, upstream, payout_payload):
    upstream.response = httpx.Response(502)

    response = await client.post(INITIATE, json=payout_payload)

    assert response.status_code == 502
    assert response.json() == {
        "status": False,
        "error": "An error occurred while initiating the payout.",
    }


@pytest.mark.asyncio
async def test_unreachable_upstream_is_500(client, upstream, payout_payload):
    upstream.error = httpx.ConnectError("connection refused")

    response = await client.post(INITIATE, json=payout_payload)

    assert response.status_code == 500
    assert response.json() == {
        "status": False,
        "error": "An error occurred while initiating the payout.",
    }


@pytest.mark.asyncio
async def test_invalid_payout_never_reaches_upstream(client, upstream, payout_payload):
    payout_payload["amount"] = 0
    payout_payload["reference"] = "abc-123"

    response = await client.post(INITIATE, json=payout_payload)

    assert response.status_code == 400
    assert response.json() == {
        "status": False,
        "error": "Validation error",
        "details": ["amount must be a positive value", "reference must be alphanumeric"],
    }
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_malformed_json_body(client, upstream):
    response = await client.post(
        INITIATE,
        content=b'{"amount": 10,',
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == 400
    assert response.json()["details"] == ["body must be valid JSON"]
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_non_json_body_reports_missing_fields(client, upstream):
    response = await client.post(INITIATE, data={"amount": "10"})

    assert response.status_code == 400
    details = response.json()["details"]
    assert len(details) == 12
    assert details[0] == "amount is required"


@pytest.mark.asyncio
async def test_array_body_is_rejected(client):
    response = await client.post(INITIATE, json=[1, 2, 3])

    assert response.status_code == 400
    assert response.json()["details"] == ["value must be of type object"]


@pytest.mark.asyncio
async def test_unknown_field_rejects_whole_payout(client, upstream, payout_payload):
    response = await client.post(INITIATE, json={**payout_payload, "debug": True})

    assert response.status_code == 400
    assert response.json()["details"] == ["debug is not allowed"]
    assert upstream.requests == []


@pytest.mark.asyncio
async def test_forwarding_failure_is_logged(client, upstream, payout_payload, caplog):
    upstream.response = httpx.Response(503, json={"message": "Service Unavailable"})

    with caplog.at_level(logging.ERROR, logger="payout_gateway.forwarder"):
        await client.post(INITIATE, json=payout_payload)

    records = [r for r in caplog.records if r.name == "payout_gateway.forwarder"]
    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert "Error calling payout API" in records[0].getMessage()
    assert "status code 503" in records[0].getMessage()
    assert payout_payload["reference"] in records[0].getMessage()
    assert payout_payload["customerEmail"] not in caplog.text
