"""Raw JSON body decoding shared by the routes."""

import json
from typing import Any

from fastapi import Request


class InvalidJSONBody(Exception):
    """The request declared a JSON body that could not be decoded."""


def _is_json(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


async def read_json_body(request: Request) -> Any:
    """
    Decode the request body as JSON.

    Bodies that are empty or not sent as JSON decode to an empty object,
    so schema checks report the missing fields instead of a parse error.

    Raises:
        InvalidJSONBody: If a JSON content type was sent with a malformed body.
    """
    raw = await request.body()
    if not raw or not _is_json(request.headers.get("content-type", "")):
        return {}
    try:
        return json.loads(raw)
    except ValueError as e:
        raise InvalidJSONBody(str(e)) from e
