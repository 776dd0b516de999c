"""
Request/response envelopes around the judge.

Request body: JSON {"input_data": str, "output_data": str}, optionally
base64-wrapped. Response body: {"success", "code", "message"[, "data"]}.
No Flask imports; server.py and the HTTP-trigger adapter both use these.
"""

from __future__ import annotations

import base64
import binascii
import json

from judge import judge

JSON_HEADERS = {"Content-Type": "application/json"}


class EnvelopeError(ValueError):
    """The request envelope could not be decoded."""


def decode_request_body(body, is_base64_encoded: bool = False) -> tuple[str, str]:
    """
    Decode a request body into (input_data, output_data).

    Missing keys decode to empty strings, which the judge then reports as
    an exhausted catalog.
    """
    if body is None:
        raise EnvelopeError("request body is missing")

    raw = body
    if is_base64_encoded:
        try:
            raw = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError, TypeError) as exc:
            raise EnvelopeError(f"invalid base64 body: {exc}") from exc

    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
        raise EnvelopeError(f"invalid JSON body: {exc}") from exc

    if not isinstance(payload, dict):
        raise EnvelopeError("request body must be a JSON object")

    fields = []
    for name in ("input_data", "output_data"):
        value = payload.get(name)
        if value is None:
            value = ""
        if not isinstance(value, str):
            raise EnvelopeError(f"'{name}' must be a string")
        fields.append(value)
    return fields[0], fields[1]


def ok_body(data) -> dict:
    return {"success": True, "code": 200, "message": "ok", "data": data}


def bad_request_body(message: str, code: int = 400) -> dict:
    return {"success": False, "code": code, "message": message}


def internal_error_body() -> dict:
    return {"success": False, "code": 500, "message": "internal server error"}


def _trigger_response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": dict(JSON_HEADERS),
        "isBase64Encoded": False,
        "body": json.dumps(body),
    }


def handle_trigger_event(event: dict, legacy_post_edges: bool = False) -> dict:
    """
    Serverless HTTP-trigger entry point.

    A judged plan is always a 200 carrying the result record, whatever its
    status; only an undecodable envelope is a 400.
    """
    if not isinstance(event, dict):
        return _trigger_response(400, bad_request_body("event must be a JSON object"))

    try:
        input_data, output_data = decode_request_body(
            event.get("body"),
            bool(event.get("isBase64Encoded")),
        )
    except EnvelopeError as exc:
        return _trigger_response(400, bad_request_body(str(exc)))

    result = judge(input_data, output_data, legacy_post_edges=legacy_post_edges)
    return _trigger_response(200, ok_body(result.to_dict()))
