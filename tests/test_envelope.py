import base64
import json

import pytest

from catalog_utils import catalog_text, course, plan_text, section
from envelope import (
    EnvelopeError,
    bad_request_body,
    decode_request_body,
    handle_trigger_event,
    internal_error_body,
    ok_body,
)


def _b64(payload) -> str:
    return base64.b64encode(json.dumps(payload).encode("utf-8")).decode("ascii")


@pytest.fixture
def payload():
    return {
        "input_data": catalog_text([course("A")], [section("A", "x")]),
        "output_data": plan_text([("A", "x")]),
    }


class TestDecodeRequestBody:
    def test_plain_json(self, payload):
        assert decode_request_body(json.dumps(payload)) == (
            payload["input_data"],
            payload["output_data"],
        )

    def test_bytes_body(self, payload):
        body = json.dumps(payload).encode("utf-8")
        assert decode_request_body(body)[0] == payload["input_data"]

    def test_base64_json(self, payload):
        assert decode_request_body(_b64(payload), is_base64_encoded=True)[1] == payload["output_data"]

    def test_missing_keys_default_to_empty(self):
        assert decode_request_body("{}") == ("", "")

    def test_null_values_default_to_empty(self):
        assert decode_request_body('{"input_data": null, "output_data": "0"}') == ("", "0")

    @pytest.mark.parametrize("body,b64", [
        ("not json", False),
        ("[1, 2]", False),
        ('{"input_data": 5}', False),
        ("%%%not-base64%%%", True),
        (None, False),
    ])
    def test_rejects_bad_envelopes(self, body, b64):
        with pytest.raises(EnvelopeError):
            decode_request_body(body, is_base64_encoded=b64)


class TestBodies:
    def test_ok_body(self):
        assert ok_body({"status": 1}) == {
            "success": True,
            "code": 200,
            "message": "ok",
            "data": {"status": 1},
        }

    def test_bad_request_body(self):
        assert bad_request_body("nope") == {"success": False, "code": 400, "message": "nope"}

    def test_internal_error_body(self):
        body = internal_error_body()
        assert body["success"] is False
        assert body["message"] == "internal server error"


class TestHandleTriggerEvent:
    def test_accepted_plan(self, payload):
        resp = handle_trigger_event({"body": json.dumps(payload), "isBase64Encoded": False})
        assert resp["statusCode"] == 200
        assert resp["headers"]["Content-Type"] == "application/json"
        body = json.loads(resp["body"])
        assert body["success"] is True
        assert body["data"]["status"] == 1
        assert body["data"]["compulsory_count"] == 1

    def test_base64_event(self, payload):
        resp = handle_trigger_event({"body": _b64(payload), "isBase64Encoded": True})
        assert json.loads(resp["body"])["data"]["status"] == 1

    def test_rejected_plan_is_still_200(self, payload):
        payload["output_data"] = plan_text([("A", "nope")])
        resp = handle_trigger_event({"body": json.dumps(payload)})
        assert resp["statusCode"] == 200
        data = json.loads(resp["body"])["data"]
        assert data["status"] == 2
        assert data["comment"] == "class A nope does not exist"

    def test_catalog_error_status(self):
        resp = handle_trigger_event({"body": json.dumps({"input_data": "x", "output_data": ""})})
        assert json.loads(resp["body"])["data"]["status"] == 3

    def test_missing_body_is_400(self):
        resp = handle_trigger_event({"isBase64Encoded": False})
        assert resp["statusCode"] == 400
        assert json.loads(resp["body"])["success"] is False

    def test_non_dict_event_is_400(self):
        assert handle_trigger_event(None)["statusCode"] == 400
