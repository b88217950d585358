"""Tests for the MCP wire format."""

import json
import math

import pytest

from mcp_client.errors import SerializationError
from mcp_client.protocol import (
    TOOLS_CALL,
    build_request,
    encode_result,
    parse_envelope,
)


class TestBuildRequest:

    def test_tool_call_body(self):
        body = build_request(TOOLS_CALL, {"name": "search", "arguments": {"q": "mcp"}})

        assert json.loads(body) == {
            "method": "tools/call",
            "params": {"name": "search", "arguments": {"q": "mcp"}},
        }

    def test_missing_params_become_empty_object(self):
        assert json.loads(build_request("tools/list")) == {"method": "tools/list", "params": {}}

    def test_unencodable_params(self):
        with pytest.raises(SerializationError, match="tools/call"):
            build_request(TOOLS_CALL, {"arguments": {"value": {1, 2}}})

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_rejects_non_finite_floats(self, value):
        with pytest.raises(SerializationError, match="tools/call"):
            build_request(TOOLS_CALL, {"arguments": {"a": value}})


class TestParseEnvelope:

    def test_result_envelope(self):
        envelope = parse_envelope(b'{"result": {"tools": []}, "error": null}')

        assert envelope.result == {"tools": []}
        assert envelope.error is None

    def test_error_envelope(self):
        envelope = parse_envelope(b'{"result": null, "error": {"code": 7, "message": "bad"}}')

        assert envelope.error.code == 7
        assert envelope.error.message == "bad"

    def test_missing_fields_default_to_none(self):
        envelope = parse_envelope(b"{}")

        assert envelope.result is None
        assert envelope.error is None

    @pytest.mark.parametrize("body", [b"", b"not json", b"[1, 2]", b"42"])
    def test_rejects_non_envelopes(self, body):
        with pytest.raises(SerializationError):
            parse_envelope(body)

    def test_error_without_code_defaults_to_zero(self):
        envelope = parse_envelope(b'{"error": {"message": "no code"}}')

        assert envelope.error.code == 0
        assert envelope.error.message == "no code"

    def test_null_error_fields(self):
        envelope = parse_envelope(b'{"error": {"code": null, "message": null}}')

        assert envelope.error.code == 0
        assert envelope.error.message == ""

    def test_rejects_non_integer_code(self):
        with pytest.raises(SerializationError, match="Malformed"):
            parse_envelope(b'{"error": {"code": "E42", "message": "bad"}}')


class TestEncodeResult:

    def test_scalars(self):
        assert encode_result(42) == "42"
        assert encode_result(None) == "null"
        assert encode_result("text") == '"text"'

    def test_keeps_unicode(self):
        assert encode_result({"text": "café"}) == '{"text": "café"}'
