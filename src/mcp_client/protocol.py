"""MCP wire format.

Requests are ``{"method": ..., "params": {...}}`` JSON objects; every
response is a ``{"result": ..., "error": {"code", "message"} | null}``
envelope.
"""

import json
from typing import Any, Optional

from pydantic import ValidationError

from shared.models import ResponseEnvelope
from mcp_client.errors import SerializationError

TOOLS_LIST = "tools/list"
RESOURCES_LIST = "resources/list"
TOOLS_CALL = "tools/call"


def build_request(method: str, params: Optional[dict[str, Any]] = None) -> bytes:
    """
    Encode a request body.

    Raises:
        SerializationError: If ``params`` holds values JSON cannot represent
    """
    try:
        return json.dumps(
            {"method": method, "params": params or {}},
            allow_nan=False
        ).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode {method} request: {e}") from e


def parse_envelope(body: bytes) -> ResponseEnvelope:
    """
    Decode a response body into an envelope.

    Raises:
        SerializationError: If the body is not a JSON object envelope
    """
    try:
        data = json.loads(body)
    except ValueError as e:
        raise SerializationError(f"Failed to parse response: {e}") from e

    if not isinstance(data, dict):
        raise SerializationError(
            f"Failed to parse response: expected a JSON object, got {type(data).__name__}"
        )

    try:
        return ResponseEnvelope.model_validate(data)
    except ValidationError as e:
        raise SerializationError(f"Malformed response envelope: {e}") from e


def encode_result(result: Any) -> str:
    """Re-serialize a ``result`` payload for the caller, without interpreting it."""
    return json.dumps(result, ensure_ascii=False)
