"""Fake MCP servers for tests.

Two flavours: ``RecordingTransport`` answers from canned envelopes via
``httpx.MockTransport`` and counts requests; ``create_fake_server`` is a
FastAPI app served in-process through ``httpx.ASGITransport`` so tests
exercise real request encoding, HTTP framing, and response decoding.
"""

import json
from typing import Any, Callable, Optional

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

ENDPOINT = "http://mcp.test/rpc"
FAKE_SERVER_ENDPOINT = "http://fake-mcp.test/mcp"

FAKE_TOOLS = [
    {
        "name": "echo",
        "description": "Echo text back",
        "inputSchema": {
            "type": "object",
            "properties": {"text": {"type": "string"}},
            "required": ["text"],
        },
    },
    {
        "name": "add",
        "description": "Add two numbers",
        "inputSchema": {
            "type": "object",
            "properties": {"a": {"type": "number"}, "b": {"type": "number"}},
        },
    },
]

FAKE_RESOURCES = [
    {
        "uri": "file:///docs/readme.md",
        "name": "readme",
        "description": "Project readme",
        "mimeType": "text/markdown",
    },
]

Responder = Callable[[httpx.Request, dict[str, Any]], httpx.Response]


def envelope(
    result: Any = None,
    error: Optional[dict[str, Any]] = None,
    status_code: int = 200
) -> Responder:
    """Responder returning a fixed ``{result, error}`` envelope."""
    def respond(request: httpx.Request, payload: dict[str, Any]) -> httpx.Response:
        return httpx.Response(status_code, json={"result": result, "error": error})
    return respond


def raw(content: bytes, status_code: int = 200) -> Responder:
    """Responder returning an arbitrary body."""
    def respond(request: httpx.Request, payload: dict[str, Any]) -> httpx.Response:
        return httpx.Response(status_code, content=content)
    return respond


def raises(exc_type: type[httpx.TransportError], message: str = "boom") -> Responder:
    """Responder that fails at the transport level."""
    def respond(request: httpx.Request, payload: dict[str, Any]) -> httpx.Response:
        raise exc_type(message, request=request)
    return respond


DEFAULT_ROUTES: dict[str, Responder] = {
    "tools/list": envelope({"tools": FAKE_TOOLS}),
    "resources/list": envelope({"resources": FAKE_RESOURCES}),
    "tools/call": envelope(42),
}


class RecordingTransport:
    """
    ``httpx.MockTransport`` that routes by MCP method and records requests.

    Unrouted methods get HTTP 404.
    """

    def __init__(self, overrides: Optional[dict[str, Responder]] = None) -> None:
        self.routes = {**DEFAULT_ROUTES, **(overrides or {})}
        self.requests: list[tuple[httpx.Request, dict[str, Any]]] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        self.requests.append((request, payload))
        responder = self.routes.get(payload["method"])
        if responder is None:
            return httpx.Response(404)
        return responder(request, payload)

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def methods(self) -> list[str]:
        return [payload["method"] for _, payload in self.requests]

    def reset(self) -> None:
        self.requests.clear()


def create_fake_server(fail_resources: bool = False) -> FastAPI:
    """
    Build the fake server, answering POSTs on ``/mcp``.

    Every request payload and its Content-Type header are appended to
    ``app.state.received`` for assertions.
    """
    app = FastAPI(title="Fake MCP Server")
    app.state.received = []

    def ok(result: Any) -> dict[str, Any]:
        return {"result": result, "error": None}

    def fail(code: int, message: str) -> dict[str, Any]:
        return {"result": None, "error": {"code": code, "message": message}}

    @app.post("/mcp")
    async def handle(request: Request):
        payload = await request.json()
        app.state.received.append((request.headers.get("content-type"), payload))

        method = payload.get("method")
        params = payload.get("params") or {}

        if method == "tools/list":
            return ok({"tools": FAKE_TOOLS})

        if method == "resources/list":
            if fail_resources:
                return JSONResponse(status_code=500, content={"detail": "resources unavailable"})
            return ok({"resources": FAKE_RESOURCES})

        if method == "tools/call":
            arguments = params.get("arguments") or {}
            if params.get("name") == "echo":
                return ok({"content": [{"type": "text", "text": arguments.get("text", "")}]})
            if params.get("name") == "add":
                return ok(arguments["a"] + arguments["b"])
            return fail(-32602, f"Unknown tool: {params.get('name')}")

        return fail(-32601, f"Method not found: {method}")

    return app
