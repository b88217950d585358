"""HTTP transport for MCP requests.

One request, one response: no retries, no streaming. A single
``httpx.AsyncClient`` is shared by every call made through a transport.
"""

from typing import Any, Optional

import httpx

from shared.logging import get_logger
from shared.models import ResponseEnvelope
from mcp_client.errors import (
    RemoteToolError,
    SerializationError,
    ServerStatusError,
    TransportError,
)
from mcp_client.protocol import build_request, parse_envelope

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 30.0


class MCPTransport:
    """
    Posts MCP requests to server endpoints.

    Args:
        timeout: Default request timeout in seconds
        transport: Optional httpx transport, e.g. ``httpx.MockTransport``
            or ``httpx.ASGITransport`` in tests
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                timeout=self.timeout,
                headers={"Content-Type": "application/json"},
                transport=self._transport
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def send(
        self,
        endpoint: str,
        method: str,
        params: Optional[dict[str, Any]] = None,
        *,
        server: Optional[str] = None,
        tool: Optional[str] = None,
        timeout: Optional[float] = None
    ) -> ResponseEnvelope:
        """
        Send one request and return its envelope.

        Args:
            endpoint: Server URL
            method: Protocol method, e.g. ``tools/call``
            params: Method parameters
            server: Server name, for error context
            tool: Tool name, for error context
            timeout: Per-call timeout overriding the default

        Returns:
            The decoded envelope, guaranteed to carry no error

        Raises:
            TransportError: Connection failure or timeout
            ServerStatusError: Non-2xx response
            SerializationError: Undecodable request or response
            RemoteToolError: Envelope carried an error
        """
        try:
            body = build_request(method, params)
        except SerializationError as e:
            e.server, e.tool = server, tool
            raise
        client = self._get_client()

        logger.debug("Sending MCP request", server=server, method=method, endpoint=endpoint)

        try:
            response = await client.post(
                endpoint,
                content=body,
                timeout=timeout if timeout is not None else httpx.USE_CLIENT_DEFAULT
            )
        except httpx.TimeoutException as e:
            raise TransportError(
                f"Request to {endpoint} timed out: {e}", server=server, tool=tool
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(
                f"Failed to send request to {endpoint}: {e}", server=server, tool=tool
            ) from e

        if not response.is_success:
            raise ServerStatusError(response.status_code, server=server, tool=tool)

        try:
            envelope = parse_envelope(response.content)
        except SerializationError as e:
            e.server, e.tool = server, tool
            raise

        if envelope.error is not None:
            raise RemoteToolError(
                envelope.error.code,
                envelope.error.message,
                server=server,
                tool=tool
            )
        return envelope
