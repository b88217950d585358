"""MCP Client for server registration and tool execution.

Provides a single interface for agent code: register servers, inspect
their discovered capabilities, and call tools by server and tool name.
"""

from typing import Any, Iterable, Optional

import httpx

from shared.config import MCPServerConfig, Settings
from shared.logging import get_logger, log_context
from shared.models import MCPServer, ToolDescriptor
from mcp_client.discovery import ToolDiscovery
from mcp_client.errors import DiscoveryError, MCPClientError, ServerDisabledError
from mcp_client.protocol import TOOLS_CALL, encode_result
from mcp_client.registry import ServerRegistry
from mcp_client.transport import DEFAULT_TIMEOUT, MCPTransport

logger = get_logger(__name__)


class MCPClient:
    """
    Client for a set of MCP servers.

    Provides methods for:
    - Registering servers (with capability discovery)
    - Enabling, disabling and removing servers
    - Looking up discovered tools
    - Executing tool calls

    Each client owns its registry and HTTP connection pool; nothing is
    shared between instances.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> None:
        """
        Initialize MCP Client.

        Args:
            timeout: Default request timeout in seconds
            transport: Optional httpx transport override
        """
        self._transport = MCPTransport(timeout=timeout, transport=transport)
        self._discovery = ToolDiscovery(self._transport)
        self._registry = ServerRegistry()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "MCPClient":
        """Build a client using the configured timeout."""
        return cls(timeout=settings.mcp_client.timeout, transport=transport)

    @property
    def timeout(self) -> float:
        return self._transport.timeout

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._transport.close()

    async def __aenter__(self) -> "MCPClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def add_server(
        self,
        name: str,
        endpoint: str,
        enabled: bool = True
    ) -> MCPServer:
        """
        Register a server, discovering its tools and resources.

        Re-adding an existing name replaces the record and its snapshot.
        Discovery runs before the registry is touched, so a failed
        registration leaves any previous record in place.

        Args:
            name: Unique server name
            endpoint: URL the server accepts MCP POSTs on
            enabled: Whether the record starts out enabled

        Returns:
            The registered server record

        Raises:
            DiscoveryError: If tool discovery fails
        """
        tools, resources = await self._discovery.discover(name, endpoint)
        server = MCPServer(
            name=name,
            endpoint=endpoint,
            enabled=enabled,
            tools=tools,
            resources=resources
        )
        await self._registry.put(server)
        return server

    async def load_servers(self, configs: Iterable[MCPServerConfig]) -> list[str]:
        """
        Register servers from configuration.

        Servers whose discovery fails are logged and skipped. Entries
        configured as disabled are registered already disabled.

        Returns:
            Names of the servers that were registered
        """
        registered = []
        for config in configs:
            try:
                await self.add_server(config.name, config.endpoint, enabled=config.enabled)
            except DiscoveryError as e:
                logger.error("Skipping MCP server", server=config.name, error=str(e))
                continue
            registered.append(config.name)
        return registered

    async def remove_server(self, name: str) -> None:
        """Remove a server. Unknown names are ignored."""
        await self._registry.remove(name)

    async def enable_server(self, name: str) -> None:
        """
        Enable a server.

        Raises:
            ServerNotFoundError: If no server has this name
        """
        await self._registry.set_enabled(name, True)

    async def disable_server(self, name: str) -> None:
        """
        Disable a server. Its capability snapshot is kept.

        Raises:
            ServerNotFoundError: If no server has this name
        """
        await self._registry.set_enabled(name, False)

    async def list_server_names(self) -> list[str]:
        """List registered server names in no particular order."""
        return await self._registry.names()

    async def get_server(self, name: str) -> MCPServer:
        """
        Get a server record with its capability snapshot.

        Raises:
            ServerNotFoundError: If no server has this name
        """
        return await self._registry.get(name)

    async def get_tool(self, server_name: str, tool_name: str) -> ToolDescriptor:
        """
        Get a tool descriptor.

        Raises:
            ServerNotFoundError: If no server has this name
            ToolNotFoundError: If the server did not advertise the tool
        """
        return await self._registry.get_tool(server_name, tool_name)

    async def execute_tool(
        self,
        server_name: str,
        tool_name: str,
        arguments: Optional[dict[str, Any]] = None,
        timeout: Optional[float] = None
    ) -> str:
        """
        Execute a tool on a registered server.

        The server record is read under the registry lock and the request
        is sent after the lock is released; removing or disabling the
        server meanwhile does not affect a call already under way.

        Args:
            server_name: Registered server name
            tool_name: Tool to call; not checked against the snapshot
            arguments: JSON-compatible tool arguments
            timeout: Per-call timeout in seconds

        Returns:
            The ``result`` payload re-serialized as JSON

        Raises:
            ServerNotFoundError: Unknown server; no request is made
            ServerDisabledError: Disabled server; no request is made
            TransportError: Connection failure or timeout
            ServerStatusError: Non-2xx response
            RemoteToolError: The server reported an error
            SerializationError: Undecodable request or response
        """
        server = await self._registry.get(server_name)
        if not server.enabled:
            raise ServerDisabledError(server_name, tool=tool_name)

        with log_context(server=server_name, tool=tool_name):
            logger.debug("Executing tool", arguments=arguments)

            try:
                envelope = await self._transport.send(
                    server.endpoint,
                    TOOLS_CALL,
                    {"name": tool_name, "arguments": arguments or {}},
                    server=server_name,
                    tool=tool_name,
                    timeout=timeout
                )
            except MCPClientError as e:
                logger.error("Tool execution failed", error=str(e))
                raise

            result = encode_result(envelope.result)
            logger.debug("Tool executed", result=result)
        return result
