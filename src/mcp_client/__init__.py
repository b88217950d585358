"""MCP Client - Server registry, discovery, and tool execution.

The MCP Client registers MCP servers, discovers the tools and resources
each one exposes, and executes tool calls against them over HTTP.
"""

from mcp_client.client import MCPClient
from mcp_client.discovery import ToolDiscovery
from mcp_client.errors import (
    DiscoveryError,
    MCPClientError,
    NotFoundError,
    RemoteToolError,
    SerializationError,
    ServerDisabledError,
    ServerNotFoundError,
    ServerStatusError,
    ToolNotFoundError,
    TransportError,
)
from mcp_client.registry import ServerRegistry

__all__ = [
    "MCPClient",
    "ToolDiscovery",
    "ServerRegistry",
    "MCPClientError",
    "NotFoundError",
    "ServerNotFoundError",
    "ToolNotFoundError",
    "ServerDisabledError",
    "DiscoveryError",
    "TransportError",
    "ServerStatusError",
    "RemoteToolError",
    "SerializationError",
]
