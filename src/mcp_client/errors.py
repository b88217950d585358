"""Exceptions raised by the MCP client.

Every error names the server (and tool, where one is involved) so callers
can render a diagnostic without extra bookkeeping. Underlying causes are
chained with ``raise ... from``.
"""

from typing import Optional


class MCPClientError(Exception):
    """Base exception for MCP client errors."""

    def __init__(
        self,
        message: str,
        server: Optional[str] = None,
        tool: Optional[str] = None
    ) -> None:
        super().__init__(message)
        self.server = server
        self.tool = tool


class NotFoundError(MCPClientError):
    """A server or tool is not registered."""
    pass


class ServerNotFoundError(NotFoundError):
    """No server is registered under the requested name."""

    def __init__(self, server: str) -> None:
        super().__init__(f"MCP server '{server}' not found", server=server)


class ToolNotFoundError(NotFoundError):
    """The server exists but did not advertise the tool."""

    def __init__(self, server: str, tool: str) -> None:
        super().__init__(
            f"Tool '{tool}' not found in MCP server '{server}'",
            server=server,
            tool=tool
        )


class ServerDisabledError(MCPClientError):
    """The server is registered but disabled."""

    def __init__(self, server: str, tool: Optional[str] = None) -> None:
        super().__init__(f"MCP server '{server}' is disabled", server=server, tool=tool)


class DiscoveryError(MCPClientError):
    """Tool discovery failed while registering a server."""
    pass


class TransportError(MCPClientError):
    """Connection failure or timeout talking to a server."""
    pass


class ServerStatusError(MCPClientError):
    """The server answered with a non-2xx HTTP status."""

    def __init__(
        self,
        status_code: int,
        server: Optional[str] = None,
        tool: Optional[str] = None
    ) -> None:
        super().__init__(
            f"MCP server returned status {status_code}",
            server=server,
            tool=tool
        )
        self.status_code = status_code


class RemoteToolError(MCPClientError):
    """The response envelope carried a protocol-level error."""

    def __init__(
        self,
        code: int,
        message: str,
        server: Optional[str] = None,
        tool: Optional[str] = None
    ) -> None:
        super().__init__(f"MCP error {code}: {message}", server=server, tool=tool)
        self.code = code
        self.remote_message = message


class SerializationError(MCPClientError):
    """A request could not be encoded or a response could not be decoded."""
    pass
