"""Capability discovery for MCP servers.

Run once when a server is registered. Tools are required for a server to
be useful, so a failed tool listing fails the registration; resources are
supplementary metadata and a failed listing just means "no resources".
"""

from typing import Any

from pydantic import BaseModel, ValidationError

from shared.logging import get_logger
from shared.models import ResourceDescriptor, ResourceList, ToolDescriptor, ToolList
from mcp_client.errors import DiscoveryError, MCPClientError, SerializationError
from mcp_client.protocol import RESOURCES_LIST, TOOLS_LIST
from mcp_client.transport import MCPTransport

logger = get_logger(__name__)


class ToolDiscovery:
    """
    One-shot tool and resource discovery.

    Results are not cached and failed calls are not retried; every call
    is exactly one request.
    """

    def __init__(self, transport: MCPTransport) -> None:
        self.transport = transport

    async def discover_tools(
        self,
        server_name: str,
        endpoint: str
    ) -> tuple[ToolDescriptor, ...]:
        """
        List the tools a server exposes.

        Raises:
            DiscoveryError: On any failure, chaining the cause
        """
        try:
            envelope = await self.transport.send(endpoint, TOOLS_LIST, server=server_name)
            tools = _parse(ToolList, envelope.result, server_name).tools
        except MCPClientError as e:
            raise DiscoveryError(
                f"Failed to discover tools from MCP server '{server_name}': {e}",
                server=server_name
            ) from e

        logger.debug("Tools discovered", server=server_name, tool_count=len(tools))
        return tuple(tools)

    async def discover_resources(
        self,
        server_name: str,
        endpoint: str
    ) -> tuple[ResourceDescriptor, ...]:
        """List the resources a server exposes; any failure yields none."""
        try:
            envelope = await self.transport.send(endpoint, RESOURCES_LIST, server=server_name)
            resources = _parse(ResourceList, envelope.result, server_name).resources
        except MCPClientError as e:
            logger.warning(
                "Resource discovery failed, continuing without resources",
                server=server_name,
                error=str(e)
            )
            return ()

        logger.debug("Resources discovered", server=server_name, resource_count=len(resources))
        return tuple(resources)

    async def discover(
        self,
        server_name: str,
        endpoint: str
    ) -> tuple[tuple[ToolDescriptor, ...], tuple[ResourceDescriptor, ...]]:
        """Discover tools, then resources. Resources are skipped if tools fail."""
        tools = await self.discover_tools(server_name, endpoint)
        resources = await self.discover_resources(server_name, endpoint)
        return tools, resources


def _parse(model: type[BaseModel], result: Any, server_name: str) -> Any:
    # A missing result is an empty listing
    try:
        return model.model_validate(result or {})
    except ValidationError as e:
        raise SerializationError(
            f"Malformed {model.__name__} from MCP server '{server_name}': {e}",
            server=server_name
        ) from e
