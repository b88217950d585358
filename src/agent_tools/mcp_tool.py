"""Agent tool that exposes configured MCP servers.

Translates the agent's ``{server, tool, arguments}`` call into
``MCPClient.execute_tool`` and renders the outcome for the model and for
the user.
"""

from typing import Any

from shared.logging import get_logger
from shared.schema import object_schema, validate_schema
from mcp_client.client import MCPClient
from mcp_client.errors import MCPClientError, ServerNotFoundError
from agent_tools.base import BaseTool, ToolResult

logger = get_logger(__name__)


MCP_TOOL_DESCRIPTION = (
    "Execute tools from configured MCP (Model Context Protocol) servers. "
    "MCP connects the agent to external services like Google Drive, Slack, "
    "GitHub, databases, and more without writing custom code."
)

NO_SERVERS_FOR_USER = (
    "📋 No MCP servers are currently configured.\n\n"
    "To add an MCP server, list it under mcp_client.servers in your settings file."
)

MCP_TOOL_PARAMETERS = object_schema({
    "server": {
        "type": "string",
        "description": "The MCP server name to use (e.g., 'github', 'slack', 'database')",
    },
    "tool": {
        "type": "string",
        "description": "The tool name to execute on the MCP server",
    },
    "arguments": {
        "type": "object",
        "description": "Arguments to pass to the MCP tool (as JSON object)",
    },
    "list_servers": {
        "type": "boolean",
        "description": "If true, list all available MCP servers and their tools instead of executing a tool",
    },
})


class MCPTool(BaseTool):
    """Agent-facing facade over an ``MCPClient``."""

    def __init__(self, client: MCPClient, enabled: bool = True) -> None:
        self.client = client
        self._enabled = enabled

    @property
    def name(self) -> str:
        return "mcp"

    @property
    def description(self) -> str:
        return MCP_TOOL_DESCRIPTION

    @property
    def parameters(self) -> dict[str, Any]:
        return MCP_TOOL_PARAMETERS

    @property
    def enabled(self) -> bool:
        return self._enabled

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    async def execute(self, args: dict[str, Any]) -> ToolResult:
        """
        Run the agent's request.

        Args:
            args: ``{"server", "tool", "arguments"}`` or ``{"list_servers": true}``

        Returns:
            Result rendered for the model and the user
        """
        if not self._enabled:
            return ToolResult.error("MCP tool is disabled")

        is_valid, errors = validate_schema(args, self.parameters)
        if not is_valid:
            logger.warning("Rejected MCP tool arguments", errors=errors)
            return ToolResult.error(f"Invalid arguments: {'; '.join(errors)}")

        if args.get("list_servers"):
            return await self._list_servers()

        server = args.get("server")
        if not server:
            return ToolResult.error("server parameter is required")

        tool_name = args.get("tool")
        if not tool_name:
            return ToolResult.error("tool parameter is required")

        arguments = args.get("arguments") or {}

        try:
            result = await self.client.execute_tool(server, tool_name, arguments)
        except MCPClientError as e:
            return ToolResult(
                for_llm=f"Failed to execute MCP tool: {e}",
                for_user=f"❌ Failed to execute tool '{tool_name}' on server '{server}': {e}",
                is_error=True
            )

        return ToolResult(
            for_llm=result,
            for_user=f"✅ Executed tool '{tool_name}' on server '{server}'\n\n{result}"
        )

    async def _list_servers(self) -> ToolResult:
        """List configured servers and the tools each one advertised."""
        names = await self.client.list_server_names()

        if not names:
            return ToolResult(for_llm="No MCP servers configured", for_user=NO_SERVERS_FOR_USER)

        lines = ["📋 Available MCP Servers:", ""]
        for name in sorted(names):
            try:
                server = await self.client.get_server(name)
            except ServerNotFoundError:
                # Removed since the names were read
                continue

            status = "" if server.enabled else " (disabled)"
            lines.append(f"🔹 **{name}**{status}")
            if server.tools:
                lines.append("   Tools:")
                for tool in server.tools:
                    summary = f": {tool.description}" if tool.description else ""
                    lines.append(f"   - {tool.name}{summary}")
            else:
                lines.append("   Tools: (none)")
            lines.append("")

        text = "\n".join(lines)
        return ToolResult(for_llm=text, for_user=text)
