"""Agent tools.

Adapters that expose client functionality to an LLM agent as callable
tools with a JSON Schema and dual (model / user) result rendering.
"""

from agent_tools.base import BaseTool, ToolResult
from agent_tools.mcp_tool import MCPTool

__all__ = [
    "BaseTool",
    "ToolResult",
    "MCPTool",
]
