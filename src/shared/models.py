"""Core data models for the MCP tool client.

Capability descriptors are parsed straight from the wire, so fields carry
the protocol's camelCase names as aliases. Every record is frozen: the
registry swaps whole records instead of mutating them in place.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ToolDescriptor(BaseModel):
    """A named, invocable capability exposed by an MCP server."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1)
    description: str = ""
    input_schema: dict[str, Any] = Field(
        default_factory=dict,
        alias="inputSchema",
        description="JSON Schema of accepted arguments; not validated by the client"
    )

    @field_validator("description", mode="before")
    @classmethod
    def _null_description(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("input_schema", mode="before")
    @classmethod
    def _null_schema(cls, value: Any) -> Any:
        return {} if value is None else value


class ResourceDescriptor(BaseModel):
    """An addressable piece of context exposed by an MCP server. Not invocable."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    uri: str
    name: str = ""
    description: str = ""
    mime_type: Optional[str] = Field(default=None, alias="mimeType")

    @field_validator("name", "description", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value


class MCPServer(BaseModel):
    """
    A registered MCP server and its point-in-time capability snapshot.

    The snapshot is captured when the server is added and is never
    refreshed; re-adding the server is the only way to rediscover.
    """
    model_config = ConfigDict(frozen=True)

    name: str
    endpoint: str
    enabled: bool = True
    tools: tuple[ToolDescriptor, ...] = ()
    resources: tuple[ResourceDescriptor, ...] = ()

    def find_tool(self, tool_name: str) -> Optional[ToolDescriptor]:
        """Return the tool called ``tool_name`` or None."""
        for tool in self.tools:
            if tool.name == tool_name:
                return tool
        return None


class ProtocolError(BaseModel):
    """Error object of a response envelope."""
    code: int = 0
    message: str = ""

    @field_validator("code", mode="before")
    @classmethod
    def _null_code(cls, value: Any) -> Any:
        return 0 if value is None else value

    @field_validator("message", mode="before")
    @classmethod
    def _null_message(cls, value: Any) -> Any:
        return "" if value is None else value


class ResponseEnvelope(BaseModel):
    """The ``{result, error}`` wrapper of every MCP response."""
    result: Any = None
    error: Optional[ProtocolError] = None

    @field_validator("error", mode="before")
    @classmethod
    def _empty_error_is_none(cls, value: Any) -> Any:
        # Some servers send "error": {} on success
        return None if value == {} else value


class ToolList(BaseModel):
    """``result`` payload of ``tools/list``."""
    tools: list[ToolDescriptor] = Field(default_factory=list)

    @field_validator("tools", mode="before")
    @classmethod
    def _null_tools(cls, value: Any) -> Any:
        return [] if value is None else value


class ResourceList(BaseModel):
    """``result`` payload of ``resources/list``."""
    resources: list[ResourceDescriptor] = Field(default_factory=list)

    @field_validator("resources", mode="before")
    @classmethod
    def _null_resources(cls, value: Any) -> Any:
        return [] if value is None else value
