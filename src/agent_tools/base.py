"""Base classes for agent tools.

An agent tool is what the LLM sees: a name, a description, a JSON Schema
for its parameters, and an ``execute`` coroutine whose result is rendered
twice, once for the model and once for the human reading the transcript.
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel


class ToolResult(BaseModel):
    """Outcome of an agent tool call."""
    for_llm: str
    for_user: str
    is_error: bool = False

    @classmethod
    def error(cls, message: str) -> "ToolResult":
        """Create an error result shown identically to both audiences."""
        return cls(for_llm=message, for_user=message, is_error=True)


class BaseTool(ABC):
    """Base class for tools offered to an agent."""

    @property
    @abstractmethod
    def name(self) -> str:
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        pass

    @property
    @abstractmethod
    def parameters(self) -> dict[str, Any]:
        """JSON Schema of the accepted arguments."""
        pass

    @abstractmethod
    async def execute(self, args: dict[str, Any]) -> ToolResult:
        pass

    def to_llm_format(self) -> dict[str, Any]:
        """Tool definition in OpenAI function calling format."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": self.parameters,
            }
        }
