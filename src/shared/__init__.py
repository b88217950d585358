"""Shared utilities and data models for the MCP tool client."""

from shared.models import (
    MCPServer,
    ProtocolError,
    ResourceDescriptor,
    ResponseEnvelope,
    ToolDescriptor,
)
from shared.config import MCPClientSettings, MCPServerConfig, Settings, get_settings
from shared.logging import get_logger, setup_logging

__all__ = [
    "MCPServer",
    "ProtocolError",
    "ResourceDescriptor",
    "ResponseEnvelope",
    "ToolDescriptor",
    "MCPClientSettings",
    "MCPServerConfig",
    "Settings",
    "get_settings",
    "get_logger",
    "setup_logging",
]
