"""Configuration management for the MCP tool client.

Supports YAML configuration files and environment variable overrides.
Configuration is loaded once and cached for performance.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MCPServerConfig(BaseModel):
    """A single MCP server entry as declared in configuration."""
    name: str = Field(..., min_length=1)
    endpoint: str = Field(..., min_length=1, description="HTTP URL the server accepts POSTs on")
    enabled: bool = Field(default=True)


class MCPClientSettings(BaseSettings):
    """MCP client configuration."""
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    servers: list[MCPServerConfig] = Field(default_factory=list)

    model_config = SettingsConfigDict(
        env_prefix="MCP_CLIENT_",
        env_file=".env",
        extra="ignore"
    )


class Settings(BaseSettings):
    """Main application settings."""
    environment: str = Field(default="development")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    mcp_client: MCPClientSettings = Field(default_factory=MCPClientSettings)

    model_config = SettingsConfigDict(
        env_prefix="MCP_",
        env_file=".env",
        extra="ignore"
    )

    @property
    def json_logs(self) -> bool:
        """Production deployments log JSON lines."""
        return self.environment == "production"

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from a YAML file."""
        return cls(**load_yaml_config(path))


def load_yaml_config(path: str | Path) -> dict[str, Any]:
    """Load a YAML configuration file."""
    path = Path(path)
    if not path.exists():
        return {}

    with open(path) as f:
        return yaml.safe_load(f) or {}


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    config_path = os.environ.get("MCP_CONFIG_PATH", "config/settings.yaml")
    return Settings.from_yaml(config_path)
