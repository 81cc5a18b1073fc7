"""edgee_mcp package exports."""

from .client import (
    EdgeeApiError,
    EdgeeClient,
    EdgeeClientError,
    EdgeeConfigurationError,
)
from .config import create_client_from_env, load_env_config
from .registry import discover_tool_modules, register_discovered_tools

__all__ = [
    # Client
    "EdgeeClient",
    # Exceptions
    "EdgeeClientError",
    "EdgeeConfigurationError",
    "EdgeeApiError",
    # Config
    "create_client_from_env",
    "load_env_config",
    # Server utilities
    "discover_tool_modules",
    "register_discovered_tools",
]
