from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Callable, Optional

from dotenv import load_dotenv

EDGEE_API_BASE = "https://api.edgee.app"
USER_AGENT = "edgee-mcp/1.0"

TOKEN_ENV = "EDGEE_TOKEN"
LOG_LEVEL_ENV = "EDGEE_MCP_LOG_LEVEL"


@dataclass(frozen=True)
class EdgeeSettings:
    token: str
    log_level: str = "INFO"


def load_env_config(*, use_dotenv: bool = True) -> EdgeeSettings:
    """Load the bearer token and log level from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    token = os.getenv(TOKEN_ENV, "").strip()
    log_level = os.getenv(LOG_LEVEL_ENV, "").strip() or "INFO"
    return EdgeeSettings(token=token, log_level=log_level)


def env_token_provider(name: str = TOKEN_ENV) -> Callable[[], Optional[str]]:
    """Return a provider that reads the token from the environment on each call."""

    def provider() -> Optional[str]:
        value = os.getenv(name, "").strip()
        return value or None

    return provider


def create_client_from_env(**kwargs):
    """Create an EdgeeClient, failing fast when the token is missing."""
    from .client import EdgeeClient, EdgeeConfigurationError

    settings = load_env_config()
    if not settings.token:
        raise EdgeeConfigurationError(f"{TOKEN_ENV} environment variable is required")
    return EdgeeClient(token_provider=env_token_provider(), **kwargs)


__all__ = [
    "EDGEE_API_BASE",
    "USER_AGENT",
    "TOKEN_ENV",
    "LOG_LEVEL_ENV",
    "EdgeeSettings",
    "load_env_config",
    "env_token_provider",
    "create_client_from_env",
]
