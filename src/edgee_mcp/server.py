from __future__ import annotations

import asyncio
import logging
from typing import Callable, Union

from mcp.server.fastmcp import FastMCP

from edgee_mcp.client import EdgeeClient, EdgeeConfigurationError
from edgee_mcp.config import create_client_from_env, load_env_config
from edgee_mcp.logging import setup_logging
from edgee_mcp.registry import register_discovered_tools

log = logging.getLogger("edgee_mcp.server")

SERVER_NAME = "edgee"


def create_app(client: Union[EdgeeClient, Callable[[], EdgeeClient]]) -> FastMCP:
    """Build the FastMCP app with every discovered Edgee tool registered."""
    app = FastMCP(SERVER_NAME)
    register_discovered_tools(app, client)
    return app


# --- Entry point ----------------------------------------------------------- #


async def main() -> None:
    settings = load_env_config(use_dotenv=True)
    setup_logging(settings.log_level)
    client = create_client_from_env()

    app = create_app(client)
    try:
        log.info("Edgee MCP server running on stdio")
        await app.run_stdio_async()
    finally:
        await client.aclose()


def run() -> None:
    try:
        asyncio.run(main())
    except EdgeeConfigurationError as exc:
        log.error("Fatal error in main(): %s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    run()
