"""FastMCP entry point: registers all tools and starts the server."""

import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

import structlog
from mcp.server.fastmcp import FastMCP

from matomo_client import __version__
from matomo_client.config import MatomoConfig, get_config
from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import (
    ab_testing_tools,
    report_tools,
    sites_manager_tools,
    tag_manager_tools,
    tour_tools,
    user_id_tools,
)

logger = structlog.get_logger(__name__)

SERVER_NAME = "matomo-mcp-server"

TOOL_MODULES = (
    ab_testing_tools,
    tour_tools,
    user_id_tools,
    sites_manager_tools,
    tag_manager_tools,
    report_tools,
)


def build_server(ctx: ServerContext) -> FastMCP:
    """
    Create a FastMCP server with every tool bound to ``ctx``.

    The server's lifespan closes the context's Matomo client on shutdown.
    """

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[ServerContext]:
        logger.info("mcp_server_started", name=SERVER_NAME, version=__version__)
        try:
            yield ctx
        finally:
            await ctx.aclose()

    mcp = FastMCP(
        SERVER_NAME,
        instructions=(
            "Matomo analytics tools. Site, visit and tag manager data come from "
            f"the Matomo instance at {ctx.config.base_url or '(unconfigured)'}."
        ),
        lifespan=lifespan,
    )
    for module in TOOL_MODULES:
        module.register(mcp, ctx)
    return mcp


def main(config: Optional[MatomoConfig] = None) -> None:
    """Entry point for the MCP server (stdio transport)."""
    from matomo_client.cli import setup_logging

    config = config or get_config()
    # stdout carries the MCP protocol
    setup_logging(config.log_level, json_format=config.log_json, stream=sys.stderr)
    mcp = build_server(ServerContext(config))
    mcp.run()
