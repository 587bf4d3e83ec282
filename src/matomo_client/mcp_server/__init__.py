"""
MCP server exposing the Matomo client as tools.
"""

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.server import build_server, main

__all__ = ["ServerContext", "build_server", "main"]
