"""Tools: Tour challenges and level."""

from typing import Union

from mcp.server.fastmcp import FastMCP

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import READ_ONLY, WRITE, annotations, run_tool


def register(mcp: FastMCP, ctx: ServerContext) -> None:
    """Register Tour tools."""

    @mcp.tool(
        name="matomo_tour_get_challenges",
        description="Get the list of challenges in Matomo Tour plugin",
        annotations=annotations("Get Tour Challenges", READ_ONLY),
    )
    async def get_challenges() -> str:
        return await run_tool("matomo_tour_get_challenges", ctx.client.tour.get_challenges())

    @mcp.tool(
        name="matomo_tour_skip_challenge",
        description="Skip a specific challenge in Matomo Tour plugin",
        annotations=annotations("Skip Tour Challenge", WRITE),
    )
    async def skip_challenge(id: Union[str, int]) -> str:
        """
        Args:
            id: ID of the challenge to skip
        """
        return await run_tool("matomo_tour_skip_challenge", ctx.client.tour.skip_challenge(str(id)))

    @mcp.tool(
        name="matomo_tour_get_level",
        description="Get the current level in Matomo Tour plugin",
        annotations=annotations("Get Tour Level", READ_ONLY),
    )
    async def get_level() -> str:
        return await run_tool("matomo_tour_get_level", ctx.client.tour.get_level())
