"""Tool: matomo_user_id_get_users."""

from typing import Optional

from mcp.server.fastmcp import FastMCP

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import READ_ONLY, Period, annotations, run_tool


def register(mcp: FastMCP, ctx: ServerContext) -> None:
    """Register UserId tools."""

    @mcp.tool(
        name="matomo_user_id_get_users",
        description="Get a list of all user IDs available in Matomo",
        annotations=annotations("Get User IDs", READ_ONLY),
    )
    async def get_users(
        idSite: int,
        date: str,
        period: Period = "day",
        segment: Optional[str] = None,
    ) -> str:
        """
        Args:
            idSite: Site ID
            date: Date or date range, e.g. ``today`` or ``2024-01-01,2024-01-31``
            period: day, week, month, year or range
            segment: Optional segment definition
        """
        return await run_tool(
            "matomo_user_id_get_users",
            ctx.client.user_id.get_users(idSite, period, date, segment or ""),
        )
