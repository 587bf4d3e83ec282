"""Tools: read-only reports (Contents, Overlay, SEO, VisitsSummary)."""

from typing import List, Optional, Union

from mcp.server.fastmcp import FastMCP

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import READ_ONLY, Period, annotations, run_tool


def register(mcp: FastMCP, ctx: ServerContext) -> None:
    """Register reporting tools."""
    client = ctx.client

    @mcp.tool(
        name="matomo_contents_get_content_names",
        description="Get content names with impressions and interactions",
        annotations=annotations("Get Content Names", READ_ONLY),
    )
    async def get_content_names(
        idSite: int,
        date: str,
        period: Period = "day",
        segment: Optional[str] = None,
        idSubtable: Optional[Union[int, str]] = None,
    ) -> str:
        """
        Args:
            idSite: Site ID
            date: Date or date range
            period: day, week, month, year or range
            segment: Optional segment definition
            idSubtable: Subtable ID for drilldown
        """
        return await run_tool(
            "matomo_contents_get_content_names",
            client.contents.get_content_names(
                idSite, period, date, segment or "", "" if idSubtable is None else idSubtable
            ),
        )

    @mcp.tool(
        name="matomo_contents_get_content_pieces",
        description="Get content pieces with impressions and interactions",
        annotations=annotations("Get Content Pieces", READ_ONLY),
    )
    async def get_content_pieces(
        idSite: int,
        date: str,
        period: Period = "day",
        segment: Optional[str] = None,
        idSubtable: Optional[Union[int, str]] = None,
    ) -> str:
        return await run_tool(
            "matomo_contents_get_content_pieces",
            client.contents.get_content_pieces(
                idSite, period, date, segment or "", "" if idSubtable is None else idSubtable
            ),
        )

    @mcp.tool(
        name="matomo_overlay_get_following_pages",
        description="Get the pages visited after a given page URL",
        annotations=annotations("Get Following Pages", READ_ONLY),
    )
    async def get_following_pages(
        url: str,
        idSite: int,
        date: str,
        period: Period = "day",
        segment: Optional[str] = None,
    ) -> str:
        """
        Args:
            url: Page URL
            idSite: Site ID
            date: Date or date range
            period: day, week, month, year or range
            segment: Optional segment definition
        """
        return await run_tool(
            "matomo_overlay_get_following_pages",
            client.overlay.get_following_pages(url, idSite, period, date, segment or ""),
        )

    @mcp.tool(
        name="matomo_seo_get_rank",
        description="Get SEO rank metrics for a URL",
        annotations=annotations("Get SEO Rank", READ_ONLY),
    )
    async def get_rank(url: str) -> str:
        """
        Args:
            url: URL to analyse
        """
        return await run_tool("matomo_seo_get_rank", client.seo.get_rank(url))

    @mcp.tool(
        name="matomo_visits_summary_get",
        description="Get core visit metrics (visits, unique visitors, actions, bounce rate)",
        annotations=annotations("Get Visits Summary", READ_ONLY),
    )
    async def get_visits_summary(
        idSite: int,
        date: str,
        period: Period = "day",
        segment: Optional[str] = None,
        columns: Optional[List[str]] = None,
    ) -> str:
        """
        Args:
            idSite: Site ID
            date: Date or date range
            period: day, week, month, year or range
            segment: Optional segment definition
            columns: Restrict the report to these metrics, e.g. ``["nb_visits"]``
        """
        return await run_tool(
            "matomo_visits_summary_get",
            client.visits_summary.get(idSite, period, date, segment or "", columns or ""),
        )
