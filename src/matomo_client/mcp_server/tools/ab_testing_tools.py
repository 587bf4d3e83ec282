"""Tool: AbTesting.getMetricsOverview."""

from typing import Any, Optional, Union

import structlog
from mcp.server.fastmcp import FastMCP

from matomo_client.dispatch.interface import MatomoError
from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import READ_ONLY, Period, annotations

logger = structlog.get_logger(__name__)

TOOL_NAME = "AbTesting.getMetricsOverview"


def summarize_experiments(result: Any) -> str:
    """Render a metrics overview as one line per experiment."""
    if isinstance(result, dict):
        result = [result]
    if not result:
        return "No A/B tests found."
    lines = [f"Found {len(result)} A/B tests:"]
    for test in result:
        if not isinstance(test, dict):
            lines.append(str(test))
            continue
        lines.append(
            f"ID: {test.get('idtest')}, Name: {test.get('name')}, Status: {test.get('status')}"
        )
    return "\n".join(lines)


def register(mcp: FastMCP, ctx: ServerContext) -> None:
    """Register AbTesting tools."""

    @mcp.tool(
        name=TOOL_NAME,
        description="Get metrics overview for an experiment",
        annotations=annotations("A/B Test Metrics Overview", READ_ONLY),
    )
    async def get_metrics_overview(
        idSite: int,
        date: str,
        idExperiment: Union[int, str],
        period: Period = "day",
        segment: Optional[str] = None,
    ) -> str:
        """
        Args:
            idSite: Site ID
            date: Date or date range
            idExperiment: Experiment ID
            period: day, week, month, year or range
            segment: Optional segment definition
        """
        try:
            result = await ctx.client.ab_testing.get_metrics_overview(
                idSite, period, date, idExperiment, segment or ""
            )
        except MatomoError as e:
            logger.warning("tool_failed", tool=TOOL_NAME, error=str(e))
            return f"Error: {e}"
        return summarize_experiments(result)
