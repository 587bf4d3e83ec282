"""
Insights API.

Notable changes between periods: growth, decline, movers and shakers.
"""

from typing import Optional, Union

from matomo_client.modules.base import ModuleBase, SiteId

Number = Optional[Union[int, float, str]]


class InsightsModule(ModuleBase):
    """Façade for the ``Insights`` namespace."""

    namespace = "Insights"

    def can_generate_insights(self, date: str, period: str):
        return self._call("canGenerateInsights", {"date": date, "period": period})

    def get_insights_overview(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getInsightsOverview", id_site, period, date, {"segment": segment})

    def get_movers_and_shakers_overview(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getMoversAndShakersOverview", id_site, period, date, {"segment": segment}
        )

    def get_movers_and_shakers(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        report_unique_id: str,
        segment: str = "",
        compared_to_x_periods: Number = None,
        limit_increaser: Number = None,
        limit_decreaser: Number = None,
    ):
        """
        Get the rows of one report that moved most since the compared period.

        Args:
            report_unique_id: Report to inspect, e.g. ``Actions_getPageUrls``
            compared_to_x_periods: How many periods back to compare with
            limit_increaser: Maximum number of rows that grew
            limit_decreaser: Maximum number of rows that declined
        """
        return self._report(
            "getMoversAndShakers", id_site, period, date,
            {
                "reportUniqueId": report_unique_id,
                "segment": segment,
                "comparedToXPeriods": compared_to_x_periods,
                "limitIncreaser": limit_increaser,
                "limitDecreaser": limit_decreaser,
            },
        )

    def get_insights(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        report_unique_id: str,
        segment: str = "",
        limit_increaser: Number = None,
        limit_decreaser: Number = None,
        filter_by: str = "",
        min_impact_percent: Number = None,
        min_growth_percent: Number = None,
        compared_to_x_periods: Number = None,
        order_by: str = "",
    ):
        """Get growth insights for one report, filtered by impact and growth."""
        return self._report(
            "getInsights", id_site, period, date,
            {
                "reportUniqueId": report_unique_id,
                "segment": segment,
                "limitIncreaser": limit_increaser,
                "limitDecreaser": limit_decreaser,
                "filterBy": filter_by,
                "minImpactPercent": min_impact_percent,
                "minGrowthPercent": min_growth_percent,
                "comparedToXPeriods": compared_to_x_periods,
                "orderBy": order_by,
            },
        )
