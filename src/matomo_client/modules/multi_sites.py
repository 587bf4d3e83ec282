"""
MultiSites API.

The all-websites dashboard: key metrics for every site at once.
"""

from typing import Optional

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId


class MultiSitesModule(ModuleBase):
    """Façade for the ``MultiSites`` namespace."""

    namespace = "MultiSites"

    def get_all(
        self,
        period: str = "",
        date: str = "",
        segment: str = "",
        enhanced: Flag = None,
        pattern: str = "",
        show_columns: Columns = "",
    ):
        """
        Get visits, actions and revenue for every site the user can view.

        Args:
            period: Period to report on
            date: Date or date range
            segment: Segment expression
            enhanced: Include comparison with the previous period
            pattern: Only sites whose name matches
            show_columns: Columns to keep
        """
        return self._call(
            "getAll",
            optional={
                "period": period,
                "date": date,
                "segment": segment,
                "enhanced": enhanced,
                "pattern": pattern,
                "showColumns": show_columns,
            },
        )

    def get_one(
        self,
        id_site: SiteId,
        period: str = "",
        date: str = "",
        segment: str = "",
        enhanced: Flag = None,
    ):
        return self._call(
            "getOne",
            {"idSite": id_site},
            {"period": period, "date": date, "segment": segment, "enhanced": enhanced},
        )

    def get_all_with_groups(
        self,
        period: str = "",
        date: str = "",
        segment: str = "",
        pattern: str = "",
        filter_limit: Optional[int] = None,
    ):
        """Same as ``get_all`` but grouped by site group."""
        return self._call(
            "getAllWithGroups",
            optional={
                "period": period,
                "date": date,
                "segment": segment,
                "pattern": pattern,
                "filter_limit": filter_limit,
            },
        )
