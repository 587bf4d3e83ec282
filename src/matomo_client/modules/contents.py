"""
Contents API.

Content impressions and interactions tracked by the Contents plugin.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class ContentsModule(ModuleBase):
    """Façade for the ``Contents`` namespace."""

    namespace = "Contents"

    def get_content_names(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        id_subtable="",
    ):
        """
        Get content names with their metrics.

        Args:
            id_site: Site ID
            period: day, week, month, year or range
            date: Date or date range
            segment: Optional segment definition
            id_subtable: Optional subtable ID for drilldown
        """
        return self._call(
            "getContentNames",
            {"idSite": id_site, "period": period, "date": date},
            {"segment": segment, "idSubtable": id_subtable},
        )

    def get_content_pieces(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        id_subtable="",
    ):
        """Get content pieces with their metrics."""
        return self._call(
            "getContentPieces",
            {"idSite": id_site, "period": period, "date": date},
            {"segment": segment, "idSubtable": id_subtable},
        )
