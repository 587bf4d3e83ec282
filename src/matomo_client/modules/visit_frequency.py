"""
VisitFrequency API.
"""

from matomo_client.modules.base import Columns, ModuleBase, SiteId


class VisitFrequencyModule(ModuleBase):
    """Façade for the ``VisitFrequency`` namespace."""

    namespace = "VisitFrequency"

    def get(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        columns: Columns = "",
    ):
        """Get returning-visitor metrics."""
        return self._call(
            "get",
            {"idSite": id_site, "period": period, "date": date},
            {"segment": segment, "columns": columns},
        )
