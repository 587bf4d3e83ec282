"""
PagePerformance API.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class PagePerformanceModule(ModuleBase):
    """Façade for the ``PagePerformance`` namespace."""

    namespace = "PagePerformance"

    def get(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        """Get page load timing metrics."""
        return self._call(
            "get",
            {"idSite": id_site, "period": period, "date": date},
            {"segment": segment},
        )
