"""
VisitsSummary API.

Core visit metrics: visits, unique visitors, actions, bounces and time on site.
"""

from matomo_client.modules.base import Columns, ModuleBase, SiteId


class VisitsSummaryModule(ModuleBase):
    """Façade for the ``VisitsSummary`` namespace."""

    namespace = "VisitsSummary"

    def get(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        columns: Columns = "",
    ):
        """
        Get all core visit metrics in one report.

        Args:
            columns: Restrict the report to these metrics, e.g. ``["nb_visits"]``
        """
        return self._report("get", id_site, period, date, {"segment": segment, "columns": columns})

    def get_visits(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getVisits", id_site, period, date, {"segment": segment})

    def get_unique_visitors(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getUniqueVisitors", id_site, period, date, {"segment": segment})

    def get_users(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getUsers", id_site, period, date, {"segment": segment})

    def get_actions(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getActions", id_site, period, date, {"segment": segment})

    def get_max_actions(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getMaxActions", id_site, period, date, {"segment": segment})

    def get_bounce_count(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getBounceCount", id_site, period, date, {"segment": segment})

    def get_visits_converted(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getVisitsConverted", id_site, period, date, {"segment": segment})

    def get_sum_visits_length(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        """Total time spent by visitors, in seconds."""
        return self._report("getSumVisitsLength", id_site, period, date, {"segment": segment})

    def get_sum_visits_length_pretty(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        """Total time spent by visitors, formatted for display."""
        return self._report(
            "getSumVisitsLengthPretty", id_site, period, date, {"segment": segment}
        )
