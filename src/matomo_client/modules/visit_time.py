"""
VisitTime API.

Visit distribution by hour of day and day of week.
"""

from matomo_client.modules.base import Flag, ModuleBase, SiteId


class VisitTimeModule(ModuleBase):
    """Façade for the ``VisitTime`` namespace."""

    namespace = "VisitTime"

    def get_visit_information_per_local_time(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        """Get visits by the visitor's local hour."""
        return self._report(
            "getVisitInformationPerLocalTime", id_site, period, date, {"segment": segment}
        )

    def get_visit_information_per_server_time(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        hide_future_hours_when_today: Flag = "",
    ):
        """Get visits by the server's hour."""
        return self._report(
            "getVisitInformationPerServerTime",
            id_site,
            period,
            date,
            {"segment": segment, "hideFutureHoursWhenToday": hide_future_hours_when_today},
        )

    def get_by_day_of_week(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        """Get visits by day of the week."""
        return self._report("getByDayOfWeek", id_site, period, date, {"segment": segment})
