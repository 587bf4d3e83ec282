"""
VisitorInterest API.

Engagement reports: visit duration, pages per visit, visit counts.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class VisitorInterestModule(ModuleBase):
    """Façade for the ``VisitorInterest`` namespace."""

    namespace = "VisitorInterest"

    def get_number_of_visits_per_visit_duration(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getNumberOfVisitsPerVisitDuration", id_site, period, date, {"segment": segment}
        )

    def get_number_of_visits_per_page(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getNumberOfVisitsPerPage", id_site, period, date, {"segment": segment}
        )

    def get_number_of_visits_by_days_since_last(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getNumberOfVisitsByDaysSinceLast", id_site, period, date, {"segment": segment}
        )

    def get_number_of_visits_by_visit_count(
        self, id_site: SiteId, period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getNumberOfVisitsByVisitCount", id_site, period, date, {"segment": segment}
        )
