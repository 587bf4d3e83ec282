"""
Live API.

Real-time visitor log, counters and visitor profiles.
"""

from typing import Optional, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

Number = Union[int, str]


class LiveModule(ModuleBase):
    """Façade for the ``Live`` namespace."""

    namespace = "Live"

    def get_counters(
        self,
        id_site: SiteId,
        last_minutes: Number,
        segment: str = "",
        show_columns: Columns = "",
        hide_columns: Columns = "",
    ):
        """
        Get visit, action and visitor counters for the last N minutes.

        ``show_columns`` and ``hide_columns`` accept a list or a
        comma-separated string.
        """
        return self._call(
            "getCounters",
            {"idSite": id_site, "lastMinutes": last_minutes},
            {"segment": segment, "showColumns": show_columns, "hideColumns": hide_columns},
        )

    def is_visitor_profile_enabled(self, id_site: SiteId):
        return self._call("isVisitorProfileEnabled", {"idSite": id_site})

    def get_last_visits_details(
        self,
        id_site: SiteId,
        period: str = "",
        date: str = "",
        segment: str = "",
        count_visitors_to_fetch: Optional[Number] = None,
        min_timestamp: Optional[Number] = None,
        flat: Flag = None,
        do_not_fetch_actions: Flag = None,
        enhanced: Flag = None,
    ):
        """Get the visitor log, most recent visits first."""
        return self._call(
            "getLastVisitsDetails",
            {"idSite": id_site},
            {
                "period": period,
                "date": date,
                "segment": segment,
                "countVisitorsToFetch": count_visitors_to_fetch,
                "minTimestamp": min_timestamp,
                "flat": flat,
                "doNotFetchActions": do_not_fetch_actions,
                "enhanced": enhanced,
            },
        )

    def get_visitor_profile(
        self,
        id_site: SiteId,
        visitor_id: str = "",
        segment: str = "",
        limit_visits: Optional[Number] = None,
    ):
        """Get the profile of a visitor; the most recent visitor when no ID is given."""
        return self._call(
            "getVisitorProfile",
            {"idSite": id_site},
            {"visitorId": visitor_id, "segment": segment, "limitVisits": limit_visits},
        )

    def get_most_recent_visitor_id(self, id_site: SiteId, segment: str = ""):
        return self._call("getMostRecentVisitorId", {"idSite": id_site}, {"segment": segment})

    def get_most_recent_visits_date_time(
        self, id_site: SiteId, period: Optional[str] = None, date: Optional[str] = None
    ):
        return self._call(
            "getMostRecentVisitsDateTime",
            {"idSite": id_site},
            {"period": period, "date": date},
        )
