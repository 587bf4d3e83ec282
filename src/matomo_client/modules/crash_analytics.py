"""
CrashAnalytics API.

JavaScript crashes: grouping, ignoring and per-dimension crash reports.
"""

from typing import Optional, Sequence, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

CrashId = Union[int, str]
CrashIds = Union[str, Sequence[CrashId]]


class CrashAnalyticsModule(ModuleBase):
    """Façade for the ``CrashAnalytics`` namespace."""

    namespace = "CrashAnalytics"

    def _crashes_by(self, action, id_site, period, date, segment, expanded, flat):
        return self._report(
            action, id_site, period, date,
            {"segment": segment, "expanded": expanded, "flat": flat},
        )

    def _crashes_for(self, action, id_site, period, date, id_subtable, segment):
        params = {"idSite": id_site, "period": period, "date": date, "idSubtable": id_subtable}
        if id_site is None:
            del params["idSite"]
        return self._call(action, params, {"segment": segment})

    def _recent(self, action, id_site, segment, last_minutes, filter_limit):
        return self._call(
            action,
            {"idSite": id_site},
            {"segment": segment, "lastMinutes": last_minutes, "filter_limit": filter_limit},
        )

    # Crash management

    def search_crash_messages_for_merge(
        self,
        id_site: SiteId,
        resource_uri: str = "",
        search_term: str = "",
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        exclude_id_log_crashes: CrashIds = "",
    ):
        return self._call(
            "searchCrashMessagesForMerge",
            {"idSite": id_site},
            {
                "resourceUri": resource_uri,
                "searchTerm": search_term,
                "limit": limit,
                "offset": offset,
                "excludeIdLogCrashes": exclude_id_log_crashes,
            },
        )

    def merge_crashes(self, id_site: SiteId, id_log_crashes: CrashIds):
        """Group several crashes so they are reported as one."""
        return self._call("mergeCrashes", {"idSite": id_site, "idLogCrashes": id_log_crashes})

    def unmerge_crash_group(self, id_site: SiteId, id_log_crash: CrashId):
        return self._call("unmergeCrashGroup", {"idSite": id_site, "idLogCrash": id_log_crash})

    def get_crash_groups(self, id_site: SiteId):
        return self._call("getCrashGroups", {"idSite": id_site})

    def get_crash_types(self, id_site: SiteId, filter_limit: Optional[int] = None):
        return self._call("getCrashTypes", {"idSite": id_site}, {"filter_limit": filter_limit})

    def set_ignore_crash(self, id_site: SiteId, id_log_crash: CrashId, ignore: Flag = None):
        return self._call(
            "setIgnoreCrash",
            {"idSite": id_site, "idLogCrash": id_log_crash},
            {"ignore": ignore},
        )

    def get_ignored_crashes(self, id_site: SiteId):
        return self._call("getIgnoredCrashes", {"idSite": id_site})

    def get_crash_summary(self, id_site: SiteId, id_log_crash: CrashId):
        return self._call("getCrashSummary", {"idSite": id_site, "idLogCrash": id_log_crash})

    def get_crash_visit_context(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        id_log_crash: CrashId,
        segment: str = "",
        filter_limit: Optional[int] = None,
        filter_offset: Optional[int] = None,
        fetch_recent_actions: Flag = None,
    ):
        """Get the visits in which a crash happened, optionally with their last actions."""
        return self._call(
            "getCrashVisitContext",
            {"idSite": id_site, "period": period, "date": date, "idLogCrash": id_log_crash},
            {
                "segment": segment,
                "filter_limit": filter_limit,
                "filter_offset": filter_offset,
                "fetchRecentActions": fetch_recent_actions,
            },
        )

    def get_all_crashes(
        self,
        id_site: SiteId,
        filter_sort_column: str = "",
        filter_sort_order: str = "",
        filter_limit: Optional[int] = None,
        filter_offset: Optional[int] = None,
    ):
        return self._call(
            "getAllCrashes",
            {"idSite": id_site},
            {
                "filter_sort_column": filter_sort_column,
                "filter_sort_order": filter_sort_order,
                "filter_limit": filter_limit,
                "filter_offset": filter_offset,
            },
        )

    # Reports

    def get(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        columns: Columns = "",
    ):
        return self._report("get", id_site, period, date, {"segment": segment, "columns": columns})

    def get_all_crash_messages(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getAllCrashMessages", id_site, period, date, {"segment": segment})

    def get_crash_messages(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getCrashMessages", id_site, period, date, {"segment": segment})

    def get_unidentified_crash_messages(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getUnidentifiedCrashMessages", id_site, period, date, {"segment": segment}
        )

    def get_disappeared_crashes(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getDisappearedCrashes", id_site, period, date, {"segment": segment})

    def get_reappeared_crashes(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getReappearedCrashes", id_site, period, date, {"segment": segment})

    def get_new_crashes(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._report("getNewCrashes", id_site, period, date, {"segment": segment})

    def get_crashes_by_page_url(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._crashes_by(
            "getCrashesByPageUrl", id_site, period, date, segment, expanded, flat
        )

    def get_crashes_for_page_url(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable, segment: str = ""
    ):
        return self._crashes_for("getCrashesForPageUrl", id_site, period, date, id_subtable, segment)

    def get_crashes_by_page_title(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._crashes_by(
            "getCrashesByPageTitle", id_site, period, date, segment, expanded, flat
        )

    def get_crashes_for_page_title(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable, segment: str = ""
    ):
        return self._crashes_for(
            "getCrashesForPageTitle", id_site, period, date, id_subtable, segment
        )

    def get_crashes_by_source(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._crashes_by("getCrashesBySource", id_site, period, date, segment, expanded, flat)

    def get_crashes_for_source(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable, segment: str = ""
    ):
        return self._crashes_for("getCrashesForSource", id_site, period, date, id_subtable, segment)

    def get_crashes_by_category(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._crashes_by(
            "getCrashesByCategory", id_site, period, date, segment, expanded, flat
        )

    def get_crashes_for_category(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable, segment: str = ""
    ):
        return self._crashes_for(
            "getCrashesForCategory", id_site, period, date, id_subtable, segment
        )

    def get_crashes_by_first_party(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getCrashesByFirstParty", id_site, period, date, {"segment": segment})

    def get_crashes_by_third_party(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getCrashesByThirdParty", id_site, period, date, {"segment": segment})

    # Real time

    def get_last_crashes_overview(
        self, id_site: SiteId, segment: str = "", last_minutes: Optional[int] = None,
        filter_limit: Optional[int] = None,
    ):
        return self._recent(
            "getLastCrashesOverview", id_site, segment, last_minutes, filter_limit
        )

    def get_last_top_crashes(
        self, id_site: SiteId, segment: str = "", last_minutes: Optional[int] = None,
        filter_limit: Optional[int] = None,
    ):
        return self._recent("getLastTopCrashes", id_site, segment, last_minutes, filter_limit)

    def get_last_new_crashes(
        self, id_site: SiteId, segment: str = "", last_minutes: Optional[int] = None,
        filter_limit: Optional[int] = None,
    ):
        return self._recent("getLastNewCrashes", id_site, segment, last_minutes, filter_limit)

    def get_last_reappeared_crashes(
        self, id_site: SiteId, segment: str = "", last_minutes: Optional[int] = None,
        filter_limit: Optional[int] = None,
    ):
        return self._recent(
            "getLastReappearedCrashes", id_site, segment, last_minutes, filter_limit
        )

    def get_last_disappeared_crashes(
        self, id_site: SiteId, segment: str = "", last_minutes: Optional[int] = None,
        filter_limit: Optional[int] = None,
    ):
        return self._recent(
            "getLastDisappearedCrashes", id_site, segment, last_minutes, filter_limit
        )
