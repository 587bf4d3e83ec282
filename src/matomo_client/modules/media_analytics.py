"""
MediaAnalytics API.

Video and audio plays, their resources, titles and players.
"""

from typing import Optional, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

Minutes = Union[int, str]


class MediaAnalyticsModule(ModuleBase):
    """Façade for the ``MediaAnalytics`` namespace."""

    namespace = "MediaAnalytics"

    def _titles(self, action, id_site, period, date, segment, id_subtable, secondary_dimension):
        return self._report(
            action, id_site, period, date,
            {
                "segment": segment,
                "idSubtable": id_subtable,
                "secondaryDimension": secondary_dimension,
            },
        )

    def _resources(
        self, action, id_site, period, date, segment, id_subtable, secondary_dimension,
        expanded, flat,
    ):
        return self._report(
            action, id_site, period, date,
            {
                "segment": segment,
                "idSubtable": id_subtable,
                "secondaryDimension": secondary_dimension,
                "expanded": expanded,
                "flat": flat,
            },
        )

    def has_records(self, id_site: SiteId):
        return self._call("hasRecords", {"idSite": id_site})

    def get(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        columns: Columns = "",
    ):
        return self._report("get", id_site, period, date, {"segment": segment, "columns": columns})

    def get_current_num_plays(self, id_site: SiteId, last_minutes: Minutes, segment: str = ""):
        return self._call(
            "getCurrentNumPlays",
            {"idSite": id_site, "lastMinutes": last_minutes},
            {"segment": segment},
        )

    def get_current_sum_time_spent(
        self, id_site: SiteId, last_minutes: Minutes, segment: str = ""
    ):
        return self._call(
            "getCurrentSumTimeSpent",
            {"idSite": id_site, "lastMinutes": last_minutes},
            {"segment": segment},
        )

    def get_current_most_plays(
        self, id_site: SiteId, last_minutes: Minutes, segment: str = "", filter_limit: int = 5
    ):
        """Get the most played media of the last minutes; ``filter_limit`` defaults to 5."""
        return self._call(
            "getCurrentMostPlays",
            {"idSite": id_site, "lastMinutes": last_minutes, "filter_limit": filter_limit},
            {"segment": segment},
        )

    def get_video_resources(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        id_subtable="", secondary_dimension: str = "", expanded: Flag = None, flat: Flag = None,
    ):
        return self._resources(
            "getVideoResources", id_site, period, date, segment, id_subtable,
            secondary_dimension, expanded, flat,
        )

    def get_audio_resources(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        id_subtable="", secondary_dimension: str = "", expanded: Flag = None, flat: Flag = None,
    ):
        return self._resources(
            "getAudioResources", id_site, period, date, segment, id_subtable,
            secondary_dimension, expanded, flat,
        )

    def get_video_titles(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        id_subtable="", secondary_dimension: str = "",
    ):
        return self._titles(
            "getVideoTitles", id_site, period, date, segment, id_subtable, secondary_dimension
        )

    def get_audio_titles(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        id_subtable="", secondary_dimension: str = "",
    ):
        return self._titles(
            "getAudioTitles", id_site, period, date, segment, id_subtable, secondary_dimension
        )

    def get_grouped_video_resources(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        id_subtable="", secondary_dimension: str = "",
    ):
        return self._titles(
            "getGroupedVideoResources", id_site, period, date, segment, id_subtable,
            secondary_dimension,
        )

    def get_grouped_audio_resources(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        id_subtable="", secondary_dimension: str = "",
    ):
        return self._titles(
            "getGroupedAudioResources", id_site, period, date, segment, id_subtable,
            secondary_dimension,
        )

    def get_video_hours(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._report("getVideoHours", id_site, period, date, {"segment": segment})

    def get_audio_hours(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._report("getAudioHours", id_site, period, date, {"segment": segment})

    def get_video_resolutions(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getVideoResolutions", id_site, period, date, {"segment": segment})

    def get_players(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._report("getPlayers", id_site, period, date, {"segment": segment})
