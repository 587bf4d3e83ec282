"""
HeatmapSessionRecording API.

Heatmap and session recording configurations and the data they capture.
"""

from typing import Any, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

HsrId = Union[int, str]
PageRules = Union[str, Sequence[Any]]


class HeatmapSessionRecordingModule(ModuleBase):
    """Façade for the ``HeatmapSessionRecording`` namespace."""

    namespace = "HeatmapSessionRecording"

    def _config(self, action: str, id_site: SiteId, id_site_hsr: HsrId):
        return self._call(action, {"idSite": id_site, "idSiteHsr": id_site_hsr})

    # Heatmaps

    def add_heatmap(
        self,
        id_site: SiteId,
        name: str,
        match_page_rules: PageRules,
        sample_limit: Optional[int] = None,
        sample_rate: Optional[Union[int, float, str]] = None,
        excluded_elements: str = "",
        screenshot_url: str = "",
        breakpoint_mobile: str = "",
        breakpoint_tablet: str = "",
        capture_dom_manually: Flag = None,
    ):
        """
        Create a heatmap.

        Args:
            id_site: Site to record on
            name: Heatmap name
            match_page_rules: Pages the heatmap records
            sample_limit: Number of page views to record
            sample_rate: Percentage of visitors recorded
            excluded_elements: CSS selectors hidden from the heatmap
            screenshot_url: Page used for the background screenshot
            breakpoint_mobile: Widest viewport counted as mobile
            breakpoint_tablet: Widest viewport counted as tablet
            capture_dom_manually: Take the screenshot only on request
        """
        return self._call(
            "addHeatmap",
            {"idSite": id_site, "name": name, "matchPageRules": match_page_rules},
            {
                "sampleLimit": sample_limit,
                "sampleRate": sample_rate,
                "excludedElements": excluded_elements,
                "screenshotUrl": screenshot_url,
                "breakpointMobile": breakpoint_mobile,
                "breakpointTablet": breakpoint_tablet,
                "captureDomManually": capture_dom_manually,
            },
        )

    def update_heatmap(
        self,
        id_site: SiteId,
        id_site_hsr: HsrId,
        name: str,
        match_page_rules: PageRules,
        sample_limit: Optional[int] = None,
        sample_rate: Optional[Union[int, float, str]] = None,
        excluded_elements: str = "",
        screenshot_url: str = "",
        breakpoint_mobile: str = "",
        breakpoint_tablet: str = "",
        capture_dom_manually: Flag = None,
    ):
        return self._call(
            "updateHeatmap",
            {
                "idSite": id_site,
                "idSiteHsr": id_site_hsr,
                "name": name,
                "matchPageRules": match_page_rules,
            },
            {
                "sampleLimit": sample_limit,
                "sampleRate": sample_rate,
                "excludedElements": excluded_elements,
                "screenshotUrl": screenshot_url,
                "breakpointMobile": breakpoint_mobile,
                "breakpointTablet": breakpoint_tablet,
                "captureDomManually": capture_dom_manually,
            },
        )

    def delete_heatmap_screenshot(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("deleteHeatmapScreenshot", id_site, id_site_hsr)

    def get_heatmap(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("getHeatmap", id_site, id_site_hsr)

    def pause_heatmap(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("pauseHeatmap", id_site, id_site_hsr)

    def resume_heatmap(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("resumeHeatmap", id_site, id_site_hsr)

    def delete_heatmap(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("deleteHeatmap", id_site, id_site_hsr)

    def end_heatmap(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("endHeatmap", id_site, id_site_hsr)

    def get_heatmaps(self, id_site: SiteId, include_page_tree_mirror: Flag = None):
        return self._call(
            "getHeatmaps",
            {"idSite": id_site},
            {"includePageTreeMirror": include_page_tree_mirror},
        )

    # Session recordings

    def add_session_recording(
        self,
        id_site: SiteId,
        name: str,
        match_page_rules: PageRules = "",
        sample_limit: Optional[int] = None,
        sample_rate: Optional[Union[int, float, str]] = None,
        min_session_time: Optional[int] = None,
        requires_activity: Flag = None,
        capture_keystrokes: Flag = None,
    ):
        """Create a session recording; without page rules every page is recorded."""
        return self._call(
            "addSessionRecording",
            {"idSite": id_site, "name": name},
            {
                "matchPageRules": match_page_rules,
                "sampleLimit": sample_limit,
                "sampleRate": sample_rate,
                "minSessionTime": min_session_time,
                "requiresActivity": requires_activity,
                "captureKeystrokes": capture_keystrokes,
            },
        )

    def update_session_recording(
        self,
        id_site: SiteId,
        id_site_hsr: HsrId,
        name: str,
        match_page_rules: PageRules = "",
        sample_limit: Optional[int] = None,
        sample_rate: Optional[Union[int, float, str]] = None,
        min_session_time: Optional[int] = None,
        requires_activity: Flag = None,
        capture_keystrokes: Flag = None,
    ):
        return self._call(
            "updateSessionRecording",
            {"idSite": id_site, "idSiteHsr": id_site_hsr, "name": name},
            {
                "matchPageRules": match_page_rules,
                "sampleLimit": sample_limit,
                "sampleRate": sample_rate,
                "minSessionTime": min_session_time,
                "requiresActivity": requires_activity,
                "captureKeystrokes": capture_keystrokes,
            },
        )

    def get_session_recording(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("getSessionRecording", id_site, id_site_hsr)

    def pause_session_recording(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("pauseSessionRecording", id_site, id_site_hsr)

    def resume_session_recording(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("resumeSessionRecording", id_site, id_site_hsr)

    def delete_session_recording(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("deleteSessionRecording", id_site, id_site_hsr)

    def end_session_recording(self, id_site: SiteId, id_site_hsr: HsrId):
        return self._config("endSessionRecording", id_site, id_site_hsr)

    def get_session_recordings(self, id_site: SiteId):
        return self._call("getSessionRecordings", {"idSite": id_site})

    # Recorded data

    def get_recorded_sessions(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_site_hsr: HsrId,
        segment: str = "",
        id_subtable="",
    ):
        return self._report(
            "getRecordedSessions", id_site, period, date,
            {"idSiteHsr": id_site_hsr, "segment": segment, "idSubtable": id_subtable},
        )

    def get_recorded_session(self, id_site: SiteId, id_site_hsr: HsrId, id_log_hsr: HsrId):
        return self._call(
            "getRecordedSession",
            {"idSite": id_site, "idSiteHsr": id_site_hsr, "idLogHsr": id_log_hsr},
        )

    def delete_recorded_session(self, id_site: SiteId, id_site_hsr: HsrId, id_visit: HsrId):
        return self._call(
            "deleteRecordedSession",
            {"idSite": id_site, "idSiteHsr": id_site_hsr, "idVisit": id_visit},
        )

    def delete_recorded_pageview(self, id_site: SiteId, id_site_hsr: HsrId, id_log_hsr: HsrId):
        return self._call(
            "deleteRecordedPageview",
            {"idSite": id_site, "idSiteHsr": id_site_hsr, "idLogHsr": id_log_hsr},
        )

    def get_recorded_heatmap_metadata(
        self, id_site: Optional[SiteId], period: str, date: str, id_site_hsr: HsrId,
        segment: str = "",
    ):
        return self._report(
            "getRecordedHeatmapMetadata", id_site, period, date,
            {"idSiteHsr": id_site_hsr, "segment": segment},
        )

    def get_recorded_heatmap(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_site_hsr: HsrId,
        heatmap_type: Union[int, str],
        device_type: Union[int, str],
        segment: str = "",
    ):
        """Get the recorded clicks, moves or scrolls of a heatmap for one device type."""
        return self._report(
            "getRecordedHeatmap", id_site, period, date,
            {
                "idSiteHsr": id_site_hsr,
                "heatmapType": heatmap_type,
                "deviceType": device_type,
                "segment": segment,
            },
        )

    def get_embed_session_info(self, id_site: SiteId, id_site_hsr: HsrId, id_log_hsr: HsrId):
        return self._call(
            "getEmbedSessionInfo",
            {"idSite": id_site, "idSiteHsr": id_site_hsr, "idLogHsr": id_log_hsr},
        )

    def test_url_match_pages(self, url: str, match_page_rules: PageRules = ""):
        return self._call("testUrlMatchPages", {"url": url}, {"matchPageRules": match_page_rules})

    # Metadata

    def get_available_statuses(self):
        return self._call("getAvailableStatuses")

    def get_available_target_page_rules(self):
        return self._call("getAvailableTargetPageRules")

    def get_available_device_types(self):
        return self._call("getAvailableDeviceTypes")

    def get_available_heatmap_types(self):
        return self._call("getAvailableHeatmapTypes")

    def get_available_session_recording_sample_limits(self):
        return self._call("getAvailableSessionRecordingSampleLimits")

    def get_event_types(self):
        return self._call("getEventTypes")
