"""
API namespace.

Server metadata, report metadata and generic report access. Scalar results
(``getMatomoVersion``, ``isPluginActivated``, ...) come back wrapped as
``{"value": ...}``; these methods unwrap them in both dispatch modes.
"""

from typing import Any, Dict, Optional, Sequence, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId, unwrap_value

SiteIds = Optional[Union[str, Sequence[SiteId]]]
ApiParameters = Optional[Union[str, Dict[str, Any]]]


def _site_list(id_sites: SiteIds):
    if isinstance(id_sites, (list, tuple)):
        return list(id_sites)
    return id_sites


class ApiModule(ModuleBase):
    """Façade for the ``API`` namespace."""

    namespace = "API"

    def get_matomo_version(self):
        """Get the Matomo version string, e.g. ``5.1.0``."""
        return self._call("getMatomoVersion", transform=unwrap_value)

    def get_php_version(self):
        return self._call("getPhpVersion", transform=unwrap_value)

    def get_ip_from_header(self):
        """Get the IP address Matomo sees for this client."""
        return self._call("getIpFromHeader", transform=unwrap_value)

    def get_settings(self):
        return self._call("getSettings")

    def get_segments_metadata(self, id_sites: SiteIds = None):
        return self._call("getSegmentsMetadata", optional={"idSites": _site_list(id_sites)})

    def get_metadata(
        self,
        id_site: Optional[SiteId] = None,
        api_module: str = "",
        api_action: str = "",
        api_parameters: ApiParameters = None,
        language: str = "",
        period: str = "",
        date: str = "",
        hide_metrics_doc: Flag = None,
        show_subtable_reports: Flag = None,
    ):
        """Get metadata for one report."""
        return self._call(
            "getMetadata",
            optional={
                "idSite": id_site,
                "apiModule": api_module,
                "apiAction": api_action,
                "apiParameters": api_parameters,
                "language": language,
                "period": period,
                "date": date,
                "hideMetricsDoc": hide_metrics_doc,
                "showSubtableReports": show_subtable_reports,
            },
        )

    def get_report_metadata(
        self,
        id_sites: SiteIds = None,
        period: str = "",
        date: str = "",
        hide_metrics_doc: Flag = None,
        show_subtable_reports: Flag = None,
    ):
        """Get metadata for every report available on the given sites."""
        return self._call(
            "getReportMetadata",
            optional={
                "idSites": _site_list(id_sites),
                "period": period,
                "date": date,
                "hideMetricsDoc": hide_metrics_doc,
                "showSubtableReports": show_subtable_reports,
            },
        )

    def get_processed_report(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        api_module: str,
        api_action: str,
        segment: str = "",
        api_parameters: ApiParameters = None,
        id_goal="",
        language: str = "",
        show_timer: Flag = None,
        hide_metrics_doc: Flag = None,
        id_subtable="",
        show_raw_metrics: Flag = None,
        format_metrics: Flag = None,
        id_dimension="",
    ):
        """
        Get a report with its metadata and formatted values.

        Args:
            api_module: Module of the report, e.g. ``UserCountry``
            api_action: Action of the report, e.g. ``getCountry``
            api_parameters: Extra parameters of the underlying report
        """
        return self._call(
            "getProcessedReport",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "apiModule": api_module,
                "apiAction": api_action,
            },
            {
                "segment": segment,
                "apiParameters": api_parameters,
                "idGoal": id_goal,
                "language": language,
                "showTimer": show_timer,
                "hideMetricsDoc": hide_metrics_doc,
                "idSubtable": id_subtable,
                "showRawMetrics": show_raw_metrics,
                "format_metrics": format_metrics,
                "idDimension": id_dimension,
            },
        )

    def get_report_pages_metadata(self, id_site: Optional[SiteId] = None):
        return self._call("getReportPagesMetadata", optional={"idSite": id_site})

    def get_widget_metadata(self, id_site: Optional[SiteId] = None):
        return self._call("getWidgetMetadata", optional={"idSite": id_site})

    def get(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        columns: Columns = "",
    ):
        """Get the combined metrics of all core reports."""
        return self._report("get", id_site, period, date, {"segment": segment, "columns": columns})

    def get_row_evolution(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        api_module: str,
        api_action: str,
        label: str = "",
        segment: str = "",
        column: str = "",
        language: str = "",
        id_goal="",
        legend_append_metric: Flag = None,
        label_use_absolute_url: Flag = None,
        id_dimension="",
        label_series: str = "",
        show_goal_metrics_for_goal="",
    ):
        """Get the evolution over time of one or more report rows."""
        return self._call(
            "getRowEvolution",
            {
                "idSite": id_site,
                "period": period,
                "date": date,
                "apiModule": api_module,
                "apiAction": api_action,
            },
            {
                "label": label,
                "segment": segment,
                "column": column,
                "language": language,
                "idGoal": id_goal,
                "legendAppendMetric": legend_append_metric,
                "labelUseAbsoluteUrl": label_use_absolute_url,
                "idDimension": id_dimension,
                "labelSeries": label_series,
                "showGoalMetricsForGoal": show_goal_metrics_for_goal,
            },
        )

    def get_bulk_request(self, urls: Sequence[str]):
        """
        Call ``API.getBulkRequest`` with pre-encoded sub-request query strings.

        Prefer ``prepare_requests()``, which builds these for you.
        """
        return self._call("getBulkRequest", {"urls": dict(enumerate(urls))})

    def is_plugin_activated(self, plugin_name: str):
        """Check whether a plugin is activated; resolves to a bool."""
        return self._call(
            "isPluginActivated", {"pluginName": plugin_name}, transform=unwrap_value
        )

    def get_suggested_values_for_segment(
        self, segment_name: str, id_site: Optional[SiteId] = None
    ):
        return self._call(
            "getSuggestedValuesForSegment", {"segmentName": segment_name}, {"idSite": id_site}
        )

    def get_pages_comparisons_disabled_for(self):
        return self._call("getPagesComparisonsDisabledFor")

    def get_glossary_reports(self, id_site: SiteId):
        return self._call("getGlossaryReports", {"idSite": id_site})

    def get_glossary_metrics(self, id_site: SiteId):
        return self._call("getGlossaryMetrics", {"idSite": id_site})
