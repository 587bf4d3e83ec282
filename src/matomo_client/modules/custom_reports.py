"""
CustomReports API.

User-defined reports built from chosen dimensions and metrics.
"""

from typing import Optional, Sequence, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

ReportId = Union[int, str]
Ids = Sequence[Union[int, str]]


class CustomReportsModule(ModuleBase):
    """Façade for the ``CustomReports`` namespace."""

    namespace = "CustomReports"

    def add_custom_report(
        self,
        id_site: SiteId,
        name: str,
        report_type: str,
        metric_ids: Sequence[str],
        category_id: str = "",
        dimension_ids: Sequence[str] = (),
        subcategory_id: str = "",
        description: str = "",
        segment_filter: str = "",
        multiple_id_sites: Ids = (),
    ):
        """
        Create a custom report.

        Args:
            id_site: Site the report belongs to
            name: Report name
            report_type: ``table`` or ``evolution``
            metric_ids: Metrics to show, e.g. ``["nb_visits"]``
            category_id: Reporting menu category
            dimension_ids: Dimensions to group by (table reports only)
            subcategory_id: Reporting menu subcategory
            description: Free text description
            segment_filter: Segment applied to the report's data
            multiple_id_sites: Further sites the report applies to
        """
        return self._call(
            "addCustomReport",
            {
                "idSite": id_site,
                "name": name,
                "reportType": report_type,
                "metricIds": list(metric_ids),
            },
            {
                "categoryId": category_id,
                "dimensionIds": list(dimension_ids),
                "subcategoryId": subcategory_id,
                "description": description,
                "segmentFilter": segment_filter,
                "multipleIdSites": list(multiple_id_sites),
            },
        )

    def update_custom_report(
        self,
        id_site: SiteId,
        id_custom_report: ReportId,
        name: str,
        report_type: str,
        metric_ids: Sequence[str],
        category_id: str = "",
        dimension_ids: Sequence[str] = (),
        subcategory_id: str = "",
        description: str = "",
        segment_filter: str = "",
        sub_category_report_ids: Sequence[str] = (),
        multiple_id_sites: Ids = (),
    ):
        """Replace a custom report's definition; takes the same fields as ``add_custom_report``."""
        return self._call(
            "updateCustomReport",
            {
                "idSite": id_site,
                "idCustomReport": id_custom_report,
                "name": name,
                "reportType": report_type,
                "metricIds": list(metric_ids),
            },
            {
                "categoryId": category_id,
                "dimensionIds": list(dimension_ids),
                "subcategoryId": subcategory_id,
                "description": description,
                "segmentFilter": segment_filter,
                "subCategoryReportIds": list(sub_category_report_ids),
                "multipleIdSites": list(multiple_id_sites),
            },
        )

    def get_configured_reports(self, id_site: SiteId, skip_category_metadata: Flag = None):
        return self._call(
            "getConfiguredReports",
            {"idSite": id_site},
            {"skipCategoryMetadata": skip_category_metadata},
        )

    def get_configured_report(self, id_site: SiteId, id_custom_report: ReportId):
        return self._call(
            "getConfiguredReport", {"idSite": id_site, "idCustomReport": id_custom_report}
        )

    def delete_custom_report(self, id_site: SiteId, id_custom_report: ReportId):
        return self._call(
            "deleteCustomReport", {"idSite": id_site, "idCustomReport": id_custom_report}
        )

    def pause_custom_report(self, id_site: SiteId, id_custom_report: ReportId):
        return self._call(
            "pauseCustomReport", {"idSite": id_site, "idCustomReport": id_custom_report}
        )

    def resume_custom_report(self, id_site: SiteId, id_custom_report: ReportId):
        return self._call(
            "resumeCustomReport", {"idSite": id_site, "idCustomReport": id_custom_report}
        )

    def get_available_categories(self, id_site: SiteId):
        return self._call("getAvailableCategories", {"idSite": id_site})

    def get_available_report_types(self):
        return self._call("getAvailableReportTypes")

    def get_available_dimensions(self, id_site: SiteId):
        return self._call("getAvailableDimensions", {"idSite": id_site})

    def get_available_metrics(self, id_site: SiteId):
        return self._call("getAvailableMetrics", {"idSite": id_site})

    def get_custom_report(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_custom_report: ReportId,
        segment: str = "",
        expanded: Flag = None,
        flat: Flag = None,
        id_subtable="",
        columns: Columns = "",
    ):
        """Get the data of a custom report."""
        return self._report(
            "getCustomReport", id_site, period, date,
            {
                "idCustomReport": id_custom_report,
                "segment": segment,
                "expanded": expanded,
                "flat": flat,
                "idSubtable": id_subtable,
                "columns": columns,
            },
        )
