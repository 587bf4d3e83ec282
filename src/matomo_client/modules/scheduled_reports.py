"""
ScheduledReports API.

Email reports sent on a schedule.
"""

import json
from typing import Any, Mapping, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

ReportId = Union[int, str]
Reports = Union[str, Sequence[str], Mapping[str, Any]]
Parameters = Union[str, Mapping[str, Any]]


def _as_json(value: Any) -> Any:
    """Matomo takes structured ``reports``/``parameters`` values as JSON text."""
    if isinstance(value, Mapping):
        return json.dumps(value)
    return value


class ScheduledReportsModule(ModuleBase):
    """Façade for the ``ScheduledReports`` namespace."""

    namespace = "ScheduledReports"

    def _report_fields(
        self, id_site, description, period, hour, report_type, report_format, reports, parameters
    ):
        return {
            "idSite": id_site,
            "description": description,
            "period": period,
            "hour": hour,
            "reportType": report_type,
            "reportFormat": report_format,
            "reports": _as_json(reports),
            "parameters": _as_json(parameters),
        }

    def add_report(
        self,
        id_site: SiteId,
        description: str,
        period: str,
        hour: Union[int, str],
        report_type: str,
        report_format: str,
        reports: Reports,
        parameters: Parameters,
        id_segment: str = "",
        evolution_period_for: str = "",
        evolution_period_n: Optional[int] = None,
        period_param: str = "",
    ):
        """
        Schedule a new report.

        Args:
            id_site: Site to report on
            description: Report title
            period: Sending schedule, e.g. ``week``
            hour: Hour of day the report is sent
            report_type: Delivery channel, usually ``email``
            report_format: ``html``, ``pdf``, ``csv``, ``tsv``
            reports: Report unique IDs to include
            parameters: Channel settings, e.g. ``{"emailMe": True}``;
                mappings are sent as JSON
            id_segment: Stored segment to apply
            evolution_period_for: ``prev`` or ``each``
            evolution_period_n: Number of periods in evolution graphs
            period_param: Period of the data shown
        """
        return self._call(
            "addReport",
            self._report_fields(
                id_site, description, period, hour, report_type, report_format, reports, parameters
            ),
            {
                "idSegment": id_segment,
                "evolutionPeriodFor": evolution_period_for,
                "evolutionPeriodN": evolution_period_n,
                "periodParam": period_param,
            },
        )

    def update_report(
        self,
        id_report: ReportId,
        id_site: SiteId,
        description: str,
        period: str,
        hour: Union[int, str],
        report_type: str,
        report_format: str,
        reports: Reports,
        parameters: Parameters,
        id_segment: str = "",
        evolution_period_for: str = "",
        evolution_period_n: Optional[int] = None,
        period_param: str = "",
    ):
        """Replace a scheduled report; takes the same fields as ``add_report``."""
        params = {"idReport": id_report}
        params.update(self._report_fields(
            id_site, description, period, hour, report_type, report_format, reports, parameters
        ))
        return self._call(
            "updateReport",
            params,
            {
                "idSegment": id_segment,
                "evolutionPeriodFor": evolution_period_for,
                "evolutionPeriodN": evolution_period_n,
                "periodParam": period_param,
            },
        )

    def delete_report(self, id_report: ReportId):
        return self._call("deleteReport", {"idReport": id_report})

    def get_reports(
        self,
        id_site: Optional[SiteId] = None,
        period: str = "",
        id_report: Optional[ReportId] = None,
        if_super_user_return_only_super_user_reports: Flag = None,
        id_segment: str = "",
    ):
        return self._call(
            "getReports",
            optional={
                "idSite": id_site,
                "period": period,
                "idReport": id_report,
                "ifSuperUserReturnOnlySuperUserReports": if_super_user_return_only_super_user_reports,
                "idSegment": id_segment,
            },
        )

    def generate_report(
        self,
        id_report: ReportId,
        date: str,
        language: str = "",
        output_type: str = "",
        period: str = "",
        report_format: str = "",
        parameters: Optional[Parameters] = None,
    ):
        """Render a scheduled report for a date without sending it."""
        return self._call(
            "generateReport",
            {"idReport": id_report, "date": date},
            {
                "language": language,
                "outputType": output_type,
                "period": period,
                "reportFormat": report_format,
                "parameters": _as_json(parameters),
            },
        )

    def send_report(
        self, id_report: ReportId, period: str = "", date: str = "", force: Flag = None
    ):
        return self._call(
            "sendReport",
            {"idReport": id_report},
            {"period": period, "date": date, "force": force},
        )
