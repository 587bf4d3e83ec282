"""
CustomAlerts API.

Alerts fired when a report metric crosses a threshold.
"""

from typing import Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

AlertId = Union[int, str]
SiteIds = Union[SiteId, Sequence[SiteId]]
Recipients = Union[str, Sequence[str]]


class CustomAlertsModule(ModuleBase):
    """Façade for the ``CustomAlerts`` namespace."""

    namespace = "CustomAlerts"

    def _alert_fields(
        self, name, id_sites, period, email_me, additional_emails, phone_numbers, metric,
        metric_condition, metric_value, compared_to, report_unique_id,
    ):
        return {
            "name": name,
            "idSites": id_sites,
            "period": period,
            "emailMe": email_me,
            "additionalEmails": additional_emails,
            "phoneNumbers": phone_numbers,
            "metric": metric,
            "metricCondition": metric_condition,
            "metricValue": metric_value,
            "comparedTo": compared_to,
            "reportUniqueId": report_unique_id,
        }

    def get_values_for_alert_in_past(self, id_alert: AlertId, sub_period_n: Union[int, str]):
        return self._call(
            "getValuesForAlertInPast", {"idAlert": id_alert, "subPeriodN": sub_period_n}
        )

    def get_alert(self, id_alert: AlertId):
        return self._call("getAlert", {"idAlert": id_alert})

    def get_alerts(self, id_sites: SiteIds, if_super_user_return_all_alerts: Flag = None):
        return self._call(
            "getAlerts",
            {"idSites": id_sites},
            {"ifSuperUserReturnAllAlerts": if_super_user_return_all_alerts},
        )

    def add_alert(
        self,
        name: str,
        id_sites: SiteIds,
        period: str,
        email_me: bool,
        additional_emails: Recipients,
        phone_numbers: Recipients,
        metric: str,
        metric_condition: str,
        metric_value: Union[int, float, str],
        compared_to: Union[int, str],
        report_unique_id: str,
        report_condition: str = "",
        report_value: str = "",
    ):
        """
        Create an alert.

        Args:
            name: Alert name
            id_sites: Sites the alert watches
            period: ``day``, ``week`` or ``month``
            email_me: Send the alert to the current user
            additional_emails: Further recipients
            phone_numbers: Phone numbers to text
            metric: Metric to watch, e.g. ``nb_visits``
            metric_condition: Condition such as ``less_than``
            metric_value: Threshold
            compared_to: Number of periods back to compare with
            report_unique_id: Report the metric comes from
            report_condition: Condition on the report row label
            report_value: Value the row label is matched against
        """
        return self._call(
            "addAlert",
            self._alert_fields(
                name, id_sites, period, email_me, additional_emails, phone_numbers, metric,
                metric_condition, metric_value, compared_to, report_unique_id,
            ),
            {"reportCondition": report_condition, "reportValue": report_value},
        )

    def edit_alert(
        self,
        id_alert: AlertId,
        name: str,
        id_sites: SiteIds,
        period: str,
        email_me: bool,
        additional_emails: Recipients,
        phone_numbers: Recipients,
        metric: str,
        metric_condition: str,
        metric_value: Union[int, float, str],
        compared_to: Union[int, str],
        report_unique_id: str,
        report_condition: str = "",
        report_value: str = "",
    ):
        """Replace an alert's definition; takes the same fields as ``add_alert``."""
        params = {"idAlert": id_alert}
        params.update(self._alert_fields(
            name, id_sites, period, email_me, additional_emails, phone_numbers, metric,
            metric_condition, metric_value, compared_to, report_unique_id,
        ))
        return self._call(
            "editAlert",
            params,
            {"reportCondition": report_condition, "reportValue": report_value},
        )

    def delete_alert(self, id_alert: AlertId):
        return self._call("deleteAlert", {"idAlert": id_alert})

    def get_triggered_alerts(self, id_sites: SiteIds, period: Optional[str] = None):
        return self._call("getTriggeredAlerts", {"idSites": id_sites}, {"period": period})
