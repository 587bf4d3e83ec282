"""
Dashboard API.
"""

from typing import Union

from matomo_client.modules.base import Flag, ModuleBase

DashboardId = Union[int, str]


class DashboardModule(ModuleBase):
    """Façade for the ``Dashboard`` namespace."""

    namespace = "Dashboard"

    def get_dashboards(self, login: str = "", return_default_if_empty: Flag = None):
        """
        Get the dashboards of a user.

        Args:
            login: User login; the authenticated user when empty
            return_default_if_empty: The server default is 1
        """
        return self._call(
            "getDashboards",
            optional={"login": login, "returnDefaultIfEmpty": return_default_if_empty},
        )

    def create_new_dashboard_for_user(
        self, login: str, dashboard_name: str = "", add_default_widgets: Flag = None
    ):
        return self._call(
            "createNewDashboardForUser",
            {"login": login},
            {"dashboardName": dashboard_name, "addDefaultWidgets": add_default_widgets},
        )

    def remove_dashboard(self, id_dashboard: DashboardId, login: str = ""):
        return self._call("removeDashboard", {"idDashboard": id_dashboard}, {"login": login})

    def copy_dashboard_to_user(
        self, id_dashboard: DashboardId, copy_to_user: str, dashboard_name: str = ""
    ):
        return self._call(
            "copyDashboardToUser",
            {"idDashboard": id_dashboard, "copyToUser": copy_to_user},
            {"dashboardName": dashboard_name},
        )

    def reset_dashboard_layout(self, id_dashboard: DashboardId, login: str = ""):
        return self._call("resetDashboardLayout", {"idDashboard": id_dashboard}, {"login": login})
