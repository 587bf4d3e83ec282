"""
ActivityLog API.

Audit trail of changes made by Matomo users.
"""

from typing import Union

from matomo_client.modules.base import ModuleBase, unwrap_value

Count = Union[int, str]


class ActivityLogModule(ModuleBase):
    """Façade for the ``ActivityLog`` namespace."""

    namespace = "ActivityLog"

    def get_entries(
        self,
        offset: Count = 0,
        limit: Count = 25,
        filter_by_user_login: str = "",
        filter_by_activity_type: str = "",
        period: str = "",
        date: str = "",
    ):
        """Get activity entries, newest first; ``offset`` and ``limit`` are always sent."""
        return self._call(
            "getEntries",
            {"offset": offset, "limit": limit},
            {
                "filterByUserLogin": filter_by_user_login,
                "filterByActivityType": filter_by_activity_type,
                "period": period,
                "date": date,
            },
        )

    def get_entry_count(
        self,
        filter_by_user_login: str = "",
        filter_by_activity_type: str = "",
        period: str = "",
        date: str = "",
    ):
        return self._call(
            "getEntryCount",
            optional={
                "filterByUserLogin": filter_by_user_login,
                "filterByActivityType": filter_by_activity_type,
                "period": period,
                "date": date,
            },
            transform=unwrap_value,
        )

    def get_all_activity_types(self, filter_limit: Count = -1):
        return self._call("getAllActivityTypes", {"filterLimit": filter_limit})
