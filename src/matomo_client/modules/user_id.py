"""
UserId API.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class UserIdModule(ModuleBase):
    """Façade for the ``UserId`` namespace."""

    namespace = "UserId"

    def get_users(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        """Get the report of visitors identified by a User ID."""
        return self._call(
            "getUsers",
            {"idSite": id_site, "period": period, "date": date},
            {"segment": segment},
        )
