"""
RollUpReporting API.

Roll-up sites aggregating the data of several source sites.
"""

from typing import Sequence

from matomo_client.modules.base import ModuleBase, SiteId


class RollUpReportingModule(ModuleBase):
    """Façade for the ``RollUpReporting`` namespace."""

    namespace = "RollUpReporting"

    def add_roll_up(
        self, name: str, source_id_sites: Sequence[SiteId], timezone: str, currency: str
    ):
        """Create a roll-up site; returns its idSite."""
        return self._call(
            "addRollUp",
            {
                "name": name,
                "sourceIdSites": list(source_id_sites),
                "timezone": timezone,
                "currency": currency,
            },
        )

    def update_roll_up(
        self,
        id_site: SiteId,
        name: str = "",
        source_id_sites: Sequence[SiteId] = (),
        timezone: str = "",
        currency: str = "",
    ):
        return self._call(
            "updateRollUp",
            {"idSite": id_site},
            {
                "name": name,
                "sourceIdSites": list(source_id_sites),
                "timezone": timezone,
                "currency": currency,
            },
        )

    def get_roll_ups(self):
        return self._call("getRollUps")
