"""
Resolution API.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class ResolutionModule(ModuleBase):
    """Façade for the ``Resolution`` namespace."""

    namespace = "Resolution"

    def get_resolution(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getResolution", id_site, period, date, {"segment": segment})

    def get_configuration(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        """Get OS, browser and resolution combinations."""
        return self._report("getConfiguration", id_site, period, date, {"segment": segment})
