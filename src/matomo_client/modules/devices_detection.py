"""
DevicesDetection API.

Device, operating system and browser reports.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class DevicesDetectionModule(ModuleBase):
    """Façade for the ``DevicesDetection`` namespace."""

    namespace = "DevicesDetection"

    def get_type(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        """Get visits by device type (desktop, smartphone, ...)."""
        return self._report("getType", id_site, period, date, {"segment": segment})

    def get_brand(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getBrand", id_site, period, date, {"segment": segment})

    def get_model(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getModel", id_site, period, date, {"segment": segment})

    def get_os_families(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getOsFamilies", id_site, period, date, {"segment": segment})

    def get_os_versions(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getOsVersions", id_site, period, date, {"segment": segment})

    def get_browsers(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getBrowsers", id_site, period, date, {"segment": segment})

    def get_browser_versions(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getBrowserVersions", id_site, period, date, {"segment": segment})

    def get_browser_engines(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getBrowserEngines", id_site, period, date, {"segment": segment})
