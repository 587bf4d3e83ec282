"""
DevicePlugins API.
"""

from typing import Optional

from matomo_client.modules.base import ModuleBase, SiteId


class DevicePluginsModule(ModuleBase):
    """Façade for the ``DevicePlugins`` namespace."""

    namespace = "DevicePlugins"

    def get_plugin(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        """Get the browser plugins (PDF, Java, ...) visitors have."""
        return self._report("getPlugin", id_site, period, date, {"segment": segment})
