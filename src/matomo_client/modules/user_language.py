"""
UserLanguage API.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class UserLanguageModule(ModuleBase):
    """Façade for the ``UserLanguage`` namespace."""

    namespace = "UserLanguage"

    def get_language(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getLanguage", id_site, period, date, {"segment": segment})

    def get_language_code(self, id_site: SiteId, period: str, date: str, segment: str = ""):
        return self._report("getLanguageCode", id_site, period, date, {"segment": segment})
