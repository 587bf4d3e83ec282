"""
Overlay API.
"""

from matomo_client.modules.base import ModuleBase, SiteId


class OverlayModule(ModuleBase):
    """Façade for the ``Overlay`` namespace."""

    namespace = "Overlay"

    def get_translations(self, id_site: SiteId):
        """Get the translations used by the overlay UI."""
        return self._call("getTranslations", {"idSite": id_site})

    def get_following_pages(
        self,
        url: str,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
    ):
        """
        Get the pages visited after ``url``.

        ``segment`` is left out of the call when empty.
        """
        return self._call(
            "getFollowingPages",
            {"url": url, "idSite": id_site, "period": period, "date": date},
            {"segment": segment},
        )
