"""
MarketingCampaignsReporting API.

Campaign reports split by the individual campaign URL parameters.
"""

from typing import Optional

from matomo_client.modules.base import Flag, ModuleBase, SiteId


class MarketingCampaignsReportingModule(ModuleBase):
    """Façade for the ``MarketingCampaignsReporting`` namespace."""

    namespace = "MarketingCampaignsReporting"

    def _dimension(self, action, id_site, period, date, segment):
        return self._report(action, id_site, period, date, {"segment": segment})

    def _subtable(self, action, id_site, period, date, id_subtable, segment):
        params = {"idSite": id_site, "period": period, "date": date, "idSubtable": id_subtable}
        if id_site is None:
            del params["idSite"]
        return self._call(action, params, {"segment": segment})

    def get_id(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getId", id_site, period, date, segment)

    def get_name(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        """Get campaign names; each row has a subtable of keyword and content."""
        return self._report(
            "getName", id_site, period, date,
            {"segment": segment, "expanded": expanded, "flat": flat},
        )

    def get_keyword_content_from_name_id(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable, segment: str = ""
    ):
        return self._subtable(
            "getKeywordContentFromNameId", id_site, period, date, id_subtable, segment
        )

    def get_keyword(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getKeyword", id_site, period, date, segment)

    def get_source(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getSource", id_site, period, date, segment)

    def get_medium(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getMedium", id_site, period, date, segment)

    def get_content(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getContent", id_site, period, date, segment)

    def get_group(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getGroup", id_site, period, date, segment)

    def get_placement(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._dimension("getPlacement", id_site, period, date, segment)

    def get_source_medium(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._report(
            "getSourceMedium", id_site, period, date,
            {"segment": segment, "expanded": expanded, "flat": flat},
        )

    def get_name_from_source_medium_id(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable, segment: str = ""
    ):
        return self._subtable(
            "getNameFromSourceMediumId", id_site, period, date, id_subtable, segment
        )
