"""
Referrers API.

Acquisition reports: channel types, search engines, keywords, websites,
social networks and campaigns.
"""

from typing import Optional, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

SubtableId = Union[int, str]


class ReferrersModule(ModuleBase):
    """Façade for the ``Referrers`` namespace."""

    namespace = "Referrers"

    def get(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        segment: str = "",
        columns: Columns = "",
    ):
        """Get referrer overview metrics."""
        return self._report("get", id_site, period, date, {"segment": segment, "columns": columns})

    def get_referrer_type(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        segment: str = "",
        type_referrer: str = "",
        id_subtable="",
        expanded: Flag = None,
    ):
        """Get visits by channel type (direct, search, website, campaign, social)."""
        return self._report(
            "getReferrerType",
            id_site,
            period,
            date,
            {
                "segment": segment,
                "typeReferrer": type_referrer,
                "idSubtable": id_subtable,
                "expanded": expanded,
            },
        )

    def _expandable(self, action, id_site, period, date, segment, expanded, flat):
        return self._report(
            action, id_site, period, date, {"segment": segment, "expanded": expanded, "flat": flat}
        )

    def _subtable(self, action, id_site, period, date, id_subtable, segment):
        params = {"idSite": id_site, "period": period, "date": date, "idSubtable": id_subtable}
        if id_site is None:
            del params["idSite"]
        return self._call(action, params, {"segment": segment})

    def get_all(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._expandable("getAll", id_site, period, date, segment, expanded, flat)

    def get_direct_entry(self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""):
        return self._report("getDirectEntry", id_site, period, date, {"segment": segment})

    def get_search_engines(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._expandable("getSearchEngines", id_site, period, date, segment, expanded, flat)

    def get_keywords_from_search_engine_id(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable: SubtableId,
        segment: str = "",
    ):
        return self._subtable(
            "getKeywordsFromSearchEngineId", id_site, period, date, id_subtable, segment
        )

    def get_campaigns(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None,
    ):
        return self._report(
            "getCampaigns", id_site, period, date, {"segment": segment, "expanded": expanded}
        )

    def get_keywords_from_campaign_id(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable: SubtableId,
        segment: str = "",
    ):
        return self._subtable(
            "getKeywordsFromCampaignId", id_site, period, date, id_subtable, segment
        )

    def get_websites(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._expandable("getWebsites", id_site, period, date, segment, expanded, flat)

    def get_urls_from_website_id(
        self, id_site: Optional[SiteId], period: str, date: str, id_subtable: SubtableId,
        segment: str = "",
    ):
        return self._subtable("getUrlsFromWebsiteId", id_site, period, date, id_subtable, segment)

    def get_socials(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, flat: Flag = None,
    ):
        return self._expandable("getSocials", id_site, period, date, segment, expanded, flat)

    def get_urls_for_social(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "", id_subtable=""
    ):
        return self._report(
            "getUrlsForSocial", id_site, period, date,
            {"segment": segment, "idSubtable": id_subtable},
        )

    def get_number_of_search_engines(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getNumberOfDistinctSearchEngines", id_site, period, date, {"segment": segment})

    def get_number_of_keywords(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getNumberOfDistinctKeywords", id_site, period, date, {"segment": segment})

    def get_number_of_campaigns(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getNumberOfDistinctCampaigns", id_site, period, date, {"segment": segment})

    def get_number_of_websites(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getNumberOfDistinctWebsites", id_site, period, date, {"segment": segment})

    def get_number_of_website_urls(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getNumberOfDistinctWebsitesUrls", id_site, period, date, {"segment": segment})
