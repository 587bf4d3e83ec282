"""
Actions API.

Page URL and title reports, entry and exit pages, downloads, outlinks and
site search.
"""

from typing import Optional

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId


class ActionsModule(ModuleBase):
    """Façade for the ``Actions`` namespace."""

    namespace = "Actions"

    def _page_report(
        self, action, id_site, period, date, segment, expanded, id_subtable, depth, flat
    ):
        return self._report(
            action,
            id_site,
            period,
            date,
            {
                "segment": segment,
                "expanded": expanded,
                "idSubtable": id_subtable,
                "depth": depth,
                "flat": flat,
            },
        )

    def _single(self, action, key, value, id_site, period, date, segment):
        optional = {"segment": segment}
        params = {key: value, "period": period, "date": date}
        if id_site is not None:
            params["idSite"] = id_site
        return self._call(action, params, optional)

    def get(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        segment: str = "",
        columns: Columns = "",
    ):
        """Get action totals: pageviews, downloads, outlinks, searches."""
        return self._report("get", id_site, period, date, {"segment": segment, "columns": columns})

    def get_page_urls(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        """
        Get the page URL report.

        Args:
            expanded: Include subtables inline
            id_subtable: Return only this subtable
            depth: Limit the depth of the folder tree
            flat: Flatten the folder tree into one table
        """
        return self._page_report(
            "getPageUrls", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_page_urls_following_site_search(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getPageUrlsFollowingSiteSearch", id_site, period, date, segment,
            expanded, id_subtable, depth, flat,
        )

    def get_page_titles_following_site_search(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getPageTitlesFollowingSiteSearch", id_site, period, date, segment,
            expanded, id_subtable, depth, flat,
        )

    def get_entry_page_urls(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getEntryPageUrls", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_exit_page_urls(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getExitPageUrls", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_page_url(
        self, page_url: str, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._single("getPageUrl", "pageUrl", page_url, id_site, period, date, segment)

    def get_page_titles(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getPageTitles", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_entry_page_titles(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getEntryPageTitles", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_exit_page_titles(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getExitPageTitles", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_page_title(
        self, page_name: str, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._single("getPageTitle", "pageName", page_name, id_site, period, date, segment)

    def get_downloads(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getDownloads", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_download(
        self, download_url: str, id_site: Optional[SiteId], period: str, date: str,
        segment: str = "",
    ):
        return self._single(
            "getDownload", "downloadUrl", download_url, id_site, period, date, segment
        )

    def get_outlinks(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = "",
        expanded: Flag = None, id_subtable="", depth="", flat: Flag = None,
    ):
        return self._page_report(
            "getOutlinks", id_site, period, date, segment, expanded, id_subtable, depth, flat
        )

    def get_outlink(
        self, outlink_url: str, id_site: Optional[SiteId], period: str, date: str,
        segment: str = "",
    ):
        return self._single("getOutlink", "outlinkUrl", outlink_url, id_site, period, date, segment)

    def get_site_search_keywords(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getSiteSearchKeywords", id_site, period, date, {"segment": segment})

    def get_site_search_no_result_keywords(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report(
            "getSiteSearchNoResultKeywords", id_site, period, date, {"segment": segment}
        )

    def get_site_search_categories(
        self, id_site: Optional[SiteId], period: str, date: str, segment: str = ""
    ):
        return self._report("getSiteSearchCategories", id_site, period, date, {"segment": segment})
