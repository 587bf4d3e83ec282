"""
SearchEngineKeywordsPerformance API.

Keywords and crawl statistics imported from Google, Bing and Yandex.
"""

from typing import Optional

from matomo_client.modules.base import ModuleBase, SiteId


class SearchEngineKeywordsPerformanceModule(ModuleBase):
    """Façade for the ``SearchEngineKeywordsPerformance`` namespace."""

    namespace = "SearchEngineKeywordsPerformance"

    def get_keywords(self, id_site: Optional[SiteId], period: str, date: str):
        """Get keywords from every source, tracked and imported."""
        return self._report("getKeywords", id_site, period, date)

    def get_keywords_imported(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsImported", id_site, period, date)

    def get_keywords_google(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsGoogle", id_site, period, date)

    def get_keywords_bing(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsBing", id_site, period, date)

    def get_keywords_yandex(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsYandex", id_site, period, date)

    def get_keywords_google_web(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsGoogleWeb", id_site, period, date)

    def get_keywords_google_image(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsGoogleImage", id_site, period, date)

    def get_keywords_google_video(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsGoogleVideo", id_site, period, date)

    def get_keywords_google_news(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getKeywordsGoogleNews", id_site, period, date)

    def get_crawling_overview_bing(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getCrawlingOverviewBing", id_site, period, date)

    def get_crawling_overview_yandex(self, id_site: Optional[SiteId], period: str, date: str):
        return self._report("getCrawlingOverviewYandex", id_site, period, date)

    def get_crawling_error_examples_bing(self, id_site: SiteId):
        return self._call("getCrawlingErrorExamplesBing", {"idSite": id_site})
