"""
SitesManager API.

Website registration, tracking code, and global tracking settings.
"""

from typing import Any, Dict, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

Urls = Union[str, Sequence[str]]


def _site_fields(
    urls: Urls,
    ecommerce: Flag,
    site_search: Flag,
    search_keyword_parameters: str,
    search_category_parameters: str,
    excluded_ips: str,
    excluded_query_parameters: str,
    timezone: str,
    currency: str,
    group: str,
    start_date: str,
    excluded_user_agents: str,
    keep_url_fragments: Flag,
    type: str,
    setting_values: Optional[Dict[str, Any]],
    exclude_unknown_urls: Flag,
    excluded_referrers: str,
) -> Dict[str, Any]:
    return {
        "urls": list(urls) if isinstance(urls, (list, tuple)) else urls,
        "ecommerce": ecommerce,
        "siteSearch": site_search,
        "searchKeywordParameters": search_keyword_parameters,
        "searchCategoryParameters": search_category_parameters,
        "excludedIps": excluded_ips,
        "excludedQueryParameters": excluded_query_parameters,
        "timezone": timezone,
        "currency": currency,
        "group": group,
        "startDate": start_date,
        "excludedUserAgents": excluded_user_agents,
        "keepURLFragments": keep_url_fragments,
        "type": type,
        "settingValues": setting_values,
        "excludeUnknownUrls": exclude_unknown_urls,
        "excludedReferrers": excluded_referrers,
    }


class SitesManagerModule(ModuleBase):
    """Façade for the ``SitesManager`` namespace."""

    namespace = "SitesManager"

    def get_javascript_tag(
        self,
        id_site: SiteId,
        piwik_url: str = "",
        merge_subdomains: Flag = None,
        group_page_titles_by_domain: Flag = None,
        merge_alias_urls: Flag = None,
        visitor_custom_variables: Optional[Dict[str, Any]] = None,
        page_custom_variables: Optional[Dict[str, Any]] = None,
        custom_campaign_name_query_param: str = "",
        custom_campaign_keyword_param: str = "",
        do_not_track: Flag = None,
        disable_cookies: Flag = None,
        track_no_script: Flag = None,
        cross_domain: Flag = None,
        force_matomo_endpoint: Flag = None,
        excluded_query_params: str = "",
        excluded_referrers: str = "",
        disable_campaign_parameters: Flag = None,
    ):
        """
        Get the JavaScript tracking code for a site.

        Args:
            id_site: Site ID
            piwik_url: Matomo URL to embed; the server URL when empty
            merge_subdomains: Track visitors across all subdomains
            do_not_track: Respect the browser's Do Not Track setting
            disable_cookies: Disable all tracking cookies
        """
        return self._call(
            "getJavascriptTag",
            {"idSite": id_site},
            {
                "piwikUrl": piwik_url,
                "mergeSubdomains": merge_subdomains,
                "groupPageTitlesByDomain": group_page_titles_by_domain,
                "mergeAliasUrls": merge_alias_urls,
                "visitorCustomVariables": visitor_custom_variables,
                "pageCustomVariables": page_custom_variables,
                "customCampaignNameQueryParam": custom_campaign_name_query_param,
                "customCampaignKeywordParam": custom_campaign_keyword_param,
                "doNotTrack": do_not_track,
                "disableCookies": disable_cookies,
                "trackNoScript": track_no_script,
                "crossDomain": cross_domain,
                "forceMatomoEndpoint": force_matomo_endpoint,
                "excludedQueryParams": excluded_query_params,
                "excludedReferrers": excluded_referrers,
                "disableCampaignParameters": disable_campaign_parameters,
            },
        )

    def get_image_tracking_code(
        self,
        id_site: SiteId,
        piwik_url: str = "",
        action_name: str = "",
        id_goal="",
        revenue="",
        force_matomo_endpoint: Flag = None,
    ):
        """Get the image tracking pixel HTML for a site."""
        return self._call(
            "getImageTrackingCode",
            {"idSite": id_site},
            {
                "piwikUrl": piwik_url,
                "actionName": action_name,
                "idGoal": id_goal,
                "revenue": revenue,
                "forceMatomoEndpoint": force_matomo_endpoint,
            },
        )

    def get_sites_info(self, id_sites: Optional[Union[SiteId, Sequence[SiteId]]] = None):
        """Get information about the sites the user can view, optionally limited to some."""
        if isinstance(id_sites, (list, tuple)):
            id_sites = list(id_sites)
        return self._call("getSitesWithAtLeastViewAccess", optional={"idSite": id_sites})

    def get_sites_from_group(self, group: str = ""):
        return self._call("getSitesFromGroup", optional={"group": group})

    def get_sites_groups(self):
        return self._call("getSitesGroups")

    def get_site_from_id(self, id_site: SiteId):
        return self._call("getSiteFromId", {"idSite": id_site})

    def get_site_urls_from_id(self, id_site: SiteId):
        return self._call("getSiteUrlsFromId", {"idSite": id_site})

    def get_all_sites(self):
        """Get every site (super user only)."""
        return self._call("getAllSites")

    def get_all_sites_id(self):
        return self._call("getAllSitesId")

    def get_sites_with_admin_access(
        self,
        fetch_alias_urls: Flag = None,
        pattern: str = "",
        limit="",
        sites_to_exclude: Optional[Sequence[SiteId]] = None,
    ):
        return self._call(
            "getSitesWithAdminAccess",
            optional={
                "fetchAliasUrls": fetch_alias_urls,
                "pattern": pattern,
                "limit": limit,
                "sitesToExclude": list(sites_to_exclude or []),
            },
        )

    def get_sites_with_view_access(self):
        return self._call("getSitesWithViewAccess")

    def get_sites_with_at_least_view_access(self, limit=""):
        return self._call("getSitesWithAtLeastViewAccess", optional={"limit": limit})

    def get_sites_id_with_admin_access(self):
        return self._call("getSitesIdWithAdminAccess")

    def get_sites_id_with_view_access(self):
        return self._call("getSitesIdWithViewAccess")

    def get_sites_id_with_write_access(self):
        return self._call("getSitesIdWithWriteAccess")

    def get_sites_id_with_at_least_view_access(self):
        return self._call("getSitesIdWithAtLeastViewAccess")

    def get_sites_id_from_site_url(self, url: str):
        """Get the IDs of the sites whose main or alias URL matches ``url``."""
        return self._call("getSitesIdFromSiteUrl", {"url": url})

    def add_site(
        self,
        site_name: str,
        urls: Urls = "",
        ecommerce: Flag = None,
        site_search: Flag = None,
        search_keyword_parameters: str = "",
        search_category_parameters: str = "",
        excluded_ips: str = "",
        excluded_query_parameters: str = "",
        timezone: str = "",
        currency: str = "",
        group: str = "",
        start_date: str = "",
        excluded_user_agents: str = "",
        keep_url_fragments: Flag = None,
        type: str = "",
        setting_values: Optional[Dict[str, Any]] = None,
        exclude_unknown_urls: Flag = None,
        excluded_referrers: str = "",
    ):
        """
        Register a new website.

        Args:
            site_name: Display name of the site
            urls: Main URL and alias URLs; lists are comma-joined
            timezone: e.g. ``UTC`` or ``Europe/Paris``
            currency: ISO 4217 code, e.g. ``EUR``

        Returns:
            Awaitable for the new site's ID
        """
        return self._call(
            "addSite",
            {"siteName": site_name},
            _site_fields(
                urls, ecommerce, site_search, search_keyword_parameters,
                search_category_parameters, excluded_ips, excluded_query_parameters,
                timezone, currency, group, start_date, excluded_user_agents,
                keep_url_fragments, type, setting_values, exclude_unknown_urls,
                excluded_referrers,
            ),
        )

    def get_site_settings(self, id_site: SiteId):
        return self._call("getSiteSettings", {"idSite": id_site})

    def update_site(
        self,
        id_site: SiteId,
        site_name: str = "",
        urls: Urls = "",
        ecommerce: Flag = None,
        site_search: Flag = None,
        search_keyword_parameters: str = "",
        search_category_parameters: str = "",
        excluded_ips: str = "",
        excluded_query_parameters: str = "",
        timezone: str = "",
        currency: str = "",
        group: str = "",
        start_date: str = "",
        excluded_user_agents: str = "",
        keep_url_fragments: Flag = None,
        type: str = "",
        setting_values: Optional[Dict[str, Any]] = None,
        exclude_unknown_urls: Flag = None,
        excluded_referrers: str = "",
    ):
        """Update a website; only the fields given are sent."""
        optional = {"siteName": site_name}
        optional.update(_site_fields(
            urls, ecommerce, site_search, search_keyword_parameters,
            search_category_parameters, excluded_ips, excluded_query_parameters,
            timezone, currency, group, start_date, excluded_user_agents,
            keep_url_fragments, type, setting_values, exclude_unknown_urls,
            excluded_referrers,
        ))
        return self._call("updateSite", {"idSite": id_site}, optional)

    def delete_site(self, id_site: SiteId, password_confirmation: str = ""):
        return self._call(
            "deleteSite", {"idSite": id_site}, {"passwordConfirmation": password_confirmation}
        )

    def add_site_alias_urls(self, id_site: SiteId, urls: Urls):
        return self._call("addSiteAliasUrls", {"idSite": id_site, "urls": urls})

    def set_site_alias_urls(self, id_site: SiteId, urls: Sequence[str] = ()):
        """Replace the alias URLs of a site."""
        return self._call("setSiteAliasUrls", {"idSite": id_site, "urls": list(urls)})

    def get_ips_for_range(self, ip_range: str):
        return self._call("getIpsForRange", {"ipRange": ip_range})

    def set_global_excluded_ips(self, excluded_ips: str):
        return self._call("setGlobalExcludedIps", {"excludedIps": excluded_ips})

    def set_global_search_parameters(
        self, search_keyword_parameters: str, search_category_parameters: str
    ):
        return self._call(
            "setGlobalSearchParameters",
            {
                "searchKeywordParameters": search_keyword_parameters,
                "searchCategoryParameters": search_category_parameters,
            },
        )

    def get_search_keyword_parameters_global(self):
        return self._call("getSearchKeywordParametersGlobal")

    def get_search_category_parameters_global(self):
        return self._call("getSearchCategoryParametersGlobal")

    def get_excluded_query_parameters(self, id_site: SiteId):
        return self._call("getExcludedQueryParameters", {"idSite": id_site})

    def get_excluded_query_parameters_global(self):
        return self._call("getExcludedQueryParametersGlobal")

    def get_excluded_user_agents_global(self):
        return self._call("getExcludedUserAgentsGlobal")

    def set_global_excluded_user_agents(self, excluded_user_agents: str):
        return self._call(
            "setGlobalExcludedUserAgents", {"excludedUserAgents": excluded_user_agents}
        )

    def get_excluded_referrers(self, id_site: SiteId):
        return self._call("getExcludedReferrers", {"idSite": id_site})

    def get_excluded_referrers_global(self):
        return self._call("getExcludedReferrersGlobal")

    def set_global_excluded_referrers(self, excluded_referrers: str):
        return self._call(
            "setGlobalExcludedReferrers", {"excludedReferrers": excluded_referrers}
        )

    def get_keep_url_fragments_global(self):
        return self._call("getKeepURLFragmentsGlobal")

    def set_keep_url_fragments_global(self, enabled: bool):
        return self._call("setKeepURLFragmentsGlobal", {"enabled": enabled})

    def get_excluded_ips_global(self):
        return self._call("getExcludedIpsGlobal")

    def get_default_currency(self):
        return self._call("getDefaultCurrency")

    def set_default_currency(self, default_currency: str):
        return self._call("setDefaultCurrency", {"defaultCurrency": default_currency})

    def get_default_timezone(self):
        return self._call("getDefaultTimezone")

    def set_default_timezone(self, default_timezone: str):
        return self._call("setDefaultTimezone", {"defaultTimezone": default_timezone})

    def set_global_query_param_exclusion(
        self, exclusion_type: str, query_params_to_exclude: Optional[str] = None
    ):
        params: Dict[str, Any] = {"exclusionType": exclusion_type}
        if query_params_to_exclude is not None:
            params["queryParamsToExclude"] = query_params_to_exclude
        return self._call("setGlobalQueryParamExclusion", params)

    def get_exclusion_type_for_query_params(self):
        return self._call("getExclusionTypeForQueryParams")

    def get_currency_list(self):
        return self._call("getCurrencyList")

    def get_currency_symbols(self):
        return self._call("getCurrencySymbols")

    def is_timezone_support_enabled(self):
        return self._call("isTimezoneSupportEnabled")

    def get_timezones_list(self):
        return self._call("getTimezonesList")

    def get_timezone_name(
        self,
        timezone: str,
        country_code: str = "",
        multiple_timezones_in_country: Flag = None,
    ):
        return self._call(
            "getTimezoneName",
            {"timezone": timezone},
            {
                "countryCode": country_code,
                "multipleTimezonesInCountry": multiple_timezones_in_country,
            },
        )

    def get_unique_site_timezones(self):
        return self._call("getUniqueSiteTimezones")

    def rename_group(self, old_group_name: str, new_group_name: str):
        return self._call(
            "renameGroup", {"oldGroupName": old_group_name, "newGroupName": new_group_name}
        )

    def get_pattern_match_sites(
        self,
        pattern: str,
        limit="",
        sites_to_exclude: Optional[Sequence[SiteId]] = None,
    ):
        """Get sites whose name or URL contains ``pattern``."""
        return self._call(
            "getPatternMatchSites",
            {"pattern": pattern},
            {"limit": limit, "sitesToExclude": list(sites_to_exclude or [])},
        )

    def get_num_websites_to_display_per_page(self):
        return self._call("getNumWebsitesToDisplayPerPage")
