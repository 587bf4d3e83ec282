"""Tools: SitesManager site lookup, tracking code and site administration."""

from typing import Any, Dict, List, Optional, Union

from mcp.server.fastmcp import FastMCP

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import (
    DESTRUCTIVE,
    READ_ONLY,
    WRITE,
    annotations,
    run_tool,
)

FlagInput = Optional[Union[bool, str]]
Urls = Union[str, List[str]]


def register(mcp: FastMCP, ctx: ServerContext) -> None:
    """Register SitesManager tools."""
    sites = ctx.client.sites_manager

    @mcp.tool(
        name="matomo_sites_manager_get_javascript_tag",
        description="Get JavaScript tracking code for a Matomo site",
        annotations=annotations("Get JavaScript Tag", READ_ONLY),
    )
    async def get_javascript_tag(
        idSite: int,
        piwikUrl: Optional[str] = None,
        mergeSubdomains: FlagInput = None,
        groupPageTitlesByDomain: FlagInput = None,
        mergeAliasUrls: FlagInput = None,
        visitorCustomVariables: Optional[Dict[str, Any]] = None,
        pageCustomVariables: Optional[Dict[str, Any]] = None,
        customCampaignNameQueryParam: Optional[str] = None,
        customCampaignKeywordParam: Optional[str] = None,
        doNotTrack: FlagInput = None,
        disableCookies: FlagInput = None,
        trackNoScript: FlagInput = None,
        crossDomain: FlagInput = None,
        forceMatomoEndpoint: FlagInput = None,
        excludedQueryParams: Optional[str] = None,
        excludedReferrers: Optional[str] = None,
        disableCampaignParameters: FlagInput = None,
    ) -> str:
        """
        Args:
            idSite: Site ID to get tracking code for
            piwikUrl: Matomo URL to embed in the snippet
            mergeSubdomains: Track visitors across all subdomains
            doNotTrack: Respect the browser's Do Not Track preference
            disableCookies: Disable all tracking cookies
        """
        return await run_tool(
            "matomo_sites_manager_get_javascript_tag",
            sites.get_javascript_tag(
                idSite,
                piwik_url=piwikUrl or "",
                merge_subdomains=mergeSubdomains,
                group_page_titles_by_domain=groupPageTitlesByDomain,
                merge_alias_urls=mergeAliasUrls,
                visitor_custom_variables=visitorCustomVariables,
                page_custom_variables=pageCustomVariables,
                custom_campaign_name_query_param=customCampaignNameQueryParam or "",
                custom_campaign_keyword_param=customCampaignKeywordParam or "",
                do_not_track=doNotTrack,
                disable_cookies=disableCookies,
                track_no_script=trackNoScript,
                cross_domain=crossDomain,
                force_matomo_endpoint=forceMatomoEndpoint,
                excluded_query_params=excludedQueryParams or "",
                excluded_referrers=excludedReferrers or "",
                disable_campaign_parameters=disableCampaignParameters,
            ),
        )

    @mcp.tool(
        name="matomo_sites_manager_get_image_tracking_code",
        description="Get image tracking code for a Matomo site",
        annotations=annotations("Get Image Tracking Code", READ_ONLY),
    )
    async def get_image_tracking_code(
        idSite: int,
        piwikUrl: Optional[str] = None,
        actionName: Optional[str] = None,
        idGoal: Optional[Union[str, int]] = None,
        revenue: Optional[Union[str, float]] = None,
        forceMatomoEndpoint: FlagInput = None,
    ) -> str:
        """
        Args:
            idSite: Site ID to get tracking code for
            actionName: Action name for the request
            idGoal: Goal ID to convert
            revenue: Revenue for the goal conversion
        """
        return await run_tool(
            "matomo_sites_manager_get_image_tracking_code",
            sites.get_image_tracking_code(
                idSite,
                piwik_url=piwikUrl or "",
                action_name=actionName or "",
                id_goal="" if idGoal is None else idGoal,
                revenue="" if revenue is None else revenue,
                force_matomo_endpoint=forceMatomoEndpoint,
            ),
        )

    @mcp.tool(
        name="matomo_sites_manager_get_sites_from_group",
        description="Get all sites belonging to a group",
        annotations=annotations("Get Sites From Group", READ_ONLY),
    )
    async def get_sites_from_group(group: Optional[str] = None) -> str:
        """
        Args:
            group: Group to search for sites
        """
        return await run_tool(
            "matomo_sites_manager_get_sites_from_group",
            sites.get_sites_from_group(group or ""),
        )

    @mcp.tool(
        name="matomo_sites_manager_get_sites_groups",
        description="Get all site groups in Matomo",
        annotations=annotations("Get Site Groups", READ_ONLY),
    )
    async def get_sites_groups() -> str:
        return await run_tool("matomo_sites_manager_get_sites_groups", sites.get_sites_groups())

    @mcp.tool(
        name="matomo_sites_manager_get_site_from_id",
        description="Get details of a Matomo site by ID",
        annotations=annotations("Get Site", READ_ONLY),
    )
    async def get_site_from_id(idSite: int) -> str:
        """
        Args:
            idSite: Site ID to fetch details for
        """
        return await run_tool(
            "matomo_sites_manager_get_site_from_id", sites.get_site_from_id(idSite)
        )

    @mcp.tool(
        name="matomo_sites_manager_get_site_urls_from_id",
        description="Get all URLs of a Matomo site",
        annotations=annotations("Get Site URLs", READ_ONLY),
    )
    async def get_site_urls_from_id(idSite: int) -> str:
        """
        Args:
            idSite: Site ID to fetch URLs for
        """
        return await run_tool(
            "matomo_sites_manager_get_site_urls_from_id", sites.get_site_urls_from_id(idSite)
        )

    @mcp.tool(
        name="matomo_sites_manager_get_all_sites",
        description="Get all sites in Matomo",
        annotations=annotations("Get All Sites", READ_ONLY),
    )
    async def get_all_sites() -> str:
        return await run_tool("matomo_sites_manager_get_all_sites", sites.get_all_sites())

    @mcp.tool(
        name="matomo_sites_manager_get_all_sites_id",
        description="Get the IDs of all sites in Matomo",
        annotations=annotations("Get All Site IDs", READ_ONLY),
    )
    async def get_all_sites_id() -> str:
        return await run_tool("matomo_sites_manager_get_all_sites_id", sites.get_all_sites_id())

    @mcp.tool(
        name="matomo_sites_manager_get_sites_with_admin_access",
        description="Get sites the current user has admin access to",
        annotations=annotations("Get Sites With Admin Access", READ_ONLY),
    )
    async def get_sites_with_admin_access(
        fetchAliasUrls: FlagInput = None,
        pattern: Optional[str] = None,
        limit: Optional[Union[int, str]] = None,
        sitesToExclude: Optional[List[int]] = None,
    ) -> str:
        """
        Args:
            fetchAliasUrls: Include alias URLs of each site
            pattern: Filter sites by pattern
            limit: Maximum number of sites to return
            sitesToExclude: Site IDs to leave out
        """
        return await run_tool(
            "matomo_sites_manager_get_sites_with_admin_access",
            sites.get_sites_with_admin_access(
                fetch_alias_urls=fetchAliasUrls,
                pattern=pattern or "",
                limit="" if limit is None else limit,
                sites_to_exclude=sitesToExclude,
            ),
        )

    @mcp.tool(
        name="matomo_sites_manager_get_sites_with_view_access",
        description="Get sites the current user has view access to",
        annotations=annotations("Get Sites With View Access", READ_ONLY),
    )
    async def get_sites_with_view_access() -> str:
        return await run_tool(
            "matomo_sites_manager_get_sites_with_view_access",
            sites.get_sites_with_view_access(),
        )

    @mcp.tool(
        name="matomo_sites_manager_get_sites_with_at_least_view_access",
        description="Get sites the current user has at least view access to",
        annotations=annotations("Get Sites With At Least View Access", READ_ONLY),
    )
    async def get_sites_with_at_least_view_access(
        limit: Optional[Union[int, str]] = None,
    ) -> str:
        """
        Args:
            limit: Maximum number of sites to return
        """
        return await run_tool(
            "matomo_sites_manager_get_sites_with_at_least_view_access",
            sites.get_sites_with_at_least_view_access("" if limit is None else limit),
        )

    @mcp.tool(
        name="matomo_sites_manager_add_site",
        description="Add a new site to Matomo",
        annotations=annotations("Add Site", WRITE),
    )
    async def add_site(
        siteName: str,
        urls: Optional[Urls] = None,
        ecommerce: FlagInput = None,
        siteSearch: FlagInput = None,
        searchKeywordParameters: Optional[str] = None,
        searchCategoryParameters: Optional[str] = None,
        excludedIps: Optional[str] = None,
        excludedQueryParameters: Optional[str] = None,
        timezone: Optional[str] = None,
        currency: Optional[str] = None,
        group: Optional[str] = None,
        startDate: Optional[str] = None,
        excludedUserAgents: Optional[str] = None,
        keepURLFragments: FlagInput = None,
        type: Optional[str] = None,
        settingValues: Optional[Dict[str, Any]] = None,
        excludeUnknownUrls: FlagInput = None,
        excludedReferrers: Optional[str] = None,
    ) -> str:
        """
        Args:
            siteName: Name of the site
            urls: Main URL and alias URLs of the site
            timezone: Site timezone
            currency: Site currency
            startDate: When to start tracking data
        """
        return await run_tool(
            "matomo_sites_manager_add_site",
            sites.add_site(
                siteName,
                urls=urls or "",
                ecommerce=ecommerce,
                site_search=siteSearch,
                search_keyword_parameters=searchKeywordParameters or "",
                search_category_parameters=searchCategoryParameters or "",
                excluded_ips=excludedIps or "",
                excluded_query_parameters=excludedQueryParameters or "",
                timezone=timezone or "",
                currency=currency or "",
                group=group or "",
                start_date=startDate or "",
                excluded_user_agents=excludedUserAgents or "",
                keep_url_fragments=keepURLFragments,
                type=type or "",
                setting_values=settingValues,
                exclude_unknown_urls=excludeUnknownUrls,
                excluded_referrers=excludedReferrers or "",
            ),
        )

    @mcp.tool(
        name="matomo_sites_manager_update_site",
        description="Update an existing site in Matomo",
        annotations=annotations("Update Site", {**WRITE, "idempotentHint": True}),
    )
    async def update_site(
        idSite: int,
        siteName: Optional[str] = None,
        urls: Optional[Urls] = None,
        ecommerce: FlagInput = None,
        siteSearch: FlagInput = None,
        searchKeywordParameters: Optional[str] = None,
        searchCategoryParameters: Optional[str] = None,
        excludedIps: Optional[str] = None,
        excludedQueryParameters: Optional[str] = None,
        timezone: Optional[str] = None,
        currency: Optional[str] = None,
        group: Optional[str] = None,
        startDate: Optional[str] = None,
        excludedUserAgents: Optional[str] = None,
        keepURLFragments: FlagInput = None,
        type: Optional[str] = None,
        settingValues: Optional[Dict[str, Any]] = None,
        excludeUnknownUrls: FlagInput = None,
        excludedReferrers: Optional[str] = None,
    ) -> str:
        """
        Args:
            idSite: Site ID to update
            siteName: Name of the site
        """
        return await run_tool(
            "matomo_sites_manager_update_site",
            sites.update_site(
                idSite,
                site_name=siteName or "",
                urls=urls or "",
                ecommerce=ecommerce,
                site_search=siteSearch,
                search_keyword_parameters=searchKeywordParameters or "",
                search_category_parameters=searchCategoryParameters or "",
                excluded_ips=excludedIps or "",
                excluded_query_parameters=excludedQueryParameters or "",
                timezone=timezone or "",
                currency=currency or "",
                group=group or "",
                start_date=startDate or "",
                excluded_user_agents=excludedUserAgents or "",
                keep_url_fragments=keepURLFragments,
                type=type or "",
                setting_values=settingValues,
                exclude_unknown_urls=excludeUnknownUrls,
                excluded_referrers=excludedReferrers or "",
            ),
        )

    @mcp.tool(
        name="matomo_sites_manager_delete_site",
        description="Delete a site from Matomo",
        annotations=annotations("Delete Site", DESTRUCTIVE),
    )
    async def delete_site(idSite: int, passwordConfirmation: Optional[str] = None) -> str:
        """
        Args:
            idSite: Site ID to delete
            passwordConfirmation: Current user's password, required by recent Matomo versions
        """
        return await run_tool(
            "matomo_sites_manager_delete_site",
            sites.delete_site(idSite, passwordConfirmation or ""),
        )

    @mcp.tool(
        name="matomo_sites_manager_get_currency_list",
        description="Get the list of supported currencies",
        annotations=annotations("Get Currency List", READ_ONLY),
    )
    async def get_currency_list() -> str:
        return await run_tool("matomo_sites_manager_get_currency_list", sites.get_currency_list())

    @mcp.tool(
        name="matomo_sites_manager_get_timezones_list",
        description="Get the list of supported timezones",
        annotations=annotations("Get Timezones List", READ_ONLY),
    )
    async def get_timezones_list() -> str:
        return await run_tool(
            "matomo_sites_manager_get_timezones_list", sites.get_timezones_list()
        )

    @mcp.tool(
        name="matomo_sites_manager_get_pattern_match_sites",
        description="Get sites whose name or URL matches a pattern",
        annotations=annotations("Find Sites", READ_ONLY),
    )
    async def get_pattern_match_sites(
        pattern: str,
        limit: Optional[Union[int, str]] = None,
        sitesToExclude: Optional[List[int]] = None,
    ) -> str:
        """
        Args:
            pattern: Pattern to match
            limit: Maximum number of sites to return
            sitesToExclude: Site IDs to leave out
        """
        return await run_tool(
            "matomo_sites_manager_get_pattern_match_sites",
            sites.get_pattern_match_sites(
                pattern, "" if limit is None else limit, sitesToExclude
            ),
        )
