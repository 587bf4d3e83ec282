"""
Test suite for the MCP tool layer.

Tools are captured by a stand-in for FastMCP so they can be called directly
against the fake Matomo server.
"""

import json

import pytest

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.server import SERVER_NAME, TOOL_MODULES, build_server
from matomo_client.mcp_server.tools import render
from matomo_client.mcp_server.tools.ab_testing_tools import summarize_experiments


class CapturingMCP:
    """Records tools registered with ``@mcp.tool(...)``."""

    def __init__(self):
        self.tools = {}
        self.descriptions = {}
        self.annotations = {}

    def tool(self, name=None, description=None, annotations=None, **kwargs):
        def decorator(fn):
            self.tools[name] = fn
            self.descriptions[name] = description
            self.annotations[name] = annotations
            return fn
        return decorator


@pytest.fixture
def ctx(test_config, http_client) -> ServerContext:
    """Create a server context talking to the fake server."""
    return ServerContext(test_config, http_client=http_client)


@pytest.fixture
def mcp(ctx) -> CapturingMCP:
    """Register every tool module."""
    mcp = CapturingMCP()
    for module in TOOL_MODULES:
        module.register(mcp, ctx)
    return mcp


SITES_MANAGER_TOOLS = [
    "get_javascript_tag", "get_image_tracking_code", "get_sites_from_group",
    "get_sites_groups", "get_site_from_id", "get_site_urls_from_id", "get_all_sites",
    "get_all_sites_id", "get_sites_with_admin_access", "get_sites_with_view_access",
    "get_sites_with_at_least_view_access", "add_site", "update_site", "delete_site",
    "get_currency_list", "get_timezones_list", "get_pattern_match_sites",
]

TAG_MANAGER_TOOLS = [
    "get_available_contexts", "get_available_environments",
    "get_available_environments_with_publish_capability", "get_available_tag_fire_limits",
    "get_available_comparisons", "get_available_tag_types_in_context",
    "get_available_trigger_types_in_context", "get_available_variable_types_in_context",
    "get_container_embed_code", "get_container_installation_instructions",
    "get_container_tags", "create_default_container_for_site", "get_containers",
    "get_container", "get_container_versions", "get_container_version",
    "get_container_triggers", "get_container_variables", "enable_preview_mode",
    "disable_preview_mode", "export_container_version",
]

EXPECTED_TOOLS = (
    ["AbTesting.getMetricsOverview"]
    + ["matomo_tour_get_challenges", "matomo_tour_skip_challenge", "matomo_tour_get_level"]
    + ["matomo_user_id_get_users"]
    + [f"matomo_sites_manager_{name}" for name in SITES_MANAGER_TOOLS]
    + [f"matomo_tag_manager_{name}" for name in TAG_MANAGER_TOOLS]
    + [
        "matomo_contents_get_content_names",
        "matomo_contents_get_content_pieces",
        "matomo_overlay_get_following_pages",
        "matomo_seo_get_rank",
        "matomo_visits_summary_get",
    ]
)


# ============================================================================
# Test Registration
# ============================================================================

class TestRegistration:
    """Tests for tool names and metadata."""

    def test_all_tools_registered(self, mcp):
        assert sorted(mcp.tools) == sorted(EXPECTED_TOOLS)

    def test_descriptions(self, mcp):
        assert mcp.descriptions["matomo_tour_get_level"] == "Get the current level in Matomo Tour plugin"
        assert mcp.descriptions["AbTesting.getMetricsOverview"] == "Get metrics overview for an experiment"
        assert all(mcp.descriptions.values())

    def test_annotations(self, mcp):
        assert mcp.annotations["matomo_sites_manager_get_all_sites"]["readOnlyHint"] is True
        assert mcp.annotations["matomo_sites_manager_delete_site"]["destructiveHint"] is True
        assert mcp.annotations["matomo_sites_manager_add_site"]["readOnlyHint"] is False
        assert all("title" in hints for hints in mcp.annotations.values())

    @pytest.mark.asyncio
    async def test_fastmcp_server_lists_tools(self, ctx):
        server = build_server(ctx)

        tools = await server.list_tools()

        assert server.name == SERVER_NAME
        assert sorted(tool.name for tool in tools) == sorted(EXPECTED_TOOLS)


# ============================================================================
# Test Tool Calls
# ============================================================================

class TestToolCalls:
    """Tests for calling tools against the fake server."""

    @pytest.mark.asyncio
    async def test_result_rendered_as_indented_json(self, mcp, matomo):
        matomo.route("Tour.getLevel", {"level": 3, "description": "Expert"})

        text = await mcp.tools["matomo_tour_get_level"]()

        assert text == json.dumps({"level": 3, "description": "Expert"}, indent=2)
        assert matomo.params()["method"] == "Tour.getLevel"

    @pytest.mark.asyncio
    async def test_skip_challenge_accepts_numeric_id(self, mcp, matomo):
        matomo.route("Tour.skipChallenge", True)

        await mcp.tools["matomo_tour_skip_challenge"](id=7)

        assert matomo.params()["id"] == "7"

    @pytest.mark.asyncio
    async def test_user_ids_default_period(self, mcp, matomo):
        matomo.route("UserId.getUsers", [{"label": "alice"}])

        text = await mcp.tools["matomo_user_id_get_users"](idSite=1, date="today")

        assert json.loads(text) == [{"label": "alice"}]
        params = matomo.params()
        assert params["period"] == "day"
        assert "segment" not in params

    @pytest.mark.asyncio
    async def test_matomo_error_returned_as_text(self, mcp, matomo):
        matomo.route("SitesManager.getSiteFromId", {"result": "error", "message": "No access"})

        text = await mcp.tools["matomo_sites_manager_get_site_from_id"](idSite=99)

        assert text.startswith("Error: ")
        assert "No access" in text

    @pytest.mark.asyncio
    async def test_add_site_sends_only_given_fields(self, mcp, matomo):
        matomo.route("SitesManager.addSite", {"value": 12})

        await mcp.tools["matomo_sites_manager_add_site"](
            siteName="Shop", urls=["https://shop.example"], ecommerce=True
        )

        params = matomo.params()
        assert params["siteName"] == "Shop"
        assert params["urls"] == "https://shop.example"
        assert params["ecommerce"] == "1"
        assert "timezone" not in params

    @pytest.mark.asyncio
    async def test_export_draft_version(self, mcp, matomo):
        matomo.route("TagManager.exportContainerVersion", {"tags": []})

        await mcp.tools["matomo_tag_manager_export_container_version"](
            idSite=1, idContainer="abc123"
        )

        params = matomo.params()
        assert params["idContainer"] == "abc123"
        assert "idContainerVersion" not in params

    @pytest.mark.asyncio
    async def test_seo_rank(self, mcp, matomo):
        matomo.route("SEO.getRank", [{"id": "pages", "rank": "12"}])

        text = await mcp.tools["matomo_seo_get_rank"](url="https://example.com")

        assert json.loads(text) == [{"id": "pages", "rank": "12"}]


# ============================================================================
# Test A/B Testing Summary
# ============================================================================

class TestAbTesting:
    """Tests for the experiment overview tool."""

    def test_summary_of_empty_result(self):
        assert summarize_experiments([]) == "No A/B tests found."

    def test_summary_lines(self):
        text = summarize_experiments([
            {"idtest": 1, "name": "Green button", "status": "running"},
            {"idtest": 2, "name": "Headline", "status": "finished"},
        ])

        assert text == (
            "Found 2 A/B tests:\n"
            "ID: 1, Name: Green button, Status: running\n"
            "ID: 2, Name: Headline, Status: finished"
        )

    @pytest.mark.asyncio
    async def test_tool_call(self, mcp, matomo):
        matomo.route("AbTesting.getMetricsOverview", [])

        text = await mcp.tools["AbTesting.getMetricsOverview"](
            idSite=1, date="today", idExperiment=3
        )

        assert text == "No A/B tests found."
        params = matomo.params()
        assert params["idExperiment"] == "3"
        assert params["period"] == "day"

    @pytest.mark.asyncio
    async def test_tool_error(self, mcp, matomo):
        matomo.route("AbTesting.getMetricsOverview", {"result": "error", "message": "Plugin not active"})

        text = await mcp.tools["AbTesting.getMetricsOverview"](
            idSite=1, date="today", idExperiment=3
        )

        assert text.startswith("Error: ")


# ============================================================================
# Test Context
# ============================================================================

class TestContext:
    """Tests for the shared server context."""

    def test_render_passes_strings_through(self):
        assert render("<script>") == "<script>"
        assert render({"a": 1}) == '{\n  "a": 1\n}'

    @pytest.mark.asyncio
    async def test_aclose_closes_owned_client(self, test_config):
        ctx = ServerContext(test_config)
        await ctx.client.connect()

        await ctx.aclose()

        assert ctx.client.core.is_connected is False
