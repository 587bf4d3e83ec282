"""
Test suite for the per-namespace façades.

Façades are checked against a recording dispatcher for exact parameters,
and against both real dispatch modes for identical wire traffic.
"""

import pytest

from conftest import RecordingDispatcher
from matomo_client.client import ReportingClient
from matomo_client.dispatch.batch import PendingResult
from matomo_client.modules import MODULES, ModuleBase
from matomo_client.modules.ab_testing import AbTestingModule
from matomo_client.modules.annotations import AnnotationsModule
from matomo_client.modules.api import ApiModule
from matomo_client.modules.base import unwrap_value
from matomo_client.modules.custom_dimensions import CustomDimensionsModule
from matomo_client.modules.overlay import OverlayModule
from matomo_client.modules.seo import SeoModule
from matomo_client.modules.sites_manager import SitesManagerModule
from matomo_client.modules.tag_manager import TagManagerModule
from matomo_client.modules.tour import TourModule
from matomo_client.modules.users_flow import UsersFlowModule
from matomo_client.modules.visits_summary import VisitsSummaryModule


# ============================================================================
# Test Registry
# ============================================================================

class TestRegistry:
    """Tests for façade wiring."""

    def test_namespaces_are_unique(self):
        namespaces = [cls.namespace for cls in MODULES.values()]

        assert all(namespaces)
        assert len(set(namespaces)) == len(namespaces)

    def test_every_facade_on_client_and_batch(self, client):
        batch = client.prepare_requests()

        for name, cls in MODULES.items():
            assert isinstance(getattr(client, name), cls)
            assert isinstance(getattr(batch, name), cls)
            assert getattr(client, name).dispatcher is client.core
            assert getattr(batch, name).dispatcher is batch

    def test_facade_is_a_module_base(self):
        assert all(issubclass(cls, ModuleBase) for cls in MODULES.values())


# ============================================================================
# Test Parameter Mapping
# ============================================================================

class TestParameterMapping:
    """Tests for the exact calls façades build."""

    def test_seo_get_rank_sends_only_url(self, recorder):
        SeoModule(recorder).get_rank("https://example.com")

        assert recorder.last.method == "SEO.getRank"
        assert dict(recorder.last.params) == {"url": "https://example.com"}

    def test_following_pages_omits_empty_segment(self, recorder):
        overlay = OverlayModule(recorder)

        overlay.get_following_pages("https://example.com/a", 1, "day", "today")
        overlay.get_following_pages("https://example.com/a", 1, "day", "today", "browserCode==FF")

        assert "segment" not in recorder.calls[0].params
        assert recorder.calls[1].params["segment"] == "browserCode==FF"

    def test_tour_methods(self, recorder):
        tour = TourModule(recorder)

        tour.get_challenges()
        tour.skip_challenge("track_data")
        tour.get_level()

        assert [call.method for call in recorder.calls] == [
            "Tour.getChallenges",
            "Tour.skipChallenge",
            "Tour.getLevel",
        ]
        assert dict(recorder.calls[1].params) == {"id": "track_data"}

    def test_report_without_site_leaves_it_to_default(self, recorder):
        VisitsSummaryModule(recorder).get_visits(None, "day", "today")

        assert dict(recorder.last.params) == {"period": "day", "date": "today"}

    def test_visits_summary_columns(self, recorder):
        VisitsSummaryModule(recorder).get(1, "month", "2024-01-01", columns=["nb_visits", "nb_actions"])

        assert recorder.last.params["columns"] == ["nb_visits", "nb_actions"]

    def test_users_flow_optional_limit(self, recorder):
        flow = UsersFlowModule(recorder)

        flow.get_users_flow(1, "day", "today")
        flow.get_users_flow(1, "day", "today", limit_actions_per_step=0)

        assert "limitActionsPerStep" not in recorder.calls[0].params
        assert recorder.calls[1].params["limitActionsPerStep"] == 0

    def test_annotation_save_sends_given_fields_only(self, recorder):
        AnnotationsModule(recorder).save(1, 5, note="")

        assert dict(recorder.last.params) == {"idSite": 1, "idNote": 5, "note": ""}

    def test_annotation_get_all_always_sends_period(self, recorder):
        AnnotationsModule(recorder).get_all(1)

        assert dict(recorder.last.params) == {"idSite": 1, "period": "day"}

    def test_custom_dimension_defaults(self, recorder):
        CustomDimensionsModule(recorder).configure_new_custom_dimension(1, "Plan", "visit", True)

        params = recorder.last.params
        assert params["active"] == 1
        assert params["extractions"] == "Array"
        assert params["caseSensitive"] == "1"

    def test_add_site_drops_unset_fields(self, recorder):
        SitesManagerModule(recorder).add_site(
            "Shop", urls=["https://shop.example", "https://www.shop.example"], currency="EUR"
        )

        assert dict(recorder.last.params) == {
            "siteName": "Shop",
            "urls": ["https://shop.example", "https://www.shop.example"],
            "currency": "EUR",
        }

    def test_update_container_flags_default_to_zero(self, recorder):
        TagManagerModule(recorder).update_container(1, "abc123", "Main")

        params = recorder.last.params
        assert params["ignoreGtmDataLayer"] == "0"
        assert params["isTagFireLimitAllowedInPreviewMode"] == "0"
        assert params["activelySyncGtmDataLayer"] == "0"
        assert "description" not in params

    def test_ab_testing_metrics_overview(self, recorder):
        AbTestingModule(recorder).get_metrics_overview(1, "day", "today", 4)

        assert recorder.last.method == "AbTesting.getMetricsOverview"
        assert dict(recorder.last.params) == {
            "idSite": 1, "period": "day", "date": "today", "idExperiment": 4,
        }

    def test_get_bulk_request_indexes_urls(self, recorder):
        ApiModule(recorder).get_bulk_request(["?method=Tour.getLevel", "?method=SEO.getRank"])

        assert recorder.last.params["urls"] == {
            0: "?method=Tour.getLevel",
            1: "?method=SEO.getRank",
        }


# ============================================================================
# Test Result Transforms
# ============================================================================

class TestTransforms:
    """Tests for scalar result unwrapping."""

    def test_unwrap_value(self):
        assert unwrap_value({"value": "5.1.0"}) == "5.1.0"
        assert unwrap_value({"value": False}) is False
        assert unwrap_value(["a"]) == ["a"]

    @pytest.mark.asyncio
    async def test_version_unwrapped(self):
        recorder = RecordingDispatcher(result={"value": "5.1.0"})

        assert await ApiModule(recorder).get_matomo_version() == "5.1.0"

    @pytest.mark.asyncio
    async def test_plugin_activated_unwrapped(self):
        recorder = RecordingDispatcher(result={"value": True})

        assert await ApiModule(recorder).is_plugin_activated("Tour") is True


# ============================================================================
# Test Dispatch Modes
# ============================================================================

FACADE_CALLS = [
    ("seo", "get_rank", ("https://example.com",), {}),
    ("tour", "skip_challenge", ("track_data",), {}),
    ("user_id", "get_users", (1, "week", "today"), {"segment": "userId==abc"}),
    ("overlay", "get_following_pages", ("https://example.com", 1, "day", "today"), {}),
    ("sites_manager", "get_pattern_match_sites", ("shop",), {"sites_to_exclude": [2, 3]}),
    ("tag_manager", "get_container_tags", (1, "abc123", 4), {}),
]


class TestDispatchModes:
    """The same façade call produces the same sub-call in both modes."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("attr, action, args, kwargs", FACADE_CALLS)
    async def test_immediate_and_batched_agree(
        self, client: ReportingClient, matomo, attr, action, args, kwargs
    ):
        matomo.default = lambda params: {"ok": params["method"]}

        immediate = await getattr(getattr(client, attr), action)(*args, **kwargs)
        immediate_params = matomo.params(0)

        batch = client.prepare_requests()
        handle = getattr(getattr(batch, attr), action)(*args, **kwargs)
        assert isinstance(handle, PendingResult)
        await batch.execute()
        batched_params = matomo.bulk_calls(1)[0]

        expected_method = immediate_params["method"]
        assert handle.result() == immediate == {"ok": expected_method}
        for key in ("module", "format", "token_auth"):
            immediate_params.pop(key)
        assert batched_params == immediate_params


# ============================================================================
# Test Reporting Client
# ============================================================================

class TestReportingClient:
    """Tests for the client entry point."""

    @pytest.mark.asyncio
    async def test_request_delegates_to_core(self, client, matomo):
        matomo.route("API.getMatomoVersion", {"value": "5.1.0"})

        async with client:
            assert await client.request("API.getMatomoVersion") == {"value": "5.1.0"}
            assert await client.api.get_matomo_version() == "5.1.0"

        assert len(matomo.requests) == 2

    def test_repr_hides_token(self, client):
        assert "anonymous-test-token" not in repr(client)
        assert "matomo.example.com" in repr(client)
