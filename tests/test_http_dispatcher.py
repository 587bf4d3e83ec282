"""
Test suite for the immediate HTTP dispatcher.

The fake Matomo server from conftest stands in for a real instance.
"""

import inspect

import httpx
import pytest

from conftest import make_config
from matomo_client.config import MatomoConfig, ResponseFormat
from matomo_client.core.call import RemoteCall
from matomo_client.dispatch.batch import BatchRequest
from matomo_client.dispatch.http import BULK_METHOD, CoreReportingClient
from matomo_client.dispatch.interface import ConfigurationError, RequestError


def dispatcher_for(matomo, **overrides) -> CoreReportingClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(matomo.handle))
    return CoreReportingClient(make_config(**overrides), http_client=http_client)


# ============================================================================
# Test Request Shape
# ============================================================================

class TestRequestShape:
    """Tests for what goes over the wire."""

    @pytest.mark.asyncio
    async def test_security_mode_posts_form_body(self, core, matomo):
        matomo.route("VisitsSummary.getVisits", {"value": 42})

        result = await core.request(
            "VisitsSummary.getVisits", {"idSite": 1, "period": "day", "date": "today"}
        )

        assert result == {"value": 42}
        request = matomo.requests[0]
        assert request.method == "POST"
        assert str(request.url) == "https://matomo.example.com/index.php"
        assert matomo.params() == {
            "module": "API",
            "method": "VisitsSummary.getVisits",
            "format": "json",
            "token_auth": "anonymous-test-token",
            "idSite": "1",
            "period": "day",
            "date": "today",
        }

    @pytest.mark.asyncio
    async def test_without_security_mode_sends_query_string(self, matomo):
        matomo.route("Tour.getLevel", {"level": 2})
        core = dispatcher_for(matomo, security_mode=False)

        await core.request("Tour.getLevel")

        request = matomo.requests[0]
        assert request.method == "GET"
        assert request.url.params["method"] == "Tour.getLevel"
        assert request.url.params["token_auth"] == "anonymous-test-token"
        assert request.content == b""

    @pytest.mark.asyncio
    async def test_token_omitted_when_not_configured(self, matomo):
        matomo.route("API.getMatomoVersion", {"value": "5.1.0"})
        core = dispatcher_for(matomo, auth_token=None)

        await core.request("API.getMatomoVersion")

        assert "token_auth" not in matomo.params()

    @pytest.mark.asyncio
    async def test_default_site_added_when_missing(self, matomo):
        matomo.route("UserId.getUsers", [])
        core = dispatcher_for(matomo, default_site_id=7)

        await core.request("UserId.getUsers", {"period": "day", "date": "today"})
        await core.request("UserId.getUsers", {"idSite": None, "period": "day", "date": "today"})

        assert matomo.params(0)["idSite"] == "7"
        assert matomo.params(1)["idSite"] == "7"

    @pytest.mark.asyncio
    async def test_explicit_site_wins_over_default(self, matomo):
        matomo.route("UserId.getUsers", [])
        core = dispatcher_for(matomo, default_site_id=7)

        await core.request("UserId.getUsers", {"idSite": 3, "period": "day", "date": "today"})

        assert matomo.params()["idSite"] == "3"

    @pytest.mark.asyncio
    async def test_language_default(self, matomo):
        matomo.route("API.getReportMetadata", [])
        core = dispatcher_for(matomo, language="fr")

        await core.request("API.getReportMetadata")
        await core.request("API.getReportMetadata", {"language": "de"})

        assert matomo.params(0)["language"] == "fr"
        assert matomo.params(1)["language"] == "de"


# ============================================================================
# Test Response Decoding
# ============================================================================

class TestResponseDecoding:
    """Tests for result decoding and error mapping."""

    @pytest.mark.asyncio
    async def test_error_payload_raises_request_error(self, core, matomo):
        matomo.route("SitesManager.getSiteFromId", {"result": "error", "message": "No access"})

        with pytest.raises(RequestError, match="No access") as exc_info:
            await core.request("SitesManager.getSiteFromId", {"idSite": 99})

        assert exc_info.value.method == "SitesManager.getSiteFromId"
        assert exc_info.value.params == {"idSite": 99}

    @pytest.mark.asyncio
    async def test_success_result_marker_passes_through(self, core, matomo):
        matomo.route("Tour.skipChallenge", {"result": "success", "message": "ok"})

        assert await core.request("Tour.skipChallenge", {"id": "x"}) == {
            "result": "success",
            "message": "ok",
        }

    @pytest.mark.asyncio
    async def test_http_error_status(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(500, text="Internal Server Error")

        with pytest.raises(RequestError, match="HTTP 500"):
            await core.request("Tour.getLevel")

    @pytest.mark.asyncio
    async def test_transport_failure(self, core, matomo):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        matomo.handler = refuse

        with pytest.raises(RequestError) as exc_info:
            await core.request("Tour.getLevel")

        assert isinstance(exc_info.value.cause, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_invalid_json(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(200, text="<html>login</html>")

        with pytest.raises(RequestError, match="invalid JSON"):
            await core.request("Tour.getLevel")

    @pytest.mark.asyncio
    async def test_undecodable_body_raises_request_error(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(200, content=b"caf\xe9")

        with pytest.raises(RequestError, match="invalid JSON") as exc_info:
            await core.request("Tour.getLevel")

        assert isinstance(exc_info.value.cause, ValueError)

    @pytest.mark.asyncio
    async def test_image_response_returns_bytes(self, client, matomo):
        png = b"\x89PNG\r\n\x1a\n\x00\x00"
        matomo.handler = lambda request: httpx.Response(
            200, content=png, headers={"Content-Type": "image/png"}
        )

        result = await client.image_graph.get(1, "day", "today", "VisitsSummary", "get")

        assert result == png
        assert matomo.params()["method"] == "ImageGraph.get"
        assert matomo.params()["format"] == "json"

    @pytest.mark.asyncio
    async def test_image_response_ignores_text_format(self, matomo):
        matomo.handler = lambda request: httpx.Response(
            200, content=b"\x89PNG", headers={"Content-Type": "image/png"}
        )
        core = dispatcher_for(matomo, format=ResponseFormat.XML)

        assert await core.request("ImageGraph.get") == b"\x89PNG"

    @pytest.mark.asyncio
    async def test_non_json_format_returns_text(self, matomo):
        matomo.handler = lambda request: httpx.Response(200, text="<result>5</result>")
        core = dispatcher_for(matomo, format=ResponseFormat.XML)

        assert await core.request("Tour.getLevel") == "<result>5</result>"
        assert matomo.params()["format"] == "xml"

    @pytest.mark.asyncio
    async def test_original_format_returns_response(self, matomo):
        matomo.handler = lambda request: httpx.Response(200, content=b"\x89PNG")
        core = dispatcher_for(matomo, format=ResponseFormat.ORIGINAL)

        response = await core.request("ImageGraph.get")

        assert isinstance(response, httpx.Response)
        assert response.content == b"\x89PNG"


# ============================================================================
# Test Bulk Request
# ============================================================================

class TestBulkRequest:
    """Tests for the combined bulk call."""

    @pytest.mark.asyncio
    async def test_encodes_calls_in_order(self, core, matomo):
        matomo.route("Tour.getChallenges", {"challenges": []})
        matomo.route("SEO.getRank", [{"id": "pagerank"}])

        results = await core.bulk_request([
            RemoteCall("Tour.getChallenges"),
            RemoteCall("SEO.getRank", {"url": "https://example.com"}),
        ])

        assert results == [{"challenges": []}, [{"id": "pagerank"}]]
        assert len(matomo.requests) == 1
        assert matomo.params()["method"] == BULK_METHOD
        assert matomo.bulk_calls() == [
            {"method": "Tour.getChallenges"},
            {"method": "SEO.getRank", "url": "https://example.com"},
        ]

    @pytest.mark.asyncio
    async def test_always_json(self, matomo):
        matomo.route("Tour.getLevel", {"level": 1})
        core = dispatcher_for(matomo, format=ResponseFormat.XML)

        assert await core.bulk_request([RemoteCall("Tour.getLevel")]) == [{"level": 1}]
        assert matomo.params()["format"] == "json"

    @pytest.mark.asyncio
    async def test_defaults_applied_per_call(self, matomo):
        matomo.route("UserId.getUsers", [])
        core = dispatcher_for(matomo, default_site_id=4)

        await core.bulk_request([
            RemoteCall("UserId.getUsers", {"period": "day", "date": "today"}),
            RemoteCall("UserId.getUsers", {"idSite": 9, "period": "day", "date": "today"}),
        ])

        sub_calls = matomo.bulk_calls()
        assert sub_calls[0]["idSite"] == "4"
        assert sub_calls[1]["idSite"] == "9"

    @pytest.mark.asyncio
    async def test_per_item_errors_are_returned(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 1})

        results = await core.bulk_request([
            RemoteCall("Tour.getLevel"),
            RemoteCall("Nope.missing"),
        ])

        assert results[0] == {"level": 1}
        assert results[1]["result"] == "error"


# ============================================================================
# Test Lifecycle
# ============================================================================

class TestLifecycle:
    """Tests for connection handling and dispatch plumbing."""

    @pytest.mark.asyncio
    async def test_connect_requires_url(self):
        core = CoreReportingClient(MatomoConfig(_env_file=None, url=None))

        with pytest.raises(ConfigurationError):
            await core.connect()

    @pytest.mark.asyncio
    async def test_connect_and_disconnect_owned_client(self, test_config):
        core = CoreReportingClient(test_config)
        assert core.is_connected is False

        await core.connect()
        assert core.is_connected is True

        await core.disconnect()
        assert core.is_connected is False

    @pytest.mark.asyncio
    async def test_injected_client_is_not_closed(self, test_config, http_client):
        async with CoreReportingClient(test_config, http_client=http_client):
            pass

        assert http_client.is_closed is False

    @pytest.mark.asyncio
    async def test_submit_returns_coroutine_with_transform(self, core, matomo):
        matomo.route("API.getMatomoVersion", {"value": "5.1.0"})

        pending = core.submit(RemoteCall("API.getMatomoVersion"), lambda r: r["value"])

        assert inspect.iscoroutine(pending)
        assert matomo.requests == []
        assert await pending == "5.1.0"

    def test_prepare_requests_binds_batch(self, core):
        batch = core.prepare_requests()

        assert isinstance(batch, BatchRequest)
        assert batch.client is core
