"""
Test suite for batched dispatch.

Covers queueing without network traffic, ordered result correlation,
failure distribution and the single-use lifecycle of a batch.
"""

import asyncio
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from matomo_client.dispatch.batch import BatchStatus, PendingResult
from matomo_client.dispatch.http import BULK_METHOD
from matomo_client.dispatch.interface import (
    AlreadyExecutedError,
    BatchExecutionError,
    RequestError,
)


# ============================================================================
# Test Queueing
# ============================================================================

class TestQueueing:
    """Tests for collecting calls before execution."""

    def test_new_batch_is_empty(self, core):
        batch = core.prepare_requests()

        assert batch.status == BatchStatus.COLLECTING
        assert batch.is_empty is True
        assert batch.size == 0

    def test_add_request_sends_nothing(self, core, matomo):
        batch = core.prepare_requests()

        handle = batch.add_request("Tour.getLevel")

        assert isinstance(handle, PendingResult)
        assert handle.index == 0
        assert handle.done() is False
        assert matomo.requests == []

    def test_facade_calls_queue_in_order(self, core, matomo):
        batch = core.prepare_requests()

        batch.tour.get_challenges()
        batch.seo.get_rank("https://example.com")
        batch.add_request("VisitsSummary.getVisits", {"idSite": 1, "period": "day", "date": "today"})

        assert [call.method for call in batch.calls] == [
            "Tour.getChallenges",
            "SEO.getRank",
            "VisitsSummary.getVisits",
        ]
        assert matomo.requests == []

    def test_result_before_execute_raises(self, core):
        handle = core.prepare_requests().add_request("Tour.getLevel")

        with pytest.raises(RuntimeError):
            handle.result()
        with pytest.raises(RuntimeError):
            handle.exception()


# ============================================================================
# Test Execution
# ============================================================================

class TestExecution:
    """Tests for sending a batch and correlating results."""

    @pytest.mark.asyncio
    async def test_tour_results_resolve_in_order(self, core, matomo):
        matomo.route("Tour.getChallenges", {"challenges": []})
        matomo.route("Tour.getLevel", {"level": 3})
        batch = core.prepare_requests()

        challenges = batch.tour.get_challenges()
        level = batch.tour.get_level()
        results = await batch.execute()

        assert results == [{"challenges": []}, {"level": 3}]
        assert challenges.result() == {"challenges": []}
        assert level.result() == {"level": 3}
        assert batch.status == BatchStatus.EXECUTED
        assert batch.executed_at is not None

    @pytest.mark.asyncio
    async def test_single_bulk_request_sent(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 1})
        batch = core.prepare_requests()
        for _ in range(3):
            batch.tour.get_level()

        await batch.execute()

        assert len(matomo.requests) == 1
        assert matomo.params()["method"] == BULK_METHOD
        assert [call["method"] for call in matomo.bulk_calls()] == ["Tour.getLevel"] * 3

    @pytest.mark.asyncio
    async def test_handles_are_awaitable(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 5})
        batch = core.prepare_requests()
        handle = batch.tour.get_level()

        await batch.execute()

        assert await handle == {"level": 5}

    @pytest.mark.asyncio
    async def test_awaiting_before_execute_waits(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 2})
        batch = core.prepare_requests()
        handle = batch.tour.get_level()

        waiter = asyncio.create_task(handle.wait())
        await asyncio.sleep(0)
        assert waiter.done() is False

        await batch.execute()

        assert await waiter == {"level": 2}

    @pytest.mark.asyncio
    async def test_transform_applied_to_item(self, core, matomo):
        matomo.route("API.getMatomoVersion", {"value": "5.1.0"})
        batch = core.prepare_requests()

        version = batch.api.get_matomo_version()
        await batch.execute()

        assert version.result() == "5.1.0"

    @pytest.mark.asyncio
    async def test_failing_transform_fails_only_its_handle(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 1})
        batch = core.prepare_requests()

        broken = batch.add_request("Tour.getLevel", transform=lambda r: r["missing"])
        fine = batch.add_request("Tour.getLevel")
        await batch.execute()

        assert isinstance(broken.exception(), KeyError)
        assert fine.result() == {"level": 1}

    @pytest.mark.asyncio
    async def test_empty_batch_sends_nothing(self, core, matomo):
        batch = core.prepare_requests()

        assert await batch.execute() == []
        assert matomo.requests == []
        assert batch.status == BatchStatus.EXECUTED


# ============================================================================
# Test Failures
# ============================================================================

class TestFailures:
    """Tests for how failures reach the handles."""

    @pytest.mark.asyncio
    async def test_per_item_error_fails_only_that_handle(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 1})
        matomo.route("SitesManager.getSiteFromId", {"result": "error", "message": "No access"})
        batch = core.prepare_requests()

        level = batch.tour.get_level()
        site = batch.sites_manager.get_site_from_id(99)
        await batch.execute()

        assert level.result() == {"level": 1}
        error = site.exception()
        assert isinstance(error, RequestError)
        assert error.method == "SitesManager.getSiteFromId"
        with pytest.raises(RequestError, match="No access"):
            site.result()
        assert batch.status == BatchStatus.EXECUTED

    @pytest.mark.asyncio
    async def test_result_count_mismatch_fails_all(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(200, json=[{"level": 1}])
        batch = core.prepare_requests()
        first = batch.tour.get_level()
        second = batch.tour.get_challenges()

        with pytest.raises(BatchExecutionError):
            await batch.execute()

        assert isinstance(first.exception(), BatchExecutionError)
        assert isinstance(second.exception(), BatchExecutionError)
        assert batch.status == BatchStatus.FAILED
        assert batch.error_message

    @pytest.mark.asyncio
    async def test_non_list_result_fails_all(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(
            200, json={"result": "success", "message": "ok"}
        )
        batch = core.prepare_requests()
        handle = batch.tour.get_level()

        with pytest.raises(BatchExecutionError):
            await batch.execute()

        assert isinstance(handle.exception(), BatchExecutionError)

    @pytest.mark.asyncio
    async def test_combined_error_payload_fails_all(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(
            200, json={"result": "error", "message": "You must be logged in"}
        )
        batch = core.prepare_requests()
        handle = batch.tour.get_level()

        with pytest.raises(BatchExecutionError, match="logged in") as exc_info:
            await batch.execute()

        assert isinstance(exc_info.value.cause, RequestError)
        assert handle.exception() is exc_info.value

    @pytest.mark.asyncio
    async def test_transport_failure_fails_all(self, core, matomo):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        matomo.handler = refuse
        batch = core.prepare_requests()
        handles = [batch.tour.get_level(), batch.tour.get_challenges()]

        with pytest.raises(BatchExecutionError) as exc_info:
            await batch.execute()

        assert exc_info.value.calls == batch.calls
        for handle in handles:
            with pytest.raises(BatchExecutionError):
                await handle

    @pytest.mark.asyncio
    async def test_undecodable_body_fails_awaited_handle(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(200, content=b"caf\xe9")
        batch = core.prepare_requests()
        handle = batch.tour.get_level()
        waiter = asyncio.create_task(handle.wait())

        with pytest.raises(BatchExecutionError):
            await batch.execute()

        with pytest.raises(BatchExecutionError):
            await asyncio.wait_for(waiter, timeout=1)
        assert batch.status == BatchStatus.FAILED

    @pytest.mark.asyncio
    async def test_unexpected_error_fails_all(self, core):
        batch = core.prepare_requests()
        handles = [batch.tour.get_level(), batch.tour.get_challenges()]
        waiter = asyncio.create_task(handles[0].wait())

        with patch.object(core, "bulk_request", AsyncMock(side_effect=RuntimeError("boom"))):
            with pytest.raises(BatchExecutionError, match="boom") as exc_info:
                await batch.execute()

        assert isinstance(exc_info.value.cause, RuntimeError)
        assert isinstance(exc_info.value.__cause__, RuntimeError)
        with pytest.raises(BatchExecutionError):
            await asyncio.wait_for(waiter, timeout=1)
        for handle in handles:
            assert isinstance(handle.exception(), BatchExecutionError)
        assert batch.status == BatchStatus.FAILED

    @pytest.mark.asyncio
    async def test_cancellation_fails_pending_handles(self, core, matomo):
        entered = asyncio.Event()

        async def hang(request):
            entered.set()
            await asyncio.Event().wait()

        matomo.handler = hang
        batch = core.prepare_requests()
        handle = batch.tour.get_level()

        task = asyncio.create_task(batch.execute())
        await entered.wait()
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task

        assert isinstance(handle.exception(), BatchExecutionError)
        assert batch.status == BatchStatus.FAILED


# ============================================================================
# Test Lifecycle
# ============================================================================

class TestLifecycle:
    """Tests for single-use batches."""

    @pytest.mark.asyncio
    async def test_second_execute_rejected(self, core, matomo):
        matomo.route("Tour.getLevel", {"level": 1})
        batch = core.prepare_requests()
        batch.tour.get_level()
        await batch.execute()

        with pytest.raises(AlreadyExecutedError):
            await batch.execute()
        assert len(matomo.requests) == 1

    @pytest.mark.asyncio
    async def test_add_after_execute_rejected(self, core):
        batch = core.prepare_requests()
        await batch.execute()

        with pytest.raises(AlreadyExecutedError):
            batch.add_request("Tour.getLevel")
        with pytest.raises(AlreadyExecutedError):
            batch.tour.get_level()

    @pytest.mark.asyncio
    async def test_failed_batch_cannot_be_retried(self, core, matomo):
        matomo.handler = lambda request: httpx.Response(503)
        batch = core.prepare_requests()
        batch.tour.get_level()

        with pytest.raises(BatchExecutionError):
            await batch.execute()
        with pytest.raises(AlreadyExecutedError):
            await batch.execute()

    def test_to_dict(self, core):
        batch = core.prepare_requests()
        batch.seo.get_rank("https://example.com")

        data = batch.to_dict()

        assert data["batch_id"] == batch.batch_id
        assert data["status"] == "collecting"
        assert data["size"] == 1
        assert data["executed_at"] is None
        assert data["calls"] == [{"method": "SEO.getRank", "params": {"url": "https://example.com"}}]

    def test_batches_are_independent(self, core):
        first = core.prepare_requests()
        second = core.prepare_requests()
        first.tour.get_level()

        assert first.batch_id != second.batch_id
        assert second.is_empty is True
