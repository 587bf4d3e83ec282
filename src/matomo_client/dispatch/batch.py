"""
Batch request accumulator.

Collects Remote Calls and flushes them as a single ``API.getBulkRequest``,
handing each caller back its own slot of the combined response.
"""

import asyncio
import uuid
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, Generator, List, Mapping, Optional

import httpx
import structlog

from matomo_client.core.call import RemoteCall
from matomo_client.dispatch.interface import (
    AlreadyExecutedError,
    BatchExecutionError,
    Dispatcher,
    MatomoError,
    RequestError,
    Transform,
    is_error_payload,
)
from matomo_client.modules import ModulesMixin

if TYPE_CHECKING:
    from matomo_client.dispatch.http import CoreReportingClient

logger = structlog.get_logger(__name__)


class BatchStatus(str, Enum):
    """Status of a batch."""
    COLLECTING = "collecting"     # Still accepting calls
    SENDING = "sending"           # Combined call in flight
    EXECUTED = "executed"         # Results distributed to handles
    FAILED = "failed"             # Combined call failed


class PendingResult:
    """
    Handle for one queued call.

    Resolves when the owning batch is executed. It can be awaited, or
    inspected with ``done()``/``result()``/``exception()`` afterwards.

    Attributes:
        call: The queued Remote Call
        index: Position of the call in the batch queue
    """

    _UNSET = object()

    def __init__(self, call: RemoteCall, index: int, transform: Optional[Transform] = None):
        self.call = call
        self.index = index
        self._transform = transform
        self._value: Any = self._UNSET
        self._error: Optional[BaseException] = None
        self._future: Optional[asyncio.Future] = None

    def done(self) -> bool:
        """Check if the handle has been resolved or failed."""
        return self._value is not self._UNSET or self._error is not None

    def result(self) -> Any:
        """
        Get the resolved value.

        Raises:
            RuntimeError: If the batch has not been executed yet
            MatomoError: If this call failed
        """
        if not self.done():
            raise RuntimeError(f"Result for {self.call.method} is not available before execute()")
        if self._error is not None:
            raise self._error
        return self._value

    def exception(self) -> Optional[BaseException]:
        """Get the failure, or None if the call succeeded."""
        if not self.done():
            raise RuntimeError(f"Result for {self.call.method} is not available before execute()")
        return self._error

    def _set_result(self, raw: Any) -> None:
        try:
            value = self._transform(raw) if self._transform else raw
        except Exception as e:
            self._set_exception(e)
            return
        self._value = value
        if self._future is not None and not self._future.done():
            self._future.set_result(value)

    def _set_exception(self, error: BaseException) -> None:
        self._error = error
        if self._future is not None and not self._future.done():
            self._future.set_exception(error)

    async def wait(self) -> Any:
        """Wait until the batch is executed and return this call's result."""
        if self.done():
            return self.result()
        if self._future is None:
            self._future = asyncio.get_running_loop().create_future()
        return await self._future

    def __await__(self) -> Generator[Any, None, Any]:
        return self.wait().__await__()

    def __repr__(self) -> str:
        state = "pending"
        if self.done():
            state = "failed" if self._error is not None else "resolved"
        return f"PendingResult(method={self.call.method}, index={self.index}, state={state})"


class BatchRequest(ModulesMixin, Dispatcher):
    """
    Accumulates calls and sends them as one bulk request.

    Every façade is available as an attribute, so ``batch.tour.get_level()``
    queues ``Tour.getLevel`` and returns its PendingResult. A batch is
    single-use: once ``execute()`` has been called it rejects new calls
    and further executions with AlreadyExecutedError.
    """

    def __init__(self, client: "CoreReportingClient"):
        """
        Initialize an empty batch.

        Args:
            client: Dispatcher that performs the combined call
        """
        self.client = client
        self.batch_id = str(uuid.uuid4())
        self.status = BatchStatus.COLLECTING
        self.created_at = datetime.utcnow()
        self.executed_at: Optional[datetime] = None
        self.error_message: Optional[str] = None
        self._pending: List[PendingResult] = []
        self._init_modules(self)

    @property
    def size(self) -> int:
        """Get the number of queued calls."""
        return len(self._pending)

    @property
    def is_empty(self) -> bool:
        """Check if no calls are queued."""
        return len(self._pending) == 0

    @property
    def calls(self) -> List[RemoteCall]:
        """Queued calls in insertion order."""
        return [handle.call for handle in self._pending]

    def add_request(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        transform: Optional[Transform] = None,
    ) -> PendingResult:
        """
        Queue a call without sending anything.

        Args:
            method: Dotted API method
            params: Call parameters
            transform: Optional function applied to this call's result

        Returns:
            Handle resolved by ``execute()``
        """
        return self.submit(RemoteCall(method, params or {}), transform)

    def submit(
        self,
        call: RemoteCall,
        transform: Optional[Transform] = None,
    ) -> PendingResult:
        """Queue a call; returns its PendingResult."""
        if self.status != BatchStatus.COLLECTING:
            raise AlreadyExecutedError(
                f"Batch {self.batch_id[:8]} is {self.status.value} and cannot accept {call.method}"
            )
        handle = PendingResult(call, len(self._pending), transform)
        self._pending.append(handle)
        return handle

    def _fail_all(self, error: BatchExecutionError) -> None:
        self.status = BatchStatus.FAILED
        self.error_message = str(error)
        for handle in self._pending:
            if not handle.done():
                handle._set_exception(error)

    async def execute(self) -> List[Any]:
        """
        Send every queued call as one bulk request.

        Handle i resolves to response[i]. A per-item error marker fails only
        its own handle with RequestError.

        Returns:
            The combined response list in queue order

        Raises:
            AlreadyExecutedError: If the batch was already executed
            BatchExecutionError: If the combined call fails or returns a
                different number of results than calls were queued
        """
        if self.status != BatchStatus.COLLECTING:
            raise AlreadyExecutedError(f"Batch {self.batch_id[:8]} was already executed")

        if self.is_empty:
            self.status = BatchStatus.EXECUTED
            self.executed_at = datetime.utcnow()
            logger.debug("batch_empty", batch_id=self.batch_id)
            return []

        self.status = BatchStatus.SENDING
        calls = self.calls
        logger.info("batch_sending", batch_id=self.batch_id, size=len(calls))

        try:
            results = await self.client.bulk_request(calls)
        except asyncio.CancelledError:
            self._fail_all(BatchExecutionError("Batch execution was cancelled", calls))
            logger.warning("batch_cancelled", batch_id=self.batch_id)
            raise
        except (MatomoError, httpx.HTTPError) as e:
            error = BatchExecutionError(f"Batch request failed: {e}", calls, cause=e)
            self._fail_all(error)
            logger.error("batch_failed", batch_id=self.batch_id, error=str(e))
            raise error from e
        except Exception as e:
            error = BatchExecutionError(f"Batch request failed: {e}", calls, cause=e)
            self._fail_all(error)
            logger.exception("batch_failed_unexpectedly", batch_id=self.batch_id, error=str(e))
            raise error from e

        if not isinstance(results, list) or len(results) != len(calls):
            received = len(results) if isinstance(results, list) else type(results).__name__
            error = BatchExecutionError(
                f"Batch returned {received} results for {len(calls)} calls", calls
            )
            self._fail_all(error)
            logger.error(
                "batch_result_mismatch",
                batch_id=self.batch_id,
                expected=len(calls),
                received=received,
            )
            raise error

        failed = 0
        for handle, item in zip(self._pending, results):
            if is_error_payload(item):
                failed += 1
                handle._set_exception(RequestError(
                    f"Matomo API error: {item.get('message')}",
                    method=handle.call.method,
                    params=handle.call.params,
                ))
            else:
                handle._set_result(item)

        self.status = BatchStatus.EXECUTED
        self.executed_at = datetime.utcnow()
        logger.info("batch_executed", batch_id=self.batch_id, size=len(calls), failed=failed)
        return results

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "batch_id": self.batch_id,
            "status": self.status.value,
            "size": self.size,
            "created_at": self.created_at.isoformat(),
            "executed_at": self.executed_at.isoformat() if self.executed_at else None,
            "error_message": self.error_message,
            "calls": [call.to_dict() for call in self.calls],
        }

    def __repr__(self) -> str:
        return f"BatchRequest(id={self.batch_id[:8]}..., status={self.status.value}, size={self.size})"
