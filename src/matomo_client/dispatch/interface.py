"""
Dispatcher interface.

Defines the single capability every façade depends on: submitting a Remote
Call and getting back something awaitable. Two variants implement it:
CoreReportingClient (send now) and BatchRequest (queue until execute).
"""

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable, Mapping, Optional, Sequence

from matomo_client.core.call import RemoteCall


Transform = Callable[[Any], Any]


class Dispatcher(ABC):
    """
    Abstract interface for submitting Remote Calls.

    Façade modules hold a Dispatcher and never inspect which variant it is.
    """

    @abstractmethod
    def submit(
        self,
        call: RemoteCall,
        transform: Optional[Transform] = None,
    ) -> Awaitable[Any]:
        """
        Submit a call for dispatch.

        Must not suspend. The returned awaitable yields the call's result
        with ``transform`` applied, or raises a MatomoError.

        Args:
            call: The call to dispatch
            transform: Optional function applied to the raw result

        Returns:
            An awaitable (coroutine or PendingResult) for the result
        """
        pass


def is_error_payload(data: Any) -> bool:
    """Check whether a decoded response is a Matomo error marker."""
    return isinstance(data, dict) and data.get("result") == "error"


class MatomoError(Exception):
    """Base class for all client errors."""
    pass


class ConfigurationError(MatomoError):
    """Raised when the client is missing required configuration."""
    pass


class RequestError(MatomoError):
    """Raised when a single API call fails in transport or on the server."""

    def __init__(
        self,
        message: str,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.method = method
        self.params = dict(params or {})
        self.cause = cause


class BatchExecutionError(MatomoError):
    """Raised when a combined call fails or its result count does not match."""

    def __init__(
        self,
        message: str,
        calls: Sequence[RemoteCall] = (),
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message)
        self.calls = list(calls)
        self.cause = cause


class AlreadyExecutedError(MatomoError):
    """Raised when a consumed BatchRequest is used again."""
    pass
