"""
Pytest configuration and shared fixtures for the test suite.
"""

from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import parse_qsl

import httpx
import pytest

from matomo_client.client import ReportingClient
from matomo_client.config import MatomoConfig, ResponseFormat
from matomo_client.core.call import RemoteCall
from matomo_client.dispatch.http import BULK_METHOD, CoreReportingClient
from matomo_client.dispatch.interface import Dispatcher, Transform


# ============================================================================
# Configuration Fixtures
# ============================================================================

TEST_URL = "https://matomo.example.com/"
TEST_TOKEN = "anonymous-test-token"


def make_config(**overrides) -> MatomoConfig:
    """Create a configuration that ignores the environment's .env file."""
    values = dict(
        url=TEST_URL,
        auth_token=TEST_TOKEN,
        default_site_id=None,
        format=ResponseFormat.JSON,
        language=None,
        timeout_seconds=5.0,
        security_mode=True,
        log_level="DEBUG",
        log_json=False,
    )
    values.update(overrides)
    return MatomoConfig(_env_file=None, **values)


@pytest.fixture
def test_config() -> MatomoConfig:
    """Create a test configuration."""
    return make_config()


# ============================================================================
# Fake Matomo Server
# ============================================================================

Payload = Union[Any, Callable[[Dict[str, str]], Any]]


class FakeMatomo:
    """
    In-process Matomo API served through httpx.MockTransport.

    Routes map an API method to a payload, or to a callable receiving the
    call's parameters. Bulk requests are answered item by item from the
    same routes. ``default`` answers unrouted methods and ``handler``
    replaces routing entirely when set.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[str, Payload] = {}
        self.handler: Optional[Callable[[httpx.Request], Any]] = None
        self.default: Optional[Payload] = None

    def route(self, method: str, payload: Payload) -> None:
        self.routes[method] = payload

    def params(self, index: int = -1) -> Dict[str, str]:
        """Decoded parameters of a recorded request."""
        return request_params(self.requests[index])

    def bulk_calls(self, index: int = -1) -> List[Dict[str, str]]:
        """Decoded sub-calls of a recorded bulk request, in ``urls[i]`` order."""
        params = self.params(index)
        count = len([key for key in params if key.startswith("urls[")])
        return [dict(parse_qsl(params[f"urls[{i}]"].lstrip("?"))) for i in range(count)]

    def _answer(self, params: Dict[str, str]) -> Any:
        method = params.get("method", "")
        payload = self.routes.get(method, self.default)
        if payload is None:
            return {"result": "error", "message": f"Method {method} does not exist"}
        return payload(params) if callable(payload) else payload

    def handle(self, request: httpx.Request):
        self.requests.append(request)
        if self.handler is not None:
            return self.handler(request)

        params = request_params(request)
        if params.get("method") == BULK_METHOD:
            calls = self.bulk_calls()
            return httpx.Response(200, json=[self._answer(call) for call in calls])
        return httpx.Response(200, json=self._answer(params))


def request_params(request: httpx.Request) -> Dict[str, str]:
    """Decode a request's parameters from its form body or query string."""
    if request.method == "POST":
        return dict(parse_qsl(request.content.decode(), keep_blank_values=True))
    return dict(request.url.params)


@pytest.fixture
def matomo() -> FakeMatomo:
    """Create a fake Matomo server."""
    return FakeMatomo()


@pytest.fixture
def http_client(matomo) -> httpx.AsyncClient:
    """Create an httpx client wired to the fake server."""
    return httpx.AsyncClient(transport=httpx.MockTransport(matomo.handle))


@pytest.fixture
def core(test_config, http_client) -> CoreReportingClient:
    """Create an immediate dispatcher talking to the fake server."""
    return CoreReportingClient(test_config, http_client=http_client)


@pytest.fixture
def client(test_config, http_client) -> ReportingClient:
    """Create a full client talking to the fake server."""
    return ReportingClient(test_config, http_client=http_client)


# ============================================================================
# Recording Dispatcher
# ============================================================================

class RecordingDispatcher(Dispatcher):
    """Dispatcher that records submitted calls and answers with a fixed result."""

    def __init__(self, result: Any = None):
        self.calls: List[RemoteCall] = []
        self.transforms: List[Optional[Transform]] = []
        self.result = result

    @property
    def last(self) -> RemoteCall:
        return self.calls[-1]

    def submit(self, call: RemoteCall, transform: Optional[Transform] = None):
        self.calls.append(call)
        self.transforms.append(transform)
        return Ready(transform(self.result) if transform else self.result)


class Ready:
    """Awaitable that is already resolved."""

    def __init__(self, value: Any):
        self.value = value

    def __await__(self):
        return self.value
        yield


@pytest.fixture
def recorder() -> RecordingDispatcher:
    """Create a recording dispatcher."""
    return RecordingDispatcher()
