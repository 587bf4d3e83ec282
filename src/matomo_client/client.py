"""
ReportingClient: the main entry point of the library.

Bundles an immediate dispatcher with every namespace façade:

    async with ReportingClient(MatomoConfig(url=..., auth_token=...)) as client:
        version = await client.api.get_matomo_version()

        batch = client.prepare_requests()
        visits = batch.visits_summary.get_visits(1, "day", "today")
        level = batch.tour.get_level()
        await batch.execute()
        print(visits.result(), level.result())
"""

from typing import Any, List, Mapping, Optional, Sequence

import httpx

from matomo_client.config import MatomoConfig, get_config
from matomo_client.core.call import RemoteCall
from matomo_client.dispatch.batch import BatchRequest
from matomo_client.dispatch.http import CoreReportingClient
from matomo_client.modules import ModulesMixin


class ReportingClient(ModulesMixin):
    """
    Matomo Reporting API client.

    Every façade is available as an attribute (``client.sites_manager``,
    ``client.tag_manager``, ...) and dispatches immediately.
    """

    def __init__(
        self,
        config: Optional[MatomoConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration. Uses global config if not provided.
            http_client: Pre-built httpx client passed to the dispatcher
        """
        self.config = config or get_config()
        self.core = CoreReportingClient(self.config, http_client=http_client)
        self._init_modules(self.core)

    async def connect(self) -> None:
        await self.core.connect()

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self.core.disconnect()

    async def __aenter__(self) -> "ReportingClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()

    async def request(self, method: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        """Execute any API method immediately."""
        return await self.core.request(method, params)

    async def bulk_request(self, calls: Sequence[RemoteCall]) -> List[Any]:
        return await self.core.bulk_request(calls)

    def prepare_requests(self) -> BatchRequest:
        """Start a new batch; the same façades are available on it."""
        return self.core.prepare_requests()

    def __repr__(self) -> str:
        return f"ReportingClient(url={self.config.base_url})"
