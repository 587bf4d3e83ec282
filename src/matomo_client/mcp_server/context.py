"""ServerContext holding the Matomo client shared by every tool."""

from typing import Optional

import httpx
import structlog

from matomo_client.client import ReportingClient
from matomo_client.config import MatomoConfig, get_config

logger = structlog.get_logger(__name__)


class ServerContext:
    """
    Shared state for one MCP server.

    Built once by ``main()`` and handed to each tool module's ``register``.
    """

    def __init__(
        self,
        config: Optional[MatomoConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.config = config or get_config()
        self.client = ReportingClient(self.config, http_client=http_client)

    async def aclose(self) -> None:
        """Close the Matomo client."""
        await self.client.close()
        logger.info("server_context_closed")
