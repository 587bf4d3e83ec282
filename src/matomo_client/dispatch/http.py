"""
Matomo HTTP dispatcher.

Executes Remote Calls against the Matomo Reporting API over HTTP.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence

import httpx
import structlog

from matomo_client.config import MatomoConfig, ResponseFormat, get_config
from matomo_client.core.call import RemoteCall, encode_bulk_url, encode_params
from matomo_client.dispatch.batch import BatchRequest
from matomo_client.dispatch.interface import (
    ConfigurationError,
    Dispatcher,
    RequestError,
    Transform,
    is_error_payload,
)

logger = structlog.get_logger(__name__)

BULK_METHOD = "API.getBulkRequest"


class CoreReportingClient(Dispatcher):
    """
    Immediate dispatcher for the Matomo Reporting API.

    Every submitted call becomes exactly one HTTP request. Calls are sent to
    ``{url}/index.php`` as a POST form body in security mode (the default)
    or as GET query parameters otherwise.
    """

    def __init__(
        self,
        config: Optional[MatomoConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            config: Client configuration. Uses global config if not provided.
            http_client: Pre-built httpx client (custom transports, tests).
                The dispatcher does not close a client it did not create.
        """
        self.config = config or get_config()
        self._client: Optional[httpx.AsyncClient] = http_client
        self._owns_client = http_client is None

    @property
    def format(self) -> ResponseFormat:
        return self.config.format

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Create the HTTP client."""
        if self._client is not None:
            return

        if not self.config.url:
            raise ConfigurationError("Matomo URL not configured (set MATOMO_URL)")

        self._client = httpx.AsyncClient(timeout=self.config.timeout_seconds)
        self._owns_client = True
        logger.info("matomo_connected", base_url=self.config.base_url)

    async def disconnect(self) -> None:
        """Close the HTTP client."""
        if self._client and self._owns_client:
            await self._client.aclose()
            logger.info("matomo_disconnected")
        self._client = None

    async def __aenter__(self) -> "CoreReportingClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.disconnect()

    def _base_params(self, method: str, response_format: ResponseFormat) -> Dict[str, str]:
        params = {
            "module": "API",
            "method": method,
            "format": response_format.value,
        }
        if self.config.auth_token:
            params["token_auth"] = self.config.auth_token
        return params

    def _with_defaults(self, params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Add the configured default idSite and language where missing."""
        merged: Dict[str, Any] = dict(params or {})
        if self.config.default_site_id is not None and merged.get("idSite") is None:
            merged["idSite"] = self.config.default_site_id
        if self.config.language and not merged.get("language"):
            merged["language"] = self.config.language
        return merged

    async def _send(
        self,
        method: str,
        params: Mapping[str, Any],
        wire: Dict[str, str],
    ) -> httpx.Response:
        if not self._client:
            await self.connect()

        endpoint = self.config.api_endpoint
        try:
            if self.config.security_mode:
                response = await self._client.post(endpoint, data=wire)
            else:
                response = await self._client.get(endpoint, params=wire)
        except httpx.HTTPError as e:
            logger.error("matomo_request_error", method=method, error=str(e))
            raise RequestError(
                f"Matomo API error: {e}", method=method, params=params, cause=e
            ) from e

        if response.status_code >= 400:
            logger.error(
                "matomo_request_failed",
                method=method,
                status=response.status_code,
                error=response.text[:200],
            )
            raise RequestError(
                f"Matomo API error: HTTP {response.status_code}",
                method=method,
                params=params,
            )

        return response

    def _decode(
        self,
        method: str,
        params: Mapping[str, Any],
        response: httpx.Response,
        response_format: ResponseFormat,
    ) -> Any:
        if response_format == ResponseFormat.ORIGINAL:
            return response

        # ImageGraph answers with binary content whatever the format
        if response.headers.get("content-type", "").startswith("image/"):
            return response.content

        if response_format != ResponseFormat.JSON:
            return response.text

        try:
            data = response.json()
        except ValueError as e:
            raise RequestError(
                f"Matomo API error: invalid JSON response ({e})",
                method=method,
                params=params,
                cause=e,
            ) from e

        if is_error_payload(data):
            logger.warning("matomo_api_error", method=method, message=data.get("message"))
            raise RequestError(
                f"Matomo API error: {data.get('message')}", method=method, params=params
            )

        return data

    async def request(
        self,
        method: str,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """
        Execute one API call immediately.

        Args:
            method: Dotted API method, e.g. ``VisitsSummary.get``
            params: Call parameters

        Returns:
            The decoded response (JSON value, text, bytes for image
            responses, or raw response for the ``original`` format)

        Raises:
            RequestError: On transport failure, HTTP error status or a
                Matomo error payload
        """
        call = RemoteCall(method, params or {})
        wire = self._base_params(call.method, self.format)
        wire.update(encode_params(self._with_defaults(call.params)))

        logger.debug("matomo_request", method=call.method, params=len(call.params))
        response = await self._send(call.method, call.params, wire)
        return self._decode(call.method, call.params, response, self.format)

    async def bulk_request(self, calls: Sequence[RemoteCall]) -> List[Any]:
        """
        Execute several calls as one ``API.getBulkRequest``.

        Each call is encoded as ``urls[i]``. The bulk call always asks for
        JSON so the result can be split per call. Per-item error markers
        are returned as they are.

        Args:
            calls: Calls in the order their results should come back

        Returns:
            The decoded response list

        Raises:
            RequestError: If the combined call fails
        """
        wire = self._base_params(BULK_METHOD, ResponseFormat.JSON)
        for index, call in enumerate(calls):
            with_defaults = RemoteCall(call.method, self._with_defaults(call.params))
            wire[f"urls[{index}]"] = encode_bulk_url(with_defaults)

        logger.debug("matomo_bulk_request", calls=len(calls))
        response = await self._send(BULK_METHOD, {}, wire)
        return self._decode(BULK_METHOD, {}, response, ResponseFormat.JSON)

    def submit(
        self,
        call: RemoteCall,
        transform: Optional[Transform] = None,
    ):
        """Dispatch a call now; returns a coroutine for its result."""
        return self._run(call, transform)

    async def _run(self, call: RemoteCall, transform: Optional[Transform]) -> Any:
        result = await self.request(call.method, dict(call.params))
        return transform(result) if transform else result

    def prepare_requests(self) -> BatchRequest:
        """Create a BatchRequest bound to this dispatcher."""
        return BatchRequest(self)

    def __repr__(self) -> str:
        return f"CoreReportingClient(url={self.config.base_url}, format={self.format.value})"
