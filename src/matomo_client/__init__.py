"""
Matomo Client

Async client for the Matomo Reporting API. Every API namespace is wrapped
by a façade whose methods either run immediately or queue into a batch
that is sent as a single bulk request.
"""

__version__ = "0.1.0"

from matomo_client.client import ReportingClient
from matomo_client.config import MatomoConfig, ResponseFormat
from matomo_client.core.call import RemoteCall
from matomo_client.dispatch.batch import BatchRequest, BatchStatus, PendingResult
from matomo_client.dispatch.http import CoreReportingClient
from matomo_client.dispatch.interface import (
    AlreadyExecutedError,
    BatchExecutionError,
    ConfigurationError,
    Dispatcher,
    MatomoError,
    RequestError,
)

__all__ = [
    "ReportingClient",
    "MatomoConfig",
    "ResponseFormat",
    "RemoteCall",
    "CoreReportingClient",
    "BatchRequest",
    "BatchStatus",
    "PendingResult",
    "Dispatcher",
    "MatomoError",
    "ConfigurationError",
    "RequestError",
    "BatchExecutionError",
    "AlreadyExecutedError",
]
