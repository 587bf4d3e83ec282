"""
Base class for per-namespace façades.

A façade turns typed method arguments into a Remote Call and hands it to
its dispatcher. It never inspects which dispatcher it holds: an immediate
dispatcher returns a coroutine, a BatchRequest returns a PendingResult.
"""

from typing import Any, Awaitable, Mapping, Optional, Sequence, Union

from matomo_client.core.call import RemoteCall, compact_params
from matomo_client.dispatch.interface import Dispatcher, Transform

SiteId = Union[int, str]
Flag = Optional[Union[bool, int, str]]
Columns = Union[str, Sequence[str]]


def unwrap_value(result: Any) -> Any:
    """Unwrap Matomo's ``{"value": ...}`` envelope used by scalar API results."""
    if isinstance(result, dict) and "value" in result:
        return result["value"]
    return result


class ModuleBase:
    """
    Common plumbing for façade modules.

    Subclasses set ``namespace`` and expose one method per API action.
    """

    namespace: str = ""

    def __init__(self, dispatcher: Dispatcher):
        self.dispatcher = dispatcher

    def _call(
        self,
        action: str,
        params: Optional[Mapping[str, Any]] = None,
        optional: Optional[Mapping[str, Any]] = None,
        transform: Optional[Transform] = None,
    ) -> Awaitable[Any]:
        """
        Build and submit one call.

        Args:
            action: Action name within this namespace
            params: Required parameters, always sent
            optional: Optional parameters, sent only when they carry a value
            transform: Optional function applied to the result

        Returns:
            Whatever the dispatcher returns for the call
        """
        merged = dict(params or {})
        merged.update(compact_params(optional or {}))
        call = RemoteCall(f"{self.namespace}.{action}", merged)
        return self.dispatcher.submit(call, transform)

    def _report(
        self,
        action: str,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        optional: Optional[Mapping[str, Any]] = None,
    ) -> Awaitable[Any]:
        """
        Submit a report call taking the usual ``idSite``/``period``/``date`` triple.

        A None ``id_site`` is left out so the configured default site applies.
        """
        params = {"idSite": id_site, "period": period, "date": date}
        if id_site is None:
            del params["idSite"]
        return self._call(action, params, optional)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dispatcher={type(self.dispatcher).__name__})"
