"""
Remote Call model.

A Remote Call is one named Matomo API action (``Namespace.action``) together
with its parameter mapping. This module also holds the helpers that shape
optional parameters and encode parameter mappings for the wire.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterator, List, Mapping, Optional, Tuple
from urllib.parse import urlencode


@dataclass(frozen=True)
class RemoteCall:
    """
    One named API action with its parameters.

    Attributes:
        method: Dotted ``Namespace.action`` name, e.g. ``SEO.getRank``
        params: Read-only parameter mapping sent with the call
    """

    method: str
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate the method name and freeze the parameters."""
        if not isinstance(self.method, str) or not _is_dotted_name(self.method):
            raise ValueError(
                f"Remote call method must be a 'Namespace.action' string, got {self.method!r}"
            )
        object.__setattr__(self, "params", MappingProxyType(dict(self.params or {})))

    @property
    def namespace(self) -> str:
        """API namespace, e.g. ``SEO``."""
        return self.method.split(".", 1)[0]

    @property
    def action(self) -> str:
        """Action within the namespace, e.g. ``getRank``."""
        return self.method.split(".", 1)[1]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {"method": self.method, "params": dict(self.params)}

    def __repr__(self) -> str:
        return f"RemoteCall(method={self.method}, params={len(self.params)})"


def _is_dotted_name(method: str) -> bool:
    namespace, dot, action = method.partition(".")
    return bool(namespace and dot and action) and not any(c.isspace() for c in method)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


def compact_params(params: Mapping[str, Any]) -> dict:
    """
    Drop optional parameters that carry no value.

    ``None``, the empty string and empty containers are removed. ``0`` and
    ``False`` are kept.

    Args:
        params: Optional parameters keyed by their API name

    Returns:
        A new dict holding only the parameters that should be sent
    """
    return {key: value for key, value in params.items() if not _is_empty(value)}


def _scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _flatten(key: str, value: Any) -> Iterator[Tuple[str, str]]:
    if value is None:
        return
    if isinstance(value, Mapping):
        for sub_key, sub_value in value.items():
            yield from _flatten(f"{key}[{sub_key}]", sub_value)
    elif isinstance(value, (list, tuple)):
        if any(isinstance(item, (Mapping, list, tuple)) for item in value):
            for index, item in enumerate(value):
                yield from _flatten(f"{key}[{index}]", item)
        else:
            yield key, ",".join(_scalar(item) for item in value if item is not None)
    else:
        yield key, _scalar(value)


def encode_params(params: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
    """
    Flatten a parameter mapping into ``(key, value)`` string pairs.

    Booleans become ``1``/``0``, lists of scalars are comma-joined and
    nested mappings (or lists holding mappings) use PHP bracket notation,
    e.g. ``variations[0][name]``.

    Args:
        params: Parameter mapping, may be None

    Returns:
        Ordered list of encoded pairs
    """
    pairs: List[Tuple[str, str]] = []
    for key, value in (params or {}).items():
        pairs.extend(_flatten(str(key), value))
    return pairs


def encode_bulk_url(call: RemoteCall) -> str:
    """Encode one call as a relative query string for ``API.getBulkRequest``."""
    return "?" + urlencode([("method", call.method), *encode_params(call.params)])

