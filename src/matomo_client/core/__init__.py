"""
Core call model.

Remote Call value objects and the parameter helpers shared by every
dispatcher and façade.
"""

from matomo_client.core.call import (
    RemoteCall,
    compact_params,
    encode_bulk_url,
    encode_params,
)

__all__ = [
    "RemoteCall",
    "compact_params",
    "encode_bulk_url",
    "encode_params",
]
