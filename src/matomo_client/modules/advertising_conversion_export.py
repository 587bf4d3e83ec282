"""
AdvertisingConversionExport API.

Conversion exports that ad platforms (Google Ads, ...) fetch from Matomo.
"""

import json
from typing import Any, Mapping, Optional, Union

from matomo_client.modules.base import ModuleBase, SiteId

ExportId = Union[int, str]
Parameters = Union[str, Mapping[str, Any]]


def _parameters(value: Parameters) -> str:
    return json.dumps(value) if isinstance(value, Mapping) else value


class AdvertisingConversionExportModule(ModuleBase):
    """Façade for the ``AdvertisingConversionExport`` namespace."""

    namespace = "AdvertisingConversionExport"

    def get_conversion_exports(self, id_site: Optional[SiteId] = None):
        return self._call("getConversionExports", optional={"idSite": id_site})

    def get_conversion_export(self, id_export: ExportId):
        return self._call("getConversionExport", {"idExport": id_export})

    def delete_conversion_export(self, id_export: ExportId, id_site: SiteId):
        return self._call("deleteConversionExport", {"idExport": id_export, "idSite": id_site})

    def add_conversion_export(
        self,
        id_site: SiteId,
        name: str,
        type: str,
        parameters: Parameters,
        description: str = "",
    ):
        """
        Create a conversion export.

        Args:
            id_site: Site whose conversions are exported
            name: Export name
            type: Target platform, e.g. ``GoogleAds``
            parameters: Export settings; mappings are sent as JSON
            description: Free text, always sent
        """
        return self._call(
            "addConversionExport",
            {
                "idSite": id_site,
                "name": name,
                "type": type,
                "parameters": _parameters(parameters),
                "description": description,
            },
        )

    def regenerate_access_token(self, id_export: ExportId):
        return self._call("regenerateAccessToken", {"idExport": id_export})

    def update_conversion_export(
        self,
        id_export: ExportId,
        id_site: SiteId,
        name: str,
        type: str,
        parameters: Parameters,
        description: str = "",
    ):
        return self._call(
            "updateConversionExport",
            {
                "idExport": id_export,
                "idSite": id_site,
                "name": name,
                "type": type,
                "parameters": _parameters(parameters),
                "description": description,
            },
        )
