"""
CustomDimensions API.
"""

from typing import Any, Dict, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

DimensionId = Union[int, str]
Extractions = Optional[Sequence[Dict[str, Any]]]

# Sent when a dimension has no extractions
EMPTY_EXTRACTIONS = "Array"


def _active(value: Union[bool, int, str]) -> Union[int, str]:
    if isinstance(value, bool):
        return 1 if value else 0
    return value


class CustomDimensionsModule(ModuleBase):
    """Façade for the ``CustomDimensions`` namespace."""

    namespace = "CustomDimensions"

    def get_custom_dimension(
        self,
        id_dimension: DimensionId,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        expanded: Flag = None,
        flat: Flag = None,
        id_subtable="",
    ):
        """Get the report of one custom dimension."""
        return self._call(
            "getCustomDimension",
            {"idDimension": id_dimension, "idSite": id_site, "period": period, "date": date},
            {"segment": segment, "expanded": expanded, "flat": flat, "idSubtable": id_subtable},
        )

    def configure_new_custom_dimension(
        self,
        id_site: SiteId,
        name: str,
        scope: str,
        active: Union[bool, int, str],
        extractions: Extractions = None,
        case_sensitive: Union[bool, int, str] = "1",
    ):
        """
        Create a custom dimension.

        Args:
            scope: ``visit`` or ``action``
            active: Booleans are sent as 1/0
            extractions: e.g. ``[{"dimension": "url", "pattern": "index_(.+).html"}]``
        """
        return self._call(
            "configureNewCustomDimension",
            {
                "idSite": id_site,
                "name": name,
                "scope": scope,
                "active": _active(active),
                "extractions": list(extractions) if extractions else EMPTY_EXTRACTIONS,
                "caseSensitive": case_sensitive,
            },
        )

    def configure_existing_custom_dimension(
        self,
        id_dimension: DimensionId,
        id_site: SiteId,
        name: str,
        active: Union[bool, int, str],
        extractions: Extractions = None,
        case_sensitive: Flag = None,
    ):
        return self._call(
            "configureExistingCustomDimension",
            {
                "idDimension": id_dimension,
                "idSite": id_site,
                "name": name,
                "active": _active(active),
                "extractions": list(extractions) if extractions else EMPTY_EXTRACTIONS,
            },
            {"caseSensitive": case_sensitive},
        )

    def get_configured_custom_dimensions(self, id_site: SiteId):
        return self._call("getConfiguredCustomDimensions", {"idSite": id_site})

    def get_configured_custom_dimensions_having_scope(self, id_site: SiteId, scope: str):
        return self._call(
            "getConfiguredCustomDimensionsHavingScope", {"idSite": id_site, "scope": scope}
        )

    def get_available_scopes(self, id_site: SiteId):
        return self._call("getAvailableScopes", {"idSite": id_site})

    def get_available_extraction_dimensions(self):
        return self._call("getAvailableExtractionDimensions")
