"""
CustomVariables API.

Reports on the legacy custom variable slots.
"""

from typing import Optional

from matomo_client.modules.base import Flag, ModuleBase, SiteId


class CustomVariablesModule(ModuleBase):
    """Façade for the ``CustomVariables`` namespace."""

    namespace = "CustomVariables"

    def get_custom_variables(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        segment: str = "",
        expanded: Flag = None,
        flat: Flag = None,
    ):
        return self._report(
            "getCustomVariables", id_site, period, date,
            {"segment": segment, "expanded": expanded, "flat": flat},
        )

    def get_custom_variables_values_from_name_id(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_subtable,
        segment: str = "",
    ):
        """Get the values recorded for one custom variable name."""
        params = {"idSite": id_site, "period": period, "date": date, "idSubtable": id_subtable}
        if id_site is None:
            del params["idSite"]
        return self._call("getCustomVariablesValuesFromNameId", params, {"segment": segment})

    def get_usages_of_slots(self, id_site: SiteId):
        return self._call("getUsagesOfSlots", {"idSite": id_site})
