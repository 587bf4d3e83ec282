"""
Events API.

Event category, action and name reports, with drill-downs between them.
"""

from typing import Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

SubtableId = Union[int, str]


class EventsModule(ModuleBase):
    """Façade for the ``Events`` namespace."""

    namespace = "Events"

    def _top_level(
        self,
        action: str,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str,
        expanded: Flag,
        secondary_dimension: str,
        flat: Flag,
    ):
        return self._report(
            action,
            id_site,
            period,
            date,
            {
                "segment": segment,
                "expanded": expanded,
                "secondaryDimension": secondary_dimension,
                "flat": flat,
            },
        )

    def _drilldown(
        self,
        action: str,
        id_site: SiteId,
        period: str,
        date: str,
        id_subtable: SubtableId,
        segment: str,
    ):
        return self._call(
            action,
            {"idSite": id_site, "period": period, "date": date, "idSubtable": id_subtable},
            {"segment": segment},
        )

    def get_category(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        expanded: Flag = None,
        secondary_dimension: str = "",
        flat: Flag = None,
    ):
        """
        Get event categories.

        Args:
            secondary_dimension: ``eventAction`` or ``eventName``
        """
        return self._top_level(
            "getCategory", id_site, period, date, segment, expanded, secondary_dimension, flat
        )

    def get_action(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        expanded: Flag = None,
        secondary_dimension: str = "",
        flat: Flag = None,
    ):
        return self._top_level(
            "getAction", id_site, period, date, segment, expanded, secondary_dimension, flat
        )

    def get_name(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        expanded: Flag = None,
        secondary_dimension: str = "",
        flat: Flag = None,
    ):
        return self._top_level(
            "getName", id_site, period, date, segment, expanded, secondary_dimension, flat
        )

    def get_action_from_category_id(
        self, id_site: SiteId, period: str, date: str, id_subtable: SubtableId, segment: str = ""
    ):
        return self._drilldown(
            "getActionFromCategoryId", id_site, period, date, id_subtable, segment
        )

    def get_name_from_category_id(
        self, id_site: SiteId, period: str, date: str, id_subtable: SubtableId, segment: str = ""
    ):
        return self._drilldown(
            "getNameFromCategoryId", id_site, period, date, id_subtable, segment
        )

    def get_category_from_action_id(
        self, id_site: SiteId, period: str, date: str, id_subtable: SubtableId, segment: str = ""
    ):
        return self._drilldown(
            "getCategoryFromActionId", id_site, period, date, id_subtable, segment
        )

    def get_name_from_action_id(
        self, id_site: SiteId, period: str, date: str, id_subtable: SubtableId, segment: str = ""
    ):
        return self._drilldown(
            "getNameFromActionId", id_site, period, date, id_subtable, segment
        )

    def get_action_from_name_id(
        self, id_site: SiteId, period: str, date: str, id_subtable: SubtableId, segment: str = ""
    ):
        return self._drilldown(
            "getActionFromNameId", id_site, period, date, id_subtable, segment
        )

    def get_category_from_name_id(
        self, id_site: SiteId, period: str, date: str, id_subtable: SubtableId, segment: str = ""
    ):
        return self._drilldown(
            "getCategoryFromNameId", id_site, period, date, id_subtable, segment
        )
