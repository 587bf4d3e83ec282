"""
Goals API.

Goal management and conversion reports, including ecommerce item reports.
"""

from typing import Optional, Union

from matomo_client.modules.base import Columns, Flag, ModuleBase, SiteId

GoalId = Union[int, str]


class GoalsModule(ModuleBase):
    """Façade for the ``Goals`` namespace."""

    namespace = "Goals"

    def get_goal(self, id_site: SiteId, id_goal: GoalId):
        return self._call("getGoal", {"idSite": id_site, "idGoal": id_goal})

    def get_goals(self, id_site: SiteId, order_by_name: Flag = None):
        """Get every goal configured for a site."""
        return self._call("getGoals", {"idSite": id_site}, {"orderByName": order_by_name})

    def add_goal(
        self,
        id_site: SiteId,
        name: str,
        match_attribute: str,
        pattern: str,
        pattern_type: str,
        case_sensitive: Flag = None,
        revenue: Optional[Union[float, str]] = None,
        allow_multiple_conversions_per_visit: Flag = None,
        description: str = "",
        use_event_value_as_revenue: Flag = None,
    ):
        """
        Create a goal.

        Args:
            match_attribute: url, title, file, external_website, manually,
                event_action, event_category or event_name
            pattern_type: contains, exact or regex
        """
        return self._call(
            "addGoal",
            {
                "idSite": id_site,
                "name": name,
                "matchAttribute": match_attribute,
                "pattern": pattern,
                "patternType": pattern_type,
            },
            {
                "caseSensitive": case_sensitive,
                "revenue": revenue,
                "allowMultipleConversionsPerVisit": allow_multiple_conversions_per_visit,
                "description": description,
                "useEventValueAsRevenue": use_event_value_as_revenue,
            },
        )

    def update_goal(
        self,
        id_site: SiteId,
        id_goal: GoalId,
        name: str,
        match_attribute: str,
        pattern: str,
        pattern_type: str,
        case_sensitive: Flag = None,
        revenue: Optional[Union[float, str]] = None,
        allow_multiple_conversions_per_visit: Flag = None,
        description: str = "",
        use_event_value_as_revenue: Flag = None,
    ):
        return self._call(
            "updateGoal",
            {
                "idSite": id_site,
                "idGoal": id_goal,
                "name": name,
                "matchAttribute": match_attribute,
                "pattern": pattern,
                "patternType": pattern_type,
            },
            {
                "caseSensitive": case_sensitive,
                "revenue": revenue,
                "allowMultipleConversionsPerVisit": allow_multiple_conversions_per_visit,
                "description": description,
                "useEventValueAsRevenue": use_event_value_as_revenue,
            },
        )

    def delete_goal(self, id_site: SiteId, id_goal: GoalId):
        return self._call("deleteGoal", {"idSite": id_site, "idGoal": id_goal})

    def get_items_sku(
        self, id_site: SiteId, period: str, date: str, abandoned_carts: Flag = None, segment: str = ""
    ):
        return self._report(
            "getItemsSku", id_site, period, date,
            {"abandonedCarts": abandoned_carts, "segment": segment},
        )

    def get_items_name(
        self, id_site: SiteId, period: str, date: str, abandoned_carts: Flag = None, segment: str = ""
    ):
        return self._report(
            "getItemsName", id_site, period, date,
            {"abandonedCarts": abandoned_carts, "segment": segment},
        )

    def get_items_category(
        self, id_site: SiteId, period: str, date: str, abandoned_carts: Flag = None, segment: str = ""
    ):
        return self._report(
            "getItemsCategory", id_site, period, date,
            {"abandonedCarts": abandoned_carts, "segment": segment},
        )

    def get(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        id_goal="",
        columns: Columns = "",
        show_all_goal_specific_metrics: Flag = None,
        compare: str = "",
    ):
        """
        Get goal conversion metrics.

        ``columns`` may be a list of metric names or a comma-separated string.
        """
        return self._report(
            "get",
            id_site,
            period,
            date,
            {
                "segment": segment,
                "idGoal": id_goal,
                "columns": columns,
                "showAllGoalSpecificMetrics": show_all_goal_specific_metrics,
                "compare": compare,
            },
        )

    def get_days_to_conversion(
        self, id_site: SiteId, period: str, date: str, segment: str = "", id_goal=""
    ):
        return self._report(
            "getDaysToConversion", id_site, period, date, {"segment": segment, "idGoal": id_goal}
        )

    def get_visits_until_conversion(
        self, id_site: SiteId, period: str, date: str, segment: str = "", id_goal=""
    ):
        return self._report(
            "getVisitsUntilConversion", id_site, period, date,
            {"segment": segment, "idGoal": id_goal},
        )
