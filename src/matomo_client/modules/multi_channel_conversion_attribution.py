"""
MultiChannelConversionAttribution API.

Goal conversions credited across the marketing channels of each visit.
"""

from typing import Optional, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId, unwrap_value

GoalId = Union[int, str]


class MultiChannelConversionAttributionModule(ModuleBase):
    """Façade for the ``MultiChannelConversionAttribution`` namespace."""

    namespace = "MultiChannelConversionAttribution"

    def set_goal_attribution(self, id_site: SiteId, id_goal: GoalId, is_enabled: bool):
        return self._call(
            "setGoalAttribution",
            {"idSite": id_site, "idGoal": id_goal, "isEnabled": is_enabled},
        )

    def get_goal_attribution(self, id_site: SiteId, id_goal: GoalId):
        """Check whether attribution is enabled for a goal."""
        return self._call(
            "getGoalAttribution", {"idSite": id_site, "idGoal": id_goal}, transform=unwrap_value
        )

    def get_channel_attribution(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_goal: GoalId,
        id_campaign_dimension_combination: str = "",
        segment: str = "",
        expanded: Flag = None,
        flat: Flag = None,
        id_subtable="",
    ):
        """
        Get conversions of a goal per channel under each attribution model.

        Args:
            id_goal: Goal whose conversions are attributed
            id_campaign_dimension_combination: Campaign dimensions to split by
            segment: Segment expression
            expanded: Include subtables
            flat: Flatten subtables into one table
            id_subtable: Subtable to fetch
        """
        return self._report(
            "getChannelAttribution", id_site, period, date,
            {
                "idGoal": id_goal,
                "idCampaignDimensionCombination": id_campaign_dimension_combination,
                "segment": segment,
                "expanded": expanded,
                "flat": flat,
                "idSubtable": id_subtable,
            },
        )

    def get_available_campaign_dimension_combinations(self):
        return self._call("getAvailableCampaignDimensionCombinations")

    def get_site_attribution_goals(self, id_site: SiteId):
        return self._call("getSiteAttributionGoals", {"idSite": id_site})
