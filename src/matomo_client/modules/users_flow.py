"""
UsersFlow API.

Step-by-step navigation flow reports (premium UsersFlow plugin).
"""

from typing import Optional, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId


class UsersFlowModule(ModuleBase):
    """Façade for the ``UsersFlow`` namespace."""

    namespace = "UsersFlow"

    def get_users_flow_pretty(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        segment: str = "",
        expanded: Flag = None,
        flat: Flag = None,
        id_subtable="",
        data_source: str = "",
    ):
        """Get the users flow as a report table with one row per step."""
        return self._report(
            "getUsersFlowPretty",
            id_site,
            period,
            date,
            {
                "segment": segment,
                "expanded": expanded,
                "flat": flat,
                "idSubtable": id_subtable,
                "dataSource": data_source,
            },
        )

    def get_users_flow(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        limit_actions_per_step: Optional[Union[int, str]] = None,
        explore_step="",
        explore_url: str = "",
        segment: str = "",
        expanded: Flag = None,
        data_source: str = "",
    ):
        """
        Get the users flow visualization data.

        Args:
            limit_actions_per_step: Rows per step; the server uses 5 when omitted
            explore_step: Step to explore in detail
            explore_url: URL to explore in detail
        """
        return self._report(
            "getUsersFlow",
            id_site,
            period,
            date,
            {
                "limitActionsPerStep": limit_actions_per_step,
                "exploreStep": explore_step,
                "exploreUrl": explore_url,
                "segment": segment,
                "expanded": expanded,
                "dataSource": data_source,
            },
        )

    def get_interaction_actions(
        self,
        id_site: SiteId,
        period: str,
        date: str,
        interaction_position: Union[int, str],
        offset_actions_per_step="",
        segment: str = "",
        id_subtable="",
        data_source: str = "",
    ):
        """Get the actions performed at one interaction position of the flow."""
        return self._report(
            "getInteractionActions",
            id_site,
            period,
            date,
            {
                "interactionPosition": interaction_position,
                "offsetActionsPerStep": offset_actions_per_step,
                "segment": segment,
                "idSubtable": id_subtable,
                "dataSource": data_source,
            },
        )

    def get_available_data_sources(self):
        return self._call("getAvailableDataSources")
