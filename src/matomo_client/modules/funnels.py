"""
Funnels API.

Conversion funnels: goal funnels, sales funnels and funnels without a goal.
"""

from typing import Any, Mapping, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

FunnelId = Union[int, str]
Steps = Sequence[Mapping[str, Any]]


class FunnelsModule(ModuleBase):
    """Façade for the ``Funnels`` namespace."""

    namespace = "Funnels"

    def _funnel_report(self, action, id_site, period, date, id_funnel, id_goal, segment, extra=None):
        optional = {"idFunnel": id_funnel, "idGoal": id_goal, "segment": segment}
        optional.update(extra or {})
        return self._report(action, id_site, period, date, optional)

    def get_metrics(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_funnel: Optional[FunnelId] = None,
        id_goal: Optional[FunnelId] = None,
        segment: str = "",
    ):
        """
        Get conversion metrics of a funnel.

        Identify the funnel by ``id_funnel``, or by ``id_goal`` for a goal funnel.
        """
        return self._funnel_report("getMetrics", id_site, period, date, id_funnel, id_goal, segment)

    def get_funnel_flow(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_funnel: Optional[FunnelId] = None,
        id_goal: Optional[FunnelId] = None,
        segment: str = "",
    ):
        return self._funnel_report(
            "getFunnelFlow", id_site, period, date, id_funnel, id_goal, segment
        )

    def get_funnel_flow_table(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_funnel: Optional[FunnelId] = None,
        id_goal: Optional[FunnelId] = None,
        segment: str = "",
    ):
        return self._funnel_report(
            "getFunnelFlowTable", id_site, period, date, id_funnel, id_goal, segment
        )

    def get_funnel_step_subtable(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        step_position: Union[int, str],
        id_funnel: Optional[FunnelId] = None,
        id_goal: Optional[FunnelId] = None,
        segment: str = "",
    ):
        """Get the visitor actions recorded at one funnel step."""
        return self._funnel_report(
            "getFunnelStepSubtable", id_site, period, date, id_funnel, id_goal, segment,
            {"stepPosition": step_position},
        )

    def get_funnel_entries(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_funnel: FunnelId,
        segment: str = "",
        step: Optional[Union[int, str]] = None,
        expanded: Flag = None,
        id_subtable="",
        flat: Flag = None,
    ):
        """
        Get where visitors entered the funnel.

        Args:
            id_funnel: Funnel to report on
            step: Only entries into this step
            expanded: Include subtables
            id_subtable: Subtable to fetch
            flat: Flatten subtables into one table
        """
        return self._report(
            "getFunnelEntries", id_site, period, date,
            {
                "idFunnel": id_funnel,
                "segment": segment,
                "step": step,
                "expanded": expanded,
                "idSubtable": id_subtable,
                "flat": flat,
            },
        )

    def get_funnel_exits(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_funnel: FunnelId,
        segment: str = "",
        step: Optional[Union[int, str]] = None,
    ):
        return self._report(
            "getFunnelExits", id_site, period, date,
            {"idFunnel": id_funnel, "segment": segment, "step": step},
        )

    def get_goal_funnel(self, id_site: SiteId, id_goal: FunnelId):
        return self._call("getGoalFunnel", {"idSite": id_site, "idGoal": id_goal})

    def get_sales_funnel_for_site(self, id_site: SiteId):
        return self._call("getSalesFunnelForSite", {"idSite": id_site})

    def get_funnel(self, id_site: SiteId, id_funnel: FunnelId):
        return self._call("getFunnel", {"idSite": id_site, "idFunnel": id_funnel})

    def get_all_activated_funnels_for_site(self, id_site: SiteId):
        return self._call("getAllActivatedFunnelsForSite", {"idSite": id_site})

    def has_any_activated_funnel_for_site(self, id_site: SiteId):
        return self._call("hasAnyActivatedFunnelForSite", {"idSite": id_site})

    def delete_goal_funnel(self, id_site: SiteId, id_goal: FunnelId):
        return self._call("deleteGoalFunnel", {"idSite": id_site, "idGoal": id_goal})

    def delete_non_goal_funnel(self, id_site: SiteId, id_funnel: FunnelId):
        return self._call("deleteNonGoalFunnel", {"idSite": id_site, "idFunnel": id_funnel})

    def set_goal_funnel(self, id_site: SiteId, id_goal: FunnelId, is_activated: bool, steps: Steps):
        """
        Define the funnel of a goal.

        Args:
            id_site: Site of the goal
            id_goal: Goal the funnel leads to
            is_activated: Whether the funnel is tracked
            steps: Steps as mappings with ``position``, ``name``,
                ``pattern_type``, ``pattern`` and ``required``
        """
        return self._call(
            "setGoalFunnel",
            {
                "idSite": id_site,
                "idGoal": id_goal,
                "isActivated": is_activated,
                "steps": [dict(step) for step in steps],
            },
        )

    def save_non_goal_funnel(
        self, id_site: SiteId, id_funnel: FunnelId, funnel_name: str, steps: Steps
    ):
        return self._call(
            "saveNonGoalFunnel",
            {
                "idSite": id_site,
                "idFunnel": id_funnel,
                "funnelName": funnel_name,
                "steps": [dict(step) for step in steps],
            },
        )

    def get_available_pattern_matches(self):
        return self._call("getAvailablePatternMatches")

    def test_url_matches_steps(self, url: str, steps: Steps):
        """Check which steps a URL would match."""
        return self._call(
            "testUrlMatchesSteps", {"url": url, "steps": [dict(step) for step in steps]}
        )
