"""
Transitions API.

Where visitors came from before a page, and where they went after it.
``id_site`` is optional here; the configured default site is used when it
is omitted.
"""

from typing import Optional

from matomo_client.modules.base import ModuleBase, SiteId


class TransitionsModule(ModuleBase):
    """Façade for the ``Transitions`` namespace."""

    namespace = "Transitions"

    def get_transitions_for_page_title(
        self,
        page_title: str,
        period: str,
        date: str,
        id_site: Optional[SiteId] = None,
        segment: str = "",
        limit_before_grouping="",
    ):
        return self._call(
            "getTransitionsForPageTitle",
            {"pageTitle": page_title, "period": period, "date": date},
            {"idSite": id_site, "segment": segment, "limitBeforeGrouping": limit_before_grouping},
        )

    def get_transitions_for_page_url(
        self,
        page_url: str,
        period: str,
        date: str,
        id_site: Optional[SiteId] = None,
        segment: str = "",
        limit_before_grouping="",
    ):
        return self._call(
            "getTransitionsForPageUrl",
            {"pageUrl": page_url, "period": period, "date": date},
            {"idSite": id_site, "segment": segment, "limitBeforeGrouping": limit_before_grouping},
        )

    def get_transitions_for_action(
        self,
        action_name: str,
        action_type: str,
        period: str,
        date: str,
        id_site: Optional[SiteId] = None,
        segment: str = "",
        limit_before_grouping="",
        parts: str = "",
    ):
        """
        Get transitions for an action.

        Args:
            action_type: ``url`` or ``title``
            parts: ``all`` or a comma-separated subset of the report parts
        """
        return self._call(
            "getTransitionsForAction",
            {"actionName": action_name, "actionType": action_type, "period": period, "date": date},
            {
                "idSite": id_site,
                "segment": segment,
                "limitBeforeGrouping": limit_before_grouping,
                "parts": parts,
            },
        )

    def get_translations(self):
        return self._call("getTranslations")

    def is_period_allowed(self, period: str, date: str, id_site: Optional[SiteId] = None):
        """Check whether transitions can be computed for the period."""
        return self._call(
            "isPeriodAllowed", {"period": period, "date": date}, {"idSite": id_site}
        )
