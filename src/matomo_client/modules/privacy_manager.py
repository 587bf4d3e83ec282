"""
PrivacyManager API.

GDPR tools: finding, exporting, deleting and anonymizing visitor data.
"""

from typing import Any, Mapping, Sequence

from matomo_client.modules.base import ModuleBase, SiteId

Visits = Sequence[Mapping[str, Any]]


class PrivacyManagerModule(ModuleBase):
    """Façade for the ``PrivacyManager`` namespace."""

    namespace = "PrivacyManager"

    def delete_data_subjects(self, visits: Visits):
        """Delete the given visits, as returned by ``find_data_subjects``."""
        return self._call("deleteDataSubjects", {"visits": [dict(v) for v in visits]})

    def export_data_subjects(self, visits: Visits):
        return self._call("exportDataSubjects", {"visits": [dict(v) for v in visits]})

    def find_data_subjects(self, id_site: SiteId, segment: str):
        return self._call("findDataSubjects", {"idSite": id_site, "segment": segment})

    def anonymize_some_raw_data(
        self,
        id_sites: Sequence[SiteId],
        date: str,
        anonymize_ip: str = "",
        anonymize_location: str = "",
        anonymize_user_id: str = "",
        unset_visit_columns: Sequence[str] = (),
        unset_link_visit_action_columns: Sequence[str] = (),
        password_confirmation: str = "",
    ):
        """
        Anonymize already tracked raw data.

        Args:
            id_sites: Sites to anonymize
            date: Date or date range, e.g. ``2024-01-01,2024-01-31``
            anonymize_ip: Number of IP bytes to mask
            anonymize_location: Re-run geolocation on the masked IP
            anonymize_user_id: Replace the user ID with a pseudonym
            unset_visit_columns: Visit columns to clear
            unset_link_visit_action_columns: Action columns to clear
            password_confirmation: Password of the current user
        """
        return self._call(
            "anonymizeSomeRawData",
            {"idSites": list(id_sites), "date": date},
            {
                "anonymizeIp": anonymize_ip,
                "anonymizeLocation": anonymize_location,
                "anonymizeUserId": anonymize_user_id,
                "unsetVisitColumns": list(unset_visit_columns),
                "unsetLinkVisitActionColumns": list(unset_link_visit_action_columns),
                "passwordConfirmation": password_confirmation,
            },
        )

    def get_available_visit_columns_to_anonymize(self):
        return self._call("getAvailableVisitColumnsToAnonymize")

    def get_available_link_visit_action_columns_to_anonymize(self):
        return self._call("getAvailableLinkVisitActionColumnsToAnonymize")
