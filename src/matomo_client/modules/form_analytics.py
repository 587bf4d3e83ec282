"""
FormAnalytics API.

Form definitions and the interaction reports recorded for them.
"""

from typing import Mapping, Optional, Sequence, Union

from matomo_client.modules.base import Columns, ModuleBase, SiteId

FormId = Union[int, str]


class FormAnalyticsModule(ModuleBase):
    """Façade for the ``FormAnalytics`` namespace."""

    namespace = "FormAnalytics"

    def _form_report(self, action, id_site, period, date, id_form, segment):
        return self._report(action, id_site, period, date, {"idForm": id_form, "segment": segment})

    def add_form(
        self,
        id_site: SiteId,
        name: str,
        description: str = "",
        match_form_rules: str = "",
        match_page_rules: str = "",
        conversion_rule_option: str = "",
        conversion_rules: str = "",
    ):
        """
        Create a form definition.

        Args:
            id_site: Site the form lives on
            name: Form name
            description: Free text description
            match_form_rules: Rules identifying the form element
            match_page_rules: Rules identifying the pages it appears on
            conversion_rule_option: How a submission counts as a conversion
            conversion_rules: Rules for the chosen conversion option
        """
        return self._call(
            "addForm",
            {"idSite": id_site, "name": name},
            {
                "description": description,
                "matchFormRules": match_form_rules,
                "matchPageRules": match_page_rules,
                "conversionRuleOption": conversion_rule_option,
                "conversionRules": conversion_rules,
            },
        )

    def update_form(
        self,
        id_site: SiteId,
        id_form: FormId,
        name: str,
        description: str = "",
        match_form_rules: str = "",
        match_page_rules: str = "",
        conversion_rule_option: str = "",
        conversion_rules: str = "",
    ):
        return self._call(
            "updateForm",
            {"idSite": id_site, "idForm": id_form, "name": name},
            {
                "description": description,
                "matchFormRules": match_form_rules,
                "matchPageRules": match_page_rules,
                "conversionRuleOption": conversion_rule_option,
                "conversionRules": conversion_rules,
            },
        )

    def get_form(self, id_site: SiteId, id_form: FormId):
        return self._call("getForm", {"idSite": id_site, "idForm": id_form})

    def get_forms(self, id_site: SiteId):
        return self._call("getForms", {"idSite": id_site})

    def get_forms_by_statuses(self, id_site: SiteId, statuses: Union[str, Sequence[str]]):
        return self._call("getFormsByStatuses", {"idSite": id_site, "statuses": statuses})

    def delete_form(self, id_site: SiteId, id_form: FormId):
        return self._call("deleteForm", {"idSite": id_site, "idForm": id_form})

    def archive_form(self, id_site: SiteId, id_form: FormId):
        return self._call("archiveForm", {"idSite": id_site, "idForm": id_form})

    def get(
        self,
        id_site: Optional[SiteId],
        period: str,
        date: str,
        id_form: Optional[FormId] = None,
        segment: str = "",
        columns: Columns = "",
    ):
        """Get form metrics, for one form or all forms of the site."""
        return self._report(
            "get", id_site, period, date,
            {"idForm": id_form, "segment": segment, "columns": columns},
        )

    def get_entry_fields(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getEntryFields", id_site, period, date, id_form, segment)

    def get_drop_off_fields(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getDropOffFields", id_site, period, date, id_form, segment)

    def get_page_urls(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getPageUrls", id_site, period, date, id_form, segment)

    def get_field_timings(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getFieldTimings", id_site, period, date, id_form, segment)

    def get_field_size(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getFieldSize", id_site, period, date, id_form, segment)

    def get_uneeded_fields(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        """Get fields that are rarely filled in."""
        return self._form_report("getUneededFields", id_site, period, date, id_form, segment)

    def get_most_used_fields(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getMostUsedFields", id_site, period, date, id_form, segment)

    def get_field_corrections(
        self, id_site: Optional[SiteId], period: str, date: str, id_form: FormId, segment: str = ""
    ):
        return self._form_report("getFieldCorrections", id_site, period, date, id_form, segment)

    def update_form_field_display_name(
        self, id_site: SiteId, id_form: FormId, fields: Mapping[str, str]
    ):
        """Rename fields in reports; ``fields`` maps field name to display name."""
        return self._call(
            "updateFormFieldDisplayName",
            {"idSite": id_site, "idForm": id_form, "fields": dict(fields)},
        )

    def get_counters(self, id_site: SiteId, last_minutes: Union[int, str], segment: str = ""):
        return self._call(
            "getCounters", {"idSite": id_site, "lastMinutes": last_minutes}, {"segment": segment}
        )

    def get_current_most_popular_forms(
        self,
        id_site: SiteId,
        last_minutes: Union[int, str],
        segment: str = "",
        filter_limit: Optional[int] = None,
    ):
        return self._call(
            "getCurrentMostPopularForms",
            {"idSite": id_site, "lastMinutes": last_minutes},
            {"segment": segment, "filter_limit": filter_limit},
        )

    def get_auto_creation_settings(self, id_site: SiteId):
        return self._call("getAutoCreationSettings", {"idSite": id_site})

    def get_available_statuses(self):
        return self._call("getAvailableStatuses")

    def get_available_form_rules(self):
        return self._call("getAvailableFormRules")

    def get_available_page_rules(self):
        return self._call("getAvailablePageRules")

    def get_available_conversion_rule_options(self):
        return self._call("getAvailableConversionRuleOptions")
