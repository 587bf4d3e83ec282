"""
TagManager API.

Containers, container versions, tags, triggers and variables of Matomo
Tag Manager. Most calls address a container version through
``(id_site, id_container, id_container_version)``.
"""

from typing import Any, Dict, Optional, Sequence, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

VersionId = Union[int, str]
Parameters = Optional[Dict[str, Any]]
Records = Optional[Sequence[Dict[str, Any]]]


class TagManagerModule(ModuleBase):
    """Façade for the ``TagManager`` namespace."""

    namespace = "TagManager"

    @staticmethod
    def _version(id_site: SiteId, id_container: str, id_container_version: VersionId) -> dict:
        return {
            "idSite": id_site,
            "idContainer": id_container,
            "idContainerVersion": id_container_version,
        }

    # Metadata

    def get_available_contexts(self):
        return self._call("getAvailableContexts")

    def get_available_environments(self):
        return self._call("getAvailableEnvironments")

    def get_available_environments_with_publish_capability(self, id_site: SiteId):
        return self._call("getAvailableEnvironmentsWithPublishCapability", {"idSite": id_site})

    def get_available_tag_fire_limits(self):
        return self._call("getAvailableTagFireLimits")

    def get_available_comparisons(self):
        return self._call("getAvailableComparisons")

    def get_available_tag_types_in_context(self, id_context: str):
        return self._call("getAvailableTagTypesInContext", {"idContext": id_context})

    def get_available_trigger_types_in_context(self, id_context: str):
        return self._call("getAvailableTriggerTypesInContext", {"idContext": id_context})

    def get_available_variable_types_in_context(self, id_context: str):
        return self._call("getAvailableVariableTypesInContext", {"idContext": id_context})

    # Installation

    def get_container_embed_code(self, id_site: SiteId, id_container: str, environment: str):
        """Get the HTML snippet that loads a container in one environment."""
        return self._call(
            "getContainerEmbedCode",
            {"idSite": id_site, "idContainer": id_container, "environment": environment},
        )

    def get_container_install_instructions(
        self,
        id_site: SiteId,
        id_container: str,
        environment: str,
        js_framework: str = "",
    ):
        return self._call(
            "getContainerInstallInstructions",
            {"idSite": id_site, "idContainer": id_container, "environment": environment},
            {"jsFramework": js_framework},
        )

    # Tags

    def get_container_tags(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId
    ):
        return self._call(
            "getContainerTags", self._version(id_site, id_container, id_container_version)
        )

    def add_container_tag(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        type: str,
        name: str,
        parameters: Parameters = None,
        fire_trigger_ids: Optional[Sequence[str]] = None,
        block_trigger_ids: Optional[Sequence[str]] = None,
        fire_limit: str = "",
        fire_delay="",
        priority="",
        start_date: str = "",
        end_date: str = "",
        description: str = "",
        status: str = "",
    ):
        """
        Add a tag to a container version.

        Args:
            type: Tag type ID, e.g. ``Matomo`` or ``CustomHtml``
            parameters: Tag-type specific settings
            fire_trigger_ids: Triggers that fire the tag
            block_trigger_ids: Triggers that block the tag
        """
        params = self._version(id_site, id_container, id_container_version)
        params.update({"type": type, "name": name})
        return self._call(
            "addContainerTag",
            params,
            {
                "parameters": parameters,
                "fireTriggerIds": list(fire_trigger_ids or []),
                "blockTriggerIds": list(block_trigger_ids or []),
                "fireLimit": fire_limit,
                "fireDelay": fire_delay,
                "priority": priority,
                "startDate": start_date,
                "endDate": end_date,
                "description": description,
                "status": status,
            },
        )

    def update_container_tag(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        id_tag,
        name: str,
        parameters: Parameters = None,
        fire_trigger_ids: Optional[Sequence[str]] = None,
        block_trigger_ids: Optional[Sequence[str]] = None,
        fire_limit: str = "",
        fire_delay="",
        priority="",
        start_date: str = "",
        end_date: str = "",
        description: str = "",
        status: str = "",
    ):
        params = self._version(id_site, id_container, id_container_version)
        params.update({"idTag": id_tag, "name": name})
        return self._call(
            "updateContainerTag",
            params,
            {
                "parameters": parameters,
                "fireTriggerIds": list(fire_trigger_ids or []),
                "blockTriggerIds": list(block_trigger_ids or []),
                "fireLimit": fire_limit,
                "fireDelay": fire_delay,
                "priority": priority,
                "startDate": start_date,
                "endDate": end_date,
                "description": description,
                "status": status,
            },
        )

    def _tag(self, action, id_site, id_container, id_container_version, id_tag):
        params = self._version(id_site, id_container, id_container_version)
        params["idTag"] = id_tag
        return self._call(action, params)

    def delete_container_tag(self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_tag):
        return self._tag("deleteContainerTag", id_site, id_container, id_container_version, id_tag)

    def pause_container_tag(self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_tag):
        return self._tag("pauseContainerTag", id_site, id_container, id_container_version, id_tag)

    def resume_container_tag(self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_tag):
        return self._tag("resumeContainerTag", id_site, id_container, id_container_version, id_tag)

    def get_container_tag(self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_tag):
        return self._tag("getContainerTag", id_site, id_container, id_container_version, id_tag)

    # Triggers

    def get_container_trigger_references(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_trigger
    ):
        """Get the tags that reference a trigger."""
        params = self._version(id_site, id_container, id_container_version)
        params["idTrigger"] = id_trigger
        return self._call("getContainerTriggerReferences", params)

    def get_container_triggers(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId
    ):
        return self._call(
            "getContainerTriggers", self._version(id_site, id_container, id_container_version)
        )

    def add_container_trigger(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        type: str,
        name: str,
        parameters: Parameters = None,
        conditions: Records = None,
        description: str = "",
    ):
        """
        Add a trigger to a container version.

        Args:
            conditions: e.g. ``[{"actual": "PageUrl", "comparison": "contains", "expected": "/shop"}]``
        """
        params = self._version(id_site, id_container, id_container_version)
        params.update({"type": type, "name": name})
        return self._call(
            "addContainerTrigger",
            params,
            {
                "parameters": parameters,
                "conditions": list(conditions or []),
                "description": description,
            },
        )

    def update_container_trigger(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        id_trigger,
        name: str,
        parameters: Parameters = None,
        conditions: Records = None,
        description: str = "",
    ):
        params = self._version(id_site, id_container, id_container_version)
        params.update({"idTrigger": id_trigger, "name": name})
        return self._call(
            "updateContainerTrigger",
            params,
            {
                "parameters": parameters,
                "conditions": list(conditions or []),
                "description": description,
            },
        )

    def delete_container_trigger(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_trigger
    ):
        params = self._version(id_site, id_container, id_container_version)
        params["idTrigger"] = id_trigger
        return self._call("deleteContainerTrigger", params)

    def get_container_trigger(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_trigger
    ):
        params = self._version(id_site, id_container, id_container_version)
        params["idTrigger"] = id_trigger
        return self._call("getContainerTrigger", params)

    # Variables

    def get_container_variable_references(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_variable
    ):
        params = self._version(id_site, id_container, id_container_version)
        params["idVariable"] = id_variable
        return self._call("getContainerVariableReferences", params)

    def get_container_variables(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId
    ):
        return self._call(
            "getContainerVariables", self._version(id_site, id_container, id_container_version)
        )

    def get_available_container_variables(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId
    ):
        """Get the pre-configured and custom variables usable in a container version."""
        return self._call(
            "getAvailableContainerVariables",
            self._version(id_site, id_container, id_container_version),
        )

    def add_container_variable(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        type: str,
        name: str,
        parameters: Parameters = None,
        default_value: str = "",
        lookup_table: Records = None,
        description: str = "",
    ):
        params = self._version(id_site, id_container, id_container_version)
        params.update({"type": type, "name": name})
        return self._call(
            "addContainerVariable",
            params,
            {
                "parameters": parameters,
                "defaultValue": default_value,
                "lookupTable": list(lookup_table or []),
                "description": description,
            },
        )

    def update_container_variable(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        id_variable,
        name: str,
        parameters: Parameters = None,
        default_value: str = "",
        lookup_table: Records = None,
        description: str = "",
    ):
        params = self._version(id_site, id_container, id_container_version)
        params.update({"idVariable": id_variable, "name": name})
        return self._call(
            "updateContainerVariable",
            params,
            {
                "parameters": parameters,
                "defaultValue": default_value,
                "lookupTable": list(lookup_table or []),
                "description": description,
            },
        )

    def delete_container_variable(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_variable
    ):
        params = self._version(id_site, id_container, id_container_version)
        params["idVariable"] = id_variable
        return self._call("deleteContainerVariable", params)

    def get_container_variable(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId, id_variable
    ):
        params = self._version(id_site, id_container, id_container_version)
        params["idVariable"] = id_variable
        return self._call("getContainerVariable", params)

    # Containers

    def create_default_container_for_site(self, id_site: SiteId):
        return self._call("createDefaultContainerForSite", {"idSite": id_site})

    def get_containers(self, id_site: SiteId):
        return self._call("getContainers", {"idSite": id_site})

    def get_container(self, id_site: SiteId, id_container: str):
        return self._call("getContainer", {"idSite": id_site, "idContainer": id_container})

    def add_container(
        self,
        id_site: SiteId,
        context: str,
        name: str,
        description: str = "",
        ignore_gtm_data_layer: Flag = None,
        is_tag_fire_limit_allowed_in_preview_mode: Flag = None,
        actively_sync_gtm_data_layer: Flag = None,
    ):
        """
        Create a container.

        Args:
            context: Container context, usually ``web``
        """
        return self._call(
            "addContainer",
            {"idSite": id_site, "context": context, "name": name},
            {
                "description": description,
                "ignoreGtmDataLayer": ignore_gtm_data_layer,
                "isTagFireLimitAllowedInPreviewMode": is_tag_fire_limit_allowed_in_preview_mode,
                "activelySyncGtmDataLayer": actively_sync_gtm_data_layer,
            },
        )

    def update_container(
        self,
        id_site: SiteId,
        id_container: str,
        name: str,
        description: str = "",
        ignore_gtm_data_layer: Flag = "0",
        is_tag_fire_limit_allowed_in_preview_mode: Flag = "0",
        actively_sync_gtm_data_layer: Flag = "0",
    ):
        """Update a container; the three GTM/preview flags default to ``0``."""
        return self._call(
            "updateContainer",
            {"idSite": id_site, "idContainer": id_container, "name": name},
            {
                "description": description,
                "ignoreGtmDataLayer": ignore_gtm_data_layer,
                "isTagFireLimitAllowedInPreviewMode": is_tag_fire_limit_allowed_in_preview_mode,
                "activelySyncGtmDataLayer": actively_sync_gtm_data_layer,
            },
        )

    def delete_container(self, id_site: SiteId, id_container: str):
        return self._call("deleteContainer", {"idSite": id_site, "idContainer": id_container})

    # Versions

    def create_container_version(
        self,
        id_site: SiteId,
        id_container: str,
        name: str,
        description: str = "",
        id_container_version="",
    ):
        """Snapshot the draft (or ``id_container_version``) into a new version."""
        return self._call(
            "createContainerVersion",
            {"idSite": id_site, "idContainer": id_container, "name": name},
            {"description": description, "idContainerVersion": id_container_version},
        )

    def update_container_version(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        name: str,
        description: str = "",
    ):
        params = self._version(id_site, id_container, id_container_version)
        params["name"] = name
        return self._call("updateContainerVersion", params, {"description": description})

    def get_container_versions(self, id_site: SiteId, id_container: str):
        return self._call(
            "getContainerVersions", {"idSite": id_site, "idContainer": id_container}
        )

    def get_container_version(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId
    ):
        return self._call(
            "getContainerVersion", self._version(id_site, id_container, id_container_version)
        )

    def delete_container_version(
        self, id_site: SiteId, id_container: str, id_container_version: VersionId
    ):
        return self._call(
            "deleteContainerVersion", self._version(id_site, id_container, id_container_version)
        )

    def publish_container_version(
        self,
        id_site: SiteId,
        id_container: str,
        id_container_version: VersionId,
        environment: str,
    ):
        """Publish a version to an environment such as ``live``."""
        params = self._version(id_site, id_container, id_container_version)
        params["environment"] = environment
        return self._call("publishContainerVersion", params)

    # Preview and debugging

    def enable_preview_mode(self, id_site: SiteId, id_container: str, id_container_version=""):
        return self._call(
            "enablePreviewMode",
            {"idSite": id_site, "idContainer": id_container},
            {"idContainerVersion": id_container_version},
        )

    def disable_preview_mode(self, id_site: SiteId, id_container: str):
        return self._call(
            "disablePreviewMode", {"idSite": id_site, "idContainer": id_container}
        )

    def change_debug_url(self, id_site: SiteId, url: str):
        return self._call("changeDebugUrl", {"idSite": id_site, "url": url})

    # Import and export

    def export_container_version(
        self, id_site: SiteId, id_container: str, id_container_version=""
    ):
        """Export a version (the draft when no version is given) as JSON."""
        return self._call(
            "exportContainerVersion",
            {"idSite": id_site, "idContainer": id_container},
            {"idContainerVersion": id_container_version},
        )

    def import_container_version(
        self,
        exported_container_version: str,
        id_site: SiteId,
        id_container: str,
        backup_name: str = "",
    ):
        return self._call(
            "importContainerVersion",
            {
                "exportedContainerVersion": exported_container_version,
                "idSite": id_site,
                "idContainer": id_container,
            },
            {"backupName": backup_name},
        )
