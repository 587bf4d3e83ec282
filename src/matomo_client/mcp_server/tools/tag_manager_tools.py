"""Tools: TagManager reference data, containers and container versions."""

from typing import Optional, Union

from mcp.server.fastmcp import FastMCP

from matomo_client.mcp_server.context import ServerContext
from matomo_client.mcp_server.tools import READ_ONLY, WRITE, annotations, run_tool

VersionId = Union[str, int]


def register(mcp: FastMCP, ctx: ServerContext) -> None:
    """Register TagManager tools."""
    tags = ctx.client.tag_manager

    # Reference data

    @mcp.tool(
        name="matomo_tag_manager_get_available_contexts",
        description="Get all available contexts in Matomo Tag Manager",
        annotations=annotations("Get Available Contexts", READ_ONLY),
    )
    async def get_available_contexts() -> str:
        return await run_tool(
            "matomo_tag_manager_get_available_contexts", tags.get_available_contexts()
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_environments",
        description="Get all available environments in Matomo Tag Manager",
        annotations=annotations("Get Available Environments", READ_ONLY),
    )
    async def get_available_environments() -> str:
        return await run_tool(
            "matomo_tag_manager_get_available_environments", tags.get_available_environments()
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_environments_with_publish_capability",
        description="Get all available environments with publish capability for a site",
        annotations=annotations("Get Publishable Environments", READ_ONLY),
    )
    async def get_available_environments_with_publish_capability(idSite: int) -> str:
        """
        Args:
            idSite: Site ID to check for environments
        """
        return await run_tool(
            "matomo_tag_manager_get_available_environments_with_publish_capability",
            tags.get_available_environments_with_publish_capability(idSite),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_tag_fire_limits",
        description="Get all available tag fire limits in Matomo Tag Manager",
        annotations=annotations("Get Tag Fire Limits", READ_ONLY),
    )
    async def get_available_tag_fire_limits() -> str:
        return await run_tool(
            "matomo_tag_manager_get_available_tag_fire_limits",
            tags.get_available_tag_fire_limits(),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_comparisons",
        description="Get all available comparisons in Matomo Tag Manager",
        annotations=annotations("Get Available Comparisons", READ_ONLY),
    )
    async def get_available_comparisons() -> str:
        return await run_tool(
            "matomo_tag_manager_get_available_comparisons", tags.get_available_comparisons()
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_tag_types_in_context",
        description="Get all available tag types for a specific context",
        annotations=annotations("Get Tag Types", READ_ONLY),
    )
    async def get_available_tag_types_in_context(idContext: str) -> str:
        """
        Args:
            idContext: Context identifier, e.g. ``web``
        """
        return await run_tool(
            "matomo_tag_manager_get_available_tag_types_in_context",
            tags.get_available_tag_types_in_context(idContext),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_trigger_types_in_context",
        description="Get all available trigger types for a specific context",
        annotations=annotations("Get Trigger Types", READ_ONLY),
    )
    async def get_available_trigger_types_in_context(idContext: str) -> str:
        """
        Args:
            idContext: Context identifier
        """
        return await run_tool(
            "matomo_tag_manager_get_available_trigger_types_in_context",
            tags.get_available_trigger_types_in_context(idContext),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_available_variable_types_in_context",
        description="Get all available variable types for a specific context",
        annotations=annotations("Get Variable Types", READ_ONLY),
    )
    async def get_available_variable_types_in_context(idContext: str) -> str:
        """
        Args:
            idContext: Context identifier
        """
        return await run_tool(
            "matomo_tag_manager_get_available_variable_types_in_context",
            tags.get_available_variable_types_in_context(idContext),
        )

    # Installation

    @mcp.tool(
        name="matomo_tag_manager_get_container_embed_code",
        description="Get the embed code for a container",
        annotations=annotations("Get Container Embed Code", READ_ONLY),
    )
    async def get_container_embed_code(idSite: int, idContainer: str, environment: str) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            environment: Environment, e.g. live, dev or staging
        """
        return await run_tool(
            "matomo_tag_manager_get_container_embed_code",
            tags.get_container_embed_code(idSite, idContainer, environment),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_container_installation_instructions",
        description="Get installation instructions for a container",
        annotations=annotations("Get Container Install Instructions", READ_ONLY),
    )
    async def get_container_installation_instructions(
        idSite: int,
        idContainer: str,
        environment: str,
        jsFramework: Optional[str] = None,
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            environment: Environment, e.g. live
            jsFramework: JavaScript framework
        """
        return await run_tool(
            "matomo_tag_manager_get_container_installation_instructions",
            tags.get_container_install_instructions(
                idSite, idContainer, environment, jsFramework or ""
            ),
        )

    # Containers

    @mcp.tool(
        name="matomo_tag_manager_create_default_container_for_site",
        description="Create a default container for a site",
        annotations=annotations("Create Default Container", WRITE),
    )
    async def create_default_container_for_site(idSite: int) -> str:
        """
        Args:
            idSite: Site ID
        """
        return await run_tool(
            "matomo_tag_manager_create_default_container_for_site",
            tags.create_default_container_for_site(idSite),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_containers",
        description="Get all containers for a site",
        annotations=annotations("Get Containers", READ_ONLY),
    )
    async def get_containers(idSite: int) -> str:
        """
        Args:
            idSite: Site ID
        """
        return await run_tool("matomo_tag_manager_get_containers", tags.get_containers(idSite))

    @mcp.tool(
        name="matomo_tag_manager_get_container",
        description="Get a specific container",
        annotations=annotations("Get Container", READ_ONLY),
    )
    async def get_container(idSite: int, idContainer: str) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
        """
        return await run_tool(
            "matomo_tag_manager_get_container", tags.get_container(idSite, idContainer)
        )

    # Versions

    @mcp.tool(
        name="matomo_tag_manager_get_container_versions",
        description="Get all versions for a container",
        annotations=annotations("Get Container Versions", READ_ONLY),
    )
    async def get_container_versions(idSite: int, idContainer: str) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
        """
        return await run_tool(
            "matomo_tag_manager_get_container_versions",
            tags.get_container_versions(idSite, idContainer),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_container_version",
        description="Get a specific container version",
        annotations=annotations("Get Container Version", READ_ONLY),
    )
    async def get_container_version(
        idSite: int, idContainer: str, idContainerVersion: VersionId
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            idContainerVersion: Container version ID
        """
        return await run_tool(
            "matomo_tag_manager_get_container_version",
            tags.get_container_version(idSite, idContainer, idContainerVersion),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_container_tags",
        description="Get all tags for a container version",
        annotations=annotations("Get Container Tags", READ_ONLY),
    )
    async def get_container_tags(
        idSite: int, idContainer: str, idContainerVersion: VersionId
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            idContainerVersion: Container version ID
        """
        return await run_tool(
            "matomo_tag_manager_get_container_tags",
            tags.get_container_tags(idSite, idContainer, idContainerVersion),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_container_triggers",
        description="Get all triggers for a container version",
        annotations=annotations("Get Container Triggers", READ_ONLY),
    )
    async def get_container_triggers(
        idSite: int, idContainer: str, idContainerVersion: VersionId
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            idContainerVersion: Container version ID
        """
        return await run_tool(
            "matomo_tag_manager_get_container_triggers",
            tags.get_container_triggers(idSite, idContainer, idContainerVersion),
        )

    @mcp.tool(
        name="matomo_tag_manager_get_container_variables",
        description="Get all variables for a container version",
        annotations=annotations("Get Container Variables", READ_ONLY),
    )
    async def get_container_variables(
        idSite: int, idContainer: str, idContainerVersion: VersionId
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            idContainerVersion: Container version ID
        """
        return await run_tool(
            "matomo_tag_manager_get_container_variables",
            tags.get_container_variables(idSite, idContainer, idContainerVersion),
        )

    # Preview and export

    @mcp.tool(
        name="matomo_tag_manager_enable_preview_mode",
        description="Enable preview mode for a container",
        annotations=annotations("Enable Preview Mode", {**WRITE, "idempotentHint": True}),
    )
    async def enable_preview_mode(
        idSite: int, idContainer: str, idContainerVersion: Optional[str] = None
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            idContainerVersion: Container version ID; the draft when omitted
        """
        return await run_tool(
            "matomo_tag_manager_enable_preview_mode",
            tags.enable_preview_mode(idSite, idContainer, idContainerVersion or ""),
        )

    @mcp.tool(
        name="matomo_tag_manager_disable_preview_mode",
        description="Disable preview mode for a container",
        annotations=annotations("Disable Preview Mode", {**WRITE, "idempotentHint": True}),
    )
    async def disable_preview_mode(idSite: int, idContainer: str) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
        """
        return await run_tool(
            "matomo_tag_manager_disable_preview_mode",
            tags.disable_preview_mode(idSite, idContainer),
        )

    @mcp.tool(
        name="matomo_tag_manager_export_container_version",
        description="Export a container version",
        annotations=annotations("Export Container Version", READ_ONLY),
    )
    async def export_container_version(
        idSite: int, idContainer: str, idContainerVersion: Optional[str] = None
    ) -> str:
        """
        Args:
            idSite: Site ID
            idContainer: Container ID
            idContainerVersion: Container version ID (if empty, exports draft version)
        """
        return await run_tool(
            "matomo_tag_manager_export_container_version",
            tags.export_container_version(idSite, idContainer, idContainerVersion or ""),
        )
