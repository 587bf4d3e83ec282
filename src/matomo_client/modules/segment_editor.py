"""
SegmentEditor API.

Stored segment definitions.
"""

from typing import Optional, Union

from matomo_client.modules.base import Flag, ModuleBase, SiteId

SegmentId = Union[int, str]


class SegmentEditorModule(ModuleBase):
    """Façade for the ``SegmentEditor`` namespace."""

    namespace = "SegmentEditor"

    def is_user_can_add_new_segment(self, id_site: Optional[SiteId] = None):
        return self._call("isUserCanAddNewSegment", optional={"idSite": id_site})

    def delete(self, id_segment: SegmentId):
        return self._call("delete", {"idSegment": id_segment})

    def update(
        self,
        id_segment: SegmentId,
        name: str,
        definition: str,
        id_site: Optional[SiteId] = None,
        auto_archive: Flag = None,
        enabled_all_users: Flag = None,
    ):
        """Replace a stored segment's name and definition."""
        return self._call(
            "update",
            {"idSegment": id_segment, "name": name, "definition": definition},
            {
                "idSite": id_site,
                "autoArchive": auto_archive,
                "enabledAllUsers": enabled_all_users,
            },
        )

    def add(
        self,
        name: str,
        definition: str,
        id_site: Optional[SiteId] = None,
        auto_archive: Flag = None,
        enabled_all_users: Flag = None,
    ):
        """
        Store a new segment.

        Args:
            name: Display name
            definition: Segment expression, e.g. ``browserCode==FF``
            id_site: Site the segment belongs to, all sites when omitted
            auto_archive: Pre-process the segment in the archiver
            enabled_all_users: Share the segment with every user
        """
        return self._call(
            "add",
            {"name": name, "definition": definition},
            {
                "idSite": id_site,
                "autoArchive": auto_archive,
                "enabledAllUsers": enabled_all_users,
            },
        )

    def get(self, id_segment: SegmentId):
        return self._call("get", {"idSegment": id_segment})

    def get_all(self, id_site: Optional[SiteId] = None):
        """Get the segments visible to the current user."""
        return self._call("getAll", optional={"idSite": id_site})
