"""
Annotations API.

Notes attached to dates on evolution graphs.
"""

from typing import Optional, Union

from matomo_client.modules.base import ModuleBase, SiteId

NoteId = Union[int, str]


class AnnotationsModule(ModuleBase):
    """Façade for the ``Annotations`` namespace."""

    namespace = "Annotations"

    def add(self, id_site: SiteId, date: str, note: str, starred: bool = False):
        """Create an annotation; ``starred`` is always sent."""
        return self._call(
            "add", {"idSite": id_site, "date": date, "note": note, "starred": starred}
        )

    def save(
        self,
        id_site: SiteId,
        id_note: NoteId,
        date: Optional[str] = None,
        note: Optional[str] = None,
        starred: Optional[bool] = None,
    ):
        """
        Update an annotation.

        Fields left at None are not changed. An empty ``note`` is sent as
        given.
        """
        params = {"idSite": id_site, "idNote": id_note}
        for key, value in (("date", date), ("note", note), ("starred", starred)):
            if value is not None:
                params[key] = value
        return self._call("save", params)

    def delete(self, id_site: SiteId, id_note: NoteId):
        return self._call("delete", {"idSite": id_site, "idNote": id_note})

    def delete_all(self, id_site: SiteId):
        """Delete every annotation of a site."""
        return self._call("deleteAll", {"idSite": id_site})

    def get(self, id_site: SiteId, id_note: NoteId):
        return self._call("get", {"idSite": id_site, "idNote": id_note})

    def get_all(
        self,
        id_site: SiteId,
        date: str = "",
        period: str = "day",
        last_n: Optional[int] = None,
    ):
        """Get annotations for a period; ``period`` is always sent."""
        return self._call(
            "getAll",
            {"idSite": id_site, "period": period},
            {"date": date, "lastN": last_n},
        )

    def get_annotation_count_for_dates(
        self,
        id_site: SiteId,
        date: str,
        period: str,
        last_n: Optional[int] = None,
        get_annotation_text: bool = False,
    ):
        return self._call(
            "getAnnotationCountForDates",
            {
                "idSite": id_site,
                "date": date,
                "period": period,
                "getAnnotationText": get_annotation_text,
            },
            {"lastN": last_n},
        )
