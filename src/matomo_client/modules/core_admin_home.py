"""
CoreAdminHome API.

Tracking failures recorded by the tracker.
"""

from typing import Union

from matomo_client.modules.base import ModuleBase, SiteId


class CoreAdminHomeModule(ModuleBase):
    """Façade for the ``CoreAdminHome`` namespace."""

    namespace = "CoreAdminHome"

    def delete_all_tracking_failures(self):
        return self._call("deleteAllTrackingFailures")

    def delete_tracking_failure(self, id_site: SiteId, id_failure: Union[int, str]):
        return self._call("deleteTrackingFailure", {"idSite": id_site, "idFailure": id_failure})

    def get_tracking_failures(self):
        return self._call("getTrackingFailures")
