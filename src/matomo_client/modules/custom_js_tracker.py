"""
CustomJsTracker API.
"""

from matomo_client.modules.base import ModuleBase


class CustomJsTrackerModule(ModuleBase):
    """Façade for the ``CustomJsTracker`` namespace."""

    namespace = "CustomJsTracker"

    def does_include_plugin_trackers_automatically(self):
        """Check whether plugin trackers are bundled into matomo.js automatically."""
        return self._call("doesIncludePluginTrackersAutomatically")
