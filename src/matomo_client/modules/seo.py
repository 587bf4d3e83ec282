"""
SEO API.
"""

from matomo_client.modules.base import ModuleBase


class SeoModule(ModuleBase):
    """Façade for the ``SEO`` namespace."""

    namespace = "SEO"

    def get_rank(self, url: str):
        """Get SEO rank metrics for a URL."""
        return self._call("getRank", {"url": url})
