"""
Tour API.

Onboarding challenges shown to Matomo super users.
"""

from matomo_client.modules.base import ModuleBase


class TourModule(ModuleBase):
    """Façade for the ``Tour`` namespace."""

    namespace = "Tour"

    def get_challenges(self):
        """Get all onboarding challenges and whether they are completed."""
        return self._call("getChallenges")

    def skip_challenge(self, id: str):
        """
        Skip a challenge.

        Args:
            id: Challenge ID, as returned by ``get_challenges``
        """
        return self._call("skipChallenge", {"id": id})

    def get_level(self):
        """Get the current user's onboarding level."""
        return self._call("getLevel")
