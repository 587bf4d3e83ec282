"""
Login API.
"""

from matomo_client.modules.base import ModuleBase


class LoginModule(ModuleBase):
    """Façade for the ``Login`` namespace."""

    namespace = "Login"

    def unblock_brute_force_ips(self):
        """Lift every brute force block on login attempts."""
        return self._call("unblockBruteForceIPs")
