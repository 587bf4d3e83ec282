"""
TwoFactorAuth API.
"""

from matomo_client.modules.base import ModuleBase


class TwoFactorAuthModule(ModuleBase):
    """Façade for the ``TwoFactorAuth`` namespace."""

    namespace = "TwoFactorAuth"

    def reset_two_factor_auth(self, user_login: str, password_confirmation: str = ""):
        """Disable two-factor authentication for a user."""
        return self._call(
            "resetTwoFactorAuth",
            {"userLogin": user_login},
            {"passwordConfirmation": password_confirmation},
        )
