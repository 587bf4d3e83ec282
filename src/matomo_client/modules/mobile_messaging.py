"""
MobileMessaging API.

SMS provider settings and the phone numbers SMS reports go to.
"""

from typing import Any, Mapping, Optional

from matomo_client.modules.base import ModuleBase, unwrap_value


class MobileMessagingModule(ModuleBase):
    """Façade for the ``MobileMessaging`` namespace."""

    namespace = "MobileMessaging"

    def are_sms_api_credential_provided(self):
        return self._call("areSMSAPICredentialProvided", transform=unwrap_value)

    def get_sms_provider(self):
        return self._call("getSMSProvider", transform=unwrap_value)

    def set_sms_api_credential(
        self, provider: str, credentials: Optional[Mapping[str, Any]] = None
    ):
        """
        Configure the SMS provider.

        Args:
            provider: Provider name, e.g. ``Clockwork``
            credentials: Provider specific fields such as ``{"apiKey": ...}``
        """
        return self._call(
            "setSMSAPICredential",
            {"provider": provider},
            {"credentials": dict(credentials) if credentials else None},
        )

    def add_phone_number(self, phone_number: str):
        return self._call("addPhoneNumber", {"phoneNumber": phone_number})

    def resend_verification_code(self, phone_number: str):
        return self._call("resendVerificationCode", {"phoneNumber": phone_number})

    def get_credit_left(self):
        return self._call("getCreditLeft", transform=unwrap_value)

    def get_phone_numbers(self):
        return self._call("getPhoneNumbers")

    def remove_phone_number(self, phone_number: str):
        return self._call("removePhoneNumber", {"phoneNumber": phone_number})

    def validate_phone_number(self, phone_number: str, verification_code: str):
        return self._call(
            "validatePhoneNumber",
            {"phoneNumber": phone_number, "verificationCode": verification_code},
        )

    def delete_sms_api_credential(self):
        return self._call("deleteSMSAPICredential")

    def set_delegated_management(self, delegated_management: bool):
        return self._call("setDelegatedManagement", {"delegatedManagement": delegated_management})

    def get_delegated_management(self):
        return self._call("getDelegatedManagement", transform=unwrap_value)
