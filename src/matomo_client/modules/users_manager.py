"""
UsersManager API.

User accounts, their roles on each site, capabilities and app tokens.
"""

from typing import Optional, Sequence, Union

from matomo_client.modules.base import ModuleBase, SiteId

Logins = Union[str, Sequence[str]]
SiteIds = Union[SiteId, Sequence[SiteId]]
Capabilities = Union[str, Sequence[str]]


class UsersManagerModule(ModuleBase):
    """Façade for the ``UsersManager`` namespace."""

    namespace = "UsersManager"

    def get_available_roles(self):
        return self._call("getAvailableRoles")

    def get_available_capabilities(self):
        return self._call("getAvailableCapabilities")

    def set_user_preference(self, user_login: str, preference_name: str, preference_value=""):
        return self._call(
            "setUserPreference",
            {"userLogin": user_login, "preferenceName": preference_name},
            {"preferenceValue": preference_value},
        )

    def get_user_preference(self, preference_name: str, user_login: str = ""):
        """Get a preference of a user, the current user when no login is given."""
        return self._call(
            "getUserPreference",
            {"preferenceName": preference_name},
            {"userLogin": user_login},
        )

    def get_users_plus_role(
        self,
        id_site: SiteId,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filter_search: str = "",
        filter_access: str = "",
        filter_status: str = "",
    ):
        """
        Get the users of a site along with their role.

        Args:
            id_site: Site whose users are listed
            limit: Maximum number of users
            offset: Offset of the first user returned
            filter_search: Text matched against login and email
            filter_access: Only users with this role
            filter_status: ``active``, ``pending`` or ``expired``
        """
        return self._call(
            "getUsersPlusRole",
            {"idSite": id_site},
            {
                "limit": limit,
                "offset": offset,
                "filter_search": filter_search,
                "filter_access": filter_access,
                "filter_status": filter_status,
            },
        )

    def get_users(self, user_logins: Logins = ""):
        return self._call("getUsers", optional={"userLogins": user_logins})

    def get_users_login(self):
        return self._call("getUsersLogin")

    def get_users_sites_from_access(self, access: str):
        return self._call("getUsersSitesFromAccess", {"access": access})

    def get_users_access_from_site(self, id_site: SiteId):
        return self._call("getUsersAccessFromSite", {"idSite": id_site})

    def get_users_with_site_access(self, id_site: SiteId, access: str):
        return self._call("getUsersWithSiteAccess", {"idSite": id_site, "access": access})

    def get_sites_access_from_user(self, user_login: str):
        return self._call("getSitesAccessFromUser", {"userLogin": user_login})

    def get_sites_access_for_user(
        self,
        user_login: str,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        filter_search: str = "",
        filter_access: str = "",
    ):
        """Get a user's access level on each site, paginated."""
        return self._call(
            "getSitesAccessForUser",
            {"userLogin": user_login},
            {
                "limit": limit,
                "offset": offset,
                "filter_search": filter_search,
                "filter_access": filter_access,
            },
        )

    def get_user(self, user_login: str):
        return self._call("getUser", {"userLogin": user_login})

    def get_user_by_email(self, user_email: str):
        return self._call("getUserByEmail", {"userEmail": user_email})

    def add_user(
        self,
        user_login: str,
        password: str,
        email: str,
        initial_id_site: Optional[SiteId] = None,
        password_confirmation: str = "",
    ):
        """
        Create a user.

        Args:
            user_login: Login of the new user
            password: Password of the new user
            email: Email of the new user
            initial_id_site: Site the user gets view access to
            password_confirmation: Password of the current user
        """
        return self._call(
            "addUser",
            {"userLogin": user_login, "password": password, "email": email},
            {"initialIdSite": initial_id_site, "passwordConfirmation": password_confirmation},
        )

    def invite_user(
        self,
        user_login: str,
        email: str,
        initial_id_site: Optional[SiteId] = None,
        expiry_in_days: Optional[int] = None,
        password_confirmation: str = "",
    ):
        """Invite a user by email; the account is pending until accepted."""
        return self._call(
            "inviteUser",
            {"userLogin": user_login, "email": email},
            {
                "initialIdSite": initial_id_site,
                "expiryInDays": expiry_in_days,
                "passwordConfirmation": password_confirmation,
            },
        )

    def set_super_user_access(
        self, user_login: str, has_super_user_access: bool, password_confirmation: str = ""
    ):
        return self._call(
            "setSuperUserAccess",
            {"userLogin": user_login, "hasSuperUserAccess": has_super_user_access},
            {"passwordConfirmation": password_confirmation},
        )

    def has_super_user_access(self):
        return self._call("hasSuperUserAccess")

    def get_users_having_super_user_access(self):
        return self._call("getUsersHavingSuperUserAccess")

    def update_user(
        self,
        user_login: str,
        password: str = "",
        email: str = "",
        password_confirmation: str = "",
    ):
        """Change a user's password or email; empty fields are left unchanged."""
        return self._call(
            "updateUser",
            {"userLogin": user_login},
            {
                "password": password,
                "email": email,
                "passwordConfirmation": password_confirmation,
            },
        )

    def delete_user(self, user_login: str, password_confirmation: str = ""):
        return self._call(
            "deleteUser",
            {"userLogin": user_login},
            {"passwordConfirmation": password_confirmation},
        )

    def user_exists(self, user_login: str):
        return self._call("userExists", {"userLogin": user_login})

    def user_email_exists(self, user_email: str):
        return self._call("userEmailExists", {"userEmail": user_email})

    def get_user_login_from_user_email(self, user_email: str):
        return self._call("getUserLoginFromUserEmail", {"userEmail": user_email})

    def set_user_access(
        self, user_login: str, access: str, id_sites: SiteIds, password_confirmation: str = ""
    ):
        """
        Set a user's role on one or more sites.

        Args:
            user_login: User to change
            access: ``noaccess``, ``view``, ``write`` or ``admin``
            id_sites: One site ID or several
            password_confirmation: Password of the current user
        """
        return self._call(
            "setUserAccess",
            {"userLogin": user_login, "access": access, "idSites": id_sites},
            {"passwordConfirmation": password_confirmation},
        )

    def add_capabilities(self, user_login: str, capabilities: Capabilities, id_sites: SiteIds):
        return self._call(
            "addCapabilities",
            {"userLogin": user_login, "capabilities": capabilities, "idSites": id_sites},
        )

    def remove_capabilities(self, user_login: str, capabilities: Capabilities, id_sites: SiteIds):
        return self._call(
            "removeCapabilities",
            {"userLogin": user_login, "capabilities": capabilities, "idSites": id_sites},
        )

    def create_app_specific_token_auth(
        self,
        user_login: str,
        password_confirmation: str,
        description: str,
        expire_date: str = "",
        expire_hours: Optional[int] = None,
    ):
        """Create a token_auth for one application, optionally expiring."""
        return self._call(
            "createAppSpecificTokenAuth",
            {
                "userLogin": user_login,
                "passwordConfirmation": password_confirmation,
                "description": description,
            },
            {"expireDate": expire_date, "expireHours": expire_hours},
        )

    def newsletter_signup(self):
        return self._call("newsletterSignup")

    def resend_invite(
        self, user_login: str, expiry_in_days: Optional[int] = None, password_confirmation: str = ""
    ):
        return self._call(
            "resendInvite",
            {"userLogin": user_login},
            {"expiryInDays": expiry_in_days, "passwordConfirmation": password_confirmation},
        )

    def generate_invite_link(
        self, user_login: str, expiry_in_days: Optional[int] = None, password_confirmation: str = ""
    ):
        return self._call(
            "generateInviteLink",
            {"userLogin": user_login},
            {"expiryInDays": expiry_in_days, "passwordConfirmation": password_confirmation},
        )
