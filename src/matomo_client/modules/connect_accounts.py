"""
ConnectAccounts API.

Google Tag Manager account linking.
"""

import json
from typing import Any, Mapping, Sequence, Union

from matomo_client.modules.base import ModuleBase


class ConnectAccountsModule(ModuleBase):
    """Façade for the ``ConnectAccounts`` namespace."""

    namespace = "ConnectAccounts"

    def get_gtm_containers_list(self, account_id: str):
        return self._call("getGtmContainersList", {"accountId": account_id})

    def get_gtm_workspace_list(self, account_id: str, container_id: str):
        return self._call(
            "getGtmWorkspaceList", {"accountId": account_id, "containerId": container_id}
        )

    def create_matomo_tag(
        self,
        account_id: str,
        container_id: str,
        workspace_id: str,
        parent_info: Union[str, Mapping[str, Any], Sequence[Any]],
    ):
        """Create the Matomo tag in a GTM workspace; structured ``parent_info`` is sent as JSON."""
        if not isinstance(parent_info, str):
            parent_info = json.dumps(parent_info)
        return self._call(
            "createMatomoTag",
            {
                "accountId": account_id,
                "containerId": container_id,
                "workspaceId": workspace_id,
                "parentInfo": parent_info,
            },
        )
