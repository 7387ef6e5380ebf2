"""Account endpoints."""

import logging
from typing import Dict, List, Optional, Union

from ..models.accounts import (
    AccountDetailInfo,
    AccountExternalIdInfo,
    AccountInput,
    AccountNameInput,
    AccountStatusInput,
    CapabilityInfo,
    CapabilityOptions,
    DiffPreferencesInfo,
    DiffPreferencesInput,
    DisplayNameInput,
    EditPreferencesInfo,
    EditPreferencesInput,
    EmailInfo,
    EmailInput,
    GpgKeyInfo,
    GpgKeysInput,
    HTTPPasswordInput,
    OAuthTokenInfo,
    PreferencesInfo,
    PreferencesInput,
    QueryAccountOptions,
    SSHKeyInfo,
    UsernameInput,
)
from ..models.changes import ChangeInfo
from ..models.common import AccountInfo
from ..models.groups import GroupInfo
from .base_client import BaseRESTClient
from .resource import PendingResource, Resource, escape

logger = logging.getLogger(__name__)


class Account(Resource[AccountInfo]):
    """Handle for one account.

    The identifier may be a numeric account id, a username, an email
    address or ``self``.
    """

    collection = "accounts"
    info_type = AccountInfo

    async def get_detail(self) -> AccountDetailInfo:
        return await self.client.request_model(
            "GET", self.endpoint("detail"), AccountDetailInfo
        )

    # Name, status, username and display name

    async def get_name(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("name"))

    async def set_name(self, name_input: AccountNameInput) -> Optional[str]:
        return await self.client.request_text("PUT", self.endpoint("name"), name_input)

    async def delete_name(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("name"))

    async def get_status(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("status"))

    async def set_status(self, status_input: AccountStatusInput) -> Optional[str]:
        return await self.client.request_text("PUT", self.endpoint("status"), status_input)

    async def get_username(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("username"))

    async def set_username(self, username_input: UsernameInput) -> Optional[str]:
        return await self.client.request_text(
            "PUT", self.endpoint("username"), username_input
        )

    async def set_display_name(self, display_name_input: DisplayNameInput) -> Optional[str]:
        return await self.client.request_text(
            "PUT", self.endpoint("displayname"), display_name_input
        )

    # Active state

    async def get_active(self) -> bool:
        """Inactive accounts answer 204 No Content."""
        return await self.client.request_text("GET", self.endpoint("active")) is not None

    async def set_active(self) -> None:
        await self.client.request_empty("PUT", self.endpoint("active"))

    async def delete_active(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("active"))

    # Credentials

    async def get_http_password(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("password.http"))

    async def set_http_password(
        self, password_input: HTTPPasswordInput
    ) -> Optional[str]:
        """Set or generate the HTTP password.

        Returns:
            The new password, or None when the password was removed
        """
        return await self.client.request_text(
            "PUT", self.endpoint("password.http"), password_input
        )

    async def delete_http_password(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("password.http"))

    async def get_oauth_token(self) -> OAuthTokenInfo:
        return await self.client.request_model(
            "GET", self.endpoint("oauthtoken"), OAuthTokenInfo
        )

    # Emails

    async def list_emails(self) -> List[EmailInfo]:
        return await self.client.request_model("GET", self.endpoint("emails"), List[EmailInfo])

    async def get_email(self, email: str) -> EmailInfo:
        return await self.client.request_model(
            "GET", self.endpoint("emails", escape(email)), EmailInfo
        )

    async def create_email(
        self, email: str, email_input: Optional[EmailInput] = None
    ) -> EmailInfo:
        return await self.client.request_model(
            "PUT",
            self.endpoint("emails", escape(email)),
            EmailInfo,
            email_input or EmailInput(email=email),
        )

    async def delete_email(self, email: str) -> None:
        await self.client.request_empty("DELETE", self.endpoint("emails", escape(email)))

    async def set_preferred_email(self, email: str) -> None:
        await self.client.request_empty(
            "PUT", self.endpoint("emails", escape(email), "preferred")
        )

    # SSH and GPG keys

    async def list_ssh_keys(self) -> List[SSHKeyInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("sshkeys"), List[SSHKeyInfo]
        )

    async def get_ssh_key(self, seq: Union[int, str]) -> SSHKeyInfo:
        return await self.client.request_model(
            "GET", self.endpoint("sshkeys", escape(seq)), SSHKeyInfo
        )

    async def add_ssh_key(self, ssh_key: str) -> SSHKeyInfo:
        """Add a public key, sent as the raw ``ssh-rsa ...`` line."""
        return await self.client.request_model(
            "POST", self.endpoint("sshkeys"), SSHKeyInfo, ssh_key
        )

    async def delete_ssh_key(self, seq: int) -> None:
        await self.client.request_empty("DELETE", self.endpoint("sshkeys", escape(seq)))

    async def list_gpg_keys(self) -> Dict[str, GpgKeyInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("gpgkeys"), Dict[str, GpgKeyInfo]
        )

    async def add_gpg_keys(self, keys_input: GpgKeysInput) -> Dict[str, GpgKeyInfo]:
        return await self.client.request_model(
            "POST", self.endpoint("gpgkeys"), Dict[str, GpgKeyInfo], keys_input
        )

    async def get_gpg_key(self, key_id: str) -> GpgKeyInfo:
        return await self.client.request_model(
            "GET", self.endpoint("gpgkeys", escape(key_id)), GpgKeyInfo
        )

    async def delete_gpg_key(self, key_id: str) -> None:
        await self.client.request_empty("DELETE", self.endpoint("gpgkeys", escape(key_id)))

    # Capabilities and groups

    async def list_capabilities(
        self, options: Optional[CapabilityOptions] = None
    ) -> CapabilityInfo:
        return await self.client.request_model(
            "GET", self.endpoint("capabilities"), CapabilityInfo, options
        )

    async def check_capability(self, capability: str) -> Optional[str]:
        """Return "ok" if the account holds the capability.

        Raises:
            GerritAPIError: 404 when the capability is not granted
        """
        return await self.client.request_text(
            "GET", self.endpoint("capabilities", escape(capability))
        )

    async def list_groups(self) -> List[GroupInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("groups/"), List[GroupInfo]
        )

    async def get_avatar_change_url(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("avatar.change.url"))

    # Preferences

    async def get_preferences(self) -> PreferencesInfo:
        return await self.client.request_model(
            "GET", self.endpoint("preferences"), PreferencesInfo
        )

    async def set_preferences(self, preferences: PreferencesInput) -> PreferencesInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("preferences"), PreferencesInfo, preferences
        )

    async def get_diff_preferences(self) -> DiffPreferencesInfo:
        return await self.client.request_model(
            "GET", self.endpoint("preferences.diff"), DiffPreferencesInfo
        )

    async def set_diff_preferences(
        self, preferences: DiffPreferencesInput
    ) -> DiffPreferencesInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("preferences.diff"), DiffPreferencesInfo, preferences
        )

    async def get_edit_preferences(self) -> EditPreferencesInfo:
        return await self.client.request_model(
            "GET", self.endpoint("preferences.edit"), EditPreferencesInfo
        )

    async def set_edit_preferences(
        self, preferences: EditPreferencesInput
    ) -> EditPreferencesInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("preferences.edit"), EditPreferencesInfo, preferences
        )

    async def get_external_ids(self) -> List[AccountExternalIdInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("external.ids"), List[AccountExternalIdInfo]
        )

    # Starred changes

    async def get_starred_changes(self) -> List[ChangeInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("starred.changes"), List[ChangeInfo]
        )

    async def star_change(self, change_id: str) -> None:
        await self.client.request_empty(
            "PUT", self.endpoint("starred.changes", escape(change_id))
        )

    async def unstar_change(self, change_id: str) -> None:
        await self.client.request_empty(
            "DELETE", self.endpoint("starred.changes", escape(change_id))
        )


class AccountsClient:
    """Entry point for ``accounts/`` endpoints."""

    def __init__(self, client: BaseRESTClient):
        self.client = client

    async def query(
        self, options: Optional[QueryAccountOptions] = None
    ) -> List[AccountInfo]:
        """Query accounts visible to the caller.

        Args:
            options: Query string, paging and additional fields

        Returns:
            List of matching accounts. The last one carries
            ``more_accounts`` when the result was truncated.
        """
        return await self.client.request_model(
            "GET", "accounts/", List[AccountInfo], options
        )

    def account(self, account_id: Union[int, str]) -> Account:
        return Account(self.client, account_id)

    async def get(self, account_id: Union[int, str]) -> Account:
        return await Account(self.client, account_id).refresh()

    async def create(
        self, username: str, account_input: Optional[AccountInput] = None
    ) -> Account:
        """Create an account and bind the handle to its numeric id."""
        pending = PendingResource(self.client, Account, username)
        info = await self.client.request_model(
            "PUT", pending.path, AccountInfo, account_input or AccountInput()
        )
        logger.info(f"Created account {username} ({info.account_id})")
        account_id = str(info.account_id) if info.account_id is not None else None
        return pending.bind(account_id, info)
