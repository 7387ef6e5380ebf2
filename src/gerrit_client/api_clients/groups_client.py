"""Group endpoints: groups, members and included groups."""

import logging
from typing import Dict, List, Optional, Union

from ..models.common import AccountInfo
from ..models.groups import (
    GroupAuditEventInfo,
    GroupDescriptionInput,
    GroupInfo,
    GroupInput,
    GroupNameInput,
    GroupOptionsInfo,
    GroupOptionsInput,
    GroupOwnerInput,
    GroupsInput,
    ListGroupMembersOptions,
    ListGroupsOptions,
    MembersInput,
)
from .base_client import BaseRESTClient
from .resource import PendingResource, Resource, escape

logger = logging.getLogger(__name__)


class Group(Resource[GroupInfo]):
    """Handle for one group, addressed by UUID, legacy numeric id or name."""

    collection = "groups"
    info_type = GroupInfo

    async def get_detail(self) -> GroupInfo:
        return await self.client.request_model("GET", self.endpoint("detail"), GroupInfo)

    async def get_name(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("name"))

    async def rename(self, name_input: GroupNameInput) -> Optional[str]:
        return await self.client.request_text("PUT", self.endpoint("name"), name_input)

    async def get_description(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("description"))

    async def set_description(
        self, description_input: GroupDescriptionInput
    ) -> Optional[str]:
        return await self.client.request_text(
            "PUT", self.endpoint("description"), description_input
        )

    async def delete_description(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("description"))

    async def get_options(self) -> GroupOptionsInfo:
        return await self.client.request_model(
            "GET", self.endpoint("options"), GroupOptionsInfo
        )

    async def set_options(self, options_input: GroupOptionsInput) -> GroupOptionsInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("options"), GroupOptionsInfo, options_input
        )

    async def get_owner(self) -> GroupInfo:
        return await self.client.request_model("GET", self.endpoint("owner"), GroupInfo)

    async def set_owner(self, owner_input: GroupOwnerInput) -> GroupInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("owner"), GroupInfo, owner_input
        )

    async def get_audit_log(self) -> List[GroupAuditEventInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("log.audit"), List[GroupAuditEventInfo]
        )

    # Members

    async def list_members(
        self, options: Optional[ListGroupMembersOptions] = None
    ) -> List[AccountInfo]:
        """List direct members, or all members when ``recursive`` is set."""
        return await self.client.request_model(
            "GET", self.endpoint("members/"), List[AccountInfo], options
        )

    async def get_member(self, account_id: Union[int, str]) -> AccountInfo:
        return await self.client.request_model(
            "GET", self.endpoint("members", escape(account_id)), AccountInfo
        )

    async def add_member(self, account_id: Union[int, str]) -> AccountInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("members", escape(account_id)), AccountInfo
        )

    async def add_members(self, members_input: MembersInput) -> List[AccountInfo]:
        return await self.client.request_model(
            "POST", self.endpoint("members"), List[AccountInfo], members_input
        )

    async def delete_member(self, account_id: Union[int, str]) -> None:
        await self.client.request_empty(
            "DELETE", self.endpoint("members", escape(account_id))
        )

    async def delete_members(self, members_input: MembersInput) -> None:
        await self.client.request_empty(
            "POST", self.endpoint("members.delete"), members_input
        )

    # Included groups

    async def list_subgroups(self) -> List[GroupInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("groups/"), List[GroupInfo]
        )

    async def get_subgroup(self, group_id: str) -> GroupInfo:
        return await self.client.request_model(
            "GET", self.endpoint("groups", escape(group_id)), GroupInfo
        )

    async def add_subgroup(self, group_id: str) -> GroupInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("groups", escape(group_id)), GroupInfo
        )

    async def add_subgroups(self, groups_input: GroupsInput) -> List[GroupInfo]:
        return await self.client.request_model(
            "POST", self.endpoint("groups"), List[GroupInfo], groups_input
        )

    async def delete_subgroup(self, group_id: str) -> None:
        await self.client.request_empty("DELETE", self.endpoint("groups", escape(group_id)))

    async def delete_subgroups(self, groups_input: GroupsInput) -> None:
        await self.client.request_empty(
            "POST", self.endpoint("groups.delete"), groups_input
        )


class GroupsClient:
    """Entry point for ``groups/`` endpoints."""

    def __init__(self, client: BaseRESTClient):
        self.client = client

    async def list(self, options: Optional[ListGroupsOptions] = None) -> Dict[str, GroupInfo]:
        """List visible groups keyed by name."""
        return await self.client.request_model(
            "GET", "groups/", Dict[str, GroupInfo], options
        )

    def group(self, group_id: Union[int, str]) -> Group:
        return Group(self.client, group_id)

    async def get(self, group_id: Union[int, str]) -> Group:
        return await Group(self.client, group_id).refresh()

    async def create(self, name: str, group_input: Optional[GroupInput] = None) -> Group:
        """Create a group and bind the handle to the UUID the server assigned.

        Raises:
            GerritAPIError: 409 if a group with this name already exists
        """
        pending = PendingResource(self.client, Group, name)
        info = await self.client.request_model(
            "PUT", pending.path, GroupInfo, group_input or GroupInput()
        )
        logger.info(f"Created group {name} ({info.id})")
        return pending.bind(info.id, info)
