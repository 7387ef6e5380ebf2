"""Group entities, inputs and list options."""

from typing import List, Optional

from pydantic import Field

from ..query_options import QueryOptions
from .common import AccountInfo, GerritInput, GerritModel, Timestamp


class GroupOptionsInfo(GerritModel):
    visible_to_all: Optional[bool] = None


class GroupInfo(GerritModel):
    id: Optional[str] = None
    name: Optional[str] = None
    url: Optional[str] = None
    options: Optional[GroupOptionsInfo] = None
    description: Optional[str] = None
    group_id: Optional[int] = None
    owner: Optional[str] = None
    owner_id: Optional[str] = None
    created_on: Optional[Timestamp] = None
    more_groups: Optional[bool] = Field(default=None, alias="_more_groups")
    members: Optional[List[AccountInfo]] = None
    includes: Optional[List["GroupInfo"]] = None


class GroupInput(GerritInput):
    name: Optional[str] = None
    uuid: Optional[str] = None
    description: Optional[str] = None
    visible_to_all: Optional[bool] = None
    owner_id: Optional[str] = None
    members: Optional[List[str]] = None


class GroupNameInput(GerritInput):
    name: str


class GroupDescriptionInput(GerritInput):
    description: Optional[str] = None


class GroupOptionsInput(GerritInput):
    visible_to_all: Optional[bool] = None


class GroupOwnerInput(GerritInput):
    owner: str


class GroupAuditEventInfo(GerritModel):
    type: Optional[str] = Field(
        default=None, description="ADD_USER, REMOVE_USER, ADD_GROUP or REMOVE_GROUP"
    )
    user: Optional[AccountInfo] = None
    member: Optional[dict] = None
    date: Optional[Timestamp] = None


class MembersInput(GerritInput):
    one_member: Optional[str] = Field(default=None, alias="_one_member")
    members: Optional[List[str]] = None


class GroupsInput(GerritInput):
    one_group: Optional[str] = Field(default=None, alias="_one_group")
    groups: Optional[List[str]] = None


class ListGroupsOptions(QueryOptions):
    options: Optional[List[str]] = Field(default=None, alias="o")
    owned: Optional[bool] = None
    query: Optional[str] = Field(default=None, alias="q")
    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="S")
    substring: Optional[str] = Field(default=None, alias="m")
    regex: Optional[str] = Field(default=None, alias="r")


class ListGroupMembersOptions(QueryOptions):
    recursive: Optional[bool] = None
