"""Access-right entities."""

from typing import Dict, List, Optional

from pydantic import Field

from ..query_options import QueryOptions
from .common import GerritModel
from .groups import GroupInfo
from .projects import ProjectInfo


class PermissionRuleInfo(GerritModel):
    action: Optional[str] = Field(default=None, description="ALLOW, DENY, BLOCK, INTERACTIVE or BATCH")
    force: Optional[bool] = None
    min: Optional[int] = None
    max: Optional[int] = None


class PermissionInfo(GerritModel):
    label: Optional[str] = None
    exclusive: Optional[bool] = None
    rules: Optional[Dict[str, PermissionRuleInfo]] = None


class AccessSectionInfo(GerritModel):
    permissions: Optional[Dict[str, PermissionInfo]] = None


class ProjectAccessInfo(GerritModel):
    revision: Optional[str] = None
    inherits_from: Optional[ProjectInfo] = None
    local: Optional[Dict[str, AccessSectionInfo]] = None
    is_owner: Optional[bool] = None
    owner_of: Optional[List[str]] = None
    can_upload: Optional[bool] = None
    can_add: Optional[bool] = None
    can_add_tags: Optional[bool] = None
    config_visible: Optional[bool] = None
    groups: Optional[Dict[str, GroupInfo]] = None
    config_web_links: Optional[List[dict]] = Field(default=None, alias="configWebLinks")


class ListAccessRightsOptions(QueryOptions):
    project: Optional[List[str]] = None
