"""Project, branch and tag entities."""

from typing import Any, Dict, List, Optional

from pydantic import Field

from ..query_options import KEEP_EMPTY, QueryOptions
from .common import ActionInfo, GerritInput, GerritModel, GitPersonInfo, Timestamp, WebLinkInfo


class ProjectInfo(GerritModel):
    id: Optional[str] = None
    name: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    state: Optional[str] = Field(default=None, description="ACTIVE, READ_ONLY or HIDDEN")
    branches: Optional[Dict[str, str]] = None
    labels: Optional[Dict[str, Any]] = None
    web_links: Optional[List[WebLinkInfo]] = None


class ProjectInput(GerritInput):
    name: Optional[str] = None
    parent: Optional[str] = None
    description: Optional[str] = None
    permissions_only: Optional[bool] = None
    create_empty_commit: Optional[bool] = None
    submit_type: Optional[str] = None
    branches: Optional[List[str]] = None
    owners: Optional[List[str]] = None
    use_contributor_agreements: Optional[str] = None
    use_signed_off_by: Optional[str] = None
    create_new_change_for_all_not_in_target: Optional[str] = None
    use_content_merge: Optional[str] = None
    require_change_id: Optional[str] = None
    max_object_size_limit: Optional[str] = None
    plugin_config_values: Optional[Dict[str, Dict[str, str]]] = None


class DeleteOptionsInfo(GerritInput):
    """Body of the delete-project plugin endpoint."""

    force: bool = False
    preserve: bool = False


class HeadInput(GerritInput):
    ref: str


class ProjectParentInput(GerritInput):
    parent: str
    commit_message: Optional[str] = None


class ProjectDescriptionInput(GerritInput):
    description: Optional[str] = None
    commit_message: Optional[str] = None


class InheritedBooleanInfo(GerritModel):
    value: Optional[bool] = None
    configured_value: Optional[str] = Field(default=None, description="TRUE, FALSE or INHERIT")
    inherited_value: Optional[bool] = None


class MaxObjectSizeLimitInfo(GerritModel):
    value: Optional[str] = None
    configured_value: Optional[str] = None
    inherited_value: Optional[str] = None


class ConfigParameterInfo(GerritModel):
    display_name: Optional[str] = None
    description: Optional[str] = None
    warning: Optional[str] = None
    type: Optional[str] = None
    value: Optional[str] = None
    values: Optional[List[str]] = None


class ThemeInfo(GerritModel):
    css: Optional[str] = None
    header: Optional[str] = None
    footer: Optional[str] = None


class ConfigInfo(GerritModel):
    description: Optional[str] = None
    use_contributor_agreements: Optional[InheritedBooleanInfo] = None
    use_content_merge: Optional[InheritedBooleanInfo] = None
    use_signed_off_by: Optional[InheritedBooleanInfo] = None
    create_new_change_for_all_not_in_target: Optional[InheritedBooleanInfo] = None
    require_change_id: Optional[InheritedBooleanInfo] = None
    enable_signed_push: Optional[InheritedBooleanInfo] = None
    require_signed_push: Optional[InheritedBooleanInfo] = None
    reject_implicit_merges: Optional[InheritedBooleanInfo] = None
    max_object_size_limit: Optional[MaxObjectSizeLimitInfo] = None
    submit_type: Optional[str] = None
    state: Optional[str] = None
    commentlinks: Optional[Dict[str, Any]] = None
    theme: Optional[ThemeInfo] = None
    plugin_config: Optional[Dict[str, Dict[str, ConfigParameterInfo]]] = None
    actions: Optional[Dict[str, ActionInfo]] = None


class ConfigInput(GerritInput):
    description: Optional[str] = None
    use_contributor_agreements: Optional[str] = None
    use_content_merge: Optional[str] = None
    use_signed_off_by: Optional[str] = None
    create_new_change_for_all_not_in_target: Optional[str] = None
    enable_signed_push: Optional[str] = None
    require_signed_push: Optional[str] = None
    reject_implicit_merges: Optional[str] = None
    require_change_id: Optional[str] = None
    max_object_size_limit: Optional[str] = None
    submit_type: Optional[str] = None
    state: Optional[str] = None
    plugin_config_values: Optional[Dict[str, Dict[str, str]]] = None


class ProjectOptions(QueryOptions):
    """Filters for listing projects.

    ``prefix``, ``regex`` and ``substring`` are mutually exclusive on the
    server side.
    """

    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="S")
    branch: Optional[str] = Field(default=None, alias="b")
    description: Optional[bool] = Field(default=None, alias="d")
    prefix: Optional[str] = Field(default=None, alias="p")
    regex: Optional[str] = Field(default=None, alias="r")
    substring: Optional[str] = Field(default=None, alias="m")
    tree: Optional[bool] = Field(default=None, alias="t")
    type: Optional[str] = Field(default=None, description="ALL, CODE or PERMISSIONS")
    state: Optional[str] = None
    all: Optional[bool] = Field(default=None, description="Include hidden projects")


# Branches


class BranchInfo(GerritModel):
    ref: Optional[str] = None
    revision: Optional[str] = None
    can_delete: Optional[bool] = None
    web_links: Optional[List[WebLinkInfo]] = None


class BranchInput(GerritInput):
    ref: Optional[str] = None
    revision: Optional[str] = None


class DeleteBranchesInput(GerritInput):
    branches: List[str]


class BranchOptions(QueryOptions):
    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="S")
    substring: Optional[str] = Field(default=None, alias="m")
    regex: Optional[str] = Field(default=None, alias="r")


class MergeOptions(QueryOptions):
    """Query for the branch mergeability check.

    ``source`` is always sent, even when empty.
    """

    source: str = Field(default="", json_schema_extra=KEEP_EMPTY)
    source_branch: Optional[str] = None
    strategy: Optional[str] = None
    allow_conflicts: Optional[bool] = None


class ReflogEntryInfo(GerritModel):
    old_id: Optional[str] = None
    new_id: Optional[str] = None
    who: Optional[GitPersonInfo] = None
    comment: Optional[str] = None


# Tags


class TagInfo(GerritModel):
    ref: Optional[str] = None
    revision: Optional[str] = None
    object: Optional[str] = None
    message: Optional[str] = None
    tagger: Optional[GitPersonInfo] = None
    created: Optional[Timestamp] = None
    can_delete: Optional[bool] = None
    web_links: Optional[List[WebLinkInfo]] = None


class TagInput(GerritInput):
    ref: Optional[str] = None
    revision: Optional[str] = None
    message: Optional[str] = None


class DeleteTagsInput(GerritInput):
    tags: List[str]


class TagOptions(QueryOptions):
    limit: Optional[int] = Field(default=None, alias="n")
    skip: Optional[int] = Field(default=None, alias="S")
    substring: Optional[str] = Field(default=None, alias="m")
    regex: Optional[str] = Field(default=None, alias="r")
