"""Pydantic models for Gerrit and Gitiles REST entities.

``*Info`` models describe server responses, ``*Input`` models describe
request bodies and ``*Options`` models describe query strings.
"""

from .common import (
    AccountInfo,
    CommitInfo,
    FileInfo,
    GerritInput,
    GerritModel,
    GitPersonInfo,
    IncludedInInfo,
    Timestamp,
    WebLinkInfo,
)
from .accounts import AccountDetailInfo, AccountInput, QueryAccountOptions
from .changes import (
    ChangeInfo,
    ChangeInput,
    QueryChangeOptions,
    ReviewInput,
    ReviewResult,
    RevisionInfo,
)
from .projects import (
    BranchInfo,
    BranchInput,
    BranchOptions,
    DeleteOptionsInfo,
    ProjectInfo,
    ProjectInput,
    ProjectOptions,
    TagInfo,
    TagInput,
    TagOptions,
)
from .groups import GroupInfo, GroupInput, ListGroupsOptions
from .access import ListAccessRightsOptions, ProjectAccessInfo
from .server import ServerInfo
from .gitiles import GitilesCommitInfo, GitilesCommits, GitilesCommitsOptions

__all__ = [
    # Shared
    "AccountInfo",
    "CommitInfo",
    "FileInfo",
    "GerritInput",
    "GerritModel",
    "GitPersonInfo",
    "IncludedInInfo",
    "Timestamp",
    "WebLinkInfo",
    # Accounts
    "AccountDetailInfo",
    "AccountInput",
    "QueryAccountOptions",
    # Changes
    "ChangeInfo",
    "ChangeInput",
    "QueryChangeOptions",
    "ReviewInput",
    "ReviewResult",
    "RevisionInfo",
    # Projects, branches and tags
    "BranchInfo",
    "BranchInput",
    "BranchOptions",
    "DeleteOptionsInfo",
    "ProjectInfo",
    "ProjectInput",
    "ProjectOptions",
    "TagInfo",
    "TagInput",
    "TagOptions",
    # Groups
    "GroupInfo",
    "GroupInput",
    "ListGroupsOptions",
    # Access
    "ListAccessRightsOptions",
    "ProjectAccessInfo",
    # Server
    "ServerInfo",
    # Gitiles
    "GitilesCommitInfo",
    "GitilesCommits",
    "GitilesCommitsOptions",
]
