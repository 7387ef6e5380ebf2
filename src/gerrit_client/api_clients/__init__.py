"""API clients for Gerrit and Gitiles.

All HTTP traffic goes through ``BaseRESTClient``. The resource clients only
name a path, method, payload and result type.
"""

from .base_client import BaseRESTClient, PreparedRequest, serialize_body
from .gerrit_client import GerritClient
from .gitiles_client import GitilesClient
from .resource import PendingResource, Resource, escape
from .projects_client import (
    Branch,
    BranchesClient,
    Commit,
    CommitsClient,
    Project,
    ProjectsClient,
    Tag,
    TagsClient,
)
from .accounts_client import Account, AccountsClient
from .changes_client import Change, ChangesClient, Revision
from .groups_client import Group, GroupsClient
from .access_client import AccessClient
from .server_client import ServerClient

__all__ = [
    # Core
    "BaseRESTClient",
    "PreparedRequest",
    "serialize_body",
    "GerritClient",
    "GitilesClient",
    # Resource handles
    "Resource",
    "PendingResource",
    "escape",
    # Projects
    "ProjectsClient",
    "Project",
    "BranchesClient",
    "Branch",
    "TagsClient",
    "Tag",
    "CommitsClient",
    "Commit",
    # Accounts
    "AccountsClient",
    "Account",
    # Changes
    "ChangesClient",
    "Change",
    "Revision",
    # Groups
    "GroupsClient",
    "Group",
    # Access and server
    "AccessClient",
    "ServerClient",
]
