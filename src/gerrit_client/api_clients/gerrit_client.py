"""Gerrit REST API client.

Groups the resource method sets behind one connection:

- ``projects``: projects, branches, tags and commits
- ``accounts``: accounts and their settings
- ``changes``: changes, revisions, reviewers and edits
- ``groups``: groups and membership
- ``access``: project access rights
- ``server``: server version, info and capabilities
"""

import logging
from typing import Optional

import httpx

from ..config import TransportConfig
from .access_client import AccessClient
from .accounts_client import AccountsClient
from .base_client import BaseRESTClient
from .changes_client import ChangesClient
from .groups_client import GroupsClient
from .projects_client import ProjectsClient
from .server_client import ServerClient

logger = logging.getLogger(__name__)


class GerritClient(BaseRESTClient):
    """Client for a Gerrit code-review server."""

    def __init__(
        self,
        base_url: str,
        transport_config: Optional[TransportConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(base_url, transport_config, http_client)
        self.projects = ProjectsClient(self)
        self.accounts = AccountsClient(self)
        self.changes = ChangesClient(self)
        self.groups = GroupsClient(self)
        self.access = AccessClient(self)
        self.server = ServerClient(self)
        logger.debug(f"Gerrit client for {self.base_url}")
