"""Gitiles repository browser client.

Gitiles is served as a Gerrit plugin under ``plugins/gitiles/``. It shares
the request core, so authentication and the ``/a/`` prefix behave the same
as for the REST API.
"""

import logging
from typing import Optional

from ..models.gitiles import (
    GitilesCommitInfo,
    GitilesCommits,
    GitilesCommitsOptions,
    GitilesOptions,
)
from .base_client import BaseRESTClient
from .resource import escape, join_path

logger = logging.getLogger(__name__)

GITILES_PREFIX = "plugins/gitiles"


class GitilesClient(BaseRESTClient):
    """Read-only access to commits through Gitiles."""

    def _repo_path(self, project: str, *segments: str) -> str:
        # Project names keep their "/" separators in Gitiles URLs
        return join_path(GITILES_PREFIX, project.strip("/"), *segments)

    async def get_commit(self, project: str, commit: str) -> GitilesCommitInfo:
        """Fetch one commit.

        Args:
            project: Repository name, e.g. ``platform/build``
            commit: Commit SHA-1 or ref

        Returns:
            GitilesCommitInfo: The commit with its tree diff
        """
        path = self._repo_path(project, "+", escape(commit))
        return await self.request_model("GET", path, GitilesCommitInfo, GitilesOptions())

    async def get_commits(
        self,
        project: str,
        ref: str,
        options: Optional[GitilesCommitsOptions] = None,
    ) -> GitilesCommits:
        """Fetch one page of the commit log reachable from ``ref``.

        Use ``next`` from the result as ``start`` to fetch the following page.
        """
        path = self._repo_path(project, "+log", ref.strip("/") + "/")
        commits = await self.request_model(
            "GET", path, GitilesCommits, options or GitilesCommitsOptions()
        )
        logger.debug(f"Fetched {len(commits.log)} commits of {project} at {ref}")
        return commits
