"""Gitiles commit log entities."""

from typing import List, Optional

from pydantic import Field

from ..query_options import QueryOptions
from .common import GerritModel


class GitilesPersonInfo(GerritModel):
    name: Optional[str] = None
    email: Optional[str] = None
    time: Optional[str] = Field(
        default=None, description="Git-style date, e.g. 'Mon Jan 02 15:04:05 2006 -0700'"
    )


class GitilesDiffInfo(GerritModel):
    type: Optional[str] = None
    old_path: Optional[str] = None
    new_path: Optional[str] = None
    old_mode: Optional[int] = None
    new_mode: Optional[int] = None
    old_id: Optional[str] = None
    new_id: Optional[str] = None


class GitilesCommitInfo(GerritModel):
    commit: Optional[str] = None
    tree: Optional[str] = None
    parents: List[str] = Field(default_factory=list)
    author: Optional[GitilesPersonInfo] = None
    committer: Optional[GitilesPersonInfo] = None
    message: Optional[str] = None
    tree_diff: Optional[List[GitilesDiffInfo]] = None


class GitilesCommits(GerritModel):
    log: List[GitilesCommitInfo] = Field(default_factory=list)
    previous: Optional[str] = None
    next: Optional[str] = None


class GitilesOptions(QueryOptions):
    """Gitiles only answers with JSON when asked for it explicitly."""

    format: str = "JSON"


class GitilesCommitsOptions(GitilesOptions):
    limit: Optional[int] = Field(default=None, alias="n")
    start: Optional[str] = Field(default=None, alias="s")
