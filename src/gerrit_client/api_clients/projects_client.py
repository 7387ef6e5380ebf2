"""Projects, branches, tags and commits."""

import logging
from typing import Dict, List, Optional

from ..models.common import CommitInfo, FileInfo, IncludedInInfo, MergeableInfo
from ..models.projects import (
    BranchInfo,
    BranchInput,
    BranchOptions,
    ConfigInfo,
    ConfigInput,
    DeleteBranchesInput,
    DeleteOptionsInfo,
    DeleteTagsInput,
    HeadInput,
    MergeOptions,
    ProjectDescriptionInput,
    ProjectInfo,
    ProjectInput,
    ProjectOptions,
    ProjectParentInput,
    ReflogEntryInfo,
    TagInfo,
    TagInput,
    TagOptions,
)
from .base_client import BaseRESTClient
from .resource import PendingResource, Resource, escape

logger = logging.getLogger(__name__)


class Branch(Resource[BranchInfo]):
    collection = "branches"
    info_type = BranchInfo

    async def get_content(self, file_path: str) -> Optional[str]:
        """Return the base64-encoded content of a file at the branch tip."""
        return await self.client.request_text(
            "GET", self.endpoint("files", escape(file_path), "content")
        )

    async def get_mergeable(self, options: Optional[MergeOptions] = None) -> MergeableInfo:
        return await self.client.request_model(
            "GET", self.endpoint("mergeable"), MergeableInfo, options or MergeOptions()
        )

    async def get_reflog(self) -> List[ReflogEntryInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("reflog"), List[ReflogEntryInfo]
        )


class Tag(Resource[TagInfo]):
    collection = "tags"
    info_type = TagInfo


class Commit(Resource[CommitInfo]):
    collection = "commits"
    info_type = CommitInfo

    async def get_included_in(self) -> IncludedInInfo:
        """List the branches and tags the commit is reachable from."""
        return await self.client.request_model("GET", self.endpoint("in"), IncludedInInfo)

    async def get_content(self, file_path: str) -> Optional[str]:
        return await self.client.request_text(
            "GET", self.endpoint("files", escape(file_path), "content")
        )

    async def list_files(self) -> Dict[str, FileInfo]:
        return await self.client.request_model(
            "GET", self.endpoint("files/"), Dict[str, FileInfo]
        )


class BranchesClient:
    """Branches of one project."""

    def __init__(self, project: "Project"):
        self.project = project

    @property
    def client(self) -> BaseRESTClient:
        return self.project.client

    async def list(self, options: Optional[BranchOptions] = None) -> List[BranchInfo]:
        return await self.client.request_model(
            "GET", self.project.endpoint("branches/"), List[BranchInfo], options
        )

    async def get(self, ref: str) -> Branch:
        return await Branch(self.client, ref, parent=self.project).refresh()

    async def create(self, ref: str, branch_input: Optional[BranchInput] = None) -> Branch:
        """Create a branch.

        Args:
            ref: Branch name, with or without the ``refs/heads/`` prefix
            branch_input: Optional revision to branch from

        Returns:
            Branch: Handle bound to the requested ref
        """
        pending = PendingResource(self.client, Branch, ref, parent=self.project)
        info = await self.client.request_model(
            "PUT", pending.path, BranchInfo, branch_input or BranchInput()
        )
        return pending.bind(ref, info)

    async def delete(self, ref: str) -> None:
        await self.client.request_empty("DELETE", Branch(self.client, ref, parent=self.project).path)

    async def bulk_delete(self, delete_input: DeleteBranchesInput) -> None:
        await self.client.request_empty(
            "POST", self.project.endpoint("branches:delete"), delete_input
        )


class TagsClient:
    """Tags of one project."""

    def __init__(self, project: "Project"):
        self.project = project

    @property
    def client(self) -> BaseRESTClient:
        return self.project.client

    async def list(self, options: Optional[TagOptions] = None) -> List[TagInfo]:
        return await self.client.request_model(
            "GET", self.project.endpoint("tags/"), List[TagInfo], options
        )

    async def get(self, ref: str) -> Tag:
        return await Tag(self.client, ref, parent=self.project).refresh()

    async def create(self, ref: str, tag_input: Optional[TagInput] = None) -> Tag:
        pending = PendingResource(self.client, Tag, ref, parent=self.project)
        info = await self.client.request_model(
            "PUT", pending.path, TagInfo, tag_input or TagInput()
        )
        return pending.bind(ref, info)

    async def delete(self, ref: str) -> None:
        await self.client.request_empty("DELETE", Tag(self.client, ref, parent=self.project).path)

    async def bulk_delete(self, delete_input: DeleteTagsInput) -> None:
        await self.client.request_empty(
            "POST", self.project.endpoint("tags:delete"), delete_input
        )


class CommitsClient:
    def __init__(self, project: "Project"):
        self.project = project

    async def get(self, commit_id: str) -> Commit:
        return await Commit(self.project.client, commit_id, parent=self.project).refresh()


class Project(Resource[ProjectInfo]):
    collection = "projects"
    info_type = ProjectInfo

    def __init__(self, client, identifier, info=None, parent=None):
        super().__init__(client, identifier, info, parent)
        self.branches = BranchesClient(self)
        self.tags = TagsClient(self)
        self.commits = CommitsClient(self)

    async def get_description(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("description"))

    async def set_description(
        self, description_input: ProjectDescriptionInput
    ) -> Optional[str]:
        """Set the description. Returns None when it was cleared."""
        return await self.client.request_text(
            "PUT", self.endpoint("description"), description_input
        )

    async def delete_description(self) -> None:
        await self.client.request_empty("DELETE", self.endpoint("description"))

    async def get_parent(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("parent"))

    async def set_parent(self, parent_input: ProjectParentInput) -> Optional[str]:
        return await self.client.request_text("PUT", self.endpoint("parent"), parent_input)

    async def get_head(self) -> Optional[str]:
        return await self.client.request_text("GET", self.endpoint("HEAD"))

    async def set_head(self, head_input: HeadInput) -> Optional[str]:
        return await self.client.request_text("PUT", self.endpoint("HEAD"), head_input)

    async def get_config(self) -> ConfigInfo:
        return await self.client.request_model("GET", self.endpoint("config"), ConfigInfo)

    async def set_config(self, config_input: ConfigInput) -> ConfigInfo:
        return await self.client.request_model(
            "PUT", self.endpoint("config"), ConfigInfo, config_input
        )

    async def delete(self, delete_options: Optional[DeleteOptionsInfo] = None) -> None:
        """Delete the project through the delete-project plugin."""
        await self.client.request_empty(
            "POST",
            self.endpoint("delete-project~delete"),
            delete_options or DeleteOptionsInfo(),
        )


class ProjectsClient:
    """Entry point for ``projects/`` endpoints."""

    def __init__(self, client: BaseRESTClient):
        self.client = client

    async def list(self, options: Optional[ProjectOptions] = None) -> Dict[str, ProjectInfo]:
        """List visible projects keyed by name."""
        return await self.client.request_model(
            "GET", "projects/", Dict[str, ProjectInfo], options
        )

    def project(self, name: str) -> Project:
        """Return an unfetched handle for a project."""
        return Project(self.client, name)

    async def get(self, name: str) -> Project:
        return await Project(self.client, name).refresh()

    async def create(self, name: str, project_input: Optional[ProjectInput] = None) -> Project:
        """Create a project.

        Args:
            name: Requested project name
            project_input: Optional creation settings

        Returns:
            Project: Handle bound to the name the server reports

        Raises:
            GerritAPIError: If the project exists (409) or creation is refused
        """
        pending = PendingResource(self.client, Project, name)
        info = await self.client.request_model(
            "PUT", pending.path, ProjectInfo, project_input or ProjectInput()
        )
        logger.info(f"Created project {info.name or name}")
        return pending.bind(info.name, info)

    async def delete(
        self, name: str, delete_options: Optional[DeleteOptionsInfo] = None
    ) -> None:
        await self.project(name).delete(delete_options)
