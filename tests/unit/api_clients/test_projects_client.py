"""Tests for project, branch, tag and commit endpoints."""

import json

import pytest

from gerrit_client.api_clients import Branch, Project
from gerrit_client.exceptions import ConflictError
from gerrit_client.models.projects import (
    BranchInput,
    BranchOptions,
    DeleteBranchesInput,
    MergeOptions,
    ProjectDescriptionInput,
    ProjectInput,
    ProjectOptions,
)

BASE = "https://review.example.org"


@pytest.mark.asyncio
class TestProjectsClient:
    """Test top-level project operations."""

    async def test_list_projects_with_limit(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            method="GET",
            url=f"{BASE}/projects/?n=25",
            content=gerrit_json(
                {
                    "All-Projects": {"id": "All-Projects", "state": "ACTIVE"},
                    "demo": {"id": "demo", "state": "ACTIVE"},
                }
            ),
        )

        projects = await gerrit.projects.list(ProjectOptions(limit=25))

        assert set(projects) == {"All-Projects", "demo"}
        request = httpx_mock.get_request()
        assert request.url.params.multi_items() == [("n", "25")]
        assert request.content == b""

    async def test_get_project_escapes_name(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/projects/platform%2Fbuild",
            content=gerrit_json({"id": "platform%2Fbuild", "name": "platform/build"}),
        )

        project = await gerrit.projects.get("platform/build")

        assert isinstance(project, Project)
        assert project.info.name == "platform/build"

    async def test_create_binds_to_server_name(self, httpx_mock, authed_gerrit, gerrit_json):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE}/a/projects/demo",
            status_code=201,
            content=gerrit_json({"id": "demo", "name": "demo", "parent": "All-Projects"}),
        )

        project = await authed_gerrit.projects.create(
            "demo", ProjectInput(parent="All-Projects", create_empty_commit=True)
        )

        assert project.identifier == "demo"
        assert project.info.parent == "All-Projects"
        body = json.loads(httpx_mock.get_request().content)
        assert body == {"parent": "All-Projects", "create_empty_commit": True}

    async def test_create_existing_project_conflicts(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE}/projects/demo",
            status_code=409,
            text="Project Already Exists",
        )

        with pytest.raises(ConflictError):
            await gerrit.projects.create("demo")

    async def test_delete_posts_to_plugin(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            method="POST", url=f"{BASE}/projects/demo/delete-project~delete", status_code=204
        )

        await gerrit.projects.delete("demo")

        body = json.loads(httpx_mock.get_request().content)
        assert body == {"force": False, "preserve": False}


@pytest.mark.asyncio
class TestProjectHandle:
    async def test_description_round_trip(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE}/projects/demo/description",
            text=')]}\'\n"Demo project"',
        )

        project = gerrit.projects.project("demo")
        description = await project.set_description(
            ProjectDescriptionInput(description="Demo project", commit_message="Update")
        )

        assert description == "Demo project"

    async def test_cleared_description_is_none(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            method="PUT", url=f"{BASE}/projects/demo/description", status_code=204
        )

        project = gerrit.projects.project("demo")
        assert await project.set_description(ProjectDescriptionInput()) is None

    async def test_get_head(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            url=f"{BASE}/projects/demo/HEAD", text=')]}\'\n"refs/heads/main"'
        )

        assert await gerrit.projects.project("demo").get_head() == "refs/heads/main"


@pytest.mark.asyncio
class TestBranches:
    """Test branch operations nested under a project."""

    async def test_list_branches(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/projects/demo/branches/?n=2&m=ma",
            content=gerrit_json(
                [
                    {"ref": "HEAD", "revision": "main"},
                    {"ref": "refs/heads/main", "revision": "67ebf73"},
                ]
            ),
        )

        branches = await gerrit.projects.project("demo").branches.list(
            BranchOptions(limit=2, substring="ma")
        )

        assert [b.ref for b in branches] == ["HEAD", "refs/heads/main"]

    async def test_create_branch(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE}/projects/demo/branches/stable",
            content=gerrit_json({"ref": "refs/heads/stable", "revision": "76016386"}),
        )

        branch = await gerrit.projects.project("demo").branches.create(
            "stable", BranchInput(revision="76016386")
        )

        assert isinstance(branch, Branch)
        assert branch.identifier == "stable"
        assert branch.info.ref == "refs/heads/stable"

    async def test_bulk_delete_uses_post(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            method="POST", url=f"{BASE}/projects/demo/branches:delete", status_code=204
        )

        await gerrit.projects.project("demo").branches.bulk_delete(
            DeleteBranchesInput(branches=["stable-1.0", "stable-2.0"])
        )

        body = json.loads(httpx_mock.get_request().content)
        assert body == {"branches": ["stable-1.0", "stable-2.0"]}

    async def test_mergeable_always_sends_source(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/projects/demo/branches/main/mergeable?source=",
            content=gerrit_json({"submit_type": "MERGE_IF_NECESSARY", "mergeable": True}),
        )

        branch = Branch(gerrit, "main", parent=gerrit.projects.project("demo"))
        info = await branch.get_mergeable(MergeOptions())

        assert info.mergeable is True
        assert httpx_mock.get_request().url.params.multi_items() == [("source", "")]

    async def test_file_content_is_base64_text(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            url=f"{BASE}/projects/demo/branches/main/files/src%2Fmain.c/content",
            text="Ly8gQ29weXJpZ2h0",
        )

        branch = Branch(gerrit, "main", parent=gerrit.projects.project("demo"))
        assert await branch.get_content("src/main.c") == "Ly8gQ29weXJpZ2h0"


@pytest.mark.asyncio
class TestCommits:
    async def test_included_in(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/projects/demo/commits/a8a477ef",
            content=gerrit_json({"commit": "a8a477ef", "subject": "Fix"}),
        )
        httpx_mock.add_response(
            url=f"{BASE}/projects/demo/commits/a8a477ef/in",
            content=gerrit_json({"branches": ["main"], "tags": ["v1.0"]}),
        )

        commit = await gerrit.projects.project("demo").commits.get("a8a477ef")
        included = await commit.get_included_in()

        assert commit.info.subject == "Fix"
        assert included.branches == ["main"]
        assert included.tags == ["v1.0"]
