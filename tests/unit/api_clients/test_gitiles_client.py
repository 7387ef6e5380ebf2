"""Tests for the Gitiles client."""

import pytest

from gerrit_client.api_clients import GitilesClient
from gerrit_client.models.gitiles import GitilesCommitsOptions

BASE = "https://review.example.org"

COMMIT_JSON = {
    "commit": "a3b2e0e9f8c7d6b5a4f3e2d1c0b9a8f7e6d5c4b3",
    "tree": "0b1c2d3e",
    "parents": ["f1e2d3c4"],
    "author": {
        "name": "Jane Roe",
        "email": "jane@example.org",
        "time": "Mon Jan 02 15:04:05 2006 -0700",
    },
    "message": "Fix the build\n",
    "tree_diff": [{"type": "modify", "old_path": "BUILD", "new_path": "BUILD"}],
}


@pytest.mark.asyncio
class TestGitilesClient:
    """Test commit fetches through the Gitiles plugin path."""

    async def test_get_commit(self, httpx_mock, gitiles, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/plugins/gitiles/platform/build/+/{COMMIT_JSON['commit']}?format=JSON",
            content=gerrit_json(COMMIT_JSON),
        )

        commit = await gitiles.get_commit("platform/build", COMMIT_JSON["commit"])

        assert commit.author.name == "Jane Roe"
        assert commit.tree_diff[0].type == "modify"
        assert httpx_mock.get_request().url.params["format"] == "JSON"

    async def test_get_commits_paging(self, httpx_mock, gitiles, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/plugins/gitiles/demo/+log/refs/heads/main/?format=JSON&n=1&s=f1e2d3c4",
            content=gerrit_json({"log": [COMMIT_JSON], "next": "0a1b2c3d"}),
        )

        commits = await gitiles.get_commits(
            "demo", "refs/heads/main", GitilesCommitsOptions(limit=1, start="f1e2d3c4")
        )

        assert len(commits.log) == 1
        assert commits.next == "0a1b2c3d"
        assert commits.previous is None

    async def test_authenticated_prefix(self, httpx_mock, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/a/plugins/gitiles/demo/+log/main/?format=JSON",
            content=gerrit_json({"log": []}),
        )

        async with GitilesClient(BASE) as client:
            client.set_basic_auth("jdoe", "secret")
            commits = await client.get_commits("demo", "main")

        assert commits.log == []
