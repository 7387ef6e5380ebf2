"""Tests for change, revision, reviewer and edit endpoints."""

import io
import json
from datetime import datetime, timezone
from typing import Dict, List, Optional
from unittest.mock import AsyncMock, patch

import pytest

from gerrit_client.api_clients import Change, Revision
from gerrit_client.exceptions import NotFoundError, RequestBuildError
from gerrit_client.models.changes import (
    AttentionSetInput,
    ChangeInfo,
    ChangeInput,
    ChangeMessageInfo,
    EditInfo,
    FilesOptions,
    HashtagsInput,
    QueryChangeOptions,
    ReviewerInput,
    ReviewInput,
    ReviewResult,
    TopicInput,
)

BASE = "https://review.example.org"

CHANGE_JSON = {
    "id": "demo~main~I8473b95934b5732ac55d26311a706c9c2bde9940",
    "project": "demo",
    "branch": "main",
    "change_id": "I8473b95934b5732ac55d26311a706c9c2bde9940",
    "subject": "Implementing Feature X",
    "status": "NEW",
    "created": "2013-02-01 09:59:32.126000000",
    "updated": "2013-02-21 11:16:36.775000000",
    "_number": 3965,
    "owner": {"_account_id": 1000096, "name": "John Doe"},
}


@pytest.mark.asyncio
class TestChangesClient:
    """Test query, create, get and delete on ``changes/``."""

    async def test_query_single(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/changes/?q=is%3Aopen&n=25",
            content=gerrit_json([CHANGE_JSON]),
        )

        changes = await gerrit.changes.query(
            QueryChangeOptions(query=["is:open"], limit=25)
        )

        assert len(changes) == 1
        change = changes[0]
        assert change.number == 3965
        assert change.owner.account_id == 1000096
        assert change.created == datetime(
            2013, 2, 1, 9, 59, 32, 126000, tzinfo=timezone.utc
        )

    async def test_query_several_returns_nested_lists(self, gerrit):
        with patch.object(
            gerrit, "request_model", new=AsyncMock(return_value=[[], []])
        ) as mock_request:
            result = await gerrit.changes.query(
                QueryChangeOptions(query=["is:open", "is:merged"])
            )

        assert result == [[], []]
        assert mock_request.await_args.args[2] == List[List[ChangeInfo]]

    async def test_create_binds_to_change_id(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE}/changes/",
            status_code=201,
            content=gerrit_json(CHANGE_JSON),
        )

        change = await gerrit.changes.create(
            ChangeInput(project="demo", branch="main", subject="Implementing Feature X")
        )

        assert isinstance(change, Change)
        assert change.identifier == CHANGE_JSON["id"]
        assert change.path == "changes/demo~main~I8473b95934b5732ac55d26311a706c9c2bde9940"
        request = httpx_mock.get_request()
        assert json.loads(request.content) == {
            "project": "demo",
            "branch": "main",
            "subject": "Implementing Feature X",
        }

    async def test_get_with_additional_fields(self, httpx_mock, gerrit, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/changes/3965?o=LABELS&o=CURRENT_REVISION",
            content=gerrit_json(CHANGE_JSON),
        )

        change = await gerrit.changes.get(3965, "LABELS", "CURRENT_REVISION")

        assert change.info.status == "NEW"
        params = httpx_mock.get_request().url.params.get_list("o")
        assert params == ["LABELS", "CURRENT_REVISION"]

    async def test_delete(self, httpx_mock, gerrit):
        httpx_mock.add_response(method="DELETE", url=f"{BASE}/changes/3965", status_code=204)
        await gerrit.changes.delete(3965)


@pytest.mark.asyncio
class TestChangeHandle:
    """Test endpoint paths and payloads of change operations."""

    @pytest.fixture
    def change(self, gerrit) -> Change:
        return gerrit.changes.change("demo~main~I8473b959")

    async def test_topic(self, change):
        with patch.object(
            change.client, "request_text", new=AsyncMock(return_value="Documentation")
        ) as mock_text:
            topic = await change.set_topic(TopicInput(topic="Documentation"))

        assert topic == "Documentation"
        method, path, payload = mock_text.await_args.args
        assert method == "PUT"
        assert path == "changes/demo~main~I8473b959/topic"
        assert payload.topic == "Documentation"

    @pytest.mark.parametrize(
        "operation,endpoint",
        [
            ("abandon", "abandon"),
            ("restore", "restore"),
            ("rebase", "rebase"),
            ("revert", "revert"),
            ("submit", "submit"),
            ("fix", "check"),
        ],
    )
    async def test_state_transitions_post(self, change, operation, endpoint):
        info = ChangeInfo(status="NEW")
        with patch.object(
            change.client, "request_model", new=AsyncMock(return_value=info)
        ) as mock_model:
            result = await getattr(change, operation)()

        assert result is info
        method, path, type_, _ = mock_model.await_args.args
        assert method == "POST"
        assert path == f"changes/demo~main~I8473b959/{endpoint}"
        assert type_ is ChangeInfo

    async def test_hashtags(self, change):
        with patch.object(
            change.client, "request_model", new=AsyncMock(return_value=["feature"])
        ) as mock_model:
            tags = await change.set_hashtags(HashtagsInput(add=["feature"]))

        assert tags == ["feature"]
        assert mock_model.await_args.args[:3] == (
            "POST",
            "changes/demo~main~I8473b959/hashtags",
            List[str],
        )

    async def test_delete_message_uses_post(self, change):
        with patch.object(
            change.client,
            "request_model",
            new=AsyncMock(return_value=ChangeMessageInfo(id="YH-egE")),
        ) as mock_model:
            await change.delete_message("YH-egE")

        assert mock_model.await_args.args[:2] == (
            "POST",
            "changes/demo~main~I8473b959/messages/YH-egE/delete",
        )

    async def test_remove_attention_uses_post(self, change):
        with patch.object(change.client, "request_empty", new=AsyncMock()) as mock_empty:
            await change.remove_attention(1000096, AttentionSetInput(reason="done"))

        method, path, payload = mock_empty.await_args.args
        assert (method, path) == (
            "POST",
            "changes/demo~main~I8473b959/attention/1000096/delete",
        )
        assert payload.reason == "done"

    async def test_add_reviewer(self, change):
        with patch.object(change.client, "request_model", new=AsyncMock()) as mock_model:
            await change.add_reviewer(ReviewerInput(reviewer="john.doe@example.com"))

        assert mock_model.await_args.args[:2] == (
            "POST",
            "changes/demo~main~I8473b959/reviewers",
        )

    async def test_votes(self, change):
        with patch.object(
            change.client, "request_model", new=AsyncMock(return_value={"Code-Review": 2})
        ) as mock_model:
            votes = await change.list_votes(1000096)

        assert votes == {"Code-Review": 2}
        assert mock_model.await_args.args[:3] == (
            "GET",
            "changes/demo~main~I8473b959/reviewers/1000096/votes/",
            Dict[str, int],
        )

    async def test_delete_vote(self, change):
        with patch.object(change.client, "request_empty", new=AsyncMock()) as mock_empty:
            await change.delete_vote("self", "Code-Review")

        mock_empty.assert_awaited_once_with(
            "DELETE", "changes/demo~main~I8473b959/reviewers/self/votes/Code-Review"
        )

    async def test_edit_file_put_sends_raw_text(self, httpx_mock, change):
        httpx_mock.add_response(
            method="PUT",
            url=f"{BASE}/changes/demo~main~I8473b959/edit/src%2Ffoo.txt",
            status_code=204,
        )

        await change.put_edit_file("src/foo.txt", "new content\n")

        request = httpx_mock.get_request()
        assert request.content == b"new content\n"
        assert request.headers["Content-Type"] == "text/plain; charset=UTF-8"

    async def test_missing_edit_is_none(self, httpx_mock, change):
        httpx_mock.add_response(
            url=f"{BASE}/changes/demo~main~I8473b959/edit", status_code=204
        )

        assert await change.get_edit() is None

    async def test_existing_edit(self, change):
        with patch.object(
            change.client, "request_model", new=AsyncMock(return_value=EditInfo())
        ) as mock_model:
            await change.get_edit()

        assert mock_model.await_args.args[2] == Optional[EditInfo]

    async def test_delete_rejects_payload_at_core(self, change):
        with pytest.raises(RequestBuildError):
            await change.client.call("DELETE", change.path, {"notify": "NONE"})


@pytest.mark.asyncio
class TestRevision:
    """Test revision endpoints nested under a change."""

    @pytest.fixture
    def revision(self, gerrit) -> Revision:
        return gerrit.changes.change(3965).revision()

    async def test_set_review(self, httpx_mock, revision, gerrit_json):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE}/changes/3965/revisions/current/review",
            content=gerrit_json({"labels": {"Code-Review": -1}}),
        )

        result = await revision.set_review(
            ReviewInput(message="Some nits", labels={"Code-Review": -1})
        )

        assert isinstance(result, ReviewResult)
        assert result.labels == {"Code-Review": -1}
        assert json.loads(httpx_mock.get_request().content) == {
            "message": "Some nits",
            "labels": {"Code-Review": -1},
        }

    async def test_patch_streams_into_writer(self, httpx_mock, revision):
        patch_body = b"RnJvbSA3ZGFkYzM1ZDBkNTY2ZmU0..."
        httpx_mock.add_response(
            url=f"{BASE}/changes/3965/revisions/current/patch",
            content=patch_body,
            headers={"Content-Type": "text/plain"},
        )

        buffer = io.BytesIO()
        written = await revision.get_patch(buffer)

        assert written == len(patch_body)
        assert buffer.getvalue() == patch_body

    async def test_file_diff_escapes_path(self, revision):
        with patch.object(revision.client, "request_model", new=AsyncMock()) as mock_model:
            await revision.get_file_diff("gerrit-server/src/Main.java")

        assert mock_model.await_args.args[1] == (
            "changes/3965/revisions/current/files/"
            "gerrit-server%2Fsrc%2FMain.java/diff"
        )

    async def test_file_content_type_from_head(self, httpx_mock, revision):
        httpx_mock.add_response(
            method="HEAD",
            url=f"{BASE}/changes/3965/revisions/current/files/logo.png/content",
            headers={"X-FYI-Content-Type": "image/png", "Content-Type": "text/plain"},
        )

        assert await revision.get_file_content_type("logo.png") == "image/png"

    async def test_reviewed_files(self, httpx_mock, revision, gerrit_json):
        httpx_mock.add_response(
            url=f"{BASE}/changes/3965/revisions/current/files/?q=src&reviewed=true",
            content=gerrit_json(["src/a.py", "src/b.py"]),
        )

        files = await revision.list_reviewed_files(FilesOptions(query="src"))

        assert files == ["src/a.py", "src/b.py"]

    async def test_drafts_list_uses_trailing_slash(self, revision):
        with patch.object(
            revision.client, "request_model", new=AsyncMock(return_value={})
        ) as mock_model:
            await revision.list_drafts()

        assert mock_model.await_args.args[1] == "changes/3965/revisions/current/drafts/"

    async def test_revision_not_found(self, httpx_mock, gerrit):
        httpx_mock.add_response(
            url=f"{BASE}/changes/3965/revisions/deadbeef/commit",
            status_code=404,
            text="Not found: deadbeef",
        )

        with pytest.raises(NotFoundError) as exc_info:
            await gerrit.changes.change(3965).revision("deadbeef").get_commit()

        assert exc_info.value.status_code == 404
