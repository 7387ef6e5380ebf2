"""Tests for outgoing request construction."""

import json

import httpx
import pytest

from gerrit_client.api_clients import GerritClient, serialize_body
from gerrit_client.exceptions import RequestBuildError
from gerrit_client.models.changes import ChangeInput
from gerrit_client.models.projects import DeleteOptionsInfo, ProjectOptions


class TestResolveURL:
    """Test endpoint URL resolution with and without credentials."""

    def test_anonymous_url(self):
        client = GerritClient("https://review.example.org")
        assert (
            client.resolve_url("projects/demo")
            == "https://review.example.org/projects/demo"
        )

    def test_leading_slash_stripped(self):
        client = GerritClient("https://review.example.org")
        assert client.resolve_url("/changes/") == "https://review.example.org/changes/"

    def test_authenticated_prefix_follows_host(self):
        client = GerritClient("https://example.org:8443/gerrit")
        url = client.resolve_url("changes/1", authenticated=True)

        assert url == "https://example.org:8443/a/gerrit/changes/1"
        assert url.count("/a/") == 1

    def test_prefix_absent_when_anonymous(self):
        client = GerritClient("https://example.org/gerrit")
        assert "/a/" not in client.resolve_url("accounts/self")


class TestBuildRequest:
    """Test method-specific payload handling."""

    def test_get_with_options_becomes_query(self, gerrit):
        prepared = gerrit.build_request("GET", "projects/", ProjectOptions(limit=25))

        request = prepared.request
        assert request.method == "GET"
        assert request.url.path == "/projects/"
        assert request.url.params.multi_items() == [("n", "25")]
        assert request.content == b""
        assert request.headers["Accept"] == "application/json"

    def test_get_without_options_has_no_query(self, gerrit):
        prepared = gerrit.build_request("GET", "projects/")
        assert prepared.request.url.query == b""

    def test_string_body_sent_verbatim(self, gerrit):
        prepared = gerrit.build_request(
            "POST", "accounts/self/sshkeys", "ssh-rsa AAAA jdoe@example.org"
        )

        assert prepared.request.content == b"ssh-rsa AAAA jdoe@example.org"
        assert prepared.request.headers["Content-Type"] == "text/plain; charset=UTF-8"

    def test_model_body_is_json(self, gerrit):
        prepared = gerrit.build_request(
            "POST",
            "changes/",
            ChangeInput(project="demo", branch="main", subject="test"),
        )

        assert prepared.request.content == (
            b'{"project":"demo","branch":"main","subject":"test"}'
        )
        assert prepared.request.headers["Content-Type"] == "application/json"

    def test_plain_value_body_is_json(self, gerrit):
        prepared = gerrit.build_request("PUT", "changes/1/hashtags", {"add": ["x"]})
        assert json.loads(prepared.request.content) == {"add": ["x"]}

    def test_false_flags_are_serialized(self):
        body, content_type = serialize_body(DeleteOptionsInfo())
        assert json.loads(body) == {"force": False, "preserve": False}
        assert content_type == "application/json"

    def test_body_method_without_payload(self, gerrit):
        prepared = gerrit.build_request("POST", "changes/1/index")
        assert prepared.request.content == b""
        assert "Content-Type" not in prepared.request.headers

    def test_delete_with_payload_rejected(self, gerrit):
        with pytest.raises(RequestBuildError) as exc_info:
            gerrit.build_request("DELETE", "changes/1", {"notify": "NONE"})

        assert "DELETE" in str(exc_info.value)

    def test_delete_without_payload(self, gerrit):
        prepared = gerrit.build_request("delete", "changes/1")
        assert prepared.request.method == "DELETE"

    def test_unknown_method_rejected(self, gerrit):
        with pytest.raises(RequestBuildError):
            gerrit.build_request("PATCH", "changes/1")

    def test_unserializable_payload_rejected(self, gerrit):
        with pytest.raises(RequestBuildError):
            gerrit.build_request("POST", "changes/", object())

    def test_anonymous_request_has_no_auth(self, gerrit):
        prepared = gerrit.build_request("GET", "changes/")
        assert prepared.auth is None
        assert prepared.authenticated is False

    def test_authenticated_request_snapshot(self, authed_gerrit):
        prepared = authed_gerrit.build_request("GET", "changes/")

        assert isinstance(prepared.auth, httpx.BasicAuth)
        assert str(prepared.request.url) == "https://review.example.org/a/changes/"

        # Later credential changes do not affect an already built request
        authed_gerrit.clear_auth()
        assert isinstance(prepared.auth, httpx.BasicAuth)


@pytest.mark.asyncio
class TestClientLifecycle:
    """Test which HTTP sessions a client closes."""

    async def test_injected_session_stays_open(self):
        injected = httpx.AsyncClient()
        try:
            client = GerritClient("https://review.example.org", http_client=injected)
            async with client:
                assert client.session is injected

            assert injected.is_closed is False
        finally:
            await injected.aclose()

    async def test_own_session_closed_on_exit(self):
        async with GerritClient("https://review.example.org") as client:
            session = client.session
            assert session.is_closed is False

        assert session.is_closed is True

    async def test_closed_session_recreated(self):
        client = GerritClient("https://review.example.org")
        first = client.session
        await client.close()

        second = client.session
        try:
            assert second is not first
            assert second.is_closed is False
        finally:
            await client.close()
