"""
Shared pytest fixtures for gerrit-client tests.

Wire-level tests use pytest-httpx's ``httpx_mock`` fixture, which intercepts
every ``httpx.AsyncClient`` created during the test.
"""

import json
from pathlib import Path

import pytest

from gerrit_client.api_clients import GerritClient, GitilesClient

BASE_URL = "https://review.example.org/"


def encode_gerrit_json(payload) -> bytes:
    """Encode a payload the way Gerrit does, with the magic prefix line."""
    return b")]}'\n" + json.dumps(payload).encode("utf-8")


@pytest.fixture
def gerrit_json():
    return encode_gerrit_json


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def gerrit() -> GerritClient:
    """Anonymous client against the test server."""
    return GerritClient(BASE_URL)


@pytest.fixture
def authed_gerrit() -> GerritClient:
    """Client with basic credentials, so every path gains the ``a/`` prefix."""
    client = GerritClient(BASE_URL)
    client.set_basic_auth("jdoe", "http-password")
    return client


@pytest.fixture
def gitiles() -> GitilesClient:
    return GitilesClient(BASE_URL)


@pytest.fixture
def config_file(tmp_path: Path, monkeypatch) -> Path:
    """Write a gerritctl config file and clear environment overrides."""
    for name in (
        "GERRITCTL_URL",
        "GERRITCTL_USERNAME",
        "GERRITCTL_PASSWORD",
        "GERRITCTL_AUTH_TYPE",
    ):
        monkeypatch.delenv(name, raising=False)

    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "url": BASE_URL,
                "username": "jdoe",
                "password": "http-password",
                "auth_type": "basic",
            }
        )
    )
    return path
