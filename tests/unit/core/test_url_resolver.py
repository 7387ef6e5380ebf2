"""Tests for base URL resolution."""

import pytest

from gerrit_client.exceptions import ConfigurationError, URLValidationError
from gerrit_client.url_resolver import resolve_base_url


class TestResolveBaseURL:
    """Test normalization and validation of server URLs."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://review.example.org", "https://review.example.org/"),
            ("https://review.example.org/", "https://review.example.org/"),
            ("http://localhost:8080", "http://localhost:8080/"),
            ("https://example.org/gerrit", "https://example.org/gerrit/"),
            ("https://example.org/gerrit///", "https://example.org/gerrit/"),
            ("  https://review.example.org  ", "https://review.example.org/"),
        ],
    )
    def test_appends_exactly_one_trailing_slash(self, url, expected):
        assert resolve_base_url(url) == expected

    def test_resolution_is_idempotent(self):
        once = resolve_base_url("https://example.org/gerrit")
        assert resolve_base_url(once) == once

    @pytest.mark.parametrize("url", [None, "", "   "])
    def test_empty_url_rejected(self, url):
        with pytest.raises(URLValidationError):
            resolve_base_url(url)

    @pytest.mark.parametrize(
        "url",
        [
            "review.example.org",
            "/relative/path",
            "ftp://review.example.org",
            "https://",
            "https://review.example.org/?q=1",
            "https://review.example.org/#frag",
            "https://review.example.org:99999",
        ],
    )
    def test_invalid_url_rejected(self, url):
        with pytest.raises(URLValidationError):
            resolve_base_url(url)

    def test_validation_error_is_configuration_error(self):
        with pytest.raises(ConfigurationError) as exc_info:
            resolve_base_url("not a url")

        assert "absolute" in str(exc_info.value)
