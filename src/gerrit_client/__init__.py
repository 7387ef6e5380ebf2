"""
gerrit-client - async typed client for the Gerrit code-review REST API.

Covers accounts, projects, branches, tags, changes, groups, access rights
and server configuration, plus commit browsing through Gitiles and the
``gerritctl`` command line.
"""

__version__ = "0.1.0"

from .api_clients import GerritClient, GitilesClient
from .auth import AuthScheme, Credentials
from .config import TransportConfig
from .exceptions import (
    ConfigurationError,
    DecodeError,
    GerritAPIError,
    GerritClientError,
    RequestBuildError,
)

__all__ = [
    "GerritClient",
    "GitilesClient",
    "AuthScheme",
    "Credentials",
    "TransportConfig",
    "GerritClientError",
    "ConfigurationError",
    "RequestBuildError",
    "GerritAPIError",
    "DecodeError",
]
